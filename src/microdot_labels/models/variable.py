"""Typed node variable models (``$name=value`` tokens)."""

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class TimeUnit(str, Enum):
    """Unit suffix of a time span. Case-sensitive: ``m`` is minutes, ``M`` months."""

    DAY = "d"
    MINUTE = "m"
    MONTH = "M"
    YEAR = "y"


class TimeSpan(BaseModel):
    """A whole number of days, minutes, months or years."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=I64_MIN, le=I64_MAX)
    unit: TimeUnit

    @classmethod
    def day(cls, amount: int) -> TimeSpan:
        return cls(amount=amount, unit=TimeUnit.DAY)

    @classmethod
    def minute(cls, amount: int) -> TimeSpan:
        return cls(amount=amount, unit=TimeUnit.MINUTE)

    @classmethod
    def month(cls, amount: int) -> TimeSpan:
        return cls(amount=amount, unit=TimeUnit.MONTH)

    @classmethod
    def year(cls, amount: int) -> TimeSpan:
        return cls(amount=amount, unit=TimeUnit.YEAR)

    def __str__(self) -> str:
        return f"{self.amount}{self.unit.value}"


class StringValue(BaseModel):
    """Fallback value: the raw token, verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str

    def __str__(self) -> str:
        return self.value


class NumberValue(BaseModel):
    """A float value. All NaNs compare equal so repeated ``nan`` tokens collapse."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float

    def _key(self) -> tuple[bool, float]:
        if math.isnan(self.value):
            return True, 0.0
        return False, self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberValue):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.kind, self._key()))

    def __str__(self) -> str:
        return repr(self.value)


class BooleanValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


class TimeValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["time"] = "time"
    value: TimeSpan

    def __str__(self) -> str:
        return str(self.value)


VariableValue = Annotated[
    Union[StringValue, NumberValue, BooleanValue, TimeValue],
    Field(discriminator="kind"),
]


class Variable(BaseModel):
    """A named, typed value attached to a node.

    Equality and hashing cover both ``name`` and ``value``: ``$x=1`` and
    ``$x=2`` are two distinct variables, while repeating ``$x=1`` collapses
    to one when collected into a set.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: VariableValue

    @classmethod
    def string(cls, name: str, value: str) -> Variable:
        return cls(name=name, value=StringValue(value=value))

    @classmethod
    def number(cls, name: str, value: float) -> Variable:
        return cls(name=name, value=NumberValue(value=value))

    @classmethod
    def boolean(cls, name: str, value: bool) -> Variable:
        return cls(name=name, value=BooleanValue(value=value))

    @classmethod
    def time(cls, name: str, value: TimeSpan) -> Variable:
        return cls(name=name, value=TimeValue(value=value))

    @property
    def kind(self) -> str:
        return self.value.kind

    def __str__(self) -> str:
        return f"${self.name}={self.value}"
