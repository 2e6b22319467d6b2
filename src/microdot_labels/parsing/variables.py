"""Variable extraction and value type inference."""

from __future__ import annotations

import logging

from microdot_labels.models.variable import (
    I64_MAX,
    BooleanValue,
    NumberValue,
    StringValue,
    TimeSpan,
    TimeUnit,
    TimeValue,
    Variable,
    VariableValue,
)
from microdot_labels.parsing.patterns import (
    NUMBER_PATTERN,
    TIME_PATTERN,
    VARIABLE_PATTERN,
)

logger = logging.getLogger(__name__)


def infer_value(token: str) -> VariableValue:
    """Infer the typed value of a raw ``$name=value`` token.

    Checked in order: ``true``/``false``, ``<int><d|m|M|y>``, a float
    literal, and finally the token itself as a string. Never fails.
    """
    if token == "true":
        return BooleanValue(value=True)
    if token == "false":
        return BooleanValue(value=False)

    match = TIME_PATTERN.fullmatch(token)
    if match and int(match.group(1)) <= I64_MAX:
        span = TimeSpan(amount=int(match.group(1)), unit=TimeUnit(match.group(2)))
        return TimeValue(value=span)

    if NUMBER_PATTERN.fullmatch(token):
        return NumberValue(value=float(token))

    return StringValue(value=token)


def parse_variable(text: str) -> Variable | None:
    """Parse the first ``$name=value`` token in *text*, if any."""
    match = VARIABLE_PATTERN.search(text)
    if match is None:
        return None
    name, raw = match.groups()
    return Variable(name=name, value=infer_value(raw))


def extract_variables(text: str) -> tuple[set[Variable], str]:
    """Collect the distinct variables in *text*.

    The text is returned unchanged: variable tokens stay in the label.
    """
    variables = {
        Variable(name=name, value=infer_value(raw))
        for name, raw in VARIABLE_PATTERN.findall(text)
    }
    if variables:
        logger.debug("Found %d variable(s)", len(variables))
    return variables, text
