"""Parsed node label model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from microdot_labels.models.hashtag import HashTag
from microdot_labels.models.variable import Variable


class NodeInfo(BaseModel):
    """Metadata extracted from one diagram node label.

    ``tags`` holds the ordinary hashtags in sorted order; a ``#SG_`` tag is
    reported separately as ``subgraph``. ``variables`` is unordered.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    tags: tuple[HashTag, ...] = ()
    variables: frozenset[Variable] = Field(default_factory=frozenset)
    subgraph: HashTag | None = None

    @classmethod
    def parse(cls, label: Any) -> NodeInfo:
        """Parse a raw label (anything whose ``str()`` is the label text)."""
        from microdot_labels.parsing.node_info import parse_label

        return parse_label(label)

    def variable(self, name: str) -> list[Variable]:
        """Return every variable called *name*, sorted by value text."""
        return sorted(
            (v for v in self.variables if v.name == name),
            key=lambda v: str(v.value),
        )
