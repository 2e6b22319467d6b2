"""Hashtag annotation model."""

from __future__ import annotations

from pydantic import ConfigDict, RootModel

SUBGRAPH_PREFIX = "#SG_"


class HashTag(RootModel[str]):
    """A ``#``-prefixed annotation found in a node label.

    Compared and ordered by its raw text, e.g. ``HashTag("#end") < HashTag("#hashtag")``.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        return self.root

    @property
    def is_subgraph(self) -> bool:
        return self.root.startswith(SUBGRAPH_PREFIX)

    def __str__(self) -> str:
        return self.root

    def __repr__(self) -> str:
        return f"HashTag({self.root!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HashTag):
            return NotImplemented
        return self.root < other.root

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HashTag):
            return NotImplemented
        return self.root <= other.root

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HashTag):
            return NotImplemented
        return self.root > other.root

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HashTag):
            return NotImplemented
        return self.root >= other.root
