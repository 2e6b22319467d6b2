"""Hashtag extraction and subgraph splitting."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from microdot_labels.models.hashtag import HashTag
from microdot_labels.parsing.patterns import HASHTAG_PATTERN

logger = logging.getLogger(__name__)


def extract_hashtags(text: str) -> tuple[list[HashTag], str]:
    """Collect every hashtag in *text* and strip the trailing run of them.

    Trailing tags are shown underneath the node, so they are removed from
    the display label. Tags in the middle of the text stay where they are
    but are still reported. Returns the tags sorted and the cleaned label.
    """
    found = set(HASHTAG_PATTERN.findall(text))

    label = text
    trimmed = True
    while trimmed:
        label = label.strip()
        trimmed = False
        for tag in found:
            if label.endswith(tag):
                label = label[: -len(tag)]
                trimmed = True

    if found:
        logger.debug("Found %d hashtag(s), label trimmed to %r", len(found), label)
    return [HashTag(tag) for tag in sorted(found)], label


def split_subgraph(
    tags: Iterable[HashTag],
) -> tuple[list[HashTag], HashTag | None]:
    """Separate the ``#SG_`` subgraph tag from the ordinary tags.

    Only the first subgraph tag in sorted order is kept; any others are
    dropped rather than treated as ordinary tags.
    """
    ordered = sorted(tags)
    subgraphs = [tag for tag in ordered if tag.is_subgraph]
    ordinary = [tag for tag in ordered if not tag.is_subgraph]

    subgraph = subgraphs[0] if subgraphs else None
    if len(subgraphs) > 1:
        logger.debug(
            "Multiple subgraph tags %s, keeping %s",
            ", ".join(str(tag) for tag in subgraphs),
            subgraph,
        )
    return ordinary, subgraph
