"""Node label assembler — hashtags, variables and subgraph in one pass."""

from __future__ import annotations

from typing import Any

from microdot_labels.models.node import NodeInfo
from microdot_labels.parsing.hashtags import extract_hashtags, split_subgraph
from microdot_labels.parsing.variables import extract_variables


def parse_label(label: Any) -> NodeInfo:
    """Parse a raw node label into a :class:`NodeInfo`.

    Total over any input: text that does not form a valid tag or variable
    token is left in the label as-is.
    """
    text = str(label)

    found_tags, text = extract_hashtags(text)
    variables, text = extract_variables(text)
    tags, subgraph = split_subgraph(found_tags)

    return NodeInfo(
        label=text,
        tags=tuple(tags),
        variables=frozenset(variables),
        subgraph=subgraph,
    )
