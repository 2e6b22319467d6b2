"""Label parsing: hashtag and variable extraction."""

from microdot_labels.parsing.hashtags import extract_hashtags, split_subgraph
from microdot_labels.parsing.node_info import parse_label
from microdot_labels.parsing.variables import (
    extract_variables,
    infer_value,
    parse_variable,
)

__all__ = [
    "extract_hashtags",
    "extract_variables",
    "infer_value",
    "parse_label",
    "parse_variable",
    "split_subgraph",
]
