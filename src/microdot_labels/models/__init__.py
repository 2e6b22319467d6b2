"""Pydantic data models for parsed node labels."""

from microdot_labels.models.hashtag import SUBGRAPH_PREFIX, HashTag
from microdot_labels.models.node import NodeInfo
from microdot_labels.models.variable import (
    BooleanValue,
    NumberValue,
    StringValue,
    TimeSpan,
    TimeUnit,
    TimeValue,
    Variable,
    VariableValue,
)

__all__ = [
    "BooleanValue",
    "HashTag",
    "NodeInfo",
    "NumberValue",
    "StringValue",
    "SUBGRAPH_PREFIX",
    "TimeSpan",
    "TimeUnit",
    "TimeValue",
    "Variable",
    "VariableValue",
]
