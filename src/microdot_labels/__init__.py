"""Extract hashtags, typed variables and subgraph tags from diagram node labels."""

from microdot_labels.models import (
    BooleanValue,
    HashTag,
    NodeInfo,
    NumberValue,
    StringValue,
    TimeSpan,
    TimeUnit,
    TimeValue,
    Variable,
)
from microdot_labels.parsing import parse_label

__version__ = "0.1.0"

__all__ = [
    "BooleanValue",
    "HashTag",
    "NodeInfo",
    "NumberValue",
    "StringValue",
    "TimeSpan",
    "TimeUnit",
    "TimeValue",
    "Variable",
    "__version__",
    "parse_label",
]
