"""Compiled token patterns shared by the extractors.

Character classes are spelled out in ASCII; ``\\w`` and ``\\d`` would also
match non-ASCII letters and digits.
"""

from __future__ import annotations

import re

HASHTAG_PATTERN = re.compile(r"#[A-Za-z][A-Za-z0-9_-]*")

# group 1: name, group 2: raw value
VARIABLE_PATTERN = re.compile(r"\$([A-Za-z][A-Za-z0-9_-]*)=([A-Za-z0-9_-]+)")

# group 1: amount, group 2: unit suffix
TIME_PATTERN = re.compile(r"([0-9]+)([dmMy])")

NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
