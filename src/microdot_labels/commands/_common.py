"""Shared helpers for CLI commands — options, input reading, row building."""

from __future__ import annotations

import sys
from typing import Annotated, Any

import typer

from microdot_labels.config.manager import ConfigManager
from microdot_labels.errors import InputError
from microdot_labels.models import NodeInfo
from microdot_labels.output.tables import sorted_variables

# Shared Typer option type aliases
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]


def _get_manager() -> ConfigManager:
    return ConfigManager()


def resolve_format(fmt: str | None) -> str:
    """Resolve the output format from the flag, env var, or config file."""
    return _get_manager().resolve_format(fmt)


def read_labels(labels: list[str] | None) -> list[str]:
    """Return labels from the command line, or one per stdin line.

    Stdin is read when no label is given or the only label is ``-``.
    Blank stdin lines are skipped.
    """
    if labels and labels != ["-"]:
        return list(labels)
    lines = [line.rstrip("\r\n") for line in sys.stdin]
    result = [line for line in lines if line.strip()]
    if not result:
        raise InputError("No labels given. Pass labels as arguments or pipe them on stdin.")
    return result


def node_info_row(info: NodeInfo) -> list[Any]:
    """Flatten a NodeInfo into one table/CSV row."""
    return [
        info.label,
        " ".join(str(tag) for tag in info.tags),
        info.subgraph,
        " ".join(str(v) for v in sorted_variables(info)),
    ]


NODE_INFO_COLUMNS = ["Label", "Tags", "Subgraph", "Variables"]
