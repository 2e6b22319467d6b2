"""Output dispatcher — renders data in table, JSON, YAML, or CSV format."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from microdot_labels.models import NodeInfo
from microdot_labels.output.tables import make_table, node_info_table, sorted_variables

console = Console()


def to_data(data: Any) -> Any:
    """Convert models (and lists of them) to plain JSON-compatible data."""
    if isinstance(data, NodeInfo):
        dumped = data.model_dump(mode="json", exclude={"variables"})
        dumped["variables"] = [
            v.model_dump(mode="json") for v in sorted_variables(data)
        ]
        return dumped
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [to_data(item) for item in data]
    return data


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    console.print_json(json.dumps(to_data(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    import yaml

    console.print(
        yaml.dump(to_data(data), default_flow_style=False, sort_keys=False),
        end="",
        markup=False,
        highlight=False,
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print data as CSV."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows(
        [[str(v) if v is not None else "" for v in row] for row in rows]
    )
    console.print(buf.getvalue(), end="", markup=False, highlight=False)


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Print data as a Rich table."""
    if columns and rows is not None:
        console.print(make_table(title, columns, rows))
    elif isinstance(data, NodeInfo):
        console.print(node_info_table(data, title=title))
    elif isinstance(data, (list, tuple)) and all(isinstance(d, NodeInfo) for d in data):
        for info in data:
            console.print(node_info_table(info, title=title))
    else:
        console.print(data)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Dispatch output to the appropriate formatter."""
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        if columns and rows is not None:
            output_csv(columns, rows)
        else:
            output_json(data)
    else:
        output_table(data, columns=columns, rows=rows, title=title)
