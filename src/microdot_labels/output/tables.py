"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table
from rich.text import Text

from microdot_labels.models import NodeInfo, Variable


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(Text(str(cell)) if cell is not None else "" for cell in row))
    return table


def sorted_variables(info: NodeInfo) -> list[Variable]:
    """Variables in a stable display order: name, kind, then value text."""
    return sorted(info.variables, key=lambda v: (v.name, v.kind, str(v.value)))


def node_info_table(info: NodeInfo, *, title: str | None = None) -> Table:
    """Render one parsed label as a key-value table with a nested variables table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("label", Text(info.label))
    table.add_row("tags", " ".join(str(tag) for tag in info.tags))
    table.add_row("subgraph", str(info.subgraph) if info.subgraph else "")

    variables = sorted_variables(info)
    if variables:
        table.add_row(
            "variables",
            make_table(
                None,
                ["Name", "Type", "Value"],
                [[v.name, v.kind, v.value] for v in variables],
            ),
        )
    else:
        table.add_row("variables", "")
    return table
