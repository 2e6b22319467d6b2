"""Label commands — parse node labels and inspect their markup."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from microdot_labels.commands._common import (
    NODE_INFO_COLUMNS,
    FormatOpt,
    node_info_row,
    read_labels,
    resolve_format,
)
from microdot_labels.errors import error_handler
from microdot_labels.models import NodeInfo
from microdot_labels.output.formatter import output
from microdot_labels.parsing import extract_hashtags, infer_value, split_subgraph

app = typer.Typer(name="label", help="Parse diagram node labels.")

LabelsArg = Annotated[
    Optional[list[str]],
    typer.Argument(help="Labels to parse; reads stdin lines when omitted or '-'"),
]


@app.command()
@error_handler
def parse(
    labels: LabelsArg = None,
    fmt: FormatOpt = None,
) -> None:
    """Parse labels into display text, tags, subgraph and variables."""
    fmt = resolve_format(fmt)
    infos = [NodeInfo.parse(text) for text in read_labels(labels)]
    rows = [node_info_row(info) for info in infos]

    if fmt in ("json", "yaml"):
        output(infos[0] if len(infos) == 1 else infos, fmt)
    elif fmt == "table" and len(infos) == 1:
        output(infos[0], fmt, title="Node Label")
    else:
        output(infos, fmt, columns=NODE_INFO_COLUMNS, rows=rows, title="Node Labels")


@app.command()
@error_handler
def tags(
    label: Annotated[str, typer.Argument(help="Label to scan for hashtags")],
    fmt: FormatOpt = None,
) -> None:
    """List the hashtags in a label and mark the subgraph tag."""
    fmt = resolve_format(fmt)
    found, cleaned = extract_hashtags(label)
    ordinary, subgraph = split_subgraph(found)

    rows = [[tag, "tag"] for tag in ordinary]
    if subgraph is not None:
        rows.append([subgraph, "subgraph"])

    if not rows and fmt == "table":
        typer.echo("No hashtags found.")
        return

    data = {
        "label": cleaned,
        "tags": [str(tag) for tag in ordinary],
        "subgraph": str(subgraph) if subgraph else None,
    }
    output(data, fmt, columns=["Tag", "Kind"], rows=rows, title="Hashtags")


@app.command()
@error_handler
def infer(
    values: Annotated[list[str], typer.Argument(help="Raw variable values, e.g. 4d true 25")],
    fmt: FormatOpt = None,
) -> None:
    """Show the type inferred for raw variable values."""
    fmt = resolve_format(fmt)
    inferred = [(raw, infer_value(raw)) for raw in values]
    rows = [[raw, value.kind, value] for raw, value in inferred]
    data = [
        {"raw": raw, **value.model_dump(mode="json")} for raw, value in inferred
    ]
    output(data, fmt, columns=["Raw", "Type", "Value"], rows=rows, title="Inferred Values")
