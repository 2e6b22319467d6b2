"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from microdot_labels import __version__
from microdot_labels.commands import config_cmd, label

app = typer.Typer(
    name="microdot-labels",
    help="Extract hashtags, variables and subgraph tags from diagram node labels.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"microdot-labels {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing details to stderr."),
) -> None:
    """Node label parser — hashtags, typed variables and subgraphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


# Register command groups
app.add_typer(label.app, name="label")
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
