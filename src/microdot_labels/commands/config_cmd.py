"""Config commands — inspect and edit CLI configuration."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from microdot_labels.commands._common import FormatOpt, _get_manager
from microdot_labels.config.constants import ENV_OUTPUT_FORMAT
from microdot_labels.errors import error_handler
from microdot_labels.output.formatter import output

app = typer.Typer(name="config", help="Inspect and edit CLI configuration.")
console = Console()


@app.command()
@error_handler
def show(
    fmt: FormatOpt = None,
) -> None:
    """Show the active configuration."""
    mgr = _get_manager()
    data = {
        "config_file": str(mgr.config_path),
        "default_format": mgr.config.default_format,
        "effective_format": mgr.resolve_format(),
    }
    output(
        data,
        mgr.resolve_format(fmt),
        columns=["Key", "Value"],
        rows=list(data.items()),
        title="Configuration",
    )


@app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(_get_manager().config_path))


@app.command("set-format")
@error_handler
def set_format(
    fmt: Annotated[str, typer.Argument(help="Default output format (table, json, yaml, csv)")],
) -> None:
    """Set the default output format."""
    mgr = _get_manager()
    saved = mgr.set_format(fmt)
    console.print(f"[green]Default format set to '{saved}'.[/]")
    console.print(f"(overridden by ${ENV_OUTPUT_FORMAT} and --format when given)")


@app.command()
@error_handler
def reset(
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Delete the config file and return to defaults."""
    mgr = _get_manager()
    if not force:
        if not Confirm.ask(f"Delete {mgr.config_path}?"):
            console.print("Cancelled.")
            return

    if mgr.reset():
        console.print("[green]Configuration reset.[/]")
    else:
        console.print("[yellow]No config file to remove.[/]")
