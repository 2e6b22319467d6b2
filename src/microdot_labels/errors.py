"""Typed exceptions and error handling decorator for the CLI."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from pydantic import ValidationError
from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class LabelsCLIError(Exception):
    """Base exception for microdot-labels."""

    exit_code: int = 1


class ConfigurationError(LabelsCLIError):
    """Config file is unreadable or holds invalid values."""

    exit_code = 6


class InputError(LabelsCLIError):
    """No usable label input was given."""

    exit_code = 7

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Input error")


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def error_handler(func: F) -> F:
    """Decorator that turns CLI errors into a one-line message and an exit code.

    ``LabelsCLIError`` exits with its own ``exit_code``; model validation
    failures and other ``ValueError`` exit with 1.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except LabelsCLIError as exc:
            err_console.print(
                f"[bold red]Error:[/] {exc} [dim](exit {exc.exit_code})[/]",
                highlight=False,
            )
            raise SystemExit(exc.exit_code)
        except ValidationError as exc:
            err_console.print(
                f"[bold red]Invalid value:[/] {_validation_message(exc)}",
                highlight=False,
            )
            raise SystemExit(1)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}", highlight=False)
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]

