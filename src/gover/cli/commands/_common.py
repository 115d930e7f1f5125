"""Helpers shared by the command implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from rich.markup import escape

from gover.app import Gover
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console

USAGE_HINT = "[dim]Run [cyan]gover --help[/] for usage.[/]"


def fail(err_console: Console, error: Exception) -> NoReturn:
    """Report an error with a usage hint and exit with status 1."""
    err_console.print(f"[red]Error:[/] {escape(str(error))}")
    err_console.print(USAGE_HINT)
    raise SystemExit(1) from error


def open_app(config_path: str | None, path: str | None, err_console: Console) -> Gover:
    """Open the repository at ``path`` with the configuration at ``config_path``."""
    try:
        return Gover.open(config_path, path or ".")
    except GoverError as e:
        fail(err_console, e)


def print_plain(console: Console, text: str) -> None:
    """Print data without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)
