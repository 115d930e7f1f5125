"""Implementation of the 'tag' command.

Tags the latest commit with the next version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gover.cli.commands._common import fail, open_app
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console


def run_tag(
    path: str | None,
    config_path: str | None,
    pre_release: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the tag command.

    Args:
        path: Optional path to the repository
        config_path: Path to the configuration file
        pre_release: Pre-release label (e.g., "alpha", "rc")
        console: Console for standard output
        err_console: Console for error output
    """
    app = open_app(config_path, path, err_console)

    try:
        version = app.tag(pre_release or "")
    except GoverError as e:
        fail(err_console, e)

    if version is None:
        err_console.print("[yellow]Nothing to tag.[/]")
        return

    console.print(f"[green]✓[/] Tagged [cyan]{version}[/]")
