"""Implementation of the 'verify' command.

Checks that every commit since the latest tag follows the commit template.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gover.cli.commands._common import fail, open_app
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console


def run_verify(
    path: str | None,
    config_path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the verify command.

    Exits with status 1 on the first non-conforming commit message.
    """
    app = open_app(config_path, path, err_console)

    try:
        app.verify()
    except GoverError as e:
        fail(err_console, e)

    console.print("[green]✓[/] All commit messages match the template")
