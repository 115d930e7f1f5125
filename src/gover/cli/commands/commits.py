"""Implementation of the 'commits' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gover.cli.commands._common import fail, open_app, print_plain
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console


def run_commits(
    path: str | None,
    config_path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Print the messages of unreleased commits, newest first."""
    app = open_app(config_path, path, err_console)

    try:
        commits = app.commits()
    except GoverError as e:
        fail(err_console, e)

    for message in commits:
        print_plain(console, message)
