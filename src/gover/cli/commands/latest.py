"""Implementation of the 'latest' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gover.cli.commands._common import fail, open_app, print_plain
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console


def run_latest(
    path: str | None,
    config_path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Print the latest release tag."""
    app = open_app(config_path, path, err_console)

    try:
        tag = app.latest_tag()
    except GoverError as e:
        fail(err_console, e)

    print_plain(console, tag)
