"""Implementation of the 'changelog' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gover.cli.commands._common import fail, open_app, print_plain
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console


def run_changelog(
    path: str | None,
    config_path: str | None,
    pre_release: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the changelog command.

    Renders the configured changelog template over the unreleased commits,
    or lists them when no changelog template is configured.

    Args:
        path: Optional path to the repository
        config_path: Path to the configuration file
        pre_release: Pre-release label of the version being released
        console: Console for standard output
        err_console: Console for error output
    """
    app = open_app(config_path, path, err_console)

    try:
        changelog = app.changelog(pre_release or "")
    except GoverError as e:
        fail(err_console, e)

    print_plain(console, changelog)
