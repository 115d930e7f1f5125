"""Implementation of the 'commit' command.

Prompts for every configured template field and renders the commit
message. Intended to be used from a ``prepare-commit-msg`` hook with
``--msg-file``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gover.cli.commands._common import fail, open_app, print_plain
from gover.exceptions import GoverError

if TYPE_CHECKING:
    from rich.console import Console


def run_commit(
    path: str | None,
    config_path: str | None,
    msg_file: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the commit command.

    Args:
        path: Optional path to the repository
        config_path: Path to the configuration file
        msg_file: File to write the message to, printed when omitted
        console: Console for prompts and standard output
        err_console: Console for error output
    """
    app = open_app(config_path, path, err_console)

    try:
        message = app.compose_commit(console)
    except GoverError as e:
        fail(err_console, e)
    except (KeyboardInterrupt, EOFError):
        err_console.print("\n[yellow]Commit message prompt cancelled.[/]")
        raise SystemExit(1) from None

    if not msg_file:
        print_plain(console, message)
        return

    try:
        Path(msg_file).write_text(message, encoding="utf-8")
    except OSError as e:
        fail(err_console, e)
