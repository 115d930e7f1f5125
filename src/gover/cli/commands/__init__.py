"""Command implementations for the gover CLI."""

from __future__ import annotations

from gover.cli.commands.change import run_change
from gover.cli.commands.changelog import run_changelog
from gover.cli.commands.commit import run_commit
from gover.cli.commands.commits import run_commits
from gover.cli.commands.latest import run_latest
from gover.cli.commands.next_version import run_next
from gover.cli.commands.tag import run_tag
from gover.cli.commands.verify import run_verify

__all__ = [
    "run_change",
    "run_changelog",
    "run_commit",
    "run_commits",
    "run_latest",
    "run_next",
    "run_tag",
    "run_verify",
]
