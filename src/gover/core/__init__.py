"""Core business logic for gover.

This module contains the fundamental building blocks:
- Version parsing and the bump state machine
- Template driven commit message matching
- Change classification of commits
- Release history resolution
- Changelog and commit message rendering
"""

from __future__ import annotations

from gover.core.changelog import generate_changelog, group_messages, render_changelog
from gover.core.changes import (
    build_severity_tables,
    classify,
    classify_message,
    parse_messages,
)
from gover.core.compose import render_commit_message, wrap_text
from gover.core.history import HistoryResolver
from gover.core.message import Message, Template, match_message
from gover.core.version import ChangeType, Version, parse_version

__all__ = [
    # Version
    "ChangeType",
    # History
    "HistoryResolver",
    # Messages
    "Message",
    "Template",
    "Version",
    # Changes
    "build_severity_tables",
    "classify",
    "classify_message",
    # Changelog
    "generate_changelog",
    "group_messages",
    "match_message",
    "parse_messages",
    "parse_version",
    "render_changelog",
    "render_commit_message",
    "wrap_text",
]
