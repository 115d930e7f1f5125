"""Exception hierarchy for gover.

All errors raised by gover derive from :class:`GoverError` so that the
command line layer can report them uniformly.
"""

from __future__ import annotations

from collections.abc import Sequence


class GoverError(Exception):
    """Base exception for all gover errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(GoverError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Configuration file does not exist or cannot be read."""


class ConfigValidationError(ConfigError):
    """Configuration file content is invalid."""


# =============================================================================
# Versions
# =============================================================================


class VersionError(GoverError):
    """Base exception for version errors."""


class InvalidVersionError(VersionError):
    """A string is not a valid semantic version."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"invalid version: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


# =============================================================================
# Commit messages
# =============================================================================


class MessageError(GoverError):
    """Base exception for commit message errors."""


class MissingRequiredFieldError(MessageError):
    """A commit message lacks a value for a required template field."""

    def __init__(self, template: str, required: Sequence[str], field: str) -> None:
        self.template = template
        self.required = list(required)
        self.field = field
        super().__init__(
            "missing required message parameter:\n"
            "-----------------------------------\n"
            f"template:\n{template}\n"
            "-----------------------------------\n"
            f"required:\n{','.join(self.required)}\n"
            "-----------------------------------\n"
            f"missing: {field}"
        )


class DuplicateFieldError(MessageError):
    """A commit template uses the same placeholder name more than once."""

    def __init__(self, template: str, field: str) -> None:
        self.template = template
        self.field = field
        super().__init__(f"duplicate template field {field!r} in template:\n{template}")


# =============================================================================
# Git
# =============================================================================


class GitError(GoverError):
    """Base exception for git errors."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr
        super().__init__(message)


class NotARepositoryError(GitError):
    """Path is not inside a git repository."""


class CommitNotFoundError(GitError):
    """The latest tagged commit is not reachable from the current branch."""


class TagNotFoundError(GitError):
    """No tagged commit is reachable from the current branch."""


class NoCommitsError(GitError):
    """The current branch has no commits to tag."""


# =============================================================================
# Templates
# =============================================================================


class TemplateRenderError(GoverError):
    """A changelog or commit message template failed to render."""
