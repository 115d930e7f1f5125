"""Application facade tying configuration, history and the version engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gover.config import load_config
from gover.core.changelog import generate_changelog
from gover.core.changes import build_severity_tables, classify
from gover.core.compose import DEFAULT_WRAP_WIDTH, render_commit_message
from gover.core.history import GitSource, HistoryResolver
from gover.core.version import ChangeType, Version
from gover.exceptions import CommitNotFoundError, InvalidVersionError, TagNotFoundError
from gover.prompt import select, text_input
from gover.vcs.git import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from gover.config.models import GoverConfig

logger = logging.getLogger(__name__)


class Gover:
    """Operations behind the gover commands."""

    def __init__(self, config: GoverConfig, repo: GitSource) -> None:
        self.config = config
        self.history = HistoryResolver(repo)
        self.severity_tables = build_severity_tables(config.args)

    @classmethod
    def open(cls, config_path: Path | str | None, repo_path: Path | str = ".") -> Gover:
        """Load the configuration and open the repository."""
        return cls(load_config(config_path), GitRepository(repo_path))

    def change(self, strict: bool = False) -> ChangeType:
        """Return the most significant change since the latest tag.

        In lenient mode a missing tag or unreachable tagged commit means no
        change and commits not matching the template are skipped. In strict
        mode both are errors.

        Raises:
            MissingRequiredFieldError: In strict mode, for a non-conforming
                commit message
            TagNotFoundError: In strict mode, when there is no release tag
            CommitNotFoundError: In strict mode, when the tagged commit is
                unreachable
        """
        try:
            commits = self.history.commits_since_latest_tag()
        except (CommitNotFoundError, TagNotFoundError):
            if strict:
                raise
            logger.debug("No release history, assuming no change")
            return ChangeType.NONE

        return classify(
            self.severity_tables,
            commits,
            self.config.commit_template,
            self.config.required_args,
            strict=strict,
        )

    def verify(self) -> None:
        """Check that every unreleased commit message matches the template."""
        self.change(strict=True)

    def latest_tag(self) -> str:
        return self.history.latest_tag()

    def latest_version(self) -> Version | None:
        """Parse the latest release tag, or None when nothing was released yet.

        Raises:
            InvalidVersionError: If the latest tag is not a valid version
        """
        try:
            latest = self.history.latest_tag()
        except TagNotFoundError:
            return None
        return Version.parse(latest)

    def next_version(self, pre_release: str = "") -> Version | None:
        """Compute the next version, or None when nothing was released yet.

        Raises:
            InvalidVersionError: If the latest tag is not a valid version or
                the pre-release label is malformed
        """
        latest = self.latest_version()
        if latest is None:
            return None

        change = self.change()
        version = latest.next(change, pre_release)
        logger.debug("Next version after %s for %s change: %s", latest, change, version)
        return version

    def commits(self) -> list[str]:
        return self.history.commits_since_latest_tag()

    def changelog(self, pre_release: str = "") -> str:
        """Render the changelog of the unreleased commits.

        The next version is only a template variable, so it is left out when
        the latest tag is not a version.
        """
        try:
            latest = self.latest_version()
        except InvalidVersionError as e:
            logger.debug("Rendering changelog without a version: %s", e)
            latest = None

        version = latest.next(self.change(), pre_release) if latest is not None else None
        return generate_changelog(self.history, self.config, version)

    def tag(self, pre_release: str = "") -> Version | None:
        """Tag the latest commit with the next version.

        Returns:
            The created version, or None when there was nothing to tag
        """
        version = self.next_version(pre_release)
        if version is None:
            return None
        if str(version) == self.history.latest_tag():
            logger.info("No changes since %s, not tagging", version)
            return None

        self.history.create_tag(str(version))
        return version

    def compose_commit(self, console: Console) -> str:
        """Prompt for every configured arg and render the commit message."""
        values: dict[str, str] = {}
        for arg in self.config.args:
            if arg.options:
                values[arg.name] = select(arg.name, arg.options, console)
            else:
                values[arg.name] = text_input(
                    arg.name,
                    arg.required,
                    console,
                    width=arg.width or DEFAULT_WRAP_WIDTH,
                )
        return render_commit_message(self.config.commit_template, values)
