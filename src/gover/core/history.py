"""Release history resolution.

The latest release is the most recent commit on the current branch that
carries at least one tag. Commits between HEAD and that commit are the
unreleased changes.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator
from typing import Protocol

from gover.core.version import Version
from gover.exceptions import (
    CommitNotFoundError,
    InvalidVersionError,
    NoCommitsError,
    TagNotFoundError,
)
from gover.vcs.git import Commit, TagRef

logger = logging.getLogger(__name__)


class GitSource(Protocol):
    """The git operations history resolution relies on."""

    def list_tags(self) -> list[TagRef]: ...

    def iter_commits(self, max_count: int | None = None) -> Iterator[Commit]: ...

    def create_tag(self, name: str, sha: str) -> None: ...


class HistoryResolver:
    """Find the latest release and the commits made since."""

    def __init__(self, repo: GitSource) -> None:
        self.repo = repo

    def latest_tags(self) -> list[TagRef]:
        """Return every tag on the most recent tagged commit.

        Raises:
            TagNotFoundError: If no tagged commit is reachable from HEAD
        """
        tagged: dict[str, list[TagRef]] = defaultdict(list)
        for tag in self.repo.list_tags():
            tagged[tag.commit].append(tag)

        if tagged:
            for commit in self.repo.iter_commits():
                if commit.sha in tagged:
                    return tagged[commit.sha]

        raise TagNotFoundError("no tagged commit found on the current branch")

    def latest_tag(self) -> str:
        """Return the name of the latest release tag.

        When several tags mark the latest tagged commit, the greatest valid
        version wins. If none of them is a valid version, the first name in
        lexicographic order is returned.

        Raises:
            TagNotFoundError: If no tagged commit is reachable from HEAD
        """
        tags = self.latest_tags()

        latest: Version | None = None
        latest_name = ""
        for tag in tags:
            try:
                version = Version.parse(tag.name)
            except InvalidVersionError:
                logger.debug("Ignoring non-version tag %s", tag.name)
                continue
            if latest is None or version.is_greater(latest):
                latest, latest_name = version, tag.name

        if latest is None:
            return min(tag.name for tag in tags)
        return latest_name

    def commits_since_latest_tag(self) -> list[str]:
        """Return messages of commits made after the latest tag, newest first.

        Raises:
            TagNotFoundError: If no tagged commit is reachable from HEAD
            CommitNotFoundError: If the walk from HEAD never reaches the
                tagged commit
        """
        tagged_sha = self.latest_tags()[0].commit

        messages: list[str] = []
        for commit in self.repo.iter_commits():
            if commit.sha == tagged_sha:
                logger.debug("Found %d commits since %s", len(messages), tagged_sha[:12])
                return messages
            messages.append(commit.message.strip("\n"))

        raise CommitNotFoundError(f"tagged commit {tagged_sha[:12]} not found in history")

    def create_tag(self, name: str) -> str:
        """Tag the most recent commit of the current branch.

        Returns:
            Hash of the tagged commit

        Raises:
            NoCommitsError: If the current branch has no commits
        """
        latest = next(iter(self.repo.iter_commits(max_count=1)), None)
        if latest is None:
            raise NoCommitsError("latest commit not found")

        self.repo.create_tag(name, latest.sha)
        return latest.sha
