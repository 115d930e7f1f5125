"""Read access to a git repository through the ``git`` executable.

Only the handful of operations needed to resolve release history are
exposed: listing tags, walking commits from HEAD and creating a tag.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from gover.exceptions import GitError, NotARepositoryError

logger = logging.getLogger(__name__)

FIELD_SEP = "\x00"
RECORD_SEP = "\x1e"

# git expands %00 and %x00 to NUL itself; argv cannot carry NUL bytes.
TAG_FORMAT = "%00".join(
    [
        "%(refname:short)",
        "%(objectname)",
        "%(objecttype)",
        "%(*objectname)",
        "%(*objecttype)",
    ]
)
COMMIT_FORMAT = "%x00".join(["%H", "%an", "%ae", "%cI", "%B"]) + "%x1e"


@dataclass(frozen=True)
class TagRef:
    """A tag reference resolved to the commit it marks.

    Attributes:
        name: Short tag name, e.g. "v1.2.3"
        target: Hash the reference points at (a tag object when annotated)
        commit: Hash of the tagged commit
        is_annotated: Whether the tag is an annotated tag object
    """

    name: str
    target: str
    commit: str
    is_annotated: bool = False


@dataclass(frozen=True)
class Commit:
    """A commit as reported by ``git log``."""

    sha: str
    message: str
    author_name: str
    author_email: str
    date: datetime


class GitRepository:
    """A git working tree driven through the ``git`` command."""

    def __init__(self, path: Path | str = ".") -> None:
        self.path = Path(path)
        if not self.path.is_dir():
            raise NotARepositoryError(f"not a directory: {self.path}")
        try:
            self._run(["rev-parse", "--git-dir"])
        except GitError as e:
            if e.stderr is None:
                raise
            raise NotARepositoryError(
                f"not a git repository: {self.path}", stderr=e.stderr
            ) from e

    def _run(self, args: list[str]) -> str:
        """Run a git command in the repository and return its stdout.

        Raises:
            GitError: If git is missing or the command fails
        """
        logger.debug("Running git %s in %s", " ".join(args), self.path)
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise GitError(
                f"git command failed: git {' '.join(args)}\n{stderr}", stderr=stderr
            ) from e
        except FileNotFoundError as e:
            raise GitError("git is not installed or not in PATH") from e
        return result.stdout

    def head_sha(self) -> str | None:
        """Return the hash HEAD points at, or None on an unborn branch."""
        try:
            return self._run(["rev-parse", "--verify", "--quiet", "HEAD^{commit}"]).strip()
        except GitError:
            return None

    def list_tags(self) -> list[TagRef]:
        """List tags that resolve to a commit.

        Lightweight tags point at the commit directly. Annotated tags point at
        a tag object whose target is the commit. Tags of other objects are
        ignored.
        """
        output = self._run(["for-each-ref", f"--format={TAG_FORMAT}", "refs/tags"])

        tags: list[TagRef] = []
        for line in output.splitlines():
            if not line:
                continue
            name, target, kind, peeled, peeled_kind = line.split(FIELD_SEP)
            if kind == "commit":
                tags.append(TagRef(name=name, target=target, commit=target))
            elif kind == "tag" and peeled_kind == "commit":
                tags.append(TagRef(name=name, target=target, commit=peeled, is_annotated=True))
            else:
                logger.debug("Ignoring tag %s pointing at a %s", name, peeled_kind or kind)
        return tags

    def iter_commits(self, max_count: int | None = None) -> Iterator[Commit]:
        """Iterate commits reachable from HEAD, newest first.

        Commits come in ``git log --date-order``: newest committer date first,
        except that a parent is never listed before its children, even when
        its committer date is later.

        Args:
            max_count: Stop after this many commits, None for the whole history
        """
        if self.head_sha() is None:
            return

        args = ["log", "--date-order", f"--format={COMMIT_FORMAT}"]
        if max_count is not None:
            args.append(f"--max-count={max_count}")
        output = self._run([*args, "HEAD"])
        for record in output.split(RECORD_SEP):
            record = record.lstrip("\n")
            if not record:
                continue
            sha, author_name, author_email, date, message = record.split(FIELD_SEP, 4)
            yield Commit(
                sha=sha,
                message=message,
                author_name=author_name,
                author_email=author_email,
                date=datetime.fromisoformat(date),
            )

    def create_tag(self, name: str, sha: str) -> None:
        """Create a lightweight tag ``name`` on commit ``sha``."""
        self._run(["tag", name, sha])
        logger.info("Created tag %s at %s", name, sha[:12])
