"""Shared test fixtures."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import pytest

from gover.config.models import GoverConfig
from gover.vcs.git import Commit, TagRef

COMMIT_TEMPLATE = "{{.Type}}({{.Scope}}): {{.Message}}\n\n{{.Description}}"

CONFIG_YAML = """\
templates:
  commit: "{{.Type}}({{.Scope}}): {{.Message}}\\n\\n{{.Description}}"
args:
  - name: Type
    required: true
    options:
      - value: feat
        description: A new feature
        version: minor
      - value: fix
        description: A bug fix
        version: patch
      - value: breaking
        description: An incompatible change
        version: major
      - value: docs
        description: Documentation only
  - name: Scope
    required: true
  - name: Message
    required: true
  - name: Description
"""


@pytest.fixture
def config_data() -> dict:
    """Configuration as it is read from a file."""
    return {
        "templates": {"commit": COMMIT_TEMPLATE},
        "args": [
            {
                "name": "Type",
                "required": True,
                "options": [
                    {"value": "feat", "description": "A new feature", "version": "minor"},
                    {"value": "fix", "description": "A bug fix", "version": "patch"},
                    {"value": "breaking", "description": "Incompatible change", "version": "major"},
                    {"value": "docs", "description": "Documentation only"},
                ],
            },
            {"name": "Scope", "required": True},
            {"name": "Message", "required": True},
            {"name": "Description"},
        ],
    }


@pytest.fixture
def config(config_data: dict) -> GoverConfig:
    """Validated configuration."""
    return GoverConfig.model_validate(config_data)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A gover.yml file in a temporary directory."""
    path = tmp_path / "gover.yml"
    path.write_text(CONFIG_YAML)
    return path


@dataclass
class FakeRepository:
    """In-memory stand-in for GitRepository.

    ``commits`` are ordered newest first, like ``git log``.
    """

    commits: list[Commit] = field(default_factory=list)
    tags: list[TagRef] = field(default_factory=list)
    created: list[tuple[str, str]] = field(default_factory=list)

    def list_tags(self) -> list[TagRef]:
        return list(self.tags)

    def iter_commits(self, max_count: int | None = None) -> Iterator[Commit]:
        yield from self.commits[:max_count]

    def create_tag(self, name: str, sha: str) -> None:
        self.created.append((name, sha))
        self.tags.append(TagRef(name=name, target=sha, commit=sha))

    def add_commit(self, sha: str, message: str) -> Commit:
        commit = Commit(
            sha=sha,
            message=message,
            author_name="Test",
            author_email="test@test.com",
            date=datetime.now(timezone.utc),
        )
        self.commits.insert(0, commit)
        return commit

    def add_tag(self, name: str, sha: str, annotated: bool = False) -> None:
        target = f"tag-{name}" if annotated else sha
        self.tags.append(TagRef(name=name, target=target, commit=sha, is_annotated=annotated))


@pytest.fixture
def fake_repo() -> FakeRepository:
    """Empty in-memory repository."""
    return FakeRepository()


@pytest.fixture
def released_repo() -> FakeRepository:
    """Repository released as v1.2.3 with two unreleased commits."""
    repo = FakeRepository()
    repo.add_commit("a1", "feat(core): initial")
    repo.add_tag("v1.2.3", "a1")
    repo.add_commit("b2", "fix(api): handle null response\n\nno more crashes")
    repo.add_commit("c3", "feat(cli): add next command\n")
    return repo


# =============================================================================
# Real git repositories
# =============================================================================


GitRunner = Callable[..., str]


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty git repository isolated from user configuration."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")

    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo, check=True)
    subprocess.run(["git", "config", "commit.gpgsign", "false"], cwd=repo, check=True)
    subprocess.run(["git", "config", "tag.gpgsign", "false"], cwd=repo, check=True)
    return repo


@pytest.fixture
def git(git_repo: Path) -> GitRunner:
    """Run git commands in ``git_repo``.

    Commits get increasing timestamps so that date ordering is stable.
    """
    counter = {"commits": 0}

    def run(*args: str) -> str:
        env = None
        if args and args[0] == "commit":
            counter["commits"] += 1
            stamp = f"2024-01-01T00:{counter['commits']:02d}:00+00:00"
            env = {**os.environ, "GIT_AUTHOR_DATE": stamp, "GIT_COMMITTER_DATE": stamp}
        result = subprocess.run(
            ["git", *args],
            cwd=git_repo,
            check=True,
            capture_output=True,
            text=True,
            env=env,
        )
        return result.stdout.strip()

    return run
