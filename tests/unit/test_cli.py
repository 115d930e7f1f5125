"""Tests for the gover command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from gover.app import Gover
from gover.cli import app
from gover.config.models import GoverConfig
from gover.exceptions import ConfigNotFoundError

runner = CliRunner()


@pytest.fixture
def open_app(released_repo, config: GoverConfig):
    """Make every command run against the in-memory released repository."""
    gover = Gover(config, released_repo)
    with patch.object(Gover, "open", return_value=gover) as mock_open:
        yield mock_open


class TestQueryCommands:
    """Tests for commands that print a value."""

    def test_next(self, open_app):
        result = runner.invoke(app, ["next"])

        assert result.exit_code == 0
        assert result.output.strip() == "v1.3.0"

    def test_next_pre_release(self, open_app):
        result = runner.invoke(app, ["next", "--pre", "beta"])

        assert result.exit_code == 0
        assert result.output.strip() == "v1.3.0-beta.1"

    def test_latest(self, open_app):
        result = runner.invoke(app, ["latest"])

        assert result.exit_code == 0
        assert result.output.strip() == "v1.2.3"

    def test_change(self, open_app):
        result = runner.invoke(app, ["change"])

        assert result.exit_code == 0
        assert result.output.strip() == "minor"

    def test_commits(self, open_app):
        result = runner.invoke(app, ["commits"])

        assert result.exit_code == 0
        assert "feat(cli): add next command" in result.output
        assert "no more crashes" in result.output

    def test_changelog_without_template(self, open_app):
        result = runner.invoke(app, ["changelog"])

        assert result.exit_code == 0
        assert "fix(api): handle null response" in result.output

    def test_path_and_config_are_passed(self, open_app):
        runner.invoke(app, ["--cfg", "custom.yaml", "latest", "some/repo"])

        open_app.assert_called_once_with("custom.yaml", "some/repo")

    def test_default_config_path(self, open_app):
        runner.invoke(app, ["latest"])

        open_app.assert_called_once_with("./gover.yml", ".")

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert result.output.startswith("gover ")


class TestVerifyCommand:
    """Tests for the verify command."""

    def test_verify_success(self, open_app):
        result = runner.invoke(app, ["verify"])

        assert result.exit_code == 0

    def test_verify_failure(self, open_app, released_repo):
        released_repo.add_commit("d4", "Updated the readme file")

        result = runner.invoke(app, ["verify"])

        assert result.exit_code == 1
        assert "missing: Scope" in result.output


class TestTagCommand:
    """Tests for the tag command."""

    def test_tag(self, open_app, released_repo):
        result = runner.invoke(app, ["tag", "--pre", "rc"])

        assert result.exit_code == 0
        assert released_repo.created == [("v1.3.0-rc.1", "c3")]
        assert "v1.3.0-rc.1" in result.output


class TestCommitCommand:
    """Tests for the commit command."""

    def test_writes_message_file(self, open_app, tmp_path: Path):
        msg_file = tmp_path / "COMMIT_EDITMSG"
        answers = "fix\ncli\nhandle empty input\n\n"

        result = runner.invoke(app, ["commit", "--msg-file", str(msg_file)], input=answers)

        assert result.exit_code == 0
        assert msg_file.read_text() == "fix(cli): handle empty input\n\n"

    def test_prints_message_without_file(self, open_app):
        answers = "feat\ncore\nadd option\nlonger description\n"

        result = runner.invoke(app, ["commit"], input=answers)

        assert result.exit_code == 0
        assert "feat(core): add option\n\nlonger description" in result.output


class TestErrors:
    """Tests for error reporting."""

    def test_missing_config(self):
        with patch.object(Gover, "open", side_effect=ConfigNotFoundError("config file not found")):
            result = runner.invoke(app, ["next"])

        assert result.exit_code == 1
        assert "config file not found" in result.output
        assert "gover --help" in result.output

    def test_commits_without_tags(self, config: GoverConfig, fake_repo):
        fake_repo.add_commit("a1", "feat(core): initial")
        with patch.object(Gover, "open", return_value=Gover(config, fake_repo)):
            result = runner.invoke(app, ["commits"])

        assert result.exit_code == 1
        assert "no tagged commit" in result.output

    def test_next_without_tags(self, config: GoverConfig, fake_repo):
        """Without release tags next prints nothing and succeeds."""
        fake_repo.add_commit("a1", "feat(core): initial")
        with patch.object(Gover, "open", return_value=Gover(config, fake_repo)):
            result = runner.invoke(app, ["next"])

        assert result.exit_code == 0
        assert "No release tag found" in result.output

    def test_next_with_whitespace_label(self, open_app):
        """A pre-release label with spaces is reported as an error."""
        result = runner.invoke(app, ["next", "--pre", "my label"])

        assert result.exit_code == 1
        assert "whitespace" in result.output
