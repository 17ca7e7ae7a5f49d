"""Tests for the prscribe command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from prscribe import __version__
from prscribe.cli import app
from prscribe.server.tools import ToolDispatcher
from tests.base import RepoBuilder


@pytest.fixture
def runner() -> CliRunner:
	return CliRunner()


@pytest.mark.cli
class TestGlobalOptions:
	"""Options handled by the app callback."""

	def test_version(self, runner: CliRunner) -> None:
		result = runner.invoke(app, ["--version"])
		assert result.exit_code == 0
		assert f"prscribe version: {__version__}" in result.stdout

	def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
		"""A missing explicit config file exits with an error."""
		result = runner.invoke(app, ["--config", str(tmp_path / "missing.yml"), "analyze"])
		assert result.exit_code == 1


@pytest.mark.cli
@pytest.mark.git
@pytest.mark.integration
class TestToolCommands:
	"""The analyze and message commands."""

	def test_analyze_raw(self, runner: CliRunner, feature_repo: RepoBuilder) -> None:
		"""The raw report is printed unchanged."""
		result = runner.invoke(app, ["--repo", str(feature_repo.path), "analyze", "--raw", "--limit", "2"])
		assert result.exit_code == 0, result.output
		assert "# 🔍 Branch Analysis: `feature`" in result.stdout
		assert "## 📝 Analyzed Commits (2):" in result.stdout

	def test_message_raw(self, runner: CliRunner, feature_repo: RepoBuilder) -> None:
		result = runner.invoke(app, ["--repo", str(feature_repo.path), "message", "conventional", "--raw"])
		assert result.exit_code == 0, result.output
		assert "# 📝 Generated PR Message (conventional)" in result.stdout
		assert "feat(docs): docs: describe login" in result.stdout

	def test_message_default_style(self, runner: CliRunner, feature_repo: RepoBuilder) -> None:
		result = runner.invoke(app, ["--repo", str(feature_repo.path), "message", "--raw", "--no-files"])
		assert result.exit_code == 0, result.output
		assert "# 📝 Generated PR Message (detailed)" in result.stdout
		assert "Changed Files" not in result.stdout

	def test_message_rendered(self, runner: CliRunner, feature_repo: RepoBuilder) -> None:
		"""Without --raw the Markdown is rendered."""
		result = runner.invoke(app, ["--repo", str(feature_repo.path), "message", "simple"])
		assert result.exit_code == 0, result.output
		assert "Generated PR Message (simple)" in result.stdout
		assert "# 📝" not in result.stdout

	def test_repo_config_file(self, runner: CliRunner, feature_repo: RepoBuilder) -> None:
		"""A ``.prscribe.yml`` in the repository sets the defaults."""
		(feature_repo.path / ".prscribe.yml").write_text(yaml.dump({"pr": {"analysis_commit_limit": 1}}))
		result = runner.invoke(app, ["--repo", str(feature_repo.path), "analyze", "--raw"])
		assert result.exit_code == 0, result.output
		assert "## 📝 Analyzed Commits (1):" in result.stdout

	def test_invalid_style(self, runner: CliRunner, feature_repo: RepoBuilder) -> None:
		result = runner.invoke(app, ["--repo", str(feature_repo.path), "message", "verbose"])
		assert result.exit_code == 2

	def test_tool_error_exit_code(self, runner: CliRunner, tmp_path: Path) -> None:
		"""Tool errors exit with status 1."""
		result = runner.invoke(app, ["--repo", str(tmp_path), "analyze", "--raw"])
		assert result.exit_code == 1
		assert "Error Summary" in result.output


@pytest.mark.cli
class TestServeCommand:
	"""The serve command hands a configured dispatcher to the server."""

	def test_serve(self, runner: CliRunner, tmp_path: Path) -> None:
		(tmp_path / ".prscribe.yml").write_text(yaml.dump({"server": {"name": "pr-bot"}}))
		with patch("prscribe.server.stdio.run_stdio_server", new_callable=AsyncMock) as mock_run:
			result = runner.invoke(app, ["--repo", str(tmp_path), "serve"])

		assert result.exit_code == 0, result.output
		mock_run.assert_awaited_once()
		dispatcher = mock_run.call_args.args[0]
		assert isinstance(dispatcher, ToolDispatcher)
		assert dispatcher.repo_path == tmp_path
		assert mock_run.call_args.kwargs["name"] == "pr-bot"
