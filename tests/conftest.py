"""Global test fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.base import RepoBuilder


@pytest.fixture
def git_repo(tmp_path: Path) -> RepoBuilder:
	"""An empty repository whose HEAD points at an unborn ``main``."""
	return RepoBuilder(tmp_path / "repo")


@pytest.fixture
def feature_repo(git_repo: RepoBuilder) -> RepoBuilder:
	"""
	A repository with two commits on ``main`` and three on ``feature``.

	``feature`` is checked out.
	"""
	git_repo.commit("Initial commit", {"README.md": "# demo\n"})
	git_repo.commit("chore: configure tooling", {"setup.cfg": "[metadata]\n"})
	git_repo.create_branch("feature")
	git_repo.commit("feat: add login form", {"src/login.py": "def login():\n    pass\n"})
	git_repo.commit("fix: resolve session bug", {"src/session.py": "TIMEOUT = 30\n", "src/login.py": "def login():\n    return True\n"})
	git_repo.commit("docs: describe login", {"docs/login.md": "Login\n"})
	return git_repo
