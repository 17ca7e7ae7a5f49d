"""Tests for PR message and analysis report layouts."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from prscribe.git.pr_generator.classifier import classify_commits
from prscribe.git.pr_generator.constants import NO_COMMITS_MESSAGE
from prscribe.git.pr_generator.schemas import CommitRecord, FileChange, PRStyle
from prscribe.git.pr_generator.templates import (
	conventional_scope,
	conventional_type,
	format_analysis_report,
	render_conventional,
	render_detailed,
	render_pr_message,
	render_simple,
)
from tests.base import make_analysis, make_commit


@pytest.fixture
def mixed_commits() -> list[CommitRecord]:
	return [
		make_commit("feat: add export button", ["src/ui/export.py", "src/ui/toolbar.py"]),
		make_commit("fix: handle empty export", ["src/ui/export.py"]),
		make_commit("refactor: split exporter", ["src/core/exporter.py"]),
		make_commit("chore: bump version", ["pyproject.toml"]),
	]


@pytest.mark.unit
class TestRenderPRMessage:
	"""Dispatch and the empty case."""

	@pytest.mark.parametrize("style", list(PRStyle))
	def test_no_commits(self, style: PRStyle) -> None:
		"""Every style returns the same fixed text when nothing was found."""
		assert render_pr_message(make_analysis([]), style) == NO_COMMITS_MESSAGE

	def test_style_dispatch(self, mixed_commits: list[CommitRecord]) -> None:
		"""Each style produces its own layout."""
		analysis = make_analysis(mixed_commits)
		assert "## 🧪 How to Test" in render_pr_message(analysis, PRStyle.DETAILED)
		assert render_pr_message(analysis, PRStyle.SIMPLE).startswith("feat: add export button\n\n## Changes")
		assert render_pr_message(analysis, PRStyle.CONVENTIONAL).startswith("feat(src): add export button")


@pytest.mark.unit
class TestDetailed:
	"""The detailed layout."""

	def test_sections(self, mixed_commits: list[CommitRecord]) -> None:
		"""Summary counts, one section per category and the checklist."""
		analysis = make_analysis(mixed_commits)
		message = render_detailed(analysis, classify_commits(mixed_commits))

		assert message.startswith("feat: add export button\n\n## 📋 Summary\n\n")
		assert "**4 commit(s)** covering 1 new feature(s), 1 fix(es), 1 improvement(s)." in message
		assert "### ✨ New Features\n- **feat: add export button**\n" in message
		assert f"  - Commit: `{mixed_commits[0].short_hash}`\n" in message
		assert "  - Files: `src/ui/export.py`, `src/ui/toolbar.py`\n" in message
		assert "### 🐛 Bug Fixes\n- **fix: handle empty export**\n" in message
		assert "### 🚀 Improvements\n- **refactor: split exporter**\n" in message
		assert f"### 📝 Other Changes\n- chore: bump version (`{mixed_commits[3].short_hash}`)\n" in message
		assert "Total of **4 file(s)** changed:" in message
		assert message.endswith(
			"## 🧪 How to Test\n\n"
			"- [ ] Unit tests passing\n"
			"- [ ] Integration tests run\n"
			"- [ ] Manual testing performed\n"
		)

	def test_file_list_sorted_and_deduplicated(self, mixed_commits: list[CommitRecord]) -> None:
		"""The changed-files section lists each path once, sorted."""
		message = render_detailed(make_analysis(mixed_commits), classify_commits(mixed_commits))
		section = message.split("## 📁 Changed Files\n\n")[1].split("\n\n## 🧪")[0]
		assert section.splitlines()[2:] == [
			"- `pyproject.toml`",
			"- `src/core/exporter.py`",
			"- `src/ui/export.py`",
			"- `src/ui/toolbar.py`",
		]

	def test_without_files(self, mixed_commits: list[CommitRecord]) -> None:
		"""No file lines when files are excluded."""
		message = render_detailed(make_analysis(mixed_commits), classify_commits(mixed_commits), include_files=False)
		assert "Files:" not in message
		assert "📁" not in message

	def test_title_from_fix(self) -> None:
		"""Without features the first fix provides the title, prefix normalized."""
		commits = [make_commit("docs: readme"), make_commit("Fix: crash on start")]
		message = render_detailed(make_analysis(commits), classify_commits(commits))
		assert message.startswith("fix: crash on start\n")

	def test_title_from_newest_commit(self) -> None:
		"""Without features or fixes the newest subject is the title."""
		commits = [make_commit("docs: readme"), make_commit("chore: lint")]
		message = render_detailed(make_analysis(commits), classify_commits(commits))
		assert message.startswith("docs: readme\n")
		assert "covering various changes." in message

	def test_commit_under_several_headings(self) -> None:
		"""A commit matching two categories is listed under both."""
		commit = make_commit("fix: add missing guard")
		message = render_detailed(make_analysis([commit]), classify_commits([commit]))
		assert message.count("- **fix: add missing guard**") == 2
		assert "Other Changes" not in message


@pytest.mark.unit
class TestSimple:
	"""The simple layout."""

	def test_single_commit(self) -> None:
		"""One commit gives just the title and files."""
		commit = make_commit("feat: add export", ["a.py"])
		assert render_simple(make_analysis([commit])) == "feat: add export\n\n**1 file(s) changed**: `a.py`"

	def test_nine_commits(self) -> None:
		"""Eight subjects are listed and the ninth is summarized."""
		commits = [make_commit(f"change number {i}") for i in range(9)]
		message = render_simple(make_analysis(commits))
		lines = message.splitlines()
		listed = [line for line in lines if line.startswith("- change number")]
		assert len(listed) == 8
		assert "- ... and 1 more commit(s)" in lines
		assert "change number 8" not in message.split("## Changes")[1]

	def test_inline_files_up_to_ten(self) -> None:
		"""Up to ten files are listed inline in first-seen order."""
		commits = [make_commit("one", ["b.py", "a.py"]), make_commit("two", ["a.py", "c.py"])]
		message = render_simple(make_analysis(commits))
		assert message.endswith("**3 file(s) changed**: `b.py`, `a.py`, `c.py`")

	def test_many_files_only_counted(self) -> None:
		"""More than ten files are only counted."""
		commits = [make_commit("bulk", [f"f{i}.py" for i in range(11)])]
		message = render_simple(make_analysis(commits))
		assert message.endswith("**11 file(s) changed**")

	def test_without_files(self) -> None:
		"""File summary omitted on request."""
		commits = [make_commit("one", ["a.py"]), make_commit("two", ["b.py"])]
		assert "file(s) changed" not in render_simple(make_analysis(commits), include_files=False)


@pytest.mark.unit
class TestConventional:
	"""The conventional-commit layout."""

	def test_header_and_sections(self, mixed_commits: list[CommitRecord]) -> None:
		"""Type from category priority, scope from the first file."""
		message = render_conventional(make_analysis(mixed_commits), classify_commits(mixed_commits))
		assert message.startswith("feat(src): add export button\n\n### Included commits:\n\n")
		assert f"- chore: bump version ({mixed_commits[3].short_hash})\n" in message
		assert "### ✨ Features\n- feat: add export button\n" in message
		assert "### 🐛 Bug Fixes\n- fix: handle empty export\n" in message
		assert "### 📁 Changed files: 4\n" in message

	def test_only_other_commits(self) -> None:
		"""Nothing categorized means ``chore`` and no category sections."""
		commits = [make_commit("docs: readme", ["README.md"]), make_commit("style: whitespace", ["setup.cfg"])]
		message = render_conventional(make_analysis(commits), classify_commits(commits))
		assert message.startswith("chore: docs: readme\n")
		assert "Features" not in message
		assert "Bug Fixes" not in message

	def test_subject_prefix_stripped(self) -> None:
		"""The newest commit's own type prefix is removed."""
		commits = [make_commit("Refactor: tidy imports")]
		message = render_conventional(make_analysis(commits), classify_commits(commits))
		assert message.startswith("refactor: tidy imports\n")

	def test_single_commit_has_no_commit_list(self) -> None:
		"""The commit list only appears for more than one commit."""
		commits = [make_commit("fix: typo", ["lib/text.py"])]
		message = render_conventional(make_analysis(commits), classify_commits(commits))
		assert "Included commits" not in message
		assert message.startswith("fix(lib): typo\n")

	def test_long_file_list_truncated(self) -> None:
		"""Over fifteen files shows ten and a remainder line."""
		commits = [make_commit("bulk", [f"pkg/f{i:02d}.py" for i in range(16)])]
		message = render_conventional(make_analysis(commits), classify_commits(commits))
		file_lines = [line for line in message.splitlines() if line.startswith("- pkg/")]
		assert file_lines == [f"- pkg/f{i:02d}.py" for i in range(10)]
		assert message.endswith("- ... and 6 more file(s)\n")

	def test_fifteen_files_listed(self) -> None:
		"""Exactly fifteen files are all shown."""
		commits = [make_commit("bulk", [f"pkg/f{i:02d}.py" for i in range(15)])]
		message = render_conventional(make_analysis(commits), classify_commits(commits))
		assert "more file(s)" not in message
		assert message.count("- pkg/") == 15

	@pytest.mark.parametrize(
		("files", "scope"),
		[([], ""), (["README.md"], ""), (["src/app.py", "lib/x.py"], "src"), (["a/b/c.py"], "a")],
	)
	def test_scope(self, files: list[str], scope: str) -> None:
		"""Scope is the first segment of the first file path, when it has one."""
		assert conventional_scope(files) == scope

	def test_type_priority(self) -> None:
		"""feat beats fix beats refactor beats chore."""
		fix = make_commit("fix bug")
		refactor = make_commit("refactor x")
		feat = make_commit("add y")
		assert conventional_type(classify_commits([fix, refactor, feat])) == "feat"
		assert conventional_type(classify_commits([refactor, fix])) == "fix"
		assert conventional_type(classify_commits([refactor])) == "refactor"
		assert conventional_type(classify_commits([make_commit("docs")])) == "chore"


@pytest.mark.unit
class TestAnalysisReport:
	"""The commit-by-commit branch report."""

	def test_report(self) -> None:
		"""Header, per-commit details and per-file counts."""
		commit = CommitRecord(
			hash="0123456789abcdef0123456789abcdef01234567",
			message="feat: add export\n\nbody",
			author_name="Ada",
			date=datetime(2024, 5, 17, 12, 30, tzinfo=UTC),
			files=(FileChange(path="src/export.py", insertions=12, deletions=3),),
		)
		empty = make_commit("chore: empty")
		report = format_analysis_report(make_analysis([commit, empty], base_ref="master"), date_format="%Y")

		assert report.startswith("# 🔍 Branch Analysis: `feature`\n\n**Base:** `master`\n**Total commits:** 2\n\n")
		assert "## 📝 Analyzed Commits (2):" in report
		assert "### 1. feat: add export\n- **Hash:** `0123456`\n- **Author:** Ada\n- **Date:** 2024\n" in report
		assert "- **Changed files (1):**\n  - `src/export.py` (+12/-3)\n" in report
		assert "### 2. chore: empty\n" in report
		assert "- **Files:** No files detected\n" in report

	def test_empty_report(self) -> None:
		"""No commits gives the header and a fixed line."""
		report = format_analysis_report(make_analysis([]))
		assert report.endswith("**Total commits:** 0\n\nNo commits found on this branch.\n")
