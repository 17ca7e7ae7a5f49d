"""Text layouts for PR messages and branch analysis reports."""

from __future__ import annotations

import re
from collections.abc import Sequence

from prscribe.git.pr_generator.classifier import classify_commits
from prscribe.git.pr_generator.constants import (
	CONVENTIONAL_FILES_PREVIEW,
	DEFAULT_DATE_FORMAT,
	MAX_CONVENTIONAL_FILES,
	MAX_SIMPLE_COMMITS,
	MAX_SIMPLE_INLINE_FILES,
	NO_BRANCH_COMMITS_MESSAGE,
	NO_COMMITS_MESSAGE,
)
from prscribe.git.pr_generator.schemas import AnalysisResult, ClassifiedCommits, CommitRecord, PRStyle

FEAT_PREFIX_RE = re.compile(r"^feat:?\s*", re.IGNORECASE)
FIX_PREFIX_RE = re.compile(r"^fix:?\s*", re.IGNORECASE)
TYPE_PREFIX_RE = re.compile(r"^(feat|fix|refactor|chore):?\s*", re.IGNORECASE)

TESTING_CHECKLIST = (
	"Unit tests passing",
	"Integration tests run",
	"Manual testing performed",
)


def _commit_entries(title: str, commits: Sequence[CommitRecord], include_files: bool) -> str:
	section = f"### {title}\n"
	for commit in commits:
		section += f"- **{commit.subject}**\n"
		section += f"  - Commit: `{commit.short_hash}`\n"
		if include_files and commit.files:
			section += f"  - Files: {', '.join(f'`{change.path}`' for change in commit.files)}\n"
		section += "\n"
	return section


def _detailed_title(analysis: AnalysisResult, classified: ClassifiedCommits) -> str:
	if classified.features:
		return f"feat: {FEAT_PREFIX_RE.sub('', classified.features[0].subject)}"
	if classified.fixes:
		return f"fix: {FIX_PREFIX_RE.sub('', classified.fixes[0].subject)}"
	return analysis.commits[0].subject


def render_detailed(analysis: AnalysisResult, classified: ClassifiedCommits, include_files: bool = True) -> str:
	"""
	Render the detailed layout.

	Args:
		analysis: Collected branch data, with at least one commit.
		classified: Categories for ``analysis.commits``.
		include_files: Whether to list changed files.

	Returns:
		Markdown PR message.
	"""
	commits = analysis.commits
	all_files = analysis.distinct_files

	message = f"{_detailed_title(analysis, classified)}\n\n"
	message += "## 📋 Summary\n\n"
	message += f"This PR contains **{len(commits)} commit(s)** covering "

	changes = []
	if classified.features:
		changes.append(f"{len(classified.features)} new feature(s)")
	if classified.fixes:
		changes.append(f"{len(classified.fixes)} fix(es)")
	if classified.improvements:
		changes.append(f"{len(classified.improvements)} improvement(s)")
	message += ", ".join(changes) if changes else "various changes"
	message += ".\n\n"

	message += "## 🔄 Changes\n\n"
	if classified.features:
		message += _commit_entries("✨ New Features", classified.features, include_files)
	if classified.fixes:
		message += _commit_entries("🐛 Bug Fixes", classified.fixes, include_files)
	if classified.improvements:
		message += _commit_entries("🚀 Improvements", classified.improvements, include_files)

	if classified.other:
		message += "### 📝 Other Changes\n"
		for commit in classified.other:
			message += f"- {commit.subject} (`{commit.short_hash}`)\n"
		message += "\n"

	if include_files and all_files:
		message += "## 📁 Changed Files\n\n"
		message += f"Total of **{len(all_files)} file(s)** changed:\n\n"
		for path in sorted(all_files):
			message += f"- `{path}`\n"
		message += "\n"

	message += "## 🧪 How to Test\n\n"
	for item in TESTING_CHECKLIST:
		message += f"- [ ] {item}\n"
	return message


def render_simple(analysis: AnalysisResult, include_files: bool = True) -> str:
	"""Render the simple layout: newest subject, a short commit list and a file summary."""
	commits = analysis.commits
	all_files = analysis.distinct_files

	message = f"{commits[0].subject}\n\n"

	if len(commits) > 1:
		message += "## Changes\n\n"
		for commit in commits[:MAX_SIMPLE_COMMITS]:
			message += f"- {commit.subject}\n"
		if len(commits) > MAX_SIMPLE_COMMITS:
			message += f"- ... and {len(commits) - MAX_SIMPLE_COMMITS} more commit(s)\n"
		message += "\n"

	if include_files and all_files:
		message += f"**{len(all_files)} file(s) changed**"
		if len(all_files) <= MAX_SIMPLE_INLINE_FILES:
			message += f": {', '.join(f'`{path}`' for path in all_files)}"

	return message


def conventional_type(classified: ClassifiedCommits) -> str:
	"""Pick the conventional-commit type by category priority."""
	if classified.features:
		return "feat"
	if classified.fixes:
		return "fix"
	if classified.improvements:
		return "refactor"
	return "chore"


def conventional_scope(files: Sequence[str]) -> str:
	"""Top-level directory of the first changed file, or an empty string."""
	if not files:
		return ""
	parts = files[0].split("/")
	return parts[0] if len(parts) > 1 else ""


def render_conventional(
	analysis: AnalysisResult, classified: ClassifiedCommits, include_files: bool = True
) -> str:
	"""
	Render the conventional-commit layout.

	The header is ``type(scope): subject`` where the subject is the newest
	commit's first line without its own type prefix.
	"""
	commits = analysis.commits
	all_files = analysis.distinct_files

	scope = conventional_scope(all_files)
	scope_str = f"({scope})" if scope else ""
	subject = TYPE_PREFIX_RE.sub("", commits[0].subject)

	message = f"{conventional_type(classified)}{scope_str}: {subject}\n\n"

	if len(commits) > 1:
		message += "### Included commits:\n\n"
		for commit in commits:
			message += f"- {commit.subject} ({commit.short_hash})\n"
		message += "\n"

	if classified.features:
		message += "### ✨ Features\n"
		for commit in classified.features:
			message += f"- {commit.subject}\n"
		message += "\n"

	if classified.fixes:
		message += "### 🐛 Bug Fixes\n"
		for commit in classified.fixes:
			message += f"- {commit.subject}\n"
		message += "\n"

	if include_files and all_files:
		sorted_files = sorted(all_files)
		message += f"### 📁 Changed files: {len(sorted_files)}\n"
		if len(sorted_files) <= MAX_CONVENTIONAL_FILES:
			shown = sorted_files
		else:
			shown = sorted_files[:CONVENTIONAL_FILES_PREVIEW]
		for path in shown:
			message += f"- {path}\n"
		if len(shown) < len(sorted_files):
			message += f"- ... and {len(sorted_files) - len(shown)} more file(s)\n"

	return message


def render_pr_message(analysis: AnalysisResult, style: PRStyle, include_files: bool = True) -> str:
	"""
	Render a PR message for the collected commits in the requested style.

	Args:
		analysis: Collected branch data.
		style: Layout to render.
		include_files: Whether to mention changed files.

	Returns:
		The PR message, or ``NO_COMMITS_MESSAGE`` when there are no commits.
	"""
	if not analysis.commits:
		return NO_COMMITS_MESSAGE

	classified = classify_commits(analysis.commits)
	if style is PRStyle.DETAILED:
		return render_detailed(analysis, classified, include_files)
	if style is PRStyle.SIMPLE:
		return render_simple(analysis, include_files)
	return render_conventional(analysis, classified, include_files)


def format_analysis_report(analysis: AnalysisResult, date_format: str = DEFAULT_DATE_FORMAT) -> str:
	"""
	Format a commit-by-commit walkthrough of the branch.

	Dates are shown in the local timezone using ``date_format``.
	"""
	branch = analysis.branch
	report = f"# 🔍 Branch Analysis: `{branch.current_branch}`\n\n"
	report += f"**Base:** `{branch.base_ref}`\n"
	report += f"**Total commits:** {analysis.total_commits}\n\n"

	if not analysis.commits:
		report += f"{NO_BRANCH_COMMITS_MESSAGE}\n"
		return report

	report += f"## 📝 Analyzed Commits ({len(analysis.commits)}):\n\n"
	for index, commit in enumerate(analysis.commits, start=1):
		report += f"### {index}. {commit.subject}\n"
		report += f"- **Hash:** `{commit.short_hash}`\n"
		report += f"- **Author:** {commit.author_name}\n"
		report += f"- **Date:** {commit.date.astimezone().strftime(date_format)}\n"
		if commit.files:
			report += f"- **Changed files ({len(commit.files)}):**\n"
			for change in commit.files:
				report += f"  - `{change.path}` (+{change.insertions}/-{change.deletions})\n"
		else:
			report += "- **Files:** No files detected\n"
		report += "\n"
	return report
