"""Pipeline that turns branch history into PR messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prscribe.git.pr_generator.collector import collect_commits
from prscribe.git.pr_generator.resolver import resolve_branch
from prscribe.git.pr_generator.schemas import AnalysisResult, PRStyle
from prscribe.git.pr_generator.templates import format_analysis_report, render_pr_message
from prscribe.git.utils import GitError

if TYPE_CHECKING:
	from prscribe.config.config_schema import PRSchema
	from prscribe.git.utils import GitRepoContext

logger = logging.getLogger(__name__)


class PRGeneratorError(Exception):
	"""Raised when a branch cannot be analyzed or described."""


class PRMessageGenerator:
	"""Resolves, collects and renders the commits of the current branch."""

	def __init__(self, repo: GitRepoContext, settings: PRSchema) -> None:
		"""
		Initialize the generator.

		Args:
			repo: Repository to read from.
			settings: The ``pr`` configuration section.
		"""
		self.repo = repo
		self.settings = settings

	def analyze(self, base_branch: str | None = None, limit: int | None = None) -> AnalysisResult:
		"""
		Collect the commits on the current branch that are not on ``base_branch``.

		Args:
			base_branch: Requested base. Defaults to the configured base branch.
			limit: Maximum commits to collect. Defaults to the analysis limit.

		Returns:
			AnalysisResult for the branch.

		Raises:
			PRGeneratorError: If the branch cannot be analyzed.
		"""
		base = base_branch or self.settings.default_base_branch
		max_count = limit or self.settings.analysis_commit_limit
		try:
			branch = resolve_branch(self.repo, base, self.settings.oldest_commit_lookback)
			result = collect_commits(self.repo, branch, max_count)
		except GitError as e:
			msg = f"Failed to analyze branch: {e}"
			raise PRGeneratorError(msg) from e
		logger.info(
			"Analyzed '%s' against '%s': %d of %d commits",
			branch.current_branch,
			branch.base_ref,
			len(result.commits),
			result.total_commits,
		)
		for commit in result.commits:
			if commit.diff_error:
				logger.info("Commit %s listed without files: %s", commit.short_hash, commit.diff_error)
		return result

	def report(self, base_branch: str | None = None, limit: int | None = None) -> str:
		"""Analyze the branch and format the commit-by-commit report."""
		return format_analysis_report(self.analyze(base_branch, limit), self.settings.date_format)

	def generate(
		self,
		style: PRStyle,
		base_branch: str | None = None,
		include_files: bool | None = None,
	) -> str:
		"""
		Generate a PR message for the current branch.

		Args:
			style: Layout to render.
			base_branch: Requested base. Defaults to the configured base branch.
			include_files: Whether to mention changed files. Defaults to config.

		Returns:
			The rendered PR message.

		Raises:
			PRGeneratorError: If the branch cannot be analyzed.
		"""
		files = self.settings.include_files if include_files is None else include_files
		try:
			analysis = self.analyze(base_branch, self.settings.message_commit_limit)
		except PRGeneratorError as e:
			msg = f"Failed to generate PR message: {e}"
			raise PRGeneratorError(msg) from e
		return render_pr_message(analysis, style, include_files=files)
