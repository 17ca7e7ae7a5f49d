"""Collection of the commits unique to a branch."""

from __future__ import annotations

import logging
from collections.abc import Callable

from prscribe.git.pr_generator.schemas import AnalysisResult, BranchContext, CommitRecord
from prscribe.git.utils import CommitLog, GitError, GitRepoContext, RawCommit

logger = logging.getLogger(__name__)

LogStrategy = Callable[[GitRepoContext, BranchContext, int], CommitLog]


def _branch_range(repo: GitRepoContext, branch: BranchContext, limit: int) -> CommitLog:
	return repo.log_range(branch.base_ref, branch.current_branch, limit)


def _recent_history(repo: GitRepoContext, _branch: BranchContext, limit: int) -> CommitLog:
	return repo.log_recent(limit)


LOG_STRATEGIES: tuple[tuple[str, LogStrategy], ...] = (
	("range", _branch_range),
	("recent", _recent_history),
)


def _query_log(repo: GitRepoContext, branch: BranchContext, limit: int) -> CommitLog:
	"""Run the log strategies in order and return the first that succeeds."""
	last_error: GitError | None = None
	for name, strategy in LOG_STRATEGIES:
		try:
			log = strategy(repo, branch, limit)
		except GitError as e:
			logger.info("Log strategy '%s' failed: %s", name, e)
			last_error = e
			continue
		logger.debug("Log strategy '%s' returned %d of %d commits", name, len(log.commits), log.total)
		return log
	msg = f"Could not list commits for branch '{branch.current_branch}'"
	raise GitError(msg) from last_error


def load_commit(repo: GitRepoContext, raw: RawCommit) -> CommitRecord:
	"""
	Attach diff stats to a commit.

	A failed diff lookup (for example a root commit) degrades to an empty file
	list; it is never raised.
	"""
	try:
		files = tuple(repo.diff_stats(raw.hash))
	except GitError as e:
		return CommitRecord(
			hash=raw.hash,
			message=raw.message,
			author_name=raw.author_name,
			date=raw.date,
			diff_error=str(e),
		)
	return CommitRecord(
		hash=raw.hash,
		message=raw.message,
		author_name=raw.author_name,
		date=raw.date,
		files=files,
	)


def collect_commits(repo: GitRepoContext, branch: BranchContext, limit: int) -> AnalysisResult:
	"""
	Collect up to ``limit`` commits on the branch that are not on its base.

	Falls back to the most recent ``limit`` commits when the range query fails.

	Args:
		repo: Repository to read from.
		branch: Resolved branch and base.
		limit: Maximum number of commits returned.

	Returns:
		AnalysisResult with commits newest first.

	Raises:
		GitError: If no log query succeeds at all.
	"""
	log = _query_log(repo, branch, limit)
	commits = tuple(load_commit(repo, raw) for raw in log.commits[:limit])
	return AnalysisResult(branch=branch, total_commits=log.total, commits=commits)
