"""Resolution of the base reference a branch is compared against."""

from __future__ import annotations

import logging
from collections.abc import Callable

from prscribe.git.pr_generator.constants import DEFAULT_BASE_BRANCH, LEGACY_BASE_BRANCH, OLDEST_COMMIT_LOOKBACK
from prscribe.git.pr_generator.schemas import BaseSource, BranchContext
from prscribe.git.utils import GitError, GitRepoContext

logger = logging.getLogger(__name__)

BaseStrategy = Callable[[GitRepoContext, str, int], str | None]


def _requested_base(repo: GitRepoContext, requested: str, _lookback: int) -> str | None:
	return requested if repo.ref_exists(requested) else None


def _legacy_default_branch(repo: GitRepoContext, requested: str, _lookback: int) -> str | None:
	if requested != DEFAULT_BASE_BRANCH:
		return None
	return LEGACY_BASE_BRANCH if repo.ref_exists(LEGACY_BASE_BRANCH) else None


def _oldest_recent_commit(repo: GitRepoContext, _requested: str, lookback: int) -> str | None:
	commits = repo.log_recent(lookback).commits
	return commits[-1].hash if commits else None


BASE_STRATEGIES: tuple[tuple[BaseSource, BaseStrategy], ...] = (
	(BaseSource.REQUESTED, _requested_base),
	(BaseSource.FALLBACK_BRANCH, _legacy_default_branch),
	(BaseSource.OLDEST_COMMIT, _oldest_recent_commit),
)


def resolve_branch(
	repo: GitRepoContext,
	requested_base: str = DEFAULT_BASE_BRANCH,
	lookback: int = OLDEST_COMMIT_LOOKBACK,
) -> BranchContext:
	"""
	Determine the current branch and the base reference to diff it against.

	Base candidates are tried in order: the requested ref, ``master`` when
	``main`` was requested, then the oldest of the last ``lookback`` commits
	reachable from HEAD. The first candidate found wins.

	Args:
		repo: Repository to inspect.
		requested_base: Base branch name asked for by the caller.
		lookback: How many recent commits the last-resort base is chosen from.

	Returns:
		BranchContext naming the base actually used and where it came from.

	Raises:
		RepositoryStateError: If the current branch cannot be determined.
	"""
	current_branch = repo.current_branch()

	for source, strategy in BASE_STRATEGIES:
		try:
			base_ref = strategy(repo, requested_base, lookback)
		except GitError:
			logger.warning("Base strategy '%s' failed for '%s'", source.value, requested_base, exc_info=True)
			continue
		if base_ref is not None:
			if source is not BaseSource.REQUESTED:
				logger.info("Base '%s' not found, using %s '%s'", requested_base, source.value, base_ref)
			return BranchContext(current_branch=current_branch, base_ref=base_ref, base_source=source)

	logger.warning("No base could be resolved for '%s'; history is empty", requested_base)
	return BranchContext(current_branch=current_branch, base_ref=requested_base, base_source=BaseSource.UNRESOLVED)
