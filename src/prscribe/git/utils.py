"""Git utilities for prscribe."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from itertools import islice
from pathlib import Path
from typing import TYPE_CHECKING

from pygit2 import Commit, discover_repository
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import SortMode
from pygit2.repository import Repository

if TYPE_CHECKING:
	from pygit2 import Oid

logger = logging.getLogger(__name__)

HEADS_PREFIX = "refs/heads/"


class GitError(Exception):
	"""Custom exception for Git-related errors."""


class RepositoryStateError(GitError):
	"""Raised when the repository has no resolvable current branch."""


@dataclass(frozen=True)
class FileChange:
	"""Line counts for one file touched by a commit."""

	path: str
	insertions: int = 0
	deletions: int = 0

	@property
	def changes(self) -> int:
		"""Total number of changed lines."""
		return self.insertions + self.deletions


@dataclass(frozen=True)
class RawCommit:
	"""Commit metadata as read from the log, before diff lookup."""

	hash: str
	message: str
	author_name: str
	date: datetime


@dataclass
class CommitLog:
	"""Result of a log query."""

	commits: list[RawCommit] = field(default_factory=list)
	total: int = 0


def _commit_date(commit: Commit) -> datetime:
	"""Author date of a commit, in the author's own UTC offset."""
	tz = timezone(timedelta(minutes=commit.author.offset))
	return datetime.fromtimestamp(commit.author.time, tz=tz)


def _to_raw_commit(commit: Commit) -> RawCommit:
	return RawCommit(
		hash=str(commit.id),
		message=commit.message or "",
		author_name=commit.author.name,
		date=_commit_date(commit),
	)


class GitRepoContext:
	"""Read-only access to a Git repository using pygit2."""

	@classmethod
	def get_repo_root(cls, path: Path | None = None) -> Path:
		"""Get the git directory of the repository containing ``path``."""
		git_dir = discover_repository(str(path or Path.cwd()))
		if git_dir is None:
			msg = f"Not a git repository: {path or Path.cwd()}"
			logger.error(msg)
			raise GitError(msg)
		return Path(git_dir)

	def __init__(self, path: Path | None = None) -> None:
		"""
		Open the repository containing ``path``.

		Args:
			path: Any path inside the working tree. Defaults to the current directory.

		Raises:
			GitError: If no repository can be found or opened.
		"""
		self.git_root = self.get_repo_root(path)
		try:
			self.repo = Repository(str(self.git_root))
		except Pygit2GitError as e:
			msg = f"Failed to open repository at {self.git_root}: {e}"
			raise GitError(msg) from e

	def current_branch(self) -> str:
		"""
		Get the short name of the branch HEAD points at.

		An unborn HEAD (a repository without commits) still names its branch.

		Raises:
			RepositoryStateError: If HEAD is detached or names no branch.
		"""
		if self.repo.head_is_detached:
			msg = "Could not determine the current branch: HEAD is detached"
			raise RepositoryStateError(msg)
		try:
			if self.repo.head_is_unborn:
				target = self.repo.lookup_reference("HEAD").target
				name = target.removeprefix(HEADS_PREFIX) if isinstance(target, str) else ""
			else:
				name = self.repo.head.shorthand or ""
		except Pygit2GitError as e:
			msg = f"Could not determine the current branch: {e}"
			raise RepositoryStateError(msg) from e
		if not name:
			msg = "Could not determine the current branch"
			raise RepositoryStateError(msg)
		return name

	def _resolve(self, spec: str) -> Oid:
		try:
			return self.repo.revparse_single(spec).peel(Commit).id
		except (KeyError, ValueError, Pygit2GitError) as e:
			msg = f"Could not resolve '{spec}': {e}"
			raise GitError(msg) from e

	def ref_exists(self, name: str) -> bool:
		"""Check whether ``name`` resolves to a commit."""
		if not name:
			return False
		try:
			self._resolve(name)
		except GitError:
			return False
		return True

	def log_range(self, base: str, head: str, max_count: int) -> CommitLog:
		"""
		List commits reachable from ``head`` but not from ``base``, newest first.

		Args:
			base: Ref or hash whose history is excluded.
			head: Ref or hash to walk from.
			max_count: Maximum number of commits returned.

		Returns:
			CommitLog whose ``total`` counts every commit in the range. Counting walks
			the whole range, so a base with no shared history costs a walk of all of
			``head``'s ancestry.

		Raises:
			GitError: If either side cannot be resolved or the walk fails.
		"""
		base_oid = self._resolve(base)
		head_oid = self._resolve(head)
		try:
			walker = self.repo.walk(head_oid, SortMode.TIME)
			walker.hide(base_oid)
			commits: list[RawCommit] = []
			total = 0
			for commit in walker:
				total += 1
				if len(commits) < max_count:
					commits.append(_to_raw_commit(commit))
		except Pygit2GitError as e:
			msg = f"Failed to list commits in {base}..{head}: {e}"
			raise GitError(msg) from e
		logger.debug("Range %s..%s has %d commits, returning %d", base, head, total, len(commits))
		return CommitLog(commits=commits, total=total)

	def log_recent(self, max_count: int) -> CommitLog:
		"""
		List the newest ``max_count`` commits reachable from HEAD.

		Raises:
			GitError: If the walk fails.
		"""
		if self.repo.head_is_unborn:
			return CommitLog()
		try:
			walker = self.repo.walk(self.repo.head.target, SortMode.TIME)
			commits = [_to_raw_commit(commit) for commit in islice(walker, max_count)]
		except Pygit2GitError as e:
			msg = f"Failed to list recent commits: {e}"
			raise GitError(msg) from e
		return CommitLog(commits=commits, total=len(commits))

	def diff_stats(self, commit_hash: str) -> list[FileChange]:
		"""
		Get per-file line counts between a commit and its first parent.

		Args:
			commit_hash: Full or abbreviated commit hash.

		Returns:
			One FileChange per touched file, in diff order.

		Raises:
			GitError: If the commit is unknown or has no parent.
		"""
		oid = self._resolve(commit_hash)
		commit = self.repo[oid]
		if not commit.parents:
			msg = f"Commit {commit_hash[:7]} has no parent to diff against"
			raise GitError(msg)
		try:
			diff = self.repo.diff(commit.parents[0], commit)
			changes = []
			for patch in diff:
				if patch is None:
					continue
				_, additions, deletions = patch.line_stats
				changes.append(FileChange(path=patch.delta.new_file.path, insertions=additions, deletions=deletions))
		except Pygit2GitError as e:
			msg = f"Failed to diff commit {commit_hash[:7]}: {e}"
			raise GitError(msg) from e
		return changes
