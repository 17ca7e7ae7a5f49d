"""Schemas and data structures for PR message generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from prscribe.git.pr_generator.constants import SHORT_HASH_LENGTH
from prscribe.git.utils import FileChange

__all__ = [
	"AnalysisResult",
	"BaseSource",
	"BranchContext",
	"ClassifiedCommits",
	"CommitCategory",
	"CommitRecord",
	"FileChange",
	"PRStyle",
]


class PRStyle(str, Enum):
	"""Layouts a PR message can be rendered in."""

	DETAILED = "detailed"
	SIMPLE = "simple"
	CONVENTIONAL = "conventional"


class BaseSource(str, Enum):
	"""Which fallback tier produced the base reference."""

	REQUESTED = "requested"
	FALLBACK_BRANCH = "fallback_branch"
	OLDEST_COMMIT = "oldest_commit"
	UNRESOLVED = "unresolved"


class CommitCategory(str, Enum):
	"""Keyword categories a commit subject can match."""

	FEATURE = "feature"
	FIX = "fix"
	IMPROVEMENT = "improvement"


@dataclass(frozen=True)
class BranchContext:
	"""The branch being described and the base it is compared against."""

	current_branch: str
	base_ref: str
	base_source: BaseSource = BaseSource.REQUESTED


@dataclass(frozen=True)
class CommitRecord:
	"""A commit unique to the branch, with its file-level diff stats."""

	hash: str
	message: str
	author_name: str
	date: datetime
	files: tuple[FileChange, ...] = ()
	diff_error: str | None = None

	@property
	def subject(self) -> str:
		"""First line of the commit message."""
		return self.message.split("\n", 1)[0].strip()

	@property
	def short_hash(self) -> str:
		"""Abbreviated hash for display."""
		return self.hash[:SHORT_HASH_LENGTH]


@dataclass(frozen=True)
class AnalysisResult:
	"""Everything collected for one invocation."""

	branch: BranchContext
	total_commits: int
	commits: tuple[CommitRecord, ...] = ()

	@property
	def distinct_files(self) -> list[str]:
		"""Every changed path across all commits, deduplicated, in first-seen order."""
		seen: dict[str, None] = {}
		for commit in self.commits:
			for change in commit.files:
				seen.setdefault(change.path)
		return list(seen)


@dataclass(frozen=True)
class ClassifiedCommits:
	"""Commits grouped by keyword category. A commit may sit in several groups."""

	features: tuple[CommitRecord, ...] = field(default_factory=tuple)
	fixes: tuple[CommitRecord, ...] = field(default_factory=tuple)
	improvements: tuple[CommitRecord, ...] = field(default_factory=tuple)
	other: tuple[CommitRecord, ...] = field(default_factory=tuple)
