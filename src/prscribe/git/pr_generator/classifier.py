"""Keyword classification of commits."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from prscribe.git.pr_generator.constants import FEATURE_KEYWORDS, FIX_KEYWORDS, IMPROVEMENT_KEYWORDS
from prscribe.git.pr_generator.schemas import ClassifiedCommits, CommitCategory, CommitRecord

CATEGORY_KEYWORDS: dict[CommitCategory, tuple[str, ...]] = {
	CommitCategory.FEATURE: FEATURE_KEYWORDS,
	CommitCategory.FIX: FIX_KEYWORDS,
	CommitCategory.IMPROVEMENT: IMPROVEMENT_KEYWORDS,
}


def _mentions(subject: str, keywords: Iterable[str]) -> bool:
	lowered = subject.lower()
	return any(keyword in lowered for keyword in keywords)


def categories_for(commit: CommitRecord) -> frozenset[CommitCategory]:
	"""Every category whose keywords appear in the commit subject."""
	return frozenset(
		category for category, keywords in CATEGORY_KEYWORDS.items() if _mentions(commit.subject, keywords)
	)


def classify_commits(commits: Sequence[CommitRecord]) -> ClassifiedCommits:
	"""
	Group commits by category, keeping log order inside each group.

	The category tests are independent: a subject such as "fix: add retry"
	lands in both features and fixes. Commits matching nothing go to ``other``.

	Args:
		commits: Commits newest first.

	Returns:
		ClassifiedCommits for the given commits.
	"""
	tags = [(commit, categories_for(commit)) for commit in commits]
	return ClassifiedCommits(
		features=tuple(c for c, cats in tags if CommitCategory.FEATURE in cats),
		fixes=tuple(c for c, cats in tags if CommitCategory.FIX in cats),
		improvements=tuple(c for c, cats in tags if CommitCategory.IMPROVEMENT in cats),
		other=tuple(c for c, cats in tags if not cats),
	)
