"""PR message generation from branch history."""

from prscribe.git.pr_generator.classifier import categories_for, classify_commits
from prscribe.git.pr_generator.collector import collect_commits
from prscribe.git.pr_generator.generator import PRGeneratorError, PRMessageGenerator
from prscribe.git.pr_generator.resolver import resolve_branch
from prscribe.git.pr_generator.schemas import (
	AnalysisResult,
	BaseSource,
	BranchContext,
	ClassifiedCommits,
	CommitCategory,
	CommitRecord,
	FileChange,
	PRStyle,
)
from prscribe.git.pr_generator.templates import format_analysis_report, render_pr_message

__all__ = [
	"AnalysisResult",
	"BaseSource",
	"BranchContext",
	"ClassifiedCommits",
	"CommitCategory",
	"CommitRecord",
	"FileChange",
	"PRGeneratorError",
	"PRMessageGenerator",
	"PRStyle",
	"categories_for",
	"classify_commits",
	"collect_commits",
	"format_analysis_report",
	"render_pr_message",
	"resolve_branch",
]
