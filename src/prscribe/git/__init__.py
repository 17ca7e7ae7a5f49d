"""Git access for prscribe."""

from prscribe.git.utils import CommitLog, GitError, GitRepoContext, RawCommit, RepositoryStateError

__all__ = [
	"CommitLog",
	"GitError",
	"GitRepoContext",
	"RawCommit",
	"RepositoryStateError",
]
