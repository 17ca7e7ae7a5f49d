"""Constants for PR message generation."""

DEFAULT_BASE_BRANCH = "main"
LEGACY_BASE_BRANCH = "master"

SHORT_HASH_LENGTH = 7

DEFAULT_ANALYSIS_LIMIT = 10
DEFAULT_MESSAGE_LIMIT = 20
OLDEST_COMMIT_LOOKBACK = 100

FEATURE_KEYWORDS = ("feat", "add", "implement")
FIX_KEYWORDS = ("fix", "bug", "resolve")
IMPROVEMENT_KEYWORDS = ("refactor", "improve", "update", "enhance")

# Simple style
MAX_SIMPLE_COMMITS = 8
MAX_SIMPLE_INLINE_FILES = 10

# Conventional style
MAX_CONVENTIONAL_FILES = 15
CONVENTIONAL_FILES_PREVIEW = 10

DEFAULT_DATE_FORMAT = "%d/%m/%Y %H:%M:%S"

NO_COMMITS_MESSAGE = "No commits found on the current branch."
NO_BRANCH_COMMITS_MESSAGE = "No commits found on this branch."
