"""Pydantic schemas for prscribe configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from prscribe.git.pr_generator.constants import (
	DEFAULT_ANALYSIS_LIMIT,
	DEFAULT_BASE_BRANCH,
	DEFAULT_DATE_FORMAT,
	DEFAULT_MESSAGE_LIMIT,
	OLDEST_COMMIT_LOOKBACK,
)


class PRSchema(BaseModel):
	"""Settings for branch analysis and PR message generation."""

	default_base_branch: str = DEFAULT_BASE_BRANCH
	analysis_commit_limit: int = Field(default=DEFAULT_ANALYSIS_LIMIT, ge=1)
	# Wider than the analysis view so the classifier sees more history.
	message_commit_limit: int = Field(default=DEFAULT_MESSAGE_LIMIT, ge=1)
	oldest_commit_lookback: int = Field(default=OLDEST_COMMIT_LOOKBACK, ge=1)
	include_files: bool = True
	date_format: str = DEFAULT_DATE_FORMAT


class ServerSchema(BaseModel):
	"""Settings for the MCP server."""

	name: str = "pr-messages-generator"


class LoggingSchema(BaseModel):
	"""Logging settings."""

	verbose: bool = False
	log_file: str | None = None


class AppConfigSchema(BaseModel):
	"""Root configuration."""

	pr: PRSchema = Field(default_factory=PRSchema)
	server: ServerSchema = Field(default_factory=ServerSchema)
	logging: LoggingSchema = Field(default_factory=LoggingSchema)
