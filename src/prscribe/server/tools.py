"""Tool definitions and dispatch for the remote-call surface."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError

from prscribe.config.config_schema import PRSchema
from prscribe.git.pr_generator import PRGeneratorError, PRMessageGenerator, PRStyle
from prscribe.git.utils import GitError, GitRepoContext

logger = logging.getLogger(__name__)

ANALYZE_TOOL = "analyze_current_branch"
GENERATE_TOOL = "generate_pr_message"


class UnknownToolError(Exception):
	"""Raised when a tool name is not in the supported set."""


class AnalyzeBranchArgs(BaseModel):
	"""Arguments of ``analyze_current_branch``."""

	model_config = ConfigDict(populate_by_name=True)

	base_branch: StrictStr | None = Field(default=None, alias="baseBranch")
	limit_commits: StrictInt | None = Field(default=None, alias="limitCommits", ge=1)


class GeneratePRMessageArgs(BaseModel):
	"""Arguments of ``generate_pr_message``."""

	model_config = ConfigDict(populate_by_name=True)

	style: PRStyle
	base_branch: StrictStr | None = Field(default=None, alias="baseBranch")
	include_files: StrictBool | None = Field(default=None, alias="includeFiles")


@dataclass(frozen=True)
class ToolSpec:
	"""A tool as advertised to clients."""

	name: str
	description: str
	input_schema: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResult:
	"""Text returned by a tool call, flagged when it describes a failure."""

	text: str
	is_error: bool = False


TOOL_SPECS: tuple[ToolSpec, ...] = (
	ToolSpec(
		name=ANALYZE_TOOL,
		description="Analyze the commits of the current branch, showing the files changed in each commit",
		input_schema={
			"type": "object",
			"properties": {
				"baseBranch": {
					"type": "string",
					"description": "Base branch to compare against (default: main)",
				},
				"limitCommits": {
					"type": "integer",
					"minimum": 1,
					"description": "Maximum number of commits to analyze (default: 10)",
				},
			},
		},
	),
	ToolSpec(
		name=GENERATE_TOOL,
		description="Generate a descriptive pull request message from the commits of the current branch",
		input_schema={
			"type": "object",
			"properties": {
				"style": {
					"type": "string",
					"enum": [style.value for style in PRStyle],
					"description": "Style of PR message to generate",
				},
				"baseBranch": {
					"type": "string",
					"description": "Base branch to compare against (default: main)",
				},
				"includeFiles": {
					"type": "boolean",
					"description": "Include changed files in the message (default: true)",
				},
			},
			"required": ["style"],
		},
	),
)


def format_validation_error(tool_name: str, error: ValidationError) -> str:
	"""Summarize pydantic errors as one readable line."""
	problems = []
	for item in error.errors():
		location = ".".join(str(part) for part in item["loc"]) or "arguments"
		problems.append(f"{location}: {item['msg']}")
	return f"Invalid arguments for '{tool_name}': {'; '.join(problems)}"


def error_text(message: str) -> str:
	"""Caller-visible form of an error message."""
	return f"❌ Error: {message}"


class ToolDispatcher:
	"""
	Validates tool calls and runs them against a freshly opened repository.

	Nothing is cached between calls; each call reopens the repository and
	recomputes from its current state.

	"""

	def __init__(
		self,
		settings: PRSchema | None = None,
		repo_path: Path | None = None,
		repo_factory: Callable[[Path | None], GitRepoContext] = GitRepoContext,
	) -> None:
		"""
		Initialize the dispatcher.

		Args:
			settings: The ``pr`` configuration section. Defaults to schema defaults.
			repo_path: Repository to operate on. Defaults to the current directory.
			repo_factory: Opens a repository for one call.
		"""
		self.settings = settings or PRSchema()
		self.repo_path = repo_path
		self.repo_factory = repo_factory
		self._handlers: dict[str, Callable[[dict[str, Any]], str]] = {
			ANALYZE_TOOL: self._analyze,
			GENERATE_TOOL: self._generate,
		}

	def list_tools(self) -> list[ToolSpec]:
		"""Get the tools this dispatcher can run."""
		return list(TOOL_SPECS)

	def call(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
		"""
		Run a tool and return its text.

		Failures never escape: unknown tools, invalid arguments and repository
		errors all come back as an error result.

		Args:
			name: Tool name.
			arguments: Raw tool arguments.

		Returns:
			ToolResult with the tool output or an error message.
		"""
		logger.debug("Tool call %s with %s", name, arguments)
		try:
			handler = self._handlers.get(name)
			if handler is None:
				msg = f"Unknown tool: {name}"
				raise UnknownToolError(msg)
			return ToolResult(text=handler(arguments or {}))
		except UnknownToolError as e:
			logger.warning(str(e))
			return ToolResult(text=error_text(str(e)), is_error=True)
		except ValidationError as e:
			message = format_validation_error(name, e)
			logger.warning(message)
			return ToolResult(text=error_text(message), is_error=True)
		except (GitError, PRGeneratorError) as e:
			logger.exception("Tool %s failed", name)
			return ToolResult(text=error_text(str(e)), is_error=True)

	def _generator(self) -> PRMessageGenerator:
		return PRMessageGenerator(self.repo_factory(self.repo_path), self.settings)

	def _analyze(self, arguments: dict[str, Any]) -> str:
		args = AnalyzeBranchArgs.model_validate(arguments)
		return self._generator().report(args.base_branch, args.limit_commits)

	def _generate(self, arguments: dict[str, Any]) -> str:
		args = GeneratePRMessageArgs.model_validate(arguments)
		message = self._generator().generate(args.style, args.base_branch, args.include_files)
		return f"# 📝 Generated PR Message ({args.style.value})\n\n{message}"
