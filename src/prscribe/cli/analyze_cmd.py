"""Commands that run the PR tools locally and print their output."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from prscribe.cli.cli_types import BaseBranchOpt, CLIState, RawFlag
from prscribe.git.pr_generator import PRStyle
from prscribe.server.tools import ANALYZE_TOOL, GENERATE_TOOL, ToolDispatcher
from prscribe.utils.cli_utils import exit_with_error, print_output

logger = logging.getLogger(__name__)

LimitOpt = Annotated[
	int | None,
	typer.Option("--limit", "-n", min=1, help="Maximum number of commits to analyze (default from config: 10)"),
]

StyleArg = Annotated[PRStyle, typer.Argument(help="Style of PR message to generate")]

NoFilesFlag = Annotated[bool, typer.Option("--no-files", help="Leave changed files out of the message")]


def _run_tool(state: CLIState, name: str, arguments: dict, raw: bool) -> None:
	dispatcher = ToolDispatcher(settings=state.config.pr, repo_path=state.repo_path)
	result = dispatcher.call(name, arguments)
	if result.is_error:
		exit_with_error(result.text)
	print_output(result.text, raw=raw)


def register_command(app: typer.Typer) -> None:
	"""Register the analyze and message commands with the CLI app."""

	@app.command(name="analyze")
	def analyze_command(
		ctx: typer.Context,
		base: BaseBranchOpt = None,
		limit: LimitOpt = None,
		raw: RawFlag = False,
	) -> None:
		"""Show the commits of the current branch and the files each one changed."""
		arguments: dict[str, object] = {}
		if base is not None:
			arguments["baseBranch"] = base
		if limit is not None:
			arguments["limitCommits"] = limit
		_run_tool(ctx.obj, ANALYZE_TOOL, arguments, raw)

	@app.command(name="message")
	def message_command(
		ctx: typer.Context,
		style: StyleArg = PRStyle.DETAILED,
		base: BaseBranchOpt = None,
		no_files: NoFilesFlag = False,
		raw: RawFlag = False,
	) -> None:
		"""Generate a pull request message from the commits of the current branch."""
		arguments: dict[str, object] = {"style": style.value}
		if base is not None:
			arguments["baseBranch"] = base
		if no_files:
			arguments["includeFiles"] = False
		_run_tool(ctx.obj, GENERATE_TOOL, arguments, raw)
