"""Command for serving the PR tools over MCP stdio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import asyncer
import typer

if TYPE_CHECKING:
	from prscribe.cli.cli_types import CLIState

logger = logging.getLogger(__name__)


def register_command(app: typer.Typer) -> None:
	"""Register the serve command with the CLI app."""

	@app.command(name="serve")
	@asyncer.runnify
	async def serve_command(ctx: typer.Context) -> None:
		"""
		Serve the PR tools to an MCP client over stdin/stdout.

		Configure your editor assistant to launch `prscribe serve` as a stdio server.

		"""
		await _serve_command_impl(ctx.obj)


async def _serve_command_impl(state: CLIState) -> None:
	"""Actual implementation of the serve command."""
	# --- Heavy Imports ---
	from prscribe.server.stdio import run_stdio_server
	from prscribe.server.tools import ToolDispatcher

	dispatcher = ToolDispatcher(settings=state.config.pr, repo_path=state.repo_path)
	try:
		await run_stdio_server(dispatcher, name=state.config.server.name)
	except KeyboardInterrupt:
		logger.info("Server stopped")
