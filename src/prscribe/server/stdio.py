"""MCP server exposing the PR tools over stdio."""

from __future__ import annotations

import logging
from typing import Any

import mcp.types as types
from asyncer import asyncify
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from prscribe import __version__
from prscribe.server.tools import ToolDispatcher

logger = logging.getLogger(__name__)


class ToolCallError(Exception):
	"""Carries an error result back to the MCP layer, which flags it ``isError``."""


def create_server(dispatcher: ToolDispatcher, name: str = "pr-messages-generator") -> Server:
	"""
	Build an MCP server whose tools are served by ``dispatcher``.

	Args:
		dispatcher: Runs the tools.
		name: Server name reported to clients.

	Returns:
		A configured low-level MCP server.
	"""
	server: Server = Server(name, version=__version__)

	@server.list_tools()
	async def handle_list_tools() -> list[types.Tool]:
		return [
			types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema)
			for spec in dispatcher.list_tools()
		]

	@server.call_tool()
	async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
		# Repository access is blocking; keep it off the event loop.
		result = await asyncify(dispatcher.call)(name, arguments or {})
		if result.is_error:
			raise ToolCallError(result.text)
		return [types.TextContent(type="text", text=result.text)]

	return server


async def run_stdio_server(dispatcher: ToolDispatcher, name: str = "pr-messages-generator") -> None:
	"""Serve the tools on stdin/stdout until the client disconnects."""
	server = create_server(dispatcher, name)
	logger.info("PR messages server '%s' running on stdio", name)
	async with stdio_server() as (read_stream, write_stream):
		await server.run(read_stream, write_stream, server.create_initialization_options())
