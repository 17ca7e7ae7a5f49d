"""Remote-call surface for prscribe."""

from prscribe.server.tools import (
	ANALYZE_TOOL,
	GENERATE_TOOL,
	ToolDispatcher,
	ToolResult,
	ToolSpec,
	UnknownToolError,
)

__all__ = [
	"ANALYZE_TOOL",
	"GENERATE_TOOL",
	"ToolDispatcher",
	"ToolResult",
	"ToolSpec",
	"UnknownToolError",
]
