"""Utility module for prscribe package."""

from .cli_utils import console, exit_with_error, print_output
from .log_setup import display_error_summary, setup_logging

__all__ = [
	"console",
	"display_error_summary",
	"exit_with_error",
	"print_output",
	"setup_logging",
]
