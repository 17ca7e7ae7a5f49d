"""Utility functions for CLI operations in prscribe."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.markdown import Markdown

from prscribe.utils.log_setup import display_error_summary

# Tool output goes to stdout; diagnostics go through log_setup's stderr console.
console = Console()
logger = logging.getLogger(__name__)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	    message: Error message to display
	    exit_code: Exit code to use
	    exception: Optional exception that caused the error

	"""
	if exception is not None:
		logger.debug("Exiting after error", exc_info=exception)
	display_error_summary(message)
	raise typer.Exit(exit_code)


def print_output(text: str, raw: bool = False) -> None:
	"""Print tool output, rendered as Markdown unless ``raw`` is set."""
	if raw:
		typer.echo(text)
	else:
		console.print(Markdown(text))
