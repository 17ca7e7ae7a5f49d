"""Command-line interface package for prscribe."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from prscribe import __version__
from prscribe.config import ConfigError, ConfigLoader
from prscribe.utils.cli_utils import exit_with_error
from prscribe.utils.log_setup import setup_logging

from .analyze_cmd import register_command as register_analyze_commands
from .cli_types import CLIState
from .serve_cmd import register_command as register_serve_command

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=f"prscribe - pull request messages from your branch history\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"prscribe version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option("--save-log", help="Enable logging to a file. Logs to logs/prscribe_{datetime}.log."),
	] = False,
	config_file: Annotated[
		Path | None,
		typer.Option("--config", "-c", help="Path to a configuration file.", dir_okay=False),
	] = None,
	repo_path: Annotated[
		Path | None,
		typer.Option("--repo", "-r", help="Repository to inspect (default: current directory).", file_okay=False),
	] = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options, configuration and logging setup."""
	try:
		config = ConfigLoader(config_file=config_file, repo_root=repo_path).get
	except ConfigError as e:
		exit_with_error(str(e), exception=e)

	log_file_path: Path | str | None = config.logging.log_file
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path = Path("logs") / f"prscribe_{current_time}.log"

	setup_logging(is_verbose=is_verbose or config.logging.verbose, log_file_path=log_file_path)
	ctx.obj = CLIState(config=config, repo_path=repo_path)


register_analyze_commands(app)
register_serve_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
