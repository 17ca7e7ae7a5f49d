"""Shared types for the prscribe CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from prscribe.config import AppConfigSchema


@dataclass
class CLIState:
	"""Options shared by every command, set by the global callback."""

	config: AppConfigSchema
	repo_path: Path | None = None


BaseBranchOpt = Annotated[
	str | None,
	typer.Option("--base", "-b", help="Base branch to compare against (default from config: main)"),
]

RawFlag = Annotated[bool, typer.Option("--raw", help="Print plain text instead of rendered Markdown")]
