"""Helpers shared by mergetrain commands."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import typer

from mergetrain.config import ConfigError, ConfigLoader
from mergetrain.git.branch_graph import BranchGraphReader
from mergetrain.train.planner import MergeTrainPlanner
from mergetrain.utils.cli_utils import exit_with_error

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)


def load_config(ctx: typer.Context) -> ConfigLoader:
	"""Load configuration for the repository selected by the global options."""
	meta = ctx.meta
	repo_path: Path | None = meta.get("repo_path")
	config_file: Path | None = meta.get("config_file")
	# each invocation resolves its own config file
	ConfigLoader.reset_instance()
	try:
		return ConfigLoader.get_instance(config_file=config_file, repo_root=repo_path)
	except ConfigError as e:
		exit_with_error(f"Could not load configuration: {e}", exception=e)


def build_planner(ctx: typer.Context, config: ConfigLoader) -> MergeTrainPlanner:
	"""Create a planner bound to the selected repository."""
	reader = BranchGraphReader(repo_path=ctx.meta.get("repo_path"), timeout=config.get.git.timeout)
	return MergeTrainPlanner(reader)


def echo_json(payload: dict[str, Any]) -> None:
	typer.echo(json.dumps(payload, indent=2))
