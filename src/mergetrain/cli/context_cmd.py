"""Command for gathering merge context between two branches."""

import logging
from typing import Annotated

import typer

from mergetrain.cli.cli_types import DetailsFlag, JsonFlag, MaxCommitsOpt, MaxFilesOpt

logger = logging.getLogger(__name__)

IntoArg = Annotated[str, typer.Argument(help="Branch that will receive the merge")]

MergeArg = Annotated[str, typer.Argument(help="Branch being merged")]


def register_command(app: typer.Typer) -> None:
	"""Register the context command with the CLI app."""

	@app.command(name="context")
	def context_command(
		ctx: typer.Context,
		into_branch: IntoArg,
		merge_branch: MergeArg,
		include_details: DetailsFlag = None,
		max_commits: MaxCommitsOpt = None,
		max_files: MaxFilesOpt = None,
		as_json: JsonFlag = False,
	) -> None:
		"""
		Show how MERGE_BRANCH and INTO_BRANCH diverged and which files both changed.

		Files changed on both sides since the merge base are reported as
		potential conflicts. This is a risk signal; git may still merge them
		cleanly.

		"""
		_context_command_impl(
			ctx,
			into_branch=into_branch,
			merge_branch=merge_branch,
			include_details=include_details,
			max_commits=max_commits,
			max_files=max_files,
			as_json=as_json,
		)


def _context_command_impl(
	ctx: typer.Context,
	into_branch: str,
	merge_branch: str,
	include_details: bool | None,
	max_commits: int | None,
	max_files: int | None,
	as_json: bool,
) -> None:
	from mergetrain.cli.common import build_planner, echo_json, load_config
	from mergetrain.cli.render import render_context
	from mergetrain.utils.cli_utils import exit_with_error, handle_keyboard_interrupt

	try:
		config = load_config(ctx)
		defaults = config.get.context

		# CLI > config > built-in defaults
		planner = build_planner(ctx, config)
		result = planner.gather_context(
			into_branch,
			merge_branch,
			include_details=defaults.include_details if include_details is None else include_details,
			max_commits=defaults.max_commits if max_commits is None else max_commits,
			max_files=defaults.max_files if max_files is None else max_files,
		)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()

	if as_json:
		echo_json(result.to_dict())
		if not result.success:
			raise typer.Exit(1)
		return

	if not result.success:
		exit_with_error(result.error)

	render_context(result)
