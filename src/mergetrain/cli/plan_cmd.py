"""Command for planning a merge-forward train."""

import logging
from typing import Annotated

import typer

from mergetrain.cli.cli_types import JsonFlag

logger = logging.getLogger(__name__)

SourceArg = Annotated[str, typer.Argument(help="Branch containing the fixes to merge forward")]

TargetsArg = Annotated[
	list[str] | None,
	typer.Argument(help="Branches to merge into, oldest release first", show_default=False),
]


def register_command(app: typer.Typer) -> None:
	"""Register the plan command with the CLI app."""

	@app.command(name="plan")
	def plan_command(
		ctx: typer.Context,
		source: SourceArg,
		targets: TargetsArg = None,
		as_json: JsonFlag = False,
	) -> None:
		"""
		Plan merging SOURCE forward through each TARGET in order.

		Each target becomes the source for the next hop, so the plan is a
		chain. Nothing in the repository is changed.

		"""
		_plan_command_impl(ctx, source=source, targets=targets or [], as_json=as_json)


def _plan_command_impl(ctx: typer.Context, source: str, targets: list[str], as_json: bool) -> None:
	from mergetrain.cli.common import build_planner, echo_json, load_config
	from mergetrain.cli.render import render_plan
	from mergetrain.utils.cli_utils import exit_with_error, handle_keyboard_interrupt

	try:
		config = load_config(ctx)
		planner = build_planner(ctx, config)
		result = planner.plan(source, targets)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()

	if as_json:
		echo_json(result.to_dict())
		if not result.success:
			raise typer.Exit(1)
		return

	if not result.success:
		exit_with_error(result.error)

	render_plan(result)
