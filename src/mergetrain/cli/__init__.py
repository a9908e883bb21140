"""Command-line interface package for mergetrain."""

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from mergetrain import __version__
from mergetrain.utils.log_setup import setup_logging

from .context_cmd import register_command as register_context_command
from .plan_cmd import register_command as register_plan_command

logger = logging.getLogger(__name__)

# .env.local wins over .env
env_local = Path(".env.local")
if env_local.exists():
	load_dotenv(dotenv_path=env_local)
	logger.debug("Loaded environment variables from %s", env_local)
else:
	env_file = Path(".env")
	if env_file.exists():
		load_dotenv(dotenv_path=env_file)
		logger.debug("Loaded environment variables from %s", env_file)

app = typer.Typer(
	help=f"mergetrain - plan merge-forward trains across release branches\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"mergetrain version: {__version__}")
		raise typer.Exit


@app.callback()
def global_options(
	ctx: typer.Context,
	repo_path: Annotated[
		Path | None,
		typer.Option(
			"--repo",
			"-C",
			exists=True,
			file_okay=False,
			resolve_path=True,
			help="Repository to inspect (defaults to the current directory).",
		),
	] = None,
	config_file: Annotated[
		Path | None,
		typer.Option("--config", "-c", help="Path to a mergetrain config file."),
	] = None,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/mergetrain_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["repo_path"] = repo_path
	ctx.meta["config_file"] = config_file
	ctx.meta["is_verbose"] = is_verbose

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"mergetrain_{current_time}.log"

	setup_logging(is_verbose=is_verbose, log_file_path=log_file_path_to_use)


register_plan_command(app)
register_context_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
