"""Utility functions for CLI operations in mergetrain."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer

from mergetrain.utils.log_setup import console, display_error_summary

logger = logging.getLogger(__name__)


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
		message: The error message to display
		exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(error_text)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
		message: Error message to display
		exit_code: Exit code to use
		exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> NoReturn:
	"""Handles KeyboardInterrupt by printing a message and exiting cleanly."""
	console.print("\n[yellow]Operation cancelled by user.[/yellow]")
	raise typer.Exit(130)
