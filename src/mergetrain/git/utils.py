"""Git utilities for mergetrain."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
	"""Custom exception for Git-related errors."""


class GitToolError(GitError):
	"""Raised when the git executable itself could not be run."""


def run_git_command(
	command: list[str], cwd: Path | None = None, timeout: float | None = None, strip: bool = True
) -> str:
	"""
	Run a Git command and return its output.

	Args:
		command: Git command to run, including the leading ``git``
		cwd: Working directory (optional)
		timeout: Seconds to wait for the process before giving up (optional)
		strip: Whether to strip surrounding whitespace from the output

	Returns:
		Command output as string

	Raises:
		GitToolError: If git could not be started or did not finish in time
		GitError: If the command exits with a non-zero status

	"""
	cmd_str = " ".join(command)
	logger.debug("Running git command: %s", cmd_str)
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			encoding="utf-8",
			errors="replace",
			check=True,
			timeout=timeout,
		)
	except subprocess.CalledProcessError as e:
		stderr = (e.stderr or "").strip() or (e.stdout or "").strip() or "unknown git error"
		error_msg = f"Git command failed: {cmd_str}\nError: {stderr}"
		logger.debug(error_msg)
		raise GitError(error_msg) from e
	except subprocess.TimeoutExpired as e:
		error_msg = f"Git command timed out after {timeout}s: {cmd_str}"
		logger.warning(error_msg)
		raise GitToolError(error_msg) from e
	except OSError as e:
		# FileNotFoundError / PermissionError when git is missing or not executable
		error_msg = f"Unable to run git: {e}"
		logger.exception(error_msg)
		raise GitToolError(error_msg) from e
	else:
		return result.stdout.strip() if strip else result.stdout
