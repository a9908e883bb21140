"""Tests for the git command runner."""

from __future__ import annotations

import subprocess
from unittest.mock import Mock, patch

import pytest

from mergetrain.git.utils import GitError, GitToolError, run_git_command


@pytest.mark.unit
@pytest.mark.git
class TestRunGitCommand:
	"""Test cases for run_git_command."""

	def test_returns_stripped_stdout(self) -> None:
		"""Output is returned without surrounding whitespace."""
		with patch("mergetrain.git.utils.subprocess.run") as mock_run:
			mock_run.return_value = Mock(stdout="  abc123\n\n", returncode=0)

			assert run_git_command(["git", "merge-base", "a", "b"]) == "abc123"

			args, kwargs = mock_run.call_args
			assert args[0] == ["git", "merge-base", "a", "b"]
			assert kwargs["check"] is True
			assert kwargs["capture_output"] is True
			assert kwargs["timeout"] is None

	def test_passes_cwd_and_timeout(self, tmp_path) -> None:
		"""Working directory and timeout reach subprocess.run."""
		with patch("mergetrain.git.utils.subprocess.run") as mock_run:
			mock_run.return_value = Mock(stdout="", returncode=0)

			run_git_command(["git", "status"], cwd=tmp_path, timeout=5)

			_, kwargs = mock_run.call_args
			assert kwargs["cwd"] == tmp_path
			assert kwargs["timeout"] == 5

	def test_failure_raises_git_error_with_stderr(self) -> None:
		"""A non-zero exit becomes GitError carrying git's message."""
		error = subprocess.CalledProcessError(128, ["git", "merge-base"], output="", stderr="fatal: bad revision\n")
		with patch("mergetrain.git.utils.subprocess.run", side_effect=error):
			with pytest.raises(GitError) as excinfo:
				run_git_command(["git", "merge-base", "x", "y"])

		assert "fatal: bad revision" in str(excinfo.value)
		assert "git merge-base x y" in str(excinfo.value)
		assert not isinstance(excinfo.value, GitToolError)

	def test_missing_executable_raises_tool_error(self) -> None:
		"""A missing git binary is reported as GitToolError."""
		with patch("mergetrain.git.utils.subprocess.run", side_effect=FileNotFoundError("git")):
			with pytest.raises(GitToolError):
				run_git_command(["git", "status"])

	def test_timeout_raises_tool_error(self) -> None:
		"""A timed out git process is reported as GitToolError."""
		error = subprocess.TimeoutExpired(["git", "log"], 2)
		with patch("mergetrain.git.utils.subprocess.run", side_effect=error):
			with pytest.raises(GitToolError, match="timed out"):
				run_git_command(["git", "log"], timeout=2)

	def test_tool_error_is_a_git_error(self) -> None:
		"""Callers catching GitError also catch tool failures."""
		assert issubclass(GitToolError, GitError)

	def test_strip_can_be_disabled(self) -> None:
		"""Raw output is kept when stripping is turned off."""
		with patch("mergetrain.git.utils.subprocess.run") as mock_run:
			mock_run.return_value = Mock(stdout=" padded.txt\0", returncode=0)

			assert run_git_command(["git", "diff", "-z"], strip=False) == " padded.txt\0"
