"""Tests for BranchGraphReader with git mocked out."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mergetrain.git.branch_graph import BranchGraphReader
from mergetrain.git.models import Commit
from mergetrain.git.utils import GitError, GitToolError

RUNNER = "mergetrain.git.branch_graph.run_git_command"


@pytest.fixture
def reader() -> BranchGraphReader:
	return BranchGraphReader()


@pytest.mark.unit
@pytest.mark.git
class TestBranchExists:
	"""Test cases for branch existence checks."""

	def test_existing_branch(self, reader: BranchGraphReader) -> None:
		"""A reference that resolves exists."""
		with patch(RUNNER, return_value="0123456789abcdef") as mock_run:
			assert reader.branch_exists("release/1") is True

			args = mock_run.call_args[0][0]
			assert args[:3] == ["git", "rev-parse", "--verify"]
			assert args[-1] == "release/1"

	def test_missing_branch(self, reader: BranchGraphReader) -> None:
		"""Resolution failure means the branch does not exist."""
		with patch(RUNNER, side_effect=GitError("fatal: Needed a single revision")):
			assert reader.branch_exists("release/9") is False

	def test_tool_failure_is_not_raised(self, reader: BranchGraphReader) -> None:
		"""Even a missing git binary reads as 'not found'."""
		with patch(RUNNER, side_effect=GitToolError("Unable to run git")):
			assert reader.branch_exists("main") is False

	@pytest.mark.parametrize("name", ["", "   ", "--all", "-x"])
	def test_malformed_names_skip_git(self, reader: BranchGraphReader, name: str) -> None:
		"""Empty names and option-like names never reach git."""
		with patch(RUNNER) as mock_run:
			assert reader.branch_exists(name) is False
			mock_run.assert_not_called()


@pytest.mark.unit
@pytest.mark.git
class TestCommitRanges:
	"""Test cases for commit counts and lists."""

	def test_commit_count(self, reader: BranchGraphReader) -> None:
		"""The count comes from rev-list over to..from."""
		with patch(RUNNER, return_value="3") as mock_run:
			assert reader.commit_count("release/1", "release/2") == 3

			args = mock_run.call_args[0][0]
			assert args == ["git", "rev-list", "--count", "release/2..release/1"]

	def test_commit_count_degrades_to_zero(self, reader: BranchGraphReader) -> None:
		"""A failed count is zero, not an error."""
		with patch(RUNNER, side_effect=GitError("fatal: ambiguous argument")):
			assert reader.commit_count("a", "b") == 0

	def test_commit_count_unparseable_output(self, reader: BranchGraphReader) -> None:
		"""Garbage output also degrades to zero."""
		with patch(RUNNER, return_value="not a number"):
			assert reader.commit_count("a", "b") == 0

	def test_commit_list_parses_hash_and_subject(self, reader: BranchGraphReader) -> None:
		"""Each line splits into hash and message, newest first."""
		output = "aaaaaaaaaa Fix login redirect\nbbbbbbbbbb Bump version to 1.2.3\n"
		with patch(RUNNER, return_value=output) as mock_run:
			commits = reader.commit_list("release/1", "release/2")

			args = mock_run.call_args[0][0]
			assert args[1] == "log"
			assert "--no-show-signature" in args
			assert args[-1] == "release/2..release/1"

		assert commits == [
			Commit(hash="aaaaaaaaaa", message="Fix login redirect"),
			Commit(hash="bbbbbbbbbb", message="Bump version to 1.2.3"),
		]

	def test_commit_list_without_message(self, reader: BranchGraphReader) -> None:
		"""A commit with an empty subject gets an empty message."""
		with patch(RUNNER, return_value="cccccccccc\ndddddddddd Second"):
			commits = reader.commit_list("a", "b")

		assert commits[0] == Commit(hash="cccccccccc", message="")
		assert commits[1].message == "Second"

	def test_commit_list_empty_range(self, reader: BranchGraphReader) -> None:
		"""No output means no commits."""
		with patch(RUNNER, return_value=""):
			assert reader.commit_list("a", "b") == []

	def test_commit_list_degrades_to_empty(self, reader: BranchGraphReader) -> None:
		"""A failed listing is an empty list, not an error."""
		with patch(RUNNER, side_effect=GitError("fatal: bad revision")):
			assert reader.commit_list("a", "b") == []


@pytest.mark.unit
@pytest.mark.git
class TestDiffQueries:
	"""Test cases for changed files, merge base and current branch."""

	def test_changed_files_dedupes_and_drops_blanks(self, reader: BranchGraphReader) -> None:
		"""Paths are unique, in git's order, without empty entries."""
		with patch(RUNNER, return_value="src/app.py\0\0README.md\0src/app.py\0") as mock_run:
			files = reader.changed_files("abc123", "release/1")

			args = mock_run.call_args[0][0]
			assert args == [
				"git",
				"-c",
				"core.quotePath=false",
				"diff",
				"--name-only",
				"-z",
				"abc123..release/1",
			]
			assert mock_run.call_args[1]["strip"] is False

		assert files == ["src/app.py", "README.md"]

	def test_changed_files_keeps_paths_verbatim(self, reader: BranchGraphReader) -> None:
		"""Surrounding spaces, newlines and non-ASCII characters survive."""
		with patch(RUNNER, return_value=" notes.txt\0caf\u00e9.txt\0odd\nname.txt\0"):
			files = reader.changed_files("abc123", "release/1")

		assert files == [" notes.txt", "caf\u00e9.txt", "odd\nname.txt"]

	def test_changed_files_raises(self, reader: BranchGraphReader) -> None:
		"""Diff failures are not swallowed."""
		with patch(RUNNER, side_effect=GitError("fatal: bad object")):
			with pytest.raises(GitError):
				reader.changed_files("abc123", "release/1")

	def test_merge_base(self, reader: BranchGraphReader) -> None:
		"""The merge base is the first line of git's answer."""
		with patch(RUNNER, return_value="0123456789abcdef0123456789abcdef01234567") as mock_run:
			assert reader.merge_base("release/2", "release/1") == "0123456789abcdef0123456789abcdef01234567"
			assert mock_run.call_args[0][0] == ["git", "merge-base", "release/2", "release/1"]

	def test_merge_base_unrelated_histories(self, reader: BranchGraphReader) -> None:
		"""No common ancestor raises GitError."""
		with patch(RUNNER, side_effect=GitError("Git command failed: git merge-base")):
			with pytest.raises(GitError):
				reader.merge_base("a", "b")

	def test_merge_base_empty_output(self, reader: BranchGraphReader) -> None:
		"""An empty answer is treated as no merge base."""
		with patch(RUNNER, return_value=""):
			with pytest.raises(GitError, match="No merge base"):
				reader.merge_base("a", "b")

	def test_current_branch(self, reader: BranchGraphReader) -> None:
		"""The current branch comes from git branch --show-current."""
		with patch(RUNNER, return_value="release/2") as mock_run:
			assert reader.current_branch() == "release/2"
			assert mock_run.call_args[0][0] == ["git", "branch", "--show-current"]

	def test_repo_path_and_timeout_are_forwarded(self, tmp_path) -> None:
		"""Every query runs in the configured repository with its timeout."""
		reader = BranchGraphReader(repo_path=tmp_path, timeout=12.5)
		with patch(RUNNER, return_value="main") as mock_run:
			reader.current_branch()

			kwargs = mock_run.call_args[1]
			assert kwargs["cwd"] == tmp_path
			assert kwargs["timeout"] == 12.5
