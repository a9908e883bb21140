"""Read-only queries against the branch graph of a git repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mergetrain.git.models import Commit
from mergetrain.git.utils import GitError, run_git_command

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)

# %H is the full hash, %s the subject line
COMMIT_LOG_FORMAT = "--format=%H %s"


class BranchGraphReader:
	"""
	Synchronous, read-only view of branches, ranges and merge bases.

	Existence checks never raise. Commit counts and commit lists are advisory
	and degrade to ``0`` / ``[]`` when git fails. Merge-base, changed-file and
	current-branch queries are load-bearing and raise ``GitError``.

	Nothing is cached: every call reflects the repository as it is now.

	"""

	def __init__(self, repo_path: Path | None = None, timeout: float | None = None) -> None:
		"""
		Initialize the reader.

		Args:
			repo_path: Repository to query, defaults to the current directory
			timeout: Optional per-command timeout in seconds

		"""
		self.repo_path = repo_path
		self.timeout = timeout

	def _git(self, *args: str, strip: bool = True) -> str:
		return run_git_command(["git", *args], cwd=self.repo_path, timeout=self.timeout, strip=strip)

	def branch_exists(self, name: str) -> bool:
		"""Return True if ``name`` resolves to a revision, False on any failure."""
		if not name or not name.strip() or name.startswith("-"):
			return False
		try:
			self._git("rev-parse", "--verify", "--quiet", name)
		except GitError:
			logger.debug("Reference does not resolve: %s", name)
			return False
		return True

	def commit_count(self, from_ref: str, to_ref: str) -> int:
		"""
		Count commits reachable from ``from_ref`` but not from ``to_ref``.

		Returns:
			The commit count, or 0 if git could not compute it

		"""
		try:
			output = self._git("rev-list", "--count", f"{to_ref}..{from_ref}")
			return max(int(output), 0)
		except (GitError, ValueError) as e:
			logger.warning("Could not count commits in %s..%s: %s", to_ref, from_ref, e)
			return 0

	def commit_list(self, from_ref: str, to_ref: str) -> list[Commit]:
		"""
		List commits unique to ``from_ref`` relative to ``to_ref``, newest first.

		Returns:
			The commits, or an empty list if git could not list them

		"""
		try:
			output = self._git("log", "--no-show-signature", COMMIT_LOG_FORMAT, f"{to_ref}..{from_ref}")
		except GitError as e:
			logger.warning("Could not list commits in %s..%s: %s", to_ref, from_ref, e)
			return []
		return [Commit.from_log_line(line) for line in output.splitlines() if line.strip()]

	def changed_files(self, base: str, branch: str) -> list[str]:
		"""
		Return the paths changed between ``base`` and ``branch``.

		Paths are reported verbatim, without C-style quoting, and deduplicated
		in the order git reports them.

		Raises:
			GitError: If the diff cannot be computed

		"""
		output = self._git(
			"-c", "core.quotePath=false", "diff", "--name-only", "-z", f"{base}..{branch}", strip=False
		)
		return list(dict.fromkeys(path for path in output.split("\0") if path))

	def merge_base(self, first: str, second: str) -> str:
		"""
		Return the full hash of the best common ancestor of two refs.

		Raises:
			GitError: If the refs share no history or cannot be resolved

		"""
		output = self._git("merge-base", first, second)
		if not output:
			msg = f"No merge base found between {first} and {second}"
			raise GitError(msg)
		return output.splitlines()[0].strip()

	def current_branch(self) -> str:
		"""Return the checked-out branch name, or an empty string on a detached HEAD."""
		return self._git("branch", "--show-current")
