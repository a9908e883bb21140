"""Merge train planning and pairwise merge context."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mergetrain.git.branch_graph import BranchGraphReader
from mergetrain.git.utils import GitError
from mergetrain.train.models import (
	ContextDetails,
	ContextSummary,
	FileBreakdown,
	MergeContext,
	MergeHop,
	MergePlan,
	RepositoryFailure,
	ValidationFailure,
)

if TYPE_CHECKING:
	from collections.abc import Sequence

	from mergetrain.train.models import ContextResult, PlanResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMMITS = 10
DEFAULT_MAX_FILES = 20

SUMMARY_MODE_NOTE = (
	"Summary mode: showing counts and potential conflicts only. "
	"Set include_details=true to see commit and file lists."
)


class MergeTrainPlanner:
	"""
	Plans merge-forward trains and reports on individual hops.

	Both operations are read-only and keep no state between calls. They
	always return a value: validation problems come back as
	``ValidationFailure`` and failed load-bearing git queries as
	``RepositoryFailure``.

	"""

	def __init__(self, reader: BranchGraphReader | None = None) -> None:
		self.reader = reader or BranchGraphReader()

	def plan(self, source_branch: str, target_branches: Sequence[str]) -> PlanResult:
		"""
		Plan merging ``source_branch`` forward through ``target_branches`` in order.

		Each target becomes the source of the next hop once merged, so the plan
		is a linear chain rather than a fan-out.

		Args:
			source_branch: Branch carrying the fixes
			target_branches: Branches to merge into, oldest release first

		Returns:
			The plan, or a failure naming the branches that do not exist

		"""
		targets = tuple(target_branches)

		if not self.reader.branch_exists(source_branch):
			logger.info("Source branch missing: %s", source_branch)
			return ValidationFailure(
				error=f"Source branch '{source_branch}' does not exist",
				branches=(source_branch,),
			)

		missing = tuple(branch for branch in targets if not self.reader.branch_exists(branch))
		if missing:
			logger.info("Target branches missing: %s", ", ".join(missing))
			return ValidationFailure(
				error=f"Target branches do not exist: {', '.join(missing)}",
				branches=missing,
			)

		try:
			current_branch = self.reader.current_branch()
		except GitError as e:
			logger.exception("Failed to read the current branch")
			return RepositoryFailure(error=str(e))

		hops: list[MergeHop] = []
		current_source = source_branch
		for target in targets:
			commit_count = self.reader.commit_count(current_source, target)
			commits = self.reader.commit_list(current_source, target)
			hops.append(
				MergeHop(
					from_branch=current_source,
					into_branch=target,
					commit_count=commit_count,
					commits=tuple(commits),
				)
			)
			logger.debug("Planned hop %s -> %s (%d commits)", current_source, target, commit_count)
			current_source = target

		return MergePlan(
			source_branch=source_branch,
			target_branches=targets,
			current_branch=current_branch,
			hops=tuple(hops),
		)

	def gather_context(
		self,
		into_branch: str,
		merge_branch: str,
		include_details: bool = False,
		max_commits: int = DEFAULT_MAX_COMMITS,
		max_files: int = DEFAULT_MAX_FILES,
	) -> ContextResult:
		"""
		Describe how two branches diverged and which files are at risk.

		Args:
			into_branch: Branch that will receive the merge
			merge_branch: Branch being merged
			include_details: Also list recent commits and changed files
			max_commits: Most recent commits to list per side
			max_files: Non-conflicting files to list per side

		Returns:
			The merge context, or a failure result

		"""
		missing = tuple(b for b in (into_branch, merge_branch) if not self.reader.branch_exists(b))
		if missing:
			logger.info("Branches missing for context: %s", ", ".join(missing))
			return ValidationFailure(error="One or both branches do not exist", branches=missing)

		max_commits = max(max_commits, 0)
		max_files = max(max_files, 0)

		try:
			merge_base = self.reader.merge_base(into_branch, merge_branch)
			source_commits = self.reader.commit_list(merge_branch, merge_base)
			target_commits = self.reader.commit_list(into_branch, merge_base)
			source_files = self.reader.changed_files(merge_base, merge_branch)
			target_files = self.reader.changed_files(merge_base, into_branch)
			current_branch = self.reader.current_branch()
		except GitError as e:
			logger.exception("Failed to gather merge context for %s into %s", merge_branch, into_branch)
			return RepositoryFailure(error=str(e))

		target_file_set = set(target_files)
		potential_conflicts = tuple(f for f in source_files if f in target_file_set)

		summary = ContextSummary(
			source_commit_count=len(source_commits),
			target_commit_count=len(target_commits),
			source_files_count=len(source_files),
			target_files_count=len(target_files),
			conflict_count=len(potential_conflicts),
		)

		if not include_details:
			return MergeContext(
				into_branch=into_branch,
				merge_branch=merge_branch,
				current_branch=current_branch,
				merge_base=merge_base,
				summary=summary,
				potential_conflicts=potential_conflicts,
				note=SUMMARY_MODE_NOTE,
			)

		details = ContextDetails(
			recent_source_commits=tuple(source_commits[:max_commits]),
			recent_target_commits=tuple(target_commits[:max_commits]),
			source_files_changed=_breakdown(source_files, potential_conflicts, max_files),
			target_files_changed=_breakdown(target_files, potential_conflicts, max_files),
		)

		note = None
		if len(source_commits) > max_commits or len(target_commits) > max_commits:
			note = (
				f"Showing {min(max_commits, len(source_commits))} of {len(source_commits)} source commits "
				f"and {min(max_commits, len(target_commits))} of {len(target_commits)} target commits. "
				"Use max_commits parameter to see more."
			)

		return MergeContext(
			into_branch=into_branch,
			merge_branch=merge_branch,
			current_branch=current_branch,
			merge_base=merge_base,
			summary=summary,
			potential_conflicts=potential_conflicts,
			details=details,
			note=note,
		)


def _breakdown(files: list[str], conflicts: tuple[str, ...], max_files: int) -> FileBreakdown:
	conflict_set = set(conflicts)
	non_conflicting = [f for f in files if f not in conflict_set]
	return FileBreakdown(
		conflicting=conflicts,
		non_conflicting=tuple(non_conflicting[:max_files]),
		truncated=len(non_conflicting) > max_files,
	)
