"""Value objects produced by the merge train planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeAlias

from mergetrain.git.models import Commit

MERGE_BASE_DISPLAY_LENGTH = 8


@dataclass(frozen=True)
class MergeHop:
	"""One step of a merge train."""

	from_branch: str
	into_branch: str
	commit_count: int
	commits: tuple[Commit, ...] = ()

	def to_dict(self) -> dict[str, Any]:
		return {
			"into_branch": self.into_branch,
			"from_branch": self.from_branch,
			"commit_count": self.commit_count,
			"commits": [c.to_dict() for c in self.commits],
		}


@dataclass(frozen=True)
class MergePlan:
	"""
	Ordered merge hops from a source branch through each target.

	Each hop merges the previous hop's target, so hop ``i`` starts from
	``target_branches[i - 1]`` and hop 0 starts from ``source_branch``.

	"""

	success: ClassVar[bool] = True

	source_branch: str
	target_branches: tuple[str, ...]
	current_branch: str
	"""Branch checked out when the plan was made, for the caller to restore."""

	hops: tuple[MergeHop, ...] = ()

	@property
	def total_commits(self) -> int:
		return sum(hop.commit_count for hop in self.hops)

	def to_dict(self) -> dict[str, Any]:
		return {
			"success": True,
			"source_branch": self.source_branch,
			"target_branches": list(self.target_branches),
			"current_branch": self.current_branch,
			"merges": [hop.to_dict() for hop in self.hops],
		}


@dataclass(frozen=True)
class ContextSummary:
	"""Counts describing both sides of a divergence."""

	source_commit_count: int
	target_commit_count: int
	source_files_count: int
	target_files_count: int
	conflict_count: int

	def to_dict(self) -> dict[str, int]:
		return {
			"source_commit_count": self.source_commit_count,
			"target_commit_count": self.target_commit_count,
			"source_files_count": self.source_files_count,
			"target_files_count": self.target_files_count,
			"conflict_count": self.conflict_count,
		}


@dataclass(frozen=True)
class FileBreakdown:
	"""Changed files on one side, split by conflict risk."""

	conflicting: tuple[str, ...]
	non_conflicting: tuple[str, ...]
	truncated: bool
	"""True when more non-conflicting files exist than were listed."""

	def to_dict(self) -> dict[str, Any]:
		return {
			"conflicting": list(self.conflicting),
			"non_conflicting": list(self.non_conflicting),
			"truncated": self.truncated,
		}


@dataclass(frozen=True)
class ContextDetails:
	"""Capped commit and file listings for both sides."""

	recent_source_commits: tuple[Commit, ...]
	recent_target_commits: tuple[Commit, ...]
	source_files_changed: FileBreakdown
	target_files_changed: FileBreakdown

	def to_dict(self) -> dict[str, Any]:
		return {
			"recent_source_commits": [c.to_dict() for c in self.recent_source_commits],
			"recent_target_commits": [c.to_dict() for c in self.recent_target_commits],
			"source_files_changed": self.source_files_changed.to_dict(),
			"target_files_changed": self.target_files_changed.to_dict(),
		}


@dataclass(frozen=True)
class MergeContext:
	"""
	Divergence report for merging ``merge_branch`` into ``into_branch``.

	``potential_conflicts`` lists files changed on both sides since the merge
	base. It is a risk signal only: a listed file may merge cleanly, and a
	rename can conflict without being listed.

	"""

	success: ClassVar[bool] = True

	into_branch: str
	merge_branch: str
	current_branch: str
	merge_base: str
	summary: ContextSummary
	potential_conflicts: tuple[str, ...]
	details: ContextDetails | None = None
	note: str | None = None

	def to_dict(self) -> dict[str, Any]:
		result: dict[str, Any] = {
			"success": True,
			"into_branch": self.into_branch,
			"merge_branch": self.merge_branch,
			"current_branch": self.current_branch,
			"merge_base": self.merge_base[:MERGE_BASE_DISPLAY_LENGTH],
			"summary": self.summary.to_dict(),
			"potential_conflicts": list(self.potential_conflicts),
		}
		if self.details is not None:
			result.update(self.details.to_dict())
		if self.note:
			result["note"] = self.note
		return result


@dataclass(frozen=True)
class ValidationFailure:
	"""One or more named branches did not resolve."""

	success: ClassVar[bool] = False

	error: str
	branches: tuple[str, ...] = field(default_factory=tuple)

	def to_dict(self) -> dict[str, Any]:
		return {"success": False, "error": self.error}


@dataclass(frozen=True)
class RepositoryFailure:
	"""A load-bearing git query failed after validation passed."""

	success: ClassVar[bool] = False

	error: str

	def to_dict(self) -> dict[str, Any]:
		return {"success": False, "error": self.error}


PlanResult: TypeAlias = MergePlan | ValidationFailure | RepositoryFailure
ContextResult: TypeAlias = MergeContext | ValidationFailure | RepositoryFailure

__all__ = [
	"Commit",
	"ContextDetails",
	"ContextResult",
	"ContextSummary",
	"FileBreakdown",
	"MergeContext",
	"MergeHop",
	"MergePlan",
	"PlanResult",
	"RepositoryFailure",
	"ValidationFailure",
]
