"""Merge train planning."""

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
from mergetrain.train.planner import MergeTrainPlanner

__all__ = [
	"ContextDetails",
	"ContextSummary",
	"FileBreakdown",
	"MergeContext",
	"MergeHop",
	"MergePlan",
	"MergeTrainPlanner",
	"RepositoryFailure",
	"ValidationFailure",
]
