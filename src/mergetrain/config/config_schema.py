"""Schemas for the config file."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mergetrain.train.planner import DEFAULT_MAX_COMMITS, DEFAULT_MAX_FILES


class GitSchema(BaseModel):
	"""Settings for git subprocesses."""

	timeout: float | None = Field(default=None, gt=0)


class ContextSchema(BaseModel):
	"""Defaults for the context command."""

	include_details: bool = False
	max_commits: int = Field(default=DEFAULT_MAX_COMMITS, ge=0)
	max_files: int = Field(default=DEFAULT_MAX_FILES, ge=0)


class AppConfigSchema(BaseModel):
	"""Top-level mergetrain configuration."""

	git: GitSchema = Field(default_factory=GitSchema)
	context: ContextSchema = Field(default_factory=ContextSchema)
