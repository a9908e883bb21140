"""Merge-train planning and context diffing for release branch chains."""

__version__ = "0.1.0"
