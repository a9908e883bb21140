"""Shared helpers for the mergetrain CLI."""
