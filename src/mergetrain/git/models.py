"""Git value objects read from branch history."""

from __future__ import annotations

from dataclasses import dataclass

SHORT_HASH_LENGTH = 7


@dataclass(frozen=True)
class Commit:
	"""A commit as listed in a branch range."""

	hash: str
	"""Full object name, usable for resolution."""

	message: str
	"""Subject line of the commit message, empty if the commit has none."""

	@property
	def short_hash(self) -> str:
		"""Abbreviated hash for display."""
		return self.hash[:SHORT_HASH_LENGTH]

	@classmethod
	def from_log_line(cls, line: str) -> Commit:
		"""Build a commit from a ``<hash> <subject>`` log line."""
		commit_hash, _, message = line.strip().partition(" ")
		return cls(hash=commit_hash, message=message.strip())

	def to_dict(self) -> dict[str, str]:
		return {
			"hash": self.hash,
			"short_hash": self.short_hash,
			"message": self.message,
		}
