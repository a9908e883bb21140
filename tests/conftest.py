"""Global test fixtures and configuration."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

from mergetrain.config import ConfigLoader

if TYPE_CHECKING:
	from collections.abc import Iterator
	from pathlib import Path

GIT_IDENTITY = [
	"-c",
	"user.name=Merge Train Tests",
	"-c",
	"user.email=tests@example.com",
	"-c",
	"commit.gpgsign=false",
]


class GitRepo:
	"""Small driver for building throwaway git histories."""

	def __init__(self, path: Path) -> None:
		self.path = path

	def git(self, *args: str) -> str:
		result = subprocess.run(
			["git", *GIT_IDENTITY, *args],
			cwd=self.path,
			capture_output=True,
			text=True,
			check=True,
		)
		return result.stdout.strip()

	def write(self, name: str, content: str) -> None:
		file_path = self.path / name
		file_path.parent.mkdir(parents=True, exist_ok=True)
		file_path.write_text(content, encoding="utf-8")

	def commit(self, message: str, files: dict[str, str]) -> str:
		"""Write ``files`` and commit them, returning the new commit hash."""
		for name, content in files.items():
			self.write(name, content)
		self.git("--literal-pathspecs", "add", "--", *files)
		self.git("commit", "-q", "-m", message)
		return self.git("rev-parse", "HEAD")

	def branch(self, name: str, start: str = "HEAD") -> None:
		self.git("branch", name, start)

	def checkout(self, name: str) -> None:
		self.git("checkout", "-q", name)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
	"""An empty repository whose unborn HEAD points at ``main``."""
	repo_path = tmp_path / "repo"
	repo_path.mkdir()
	repo = GitRepo(repo_path)
	repo.git("init", "-q")
	repo.git("symbolic-ref", "HEAD", "refs/heads/main")
	return repo


@pytest.fixture
def release_repo(git_repo: GitRepo) -> GitRepo:
	"""
	Two release branches diverging from ``main``.

	``release/1`` changes a.txt and c.txt, ``release/2`` changes b.txt and
	c.txt. ``main`` stays at the shared base commit, and ``release/2`` is
	checked out at the end.

	"""
	git_repo.commit("Initial layout", {"a.txt": "a\n", "b.txt": "b\n", "c.txt": "c\n"})
	git_repo.branch("release/1")
	git_repo.branch("release/2")

	git_repo.checkout("release/1")
	git_repo.commit("Fix a on release 1", {"a.txt": "a fixed\n"})
	git_repo.commit("Fix c on release 1", {"c.txt": "c fixed on 1\n"})

	git_repo.checkout("release/2")
	git_repo.commit("Fix b on release 2", {"b.txt": "b fixed\n"})
	git_repo.commit("Fix c on release 2", {"c.txt": "c fixed on 2\n"})
	return git_repo


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
	"""Keep user config files out of tests and drop the config singleton."""
	xdg_home = tmp_path / "xdg"
	xdg_home.mkdir()
	monkeypatch.setattr("mergetrain.config.config_loader.xdg_config_home", str(xdg_home))
	monkeypatch.delenv("LOG_LEVEL", raising=False)
	ConfigLoader.reset_instance()
	yield
	ConfigLoader.reset_instance()
