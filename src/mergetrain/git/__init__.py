"""Git access for mergetrain."""

from mergetrain.git.branch_graph import BranchGraphReader
from mergetrain.git.utils import GitError, GitToolError, run_git_command

__all__ = [
	"BranchGraphReader",
	"GitError",
	"GitToolError",
	"run_git_command",
]
