"""Git-related services for git-cleanup."""

from .executor import GitExecutor, GitResult
from .config_store import GitConfigStore
from .worktrees import WorktreeService
from .branches import BranchService, classify_branches

__all__ = [
    "GitExecutor",
    "GitResult",
    "GitConfigStore",
    "WorktreeService",
    "BranchService",
    "classify_branches",
]
