"""Data models for git-cleanup."""

from .worktree import WorktreeInfo, RemovableWorktree
from .branch import BranchListing, RemovableBranch
from .option import PromptOption

__all__ = [
    "WorktreeInfo",
    "RemovableWorktree",
    "BranchListing",
    "RemovableBranch",
    "PromptOption",
]
