"""Worktree data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorktreeInfo:
    """One entry of `git worktree list --porcelain`."""

    path: str
    branch: Optional[str] = None  # None when HEAD is detached
    head: Optional[str] = None
    is_main: bool = False  # First listed worktree is the primary one
    prunable: bool = False  # Directory no longer exists on disk

    @property
    def is_detached(self) -> bool:
        return self.branch is None

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = self.branch if self.branch else "(detached)"
        main_marker = " (main)" if self.is_main else ""
        return f"{branch} @ {self.path}{main_marker}"


@dataclass(frozen=True)
class RemovableWorktree:
    """A worktree whose checked out branch was deleted upstream."""

    path: str
    ignored: bool = False  # Deselected during a previous run
    dirty: bool = False  # Has uncommitted or untracked changes
