"""Branch classification and deletion for git-cleanup."""

from typing import Iterable

from git_cleanup.constants import IGNORED_BRANCHES_KEY, NAME_TRACKING_FORMAT
from git_cleanup.logging_config import get_logger
from git_cleanup.models.branch import BranchListing, RemovableBranch
from git_cleanup.services.git.branch_names import backup_parent
from git_cleanup.services.git.config_store import GitConfigStore
from git_cleanup.services.git.parsers import parse_branch_listing, parse_ignored_branches
from git_cleanup.services.git.worktrees import WorktreeService
from git_cleanup.utils.threading import run_parallel

logger = get_logger(__name__)


def classify_branches(branches: list[BranchListing], ignored: Iterable[str]) -> list[RemovableBranch]:
    """Pick the branches that can be cleaned up.

    A branch is removable when its upstream is gone, when it is a backup of a
    branch whose upstream is gone, or when it is a backup of a branch that no
    longer exists at all.

    Args:
        branches: Local branches in listing order
        ignored: Branch names deselected during a previous run

    Returns:
        RemovableBranch entries in listing order
    """
    ignored = set(ignored)
    names = {branch.name for branch in branches}
    merged = {branch.name for branch in branches if branch.gone}

    removable = []
    for branch in branches:
        parent = backup_parent(branch.name)

        is_merged = branch.name in merged or (parent is not None and parent in merged)
        is_orphaned = parent is not None and parent not in names

        if is_merged or is_orphaned:
            reason = "merged" if is_merged else "orphaned backup"
            logger.debug(f"Branch {branch.name} is removable ({reason})")
            removable.append(RemovableBranch(name=branch.name, ignored=branch.name in ignored))

    return removable


class BranchService:
    """Service for classifying and deleting local branches."""

    def __init__(self, executor, worktree_service: WorktreeService, max_workers: int = 1,
                 ignored_branches_key: str = IGNORED_BRANCHES_KEY):
        """Initialize the branch service.

        Args:
            executor: GitExecutor (or compatible) running git in the repository
            worktree_service: Used to find and detach worktrees holding branches
            max_workers: Number of git commands allowed to run at once
            ignored_branches_key: Config key holding the ignored branch names
        """
        self.executor = executor
        self.worktree_service = worktree_service
        self.config_store = GitConfigStore(executor)
        self.max_workers = max_workers
        self.ignored_branches_key = ignored_branches_key

    def list_branches(self) -> list[BranchListing]:
        """Get every local branch with its upstream-gone state."""
        output = self.executor.run("branch", "--format", NAME_TRACKING_FORMAT).stdout
        return parse_branch_listing(output)

    def get_removable_branches(self) -> list[RemovableBranch]:
        """Get the branches that are merged, backups of merged branches or orphaned backups."""
        branches, ignored = run_parallel(
            [self.list_branches, self.get_ignored_branches],
            self.max_workers,
        )
        removable = classify_branches(branches, ignored)
        logger.info(f"{len(removable)} of {len(branches)} branches can be removed")
        return removable

    def get_ignored_branches(self) -> list[str]:
        """Get the branches that were deselected during a previous run."""
        return parse_ignored_branches(self.config_store.get(self.ignored_branches_key))

    def set_ignored_branches(self, names: list[str]) -> None:
        """Remember the deselected branches. An empty list clears the setting."""
        self.config_store.set(self.ignored_branches_key, " ".join(names))

    def delete_branches(self, names: list[str]) -> None:
        """Force delete branches with a single `git branch -D` call.

        Worktrees that have one of the branches checked out are detached first
        because git refuses to delete a checked out branch.

        Raises:
            GitOperationError: if detaching or deleting fails
        """
        if not names:
            return

        branch_worktrees = self.worktree_service.get_branch_worktrees()
        paths = list(dict.fromkeys(branch_worktrees[name] for name in names if name in branch_worktrees))

        # Every detach must finish before the delete starts
        run_parallel(
            [lambda path=path: self.worktree_service.detach_worktree(path) for path in paths],
            self.max_workers,
        )

        self.executor.run("branch", "-D", *names, echo=True)
        logger.info(f"Deleted {len(names)} branches")
