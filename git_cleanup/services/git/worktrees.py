"""Worktree operations service for git-cleanup."""

from threading import Lock

from git_cleanup.constants import TRACKING_HEAD_FORMAT, WORKTREE_CONFIG_EXTENSION, WORKTREE_IGNORE_KEY
from git_cleanup.logging_config import get_logger
from git_cleanup.models.worktree import RemovableWorktree, WorktreeInfo
from git_cleanup.services.git.config_store import GitConfigStore
from git_cleanup.services.git.parsers import (
    build_branch_worktree_map,
    is_current_branch_gone,
    parse_worktree_list,
)
from git_cleanup.utils.threading import run_parallel

logger = get_logger(__name__)


class WorktreeService:
    """Service for classifying and removing git worktrees."""

    def __init__(self, executor, max_workers: int = 1, ignore_key: str = WORKTREE_IGNORE_KEY):
        """Initialize the worktree service.

        Args:
            executor: GitExecutor (or compatible) running git in the repository
            max_workers: Number of git commands allowed to run at once
            ignore_key: Per-worktree config key marking a worktree as ignored
        """
        self.executor = executor
        self.config_store = GitConfigStore(executor)
        self.max_workers = max_workers
        self.ignore_key = ignore_key
        self._worktree_config_enabled = False
        self._config_lock = Lock()  # Guards the one-time extensions.worktreeconfig toggle

    def list_worktrees(self) -> list[WorktreeInfo]:
        """Get all worktrees, the primary worktree first."""
        output = self.executor.run("worktree", "list", "--porcelain").stdout
        worktrees = parse_worktree_list(output)

        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def get_worktrees(self) -> list[str]:
        """Get the paths of every worktree except the primary one."""
        return [wt.path for wt in self.list_worktrees() if not wt.is_main]

    def get_branch_worktrees(self) -> dict[str, str]:
        """Get a map of checked out branch names to their worktree path."""
        return build_branch_worktree_map(self.list_worktrees())

    def enable_worktree_config(self) -> None:
        """Enable worktree specific config storage for the repository.

        The setting is repository wide, so it is written at most once per
        service instance.
        """
        with self._config_lock:
            if self._worktree_config_enabled:
                return
            self.config_store.set(WORKTREE_CONFIG_EXTENSION, "true")
            self._worktree_config_enabled = True

    def is_branch_gone(self, path: str) -> bool:
        """Check whether the branch checked out in `path` was deleted upstream."""
        output = self.executor.run("-C", path, "branch", "--format", TRACKING_HEAD_FORMAT).stdout
        return is_current_branch_gone(output)

    def is_ignored(self, path: str) -> bool:
        """Check whether `path` was deselected during a previous run."""
        return self.config_store.get(self.ignore_key, path=path, worktree=True) == "true"

    def is_dirty(self, path: str) -> bool:
        """Check whether `path` has uncommitted or untracked changes."""
        result = self.executor.run("-C", path, "status", "--porcelain", check=False)
        if not result.ok:
            logger.warning(f"Could not check worktree status for {path}: {result.stderr}")
            return False
        return bool(result.stdout.strip())

    def get_removable_worktrees(self) -> list[RemovableWorktree]:
        """Get the worktrees whose checked out branch was deleted upstream.

        Every non-primary worktree is queried concurrently for its tracking
        state, its ignore flag and its dirty state. Worktrees whose branch
        still has an upstream (or has none, or is detached) are left out, as are
        worktrees whose directory was deleted by hand.

        Returns:
            RemovableWorktree entries in listing order
        """
        self.enable_worktree_config()
        paths = []
        for wt in self.list_worktrees():
            if wt.is_main:
                continue
            if wt.prunable:
                logger.warning(f"Skipping worktree {wt.path}: directory is missing, run `git worktree prune`")
                continue
            paths.append(wt.path)

        tasks = []
        for path in paths:
            tasks.extend([
                lambda path=path: self.is_branch_gone(path),
                lambda path=path: self.is_ignored(path),
                lambda path=path: self.is_dirty(path),
            ])
        results = run_parallel(tasks, self.max_workers)

        removable = []
        for index, path in enumerate(paths):
            gone, ignored, dirty = results[index * 3:index * 3 + 3]
            if not gone:
                logger.debug(f"Keeping worktree {path}: branch not deleted upstream")
                continue
            removable.append(RemovableWorktree(path=path, ignored=ignored, dirty=dirty))

        logger.info(f"{len(removable)} of {len(paths)} worktrees can be removed")
        return removable

    def delete_worktree(self, path: str) -> None:
        """Remove a worktree, discarding any uncommitted changes.

        Raises:
            GitOperationError: if git refuses to remove the worktree
        """
        self.executor.run("worktree", "remove", path, "--force", echo=True)
        logger.info(f"Removed worktree at {path}")

    def ignore_worktree(self, path: str) -> None:
        """Mark a worktree so it starts out deselected next time."""
        self.enable_worktree_config()
        self.config_store.set(self.ignore_key, "true", path=path, worktree=True)
        logger.info(f"Ignoring worktree at {path}")

    def detach_worktree(self, path: str) -> None:
        """Switch a worktree to a detached HEAD so its branch can be deleted."""
        self.executor.run("-C", path, "switch", "--detach", echo=True)
        logger.debug(f"Detached HEAD in {path}")

    def process_selection(self, selected: list[str], deselected: list[str]) -> None:
        """Delete the selected worktrees and ignore the deselected ones concurrently."""
        tasks = [lambda path=path: self.delete_worktree(path) for path in selected]
        tasks += [lambda path=path: self.ignore_worktree(path) for path in deselected]
        run_parallel(tasks, self.max_workers)
