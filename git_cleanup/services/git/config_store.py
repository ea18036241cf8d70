"""git config backed key-value store."""

from typing import Optional

from git_cleanup.logging_config import get_logger

logger = get_logger(__name__)


class GitConfigStore:
    """Reads and writes git configuration values through an executor.

    Values can be scoped to the repository (the default) or to a single
    worktree. Worktree scope needs `extensions.worktreeconfig` enabled.
    """

    def __init__(self, executor):
        self.executor = executor

    @staticmethod
    def _location(path: Optional[str]) -> list[str]:
        return ["-C", path] if path else []

    def get(self, key: str, path: Optional[str] = None, worktree: bool = False) -> Optional[str]:
        """Return the value of `key`, or None when it is not set.

        A failed lookup is the normal "key does not exist" case and is never
        raised.
        """
        args = [*self._location(path), "config"]
        if worktree:
            args.append("--worktree")
        args.extend(["--get", key])

        result = self.executor.run(*args, check=False)
        if not result.ok:
            logger.debug(f"Config {key} not set{f' in {path}' if path else ''}")
            return None
        return result.stdout

    def set(self, key: str, value: str, path: Optional[str] = None, worktree: bool = False) -> None:
        """Write `key`. Raises GitOperationError on failure."""
        args = [*self._location(path), "config"]
        if worktree:
            args.append("--worktree")
        args.extend([key, value])
        self.executor.run(*args, echo=True)
