"""Configuration handling for git-cleanup"""

from dataclasses import dataclass
from typing import Optional

from git_cleanup.constants import IGNORED_BRANCHES_KEY, WORKTREE_IGNORE_KEY


@dataclass
class Config:
    """Configuration for git-cleanup with validation."""

    # Execution modes
    fetch: bool = True  # Run `git fetch --prune` before classifying
    verbose: bool = False
    debug: bool = False
    sequential: bool = False  # Force sequential processing (disable parallelism)
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    # git config keys holding remembered choices
    ignore_key: str = WORKTREE_IGNORE_KEY
    ignored_branches_key: str = IGNORED_BRANCHES_KEY

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_workers()
        self._validate_keys()

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def _validate_keys(self):
        """Validate config keys look like `section.name`."""
        for name in ("ignore_key", "ignored_branches_key"):
            value = (getattr(self, name) or "").strip()
            if "." not in value or value.startswith(".") or value.endswith("."):
                raise ValueError(f"{name} must be a git config key like 'section.name', got '{value}'")
            setattr(self, name, value)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "fetch": self.fetch,
            "verbose": self.verbose,
            "debug": self.debug,
            "sequential": self.sequential,
            "workers": self.workers,
            "ignore_key": self.ignore_key,
            "ignored_branches_key": self.ignored_branches_key,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "fetch",
            "verbose",
            "debug",
            "sequential",
            "workers",
            "ignore_key",
            "ignored_branches_key",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
