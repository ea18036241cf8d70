"""Custom exceptions for git-cleanup"""

from typing import Optional


class GitCleanupError(Exception):
    """Base exception for all git-cleanup errors."""
    pass


class GitOperationError(GitCleanupError):
    """Exception raised when a git command fails."""

    def __init__(self, operation: str, target: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.target = target
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if target:
            error_msg += f" for '{target}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class SelectionCancelledError(GitCleanupError):
    """Exception raised when the user aborts a selection prompt."""

    def __init__(self, message: str):
        self.prompt_message = message
        super().__init__(f"Selection cancelled: {message}")
