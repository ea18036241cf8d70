"""Services for git-cleanup."""

from .prompt import PromptResult, prompt

__all__ = ["PromptResult", "prompt"]
