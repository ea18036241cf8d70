"""Terminal UI for git-cleanup."""

from .multi_select import MultiSelectApp, multi_select

__all__ = ["MultiSelectApp", "multi_select"]
