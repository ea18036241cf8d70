"""Core functionality for git-cleanup."""

from .cleaner import Cleaner

__all__ = ["Cleaner"]
