"""
git-cleanup - Clean up local worktrees and branches deleted upstream
"""

from .__version__ import __version__
from .core import Cleaner

__all__ = ["Cleaner", "__version__"]
