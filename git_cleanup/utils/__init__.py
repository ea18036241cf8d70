"""Utility functions for git-cleanup.

This package provides utility modules:
- threading: worker count detection and parallel fan-out of git commands
"""

from .threading import (
    is_free_threading_enabled,
    get_python_threading_mode,
    get_optimal_worker_count,
    get_threading_info,
    run_parallel,
)

__all__ = [
    "is_free_threading_enabled",
    "get_python_threading_mode",
    "get_optimal_worker_count",
    "get_threading_info",
    "run_parallel",
]
