"""Threading utilities for running git commands in parallel."""

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional


def is_free_threading_enabled() -> bool:
    """Detect if Python is running with free-threading enabled.

    Returns:
        True if running on Python 3.13+ with the GIL disabled
    """
    return hasattr(sys, "_is_gil_enabled") and not sys._is_gil_enabled()


def get_python_threading_mode() -> str:
    """Get a description of the current threading mode."""
    if hasattr(sys, "_is_gil_enabled"):
        return "GIL-enabled" if sys._is_gil_enabled() else "free-threading"
    return "GIL-enabled (Python < 3.13)"


def get_optimal_worker_count(user_specified: Optional[int] = None) -> int:
    """Calculate the worker count for fanning out git subprocesses.

    Args:
        user_specified: User-specified worker count, if provided

    Returns:
        Number of workers for parallel processing
    """
    if user_specified is not None and user_specified > 0:
        return user_specified

    cpu_count = os.cpu_count() or 1

    if is_free_threading_enabled():
        return min(64, cpu_count * 2)

    # The work is waiting on git processes, so oversubscribe the CPUs a little
    return min(32, cpu_count + 4)


def get_threading_info() -> Dict[str, Any]:
    """Get information about Python threading configuration."""
    return {
        "mode": get_python_threading_mode(),
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "optimal_workers": get_optimal_worker_count(),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }


def run_parallel(tasks: Iterable[Callable[[], Any]], max_workers: int) -> List[Any]:
    """Run zero-argument callables concurrently and return their results in order.

    With more than one worker this returns only after every task finished,
    then re-raises the first exception in task order. With one worker the
    tasks run in order and an exception stops the remaining ones.
    """
    tasks = list(tasks)
    if not tasks:
        return []
    if max_workers <= 1 or len(tasks) == 1:
        return [task() for task in tasks]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(tasks))) as executor:
        futures = [executor.submit(task) for task in tasks]
    # Leaving the with block joins every worker
    return [future.result() for future in futures]
