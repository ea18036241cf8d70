"""Command-line argument parsing for git-cleanup."""

import argparse
from git_cleanup.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-cleanup",
        description="Interactively remove local worktrees and branches whose upstream branch was deleted",
        epilog="Deselected worktrees and branches are remembered in git config "
        "(cleanup.ignore per worktree, cleanup.ignoredBranches per repository) "
        "and start out unchecked on the next run.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-cleanup {__version__}")
    parser.add_argument(
        "-C",
        "--repo",
        metavar="PATH",
        default=None,
        help="Run as if started in PATH (default: current directory)",
    )
    parser.add_argument(
        "--no-fetch",
        dest="fetch",
        action="store_false",
        help="Do not run 'git fetch --prune' before looking for deleted upstream branches",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of git commands to run in parallel (default: auto-detect based on CPU and threading mode)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Force sequential processing (disable parallelism)",
    )

    return parser.parse_args(argv)
