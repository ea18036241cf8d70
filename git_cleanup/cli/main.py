"""Command-line entry point for git-cleanup"""

import os
import sys

from rich.console import Console
from rich.text import Text

from git_cleanup.cli.args import parse_args
from git_cleanup.config import Config
from git_cleanup.core import Cleaner
from git_cleanup.exceptions import GitCleanupError, SelectionCancelledError
from git_cleanup.logging_config import get_log_file, setup_logging
from git_cleanup.utils.threading import get_threading_info

console = Console()


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            fetch=parsed_args.fetch,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            sequential=parsed_args.sequential,
            workers=parsed_args.workers,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")

            threading_info = get_threading_info()
            console.print("[yellow]Threading Information:[/yellow]")
            console.print(f"  Python version: {threading_info['python_version']}")
            console.print(f"  Threading mode: {threading_info['mode']}")
            console.print(f"  CPU count: {threading_info['cpu_count']}")
            console.print(f"  Optimal workers: {threading_info['optimal_workers']}")

            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")
            console.print(f"[dim]Logging to {get_log_file()}[/dim]")
            console.print("[dim]Note: Debug mode forces sequential processing for readable logs[/dim]")

        cleaner = Cleaner(parsed_args.repo or os.getcwd(), config, console=console)
        cleaner.run()
        return 0
    except (KeyboardInterrupt, SelectionCancelledError):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except (GitCleanupError, ValueError) as e:
        console.print(Text(f"Error: {e}", style="red"))
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
