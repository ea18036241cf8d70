"""Runs the git binary for git-cleanup."""

import shlex
from dataclasses import dataclass
from typing import Optional

import git
from rich.console import Console
from rich.text import Text

from git_cleanup.exceptions import GitCleanupError, GitOperationError
from git_cleanup.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GitResult:
    """Outcome of one git invocation."""

    ok: bool
    stdout: str = ""
    stderr: str = ""
    status: Optional[int] = 0

    def lines(self) -> list[str]:
        """Return stdout split into lines."""
        return self.stdout.splitlines()


def format_command(args) -> str:
    """Render a git argument vector the way a user would type it."""
    return "git " + shlex.join(args)


class GitExecutor:
    """Executes git commands inside a repository.

    Every call goes through `run`, which makes the executor easy to replace
    in tests: a fake only has to implement `run` with the same signature.
    """

    def __init__(self, repo_path: str, console: Optional[Console] = None):
        """Initialize the executor.

        Args:
            repo_path: Directory git is run from
            console: Console used to echo mutating commands

        Raises:
            GitCleanupError: if repo_path is not inside a git repository
        """
        self.repo_path = repo_path
        self._verify_repository()
        self.console = console or Console()

    def _verify_repository(self) -> None:
        """Make sure git will run inside the named repository.

        git.Git falls back to the current directory when its working
        directory does not exist, so a bad path would silently target
        whatever repository the shell is in.
        """
        try:
            repo = git.Repo(self.repo_path, search_parent_directories=True)
        except git.NoSuchPathError:
            raise GitCleanupError(f"Path does not exist: {self.repo_path}")
        except git.InvalidGitRepositoryError:
            raise GitCleanupError(f"Not a git repository: {self.repo_path}")
        repo.close()

    def _get_git(self) -> git.Git:
        """Get a git command wrapper bound to the repository directory.

        A new wrapper is created per call so that threads never share one.
        """
        return git.Git(self.repo_path)

    def run(self, *args: str, check: bool = True, echo: bool = False) -> GitResult:
        """Run `git <args>`.

        Args:
            *args: Arguments passed to git
            check: Raise GitOperationError when git exits non-zero. With
                check=False a failure is reported through GitResult.ok.
            echo: Print the command before running it

        Returns:
            GitResult with captured stdout and stderr
        """
        command = format_command(args)
        if echo:
            self.console.print(Text(f"$ {command}", style="dim"))
        else:
            logger.debug(f"Running {command}")

        status, stdout, stderr = self._get_git().execute(
            ["git", *args],
            with_extended_output=True,
            with_exceptions=False,
        )
        result = GitResult(ok=status == 0, stdout=stdout or "", stderr=(stderr or "").strip(), status=status)

        if not result.ok:
            if check:
                if result.stderr:
                    error_msg = f"exit {status}: {result.stderr}"
                else:
                    error_msg = f"exit code {status}"
                logger.error(f"{command} failed ({error_msg})")
                raise GitOperationError(command, message=error_msg)
            logger.debug(f"{command} exited with {status}")

        return result
