"""Pytest fixtures for git-cleanup tests"""
import io
import tempfile
from pathlib import Path
from threading import Lock

import pytest
import git
from rich.console import Console

from git_cleanup.exceptions import GitOperationError
from git_cleanup.services.git.executor import GitResult, format_command


WORKTREE_LIST_OUTPUT = """worktree /dev/project
HEAD 0000000000000000000000000000000000000000
branch refs/heads/main

worktree /dev/worktree-1
HEAD 1111111111111111111111111111111111111111
branch refs/heads/worktree-1

worktree /dev/worktree-2
HEAD 2222222222222222222222222222222222222222
branch refs/heads/worktree-2

worktree /dev/worktree-3
HEAD 3333333333333333333333333333333333333333
detached
"""


class FakeGit:
    """Executor double that answers scripted git argument vectors.

    Responses are matched by arguments, not by call order, so services may run
    commands concurrently. Every call is recorded in `calls` in the order it
    started; unexpected calls fail the test.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []
        self.echoed = []
        self._lock = Lock()

    def expect(self, *args, output: str = "", error: bool = False, hook=None):
        """Register a response for `git <args>`.

        Args:
            output: stdout returned for the call
            error: make the call exit non-zero
            hook: callable run when the call happens (before returning)
        """
        self.responses[tuple(args)] = {"output": output, "error": error, "hook": hook}
        return self

    def run(self, *args, check=True, echo=False):
        with self._lock:
            self.calls.append(tuple(args))
            if echo:
                self.echoed.append(tuple(args))

        if tuple(args) not in self.responses:
            raise AssertionError(f"Unexpected git call: {list(args)}\nAll calls: {self.calls}")

        response = self.responses[tuple(args)]
        if response["hook"]:
            response["hook"]()

        if response["error"]:
            if check:
                raise GitOperationError(format_command(args), message="exit 1: fatal")
            return GitResult(ok=False, stdout="", stderr="fatal", status=1)
        return GitResult(ok=True, stdout=response["output"].rstrip("\n"))

    def called(self, *args) -> bool:
        return tuple(args) in self.calls

    def count(self, *args) -> int:
        return self.calls.count(tuple(args))

    def assert_all_called(self):
        """Every scripted call was made at least once."""
        missing = [list(args) for args in self.responses if args not in self.calls]
        assert missing == []


class ScriptedSelect:
    """Multi-select double returning pre-recorded index lists."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def __call__(self, message, options):
        self.calls.append((message, options))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)


@pytest.fixture
def fake_git():
    """Create an empty scripted executor."""
    return FakeGit()


@pytest.fixture
def worktree_list_output():
    return WORKTREE_LIST_OUTPUT


@pytest.fixture
def quiet_console():
    """Console that records output instead of printing it."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


def _configure_user(repo: git.Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "remote"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def cloned_repo(git_repo, temp_dir):
    """Clone `git_repo` so that branches can track an upstream."""
    local = git.Repo.clone_from(git_repo.working_dir, temp_dir / "local")
    _configure_user(local)

    yield local

    local.close()


@pytest.fixture
def make_select():
    """Factory for scripted multi-select widgets."""
    return ScriptedSelect
