"""Parsers for git's machine readable output."""

from git_cleanup.constants import BRANCH_REF_PREFIX, GONE_HEAD_LINE, GONE_MARKER
from git_cleanup.logging_config import get_logger
from git_cleanup.models.branch import BranchListing
from git_cleanup.models.worktree import WorktreeInfo

logger = get_logger(__name__)


def parse_worktree_list(output: str) -> list[WorktreeInfo]:
    """Parse `git worktree list --porcelain` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or `detached`)
        (blank line between worktrees)

    Returns:
        WorktreeInfo entries in listing order, the primary worktree first.
        Blocks without a `worktree` line are dropped and a path is reported
        only once.
    """
    worktrees: list[WorktreeInfo] = []
    seen: set[str] = set()

    for block in output.replace("\r\n", "\n").split("\n\n"):
        path = None
        branch = None
        head = None
        prunable = False

        for line in block.split("\n"):
            if line.startswith("worktree "):
                path = line[len("worktree "):]
            elif line.startswith("HEAD "):
                head = line[len("HEAD "):]
            elif line.startswith("branch "):
                ref = line[len("branch "):]
                if ref.startswith(BRANCH_REF_PREFIX):
                    branch = ref[len(BRANCH_REF_PREFIX):]
            elif line == "prunable" or line.startswith("prunable "):
                prunable = True
            # `detached`, `bare` and `locked` lines carry nothing we use

        if not path:
            if block.strip():
                logger.debug(f"Dropping worktree block without a path: {block!r}")
            continue
        if path in seen:
            logger.debug(f"Dropping duplicate worktree entry for {path}")
            continue

        seen.add(path)
        worktrees.append(WorktreeInfo(path=path, branch=branch, head=head, is_main=not worktrees, prunable=prunable))

    return worktrees


def is_current_branch_gone(output: str) -> bool:
    """Check `git branch --format '%(upstream:track) %(HEAD)'` output.

    True when the checked out branch (`*`) reports its upstream as gone.
    """
    return any(line == GONE_HEAD_LINE for line in output.splitlines())


def parse_branch_listing(output: str) -> list[BranchListing]:
    """Parse `git branch --format '%(refname:short)%(upstream:track)'` output.

    The tracking annotation is empty unless the upstream was deleted, in which
    case the line ends with `[gone]`.
    """
    branches = []
    for line in output.splitlines():
        if not line.strip():
            continue
        if line.endswith(GONE_MARKER):
            branches.append(BranchListing(name=line[:-len(GONE_MARKER)], gone=True))
        else:
            branches.append(BranchListing(name=line))
    return branches


def parse_ignored_branches(value) -> list[str]:
    """Split the space-joined ignored branches value. None or blank gives []."""
    if not value or not value.strip():
        return []
    return value.split()


def build_branch_worktree_map(worktrees: list[WorktreeInfo]) -> dict[str, str]:
    """Map checked out branch names to the path of the worktree holding them.

    Detached worktrees are skipped; a later worktree wins over an earlier one
    for the same branch.
    """
    return {wt.branch: wt.path for wt in worktrees if wt.branch}
