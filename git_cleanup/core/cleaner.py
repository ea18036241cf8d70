"""Cleanup flow for git-cleanup"""

from typing import Optional, Union

from rich.console import Console

from git_cleanup.config import Config
from git_cleanup.constants import BRANCH_PROMPT, WORKTREE_PROMPT
from git_cleanup.formatters import format_phase_summary, format_worktree_label
from git_cleanup.logging_config import get_logger
from git_cleanup.models.option import PromptOption
from git_cleanup.services.git import BranchService, GitExecutor, WorktreeService
from git_cleanup.services.prompt import MultiSelect, PromptResult, prompt
from git_cleanup.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


class Cleaner:
    """Removes worktrees and branches whose upstream branch was deleted.

    The flow runs in two phases, worktrees first and branches second, and
    each phase finishes completely before the next one starts:

        fetch -> classify worktrees -> prompt -> remove/ignore worktrees
              -> classify branches -> prompt -> delete branches -> remember ignored
    """

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict, None] = None,
        executor=None,
        select: Optional[MultiSelect] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the cleaner.

        Args:
            repo_path: Path of the repository (or any of its worktrees)
            config: Configuration dict or Config object
            executor: Command executor, defaults to a GitExecutor for repo_path
            select: Multi-select widget, defaults to the terminal checklist
            console: Console for status output
        """
        self.repo_path = repo_path
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.console = console or Console()
        self.executor = executor or GitExecutor(repo_path, console=self.console)
        self.select = select

        if self.config.sequential or self.config.debug:
            # Debug mode runs one command at a time for readable logs
            max_workers = 1
        else:
            max_workers = get_optimal_worker_count(self.config.workers)
        logger.debug(f"Using {max_workers} workers")

        self.worktree_service = WorktreeService(
            self.executor, max_workers=max_workers, ignore_key=self.config.ignore_key
        )
        self.branch_service = BranchService(
            self.executor,
            self.worktree_service,
            max_workers=max_workers,
            ignored_branches_key=self.config.ignored_branches_key,
        )

    def _get_select(self) -> MultiSelect:
        if self.select is None:
            from git_cleanup.ui import multi_select

            self.select = multi_select
        return self.select

    def fetch(self) -> None:
        """Fetch upstream and prune deleted remote branches."""
        self.executor.run("fetch", "--prune", echo=True)

    def clean_worktrees(self) -> PromptResult:
        """Prompt for removable worktrees, remove the chosen ones and ignore the rest."""
        worktrees = self.worktree_service.get_removable_worktrees()
        result = prompt(
            WORKTREE_PROMPT,
            [
                PromptOption(value=wt.path, selected=not wt.ignored, data={"dirty": wt.dirty})
                for wt in worktrees
            ],
            self._get_select(),
            render=format_worktree_label,
        )

        self.worktree_service.process_selection(result.selected, result.deselected)
        self.console.print(format_phase_summary(
            len(result.selected), len(result.deselected), "worktree", "Removed"
        ))
        return result

    def clean_branches(self) -> PromptResult:
        """Prompt for removable branches, delete the chosen ones and remember the rest."""
        branches = self.branch_service.get_removable_branches()
        result = prompt(
            BRANCH_PROMPT,
            [PromptOption(value=branch.name, selected=not branch.ignored) for branch in branches],
            self._get_select(),
        )

        self.branch_service.delete_branches(result.selected)
        # Unselected branches start out unchecked next time
        self.branch_service.set_ignored_branches(result.unselected)
        self.console.print(format_phase_summary(
            len(result.selected), len(result.unselected), "branch", "Deleted"
        ))
        return result

    def run(self) -> None:
        """Run the whole cleanup flow."""
        if self.config.fetch:
            self.fetch()
        else:
            logger.info("Skipping fetch")

        self.clean_worktrees()
        self.clean_branches()
