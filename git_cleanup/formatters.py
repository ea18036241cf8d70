"""Formatting functions for git-cleanup console output."""

from rich.text import Text

from git_cleanup.constants import DIRTY_MARKER, DIRTY_STYLE, SYMBOL_DONE, SYMBOL_SKIPPED
from git_cleanup.models.option import PromptOption


def format_worktree_label(option: PromptOption) -> Text:
    """Render a worktree option, flagging worktrees with local changes."""
    label = Text(option.plain_label)
    if option.data.get("dirty"):
        label.append(" ")
        label.append(DIRTY_MARKER, style=DIRTY_STYLE)
    return label


def pluralize(noun: str) -> str:
    return f"{noun}es" if noun.endswith(("ch", "s")) else f"{noun}s"


def format_count(count: int, noun: str) -> str:
    """Format `count` with a matching noun ("1 branch", "2 branches")."""
    return f"{count} {noun}" if count == 1 else f"{count} {pluralize(noun)}"


def format_phase_summary(removed: int, ignored: int, noun: str, verb: str) -> Text:
    """Format the summary printed after a cleanup phase.

    Example: "✓ Removed 2 worktrees, ignoring 1 worktree"
    """
    if not removed and not ignored:
        return Text(f"{SYMBOL_SKIPPED} No {pluralize(noun)} to clean up", style="dim")

    summary = Text(f"{SYMBOL_DONE} {verb} {format_count(removed, noun)}", style="green")
    if ignored:
        summary.append(f", ignoring {format_count(ignored, noun)}", style="yellow")
    return summary
