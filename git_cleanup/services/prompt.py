"""Multi-select prompt contract for git-cleanup."""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Union

from rich.text import Text

from git_cleanup.logging_config import get_logger
from git_cleanup.models.option import PromptOption

logger = get_logger(__name__)

# (message, options) -> indexes of the chosen options
MultiSelect = Callable[[str, List[PromptOption]], List[int]]
LabelRenderer = Callable[[PromptOption], Union[str, Text]]


@dataclass
class PromptResult:
    """Values of the options, split by what the user did with them."""

    selected: List[Any] = field(default_factory=list)
    unselected: List[Any] = field(default_factory=list)
    # Checked by default but unchecked by the user
    deselected: List[Any] = field(default_factory=list)


def prompt(
    message: str,
    options: List[PromptOption],
    select: MultiSelect,
    render: Optional[LabelRenderer] = None,
) -> PromptResult:
    """Ask the user to pick some of `options`.

    The widget is never shown for an empty option list.

    Args:
        message: Question shown above the options
        options: Options in display order
        select: Widget that returns the chosen option indexes
        render: Optional mapping from an option to the label displayed for it

    Returns:
        PromptResult with the option values
    """
    if not options:
        logger.debug(f"Skipping prompt with no options: {message}")
        return PromptResult()

    shown = [replace(option, label=render(option)) for option in options] if render else options
    chosen = set(select(message, shown))
    logger.debug(f"Chosen option indexes for '{message}': {sorted(chosen)}")

    result = PromptResult()
    for index, option in enumerate(options):
        if index in chosen:
            result.selected.append(option.value)
        else:
            result.unselected.append(option.value)
            if option.selected:
                result.deselected.append(option.value)
    return result
