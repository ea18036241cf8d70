"""Terminal multi-select widget for git-cleanup."""

from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, SelectionList, Static

from git_cleanup.exceptions import SelectionCancelledError
from git_cleanup.models.option import PromptOption


class MultiSelectApp(App[Optional[List[int]]]):
    """Inline checklist that exits with the indexes of the checked options."""

    CSS = """
    Screen {
        height: auto;
    }

    #prompt-message {
        width: 100%;
        height: auto;
        text-style: bold;
        padding: 0 1;
    }

    SelectionList {
        height: auto;
        max-height: 20;
        border: none;
    }
    """

    BINDINGS = [
        Binding("enter", "submit", "Confirm", priority=True),
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("a", "toggle_all", "Toggle all"),
    ]

    def __init__(self, message: str, options: List[PromptOption]):
        super().__init__()
        self.message = message
        self.options = options

    def compose(self) -> ComposeResult:
        yield Static(Text(self.message), id="prompt-message")
        yield SelectionList[int](
            *[
                (option.label if isinstance(option.label, Text) else Text(option.label), index, option.selected)
                for index, option in enumerate(self.options)
            ],
            id="options",
        )
        yield Footer()

    def action_submit(self) -> None:
        """Finish with the checked options."""
        self.exit(sorted(self.query_one(SelectionList).selected))

    def action_cancel(self) -> None:
        self.exit(None)

    def action_toggle_all(self) -> None:
        self.query_one(SelectionList).toggle_all()


def multi_select(message: str, options: List[PromptOption]) -> List[int]:
    """Show a checklist and return the indexes the user left checked.

    Raises:
        SelectionCancelledError: if the user pressed escape
    """
    result = MultiSelectApp(message, options).run(inline=True)
    if result is None:
        raise SelectionCancelledError(message)
    return result
