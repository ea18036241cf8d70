"""Prompt option model."""

from dataclasses import dataclass, field
from typing import Any, Union

from rich.text import Text


@dataclass
class PromptOption:
    """An entry of a multi-select prompt.

    `value` is what the caller gets back; `label` is what the user sees and
    `selected` is whether the entry starts out checked.
    """

    value: Any
    label: Union[str, Text] = ""
    selected: bool = True
    data: dict = field(default_factory=dict)  # Extra fields for label rendering

    def __post_init__(self):
        if not self.label:
            self.label = str(self.value)

    @property
    def plain_label(self) -> str:
        """Label without styling."""
        return self.label.plain if isinstance(self.label, Text) else self.label
