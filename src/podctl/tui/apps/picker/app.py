"""Inline single-choice list.

Renders a title and an option list below the shell prompt (Textual inline
mode) and exits with the chosen string, or ``None`` when the user backs out.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from podctl.core.config import DEFAULT_MAX_HEIGHT
from podctl.tui.theme import Colors

HINT = "↑/↓ move · enter select · esc cancel"


def visible_rows(option_count: int, max_height: int = DEFAULT_MAX_HEIGHT) -> int:
    """Rows shown at once: the whole list, capped at ``max_height``."""
    return max(1, min(option_count, max_height))


class PickerApp(App[str | None]):
    """Pick one value from a list.

    Args:
        title: Prompt title shown above the list.
        options: Values to choose from, in display order. Must not be empty.
        max_height: Maximum number of visible rows.
    """

    DEFAULT_CSS = f"""
    PickerApp #picker-title {{
        text-style: bold;
        color: {Colors.ACCENT};
    }}

    PickerApp #picker-options {{
        border: round {Colors.PRIMARY};
        width: auto;
        min-width: 30;
    }}

    PickerApp #picker-hint {{
        color: {Colors.TEXT_MUTED};
    }}
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
        Binding("ctrl+q", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(
        self,
        title: str,
        options: Sequence[str],
        *,
        max_height: int = DEFAULT_MAX_HEIGHT,
    ) -> None:
        if not options:
            raise ValueError("PickerApp needs at least one option")
        super().__init__()
        self.prompt_title = title
        self.options = list(options)
        self.rows = visible_rows(len(self.options), max_height)

    def compose(self) -> ComposeResult:
        """Compose the picker layout."""
        yield Label(Text(self.prompt_title), id="picker-title")
        yield OptionList(
            *[Option(Text(opt)) for opt in self.options],
            id="picker-options",
        )
        yield Label(HINT, id="picker-hint")

    def on_mount(self) -> None:
        """Size the list and focus the first option."""
        option_list = self.query_one("#picker-options", OptionList)
        # Two extra rows for the border
        option_list.styles.height = self.rows + 2
        option_list.highlighted = 0
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Exit with the selected value."""
        self.exit(self.options[event.option_index])

    def action_cancel(self) -> None:
        """Exit without a selection."""
        self.exit(None)
