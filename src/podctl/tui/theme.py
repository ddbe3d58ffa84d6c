"""Theme constants and style utilities for TUI components.

Usage:
    from podctl.tui.theme import Colors, Styles

    DEFAULT_CSS = f'''
    .title {{ color: {Colors.ACCENT}; }}
    '''

    console.print(Styles.selected("web-0"))
"""

from __future__ import annotations

from rich.markup import escape

CHECKMARK = "✔"


class Colors:
    """Color constants for TUI theming (Textual CSS variables)."""

    PRIMARY = "$primary"
    ACCENT = "$accent"
    TEXT_MUTED = "$text-muted"


class Styles:
    """Style helper functions for Rich markup.

    These functions wrap text in Rich markup tags for consistent styling.
    The text itself is escaped, so resource names are printed verbatim.
    """

    @staticmethod
    def success(text: str) -> str:
        """Style text as success (green)."""
        return f"[green]{escape(text)}[/green]"

    @staticmethod
    def primary(text: str) -> str:
        """Style text in primary color (cyan)."""
        return f"[cyan]{escape(text)}[/cyan]"

    @classmethod
    def selected(cls, value: str) -> str:
        """Confirmation line for a chosen value: green checkmark, cyan value."""
        return f"{cls.success(CHECKMARK)} {cls.primary(value)}"
