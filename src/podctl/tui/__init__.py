"""Terminal user interface components for podctl.

This package provides Textual applications for interactive prompts.

Usage:
    from podctl.tui import Colors, Styles
    from podctl.tui.apps.picker import PickerApp, TextualSelector
"""

from podctl.tui.theme import Colors, Styles

__all__ = [
    "Colors",
    "Styles",
]
