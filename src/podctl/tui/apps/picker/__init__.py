"""Inline single-choice picker.

Usage:
    from podctl.tui.apps.picker import TextualSelector

    namespace = TextualSelector(max_height=15).select("Namespace", ["default", "kube-system"])
"""

from podctl.tui.apps.picker.app import PickerApp, visible_rows
from podctl.tui.apps.picker.selector import TextualSelector

__all__ = ["PickerApp", "TextualSelector", "visible_rows"]
