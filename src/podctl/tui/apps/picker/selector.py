"""Selector backed by the inline Textual picker."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from podctl.core.config import DEFAULT_MAX_HEIGHT
from podctl.services.wizard import SelectionCancelledError, SelectionError
from podctl.tui.apps.picker.app import PickerApp

logger = structlog.get_logger()


class TextualSelector:
    """Runs a ``PickerApp`` for each prompt.

    Args:
        max_height: Maximum number of visible rows per prompt.
    """

    def __init__(self, max_height: int = DEFAULT_MAX_HEIGHT) -> None:
        self._max_height = max_height

    def create_app(self, title: str, options: Sequence[str]) -> PickerApp:
        """Build the picker for one prompt."""
        return PickerApp(title, options, max_height=self._max_height)

    def select(self, title: str, options: Sequence[str]) -> str:
        """Show the picker inline and return the chosen option.

        Raises:
            SelectionCancelledError: If the user closes the picker without choosing.
            SelectionError: If the picker could not run or crashed.
        """
        try:
            app = self.create_app(title, options)
        except ValueError as e:
            raise SelectionError(str(e)) from e

        result = app.run(inline=True)

        if app.return_code:
            logger.warning("picker_failed", title=title, return_code=app.return_code)
            raise SelectionError(f"'{title}' prompt exited with code {app.return_code}")
        if result is None:
            raise SelectionCancelledError(title)
        return result
