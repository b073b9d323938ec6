"""Module: keyboard_navigation.py

Author: Michael Economou
Date: 2026-02-12

Arrow key navigation.

Up/Down arrows move the selection to the adjacent row by replaying a click
on it, so Shift/Ctrl held with the arrow behave exactly like the same
modifiers on a click. In a multiple selection the row moved from depends on
the direction of the last range extension: the top of the range after
extending up, the bottom after extending down.
"""

from __future__ import annotations

from collections.abc import Sequence

from tableselect.core.click_selection import ClickSelectionResolver
from tableselect.core.selection_model import SelectionModel
from tableselect.domain.keyboard import KeyboardModifier, NavigationKey, strip_noise
from tableselect.domain.selection import DragDirection, RowID
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class KeyboardNavigationResolver:
    """Translates arrow key presses into clicks on the adjacent row."""

    def __init__(self, model: SelectionModel, clicks: ClickSelectionResolver) -> None:
        self._model = model
        self._clicks = clicks

    def current_row_index(self, rows: Sequence[RowID]) -> int:
        """Row index navigation moves from (0 when nothing is selected)."""
        selected = self._model.selected_indexes(rows)
        if not selected:
            return 0

        if self._model.is_multiple and self._model.drag_direction is DragDirection.DOWN:
            return selected[-1]
        return selected[0]

    def key_down(
        self,
        key: NavigationKey,
        modifiers: KeyboardModifier,
        rows: Sequence[RowID],
    ) -> bool:
        """Handle a key press. Returns False for keys left to the platform layer."""
        if key is NavigationKey.UP_ARROW:
            step = -1
        elif key is NavigationKey.DOWN_ARROW:
            step = 1
        else:
            return False

        target = self.current_row_index(rows) + step
        if not 0 <= target < len(rows):
            logger.debug(
                "[KeyboardNavigation] %s at the edge of the list, ignored",
                key.value,
                extra={"dev_only": True},
            )
            return True

        self._clicks.click(rows[target], strip_noise(modifiers), rows)
        return True
