"""Module: click_selection.py

Author: Michael Economou
Date: 2026-02-12

Modifier-aware click handling.

Implements desktop file list click semantics on top of SelectionModel:
- No modifier: clear and select (fresh gesture, drag state reset)
- Shift: range selection towards the clicked row
- Ctrl/Cmd: toggle selection of the clicked row

Single-selection tables ignore modifiers: every click selects the row.
"""

from __future__ import annotations

from collections.abc import Sequence

from tableselect.core.selection_model import SelectionModel
from tableselect.domain.keyboard import (
    KeyboardModifier,
    is_range_modifier,
    is_toggle_modifier,
)
from tableselect.domain.selection import RowID
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ClickSelectionResolver:
    """Translates resolved clicks into SelectionModel mutations."""

    def __init__(self, model: SelectionModel) -> None:
        self._model = model

    def click(
        self,
        row_id: RowID,
        modifiers: KeyboardModifier,
        rows: Sequence[RowID],
    ) -> None:
        """Handle a click on row_id.

        Args:
            row_id: Row under the pointer
            modifiers: Modifier keys held during the click
            rows: Row ids in rendered order (used for shift ranges)

        """
        model = self._model

        if not model.is_multiple:
            model.replace_with(row_id)
            return

        if is_range_modifier(modifiers):
            model.extend_range(row_id, rows)
        elif is_toggle_modifier(modifiers):
            model.toggle(row_id)
        else:
            model.clear_drag_state()
            model.replace_with(row_id)

        logger.debug(
            "[ClickSelection] click %r (modifiers=%s)",
            row_id,
            modifiers,
            extra={"dev_only": True},
        )
