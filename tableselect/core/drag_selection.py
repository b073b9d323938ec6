"""Module: drag_selection.py

Author: Michael Economou
Date: 2026-02-12

Drag (rubber band) selection over a scrolling row list.

Replicates the list behavior of a desktop file manager:
- dragging down selects rows as the pointer passes over them
- reversing the drag unselects the rows just painted until the pointer
  reaches rows that were not painted, and selecting resumes from there
- crossing the same row back and forth toggles it to follow the pointer

Each sample carries the pointer location and the location the platform
predicts the drag will end at; their vertical relation gives the direction
of the sample. Hit-testing the location to a row is done by the caller.
"""

from __future__ import annotations

from tableselect.core.selection_model import SelectionModel
from tableselect.domain.geometry import Point
from tableselect.domain.keyboard import KeyboardModifier, is_toggle_modifier
from tableselect.domain.selection import DragDirection, RowID
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def sample_direction(location: Point, predicted_end: Point) -> DragDirection:
    """Direction of one drag sample. Ties count as UP."""
    if location.y > predicted_end.y:
        return DragDirection.UP
    if location.y < predicted_end.y:
        return DragDirection.DOWN
    return DragDirection.UP


class DragSelectionResolver:
    """Applies a stream of drag samples to a SelectionModel.

    Samples of one gesture must be fed in arrival order: the per-row
    direction history collapses consecutive duplicates.
    """

    def __init__(self, model: SelectionModel) -> None:
        self._model = model
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def begin(self, modifiers: KeyboardModifier = KeyboardModifier.NONE) -> None:
        """Start a gesture.

        A plain drag on a multiple-selection table starts from an empty
        selection. With Ctrl/Cmd held the existing selection is kept and only
        the rows the drag passes over are repainted.
        """
        self._active = True
        if not self._model.is_multiple:
            return

        if is_toggle_modifier(modifiers):
            logger.debug(
                "[DragSelection] Gesture started, keeping %d selected row(s)",
                len(self._model.selected_ids),
                extra={"dev_only": True},
            )
            return

        self._model.clear_drag_state()
        self._model.clear()

    def sample(self, row_id: RowID | None, location: Point, predicted_end: Point) -> bool:
        """Apply one drag sample. Returns False if it was ignored.

        Args:
            row_id: Row under the pointer, or None when the pointer is between rows
            location: Current pointer location
            predicted_end: Predicted end location of the drag

        """
        if row_id is None:
            # Happens over the gaps between rows, nothing to do
            logger.debug(
                "[DragSelection] No row at (%s, %s)",
                location.x,
                location.y,
                extra={"dev_only": True},
            )
            return False

        if not self._active:
            self.begin()

        model = self._model
        if not model.is_multiple:
            model.select(row_id)
            return True

        direction = sample_direction(location, predicted_end)

        # The first row of the gesture is seeded with the first direction
        seed = None if model.drag_in_progress else direction
        model.dragged_row(row_id, seed).append_direction(direction)

        with model.batch_update():
            for dragged_id, dragged in model.dragged_rows.items():
                if dragged.is_selected:
                    model.select(dragged_id)
                else:
                    model.unselect(dragged_id)

        return True

    def end(self) -> None:
        """Finish the gesture. The selection is already committed to the model."""
        if self._active:
            logger.debug(
                "[DragSelection] Gesture ended over %d row(s)",
                len(self._model.dragged_rows),
                extra={"dev_only": True},
            )
        self._active = False
        self._model.clear_drag_state()
