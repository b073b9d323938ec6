"""Module: selection_model.py

Author: Michael Economou
Date: 2026-02-12

SelectionModel - selection state of one table instance.

Holds either a single optional row id (SINGLE tables) or a set of row ids
(MULTIPLE tables), the direction of the last range extension, and the
per-row direction history of the drag gesture in progress.

Features:
- select / unselect / toggle / replace_with primitives
- Shift-click range extension over the rendered row order, reversible
  around a single anchor like a desktop file list
- selection_changed emitted once per logical change (see batch_update)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from types import MappingProxyType

from tableselect.core.exceptions import SelectionTypeError
from tableselect.domain.dragged_row import DraggedRow
from tableselect.domain.selection import (
    DragDirection,
    MultipleSelection,
    RowID,
    Selection,
    SelectionType,
    SingleSelection,
)
from tableselect.utils.events import Observable, Signal
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SelectionModel(Observable):
    """Single- or multiple-row selection with drag direction memory.

    The selection type is fixed at construction. Operations that only make
    sense for multiple selection (toggle, extend_range) raise
    SelectionTypeError on a SINGLE model.
    """

    selection_changed = Signal(object)  # Selection

    def __init__(
        self,
        selection_type: SelectionType = SelectionType.MULTIPLE,
        initial: Selection | RowID | Iterable[RowID] | None = None,
    ) -> None:
        """Initialize the model, optionally pre-seeded.

        Args:
            selection_type: SINGLE or MULTIPLE, fixed for the model's lifetime
            initial: SingleSelection / row id for SINGLE models,
                MultipleSelection / set, frozenset, list or tuple of ids for
                MULTIPLE models

        """
        super().__init__()
        self._selection_type = selection_type
        self._current: RowID | None = None
        self._selected: set[RowID] = set()
        self._drag_direction: DragDirection | None = None
        self._dragged_rows: dict[RowID, DraggedRow] = {}

        self._batch_depth = 0
        self._batch_snapshot: Selection = None

        self._seed(initial)

    def _seed(self, initial) -> None:
        if initial is None:
            return

        if self._selection_type is SelectionType.SINGLE:
            if isinstance(initial, MultipleSelection | set | frozenset | list | tuple):
                raise SelectionTypeError(
                    f"single-selection table cannot start with {initial!r}"
                )
            self._current = initial.row_id if isinstance(initial, SingleSelection) else initial
            return

        if isinstance(initial, MultipleSelection):
            self._selected = set(initial.row_ids)
        elif isinstance(initial, set | frozenset | list | tuple):
            self._selected = set(initial)
        else:
            raise SelectionTypeError(
                f"multiple-selection table needs a collection of row ids, got {initial!r}"
            )

    # =====================================
    # State access
    # =====================================

    @property
    def selection_type(self) -> SelectionType:
        return self._selection_type

    @property
    def is_multiple(self) -> bool:
        return self._selection_type is SelectionType.MULTIPLE

    @property
    def selection(self) -> Selection:
        """Current selection as an immutable value."""
        if self.is_multiple:
            return MultipleSelection(frozenset(self._selected)) if self._selected else None
        return SingleSelection(self._current) if self._current is not None else None

    @property
    def selected_ids(self) -> frozenset:
        if self.is_multiple:
            return frozenset(self._selected)
        return frozenset() if self._current is None else frozenset((self._current,))

    @property
    def drag_direction(self) -> DragDirection | None:
        return self._drag_direction

    @property
    def dragged_rows(self) -> Mapping[RowID, DraggedRow]:
        """Read-only view of the drag accumulator."""
        return MappingProxyType(self._dragged_rows)

    @property
    def drag_in_progress(self) -> bool:
        return bool(self._dragged_rows)

    def is_selected(self, row_id: RowID) -> bool:
        if self.is_multiple:
            return row_id in self._selected
        return self._current is not None and row_id == self._current

    def selected_indexes(self, rows: Sequence[RowID]) -> list[int]:
        """Positions of the selected ids in rows, ascending."""
        return [index for index, row_id in enumerate(rows) if self.is_selected(row_id)]

    # =====================================
    # Change notification
    # =====================================

    @contextmanager
    def batch_update(self) -> Iterator[None]:
        """Coalesce every mutation inside the block into one selection_changed."""
        if self._batch_depth == 0:
            self._batch_snapshot = self.selection
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                current = self.selection
                if current != self._batch_snapshot:
                    logger.debug(
                        "[SelectionModel] Selection changed: %d row(s) selected",
                        len(current) if current is not None else 0,
                        extra={"dev_only": True},
                    )
                    self.selection_changed.emit(current)
                self._batch_snapshot = None

    # =====================================
    # Primitives
    # =====================================

    def select(self, row_id: RowID) -> None:
        """Single: replace current. Multiple: insert if absent."""
        with self.batch_update():
            if self.is_multiple:
                self._selected.add(row_id)
            else:
                self._current = row_id

    def unselect(self, row_id: RowID) -> None:
        """Single: clear (there is only one possible value). Multiple: remove if present."""
        with self.batch_update():
            if self.is_multiple:
                self._selected.discard(row_id)
            else:
                self._current = None

    def replace_with(self, row_id: RowID) -> None:
        """Plain click: the clicked row becomes the whole selection."""
        with self.batch_update():
            if self.is_multiple:
                self._selected.clear()
            self.select(row_id)

    def toggle(self, row_id: RowID) -> None:
        """Command/ctrl-click."""
        self._require_multiple("toggle")
        with self.batch_update():
            if self.is_selected(row_id):
                self.unselect(row_id)
            else:
                self.select(row_id)

    def clear(self) -> None:
        with self.batch_update():
            self._current = None
            self._selected.clear()

    def retain(self, row_ids: Iterable[RowID]) -> None:
        """Drop selected ids that are not in row_ids (rows removed from the table)."""
        keep = set(row_ids)
        with self.batch_update():
            if self.is_multiple:
                self._selected &= keep
            elif self._current is not None and self._current not in keep:
                self._current = None

    # =====================================
    # Range extension
    # =====================================

    def extend_range(self, to_id: RowID, rows: Sequence[RowID]) -> None:
        """Shift-click: grow or shrink the contiguous range towards to_id.

        The range is computed over the rendered row order. Reversing past the
        anchor collapses the previously extended tail before growing the other
        way. The resulting range replaces the selection entirely.

        Args:
            to_id: Clicked row
            rows: Row ids in the order they are currently rendered

        """
        self._require_multiple("extend_range")

        rows = list(rows)
        try:
            click_index = rows.index(to_id)
        except ValueError:
            logger.debug(
                "[SelectionModel] extend_range: %r is not in the current rows",
                to_id,
                extra={"dev_only": True},
            )
            return

        selected_indexes = self.selected_indexes(rows)
        current_lower = min(selected_indexes, default=0)
        current_upper = max(selected_indexes, default=0)
        prior = self._drag_direction

        if prior is DragDirection.UP:
            new_direction = DragDirection.UP if click_index < current_upper else DragDirection.DOWN
        elif prior is DragDirection.DOWN:
            new_direction = DragDirection.DOWN if click_index > current_lower else DragDirection.UP
        else:
            new_direction = DragDirection.DOWN if click_index > current_lower else DragDirection.UP

        if new_direction is DragDirection.UP:
            if prior is DragDirection.DOWN:
                current_upper = current_lower
            current_lower = click_index
        else:
            if prior is DragDirection.UP:
                current_lower = current_upper
            current_upper = click_index

        if not selected_indexes:
            # Nothing to extend from: the clicked row becomes the anchor
            current_lower = current_upper = click_index
        elif current_lower > current_upper:
            logger.warning(
                "[SelectionModel] Inverted range %d..%d, collapsing to row %d",
                current_lower,
                current_upper,
                click_index,
            )
            current_lower = current_upper = click_index

        with self.batch_update():
            self._selected = set(rows[current_lower : current_upper + 1])
        self._drag_direction = new_direction

        logger.debug(
            "[SelectionModel] Range %d..%d (%s)",
            current_lower,
            current_upper,
            new_direction.value,
            extra={"dev_only": True},
        )

    # =====================================
    # Drag state
    # =====================================

    def dragged_row(self, row_id: RowID, seed: DragDirection | None = None) -> DraggedRow:
        """History of row_id in the current drag, created (with optional seed) on first use."""
        dragged = self._dragged_rows.get(row_id)
        if dragged is None:
            dragged = DraggedRow([seed] if seed is not None else [])
            self._dragged_rows[row_id] = dragged
        return dragged

    def clear_drag_state(self) -> None:
        """Forget the drag accumulator and the range direction."""
        self._dragged_rows.clear()
        self._drag_direction = None

    def _require_multiple(self, operation: str) -> None:
        if not self.is_multiple:
            raise SelectionTypeError(f"{operation} requires a multiple-selection table")
