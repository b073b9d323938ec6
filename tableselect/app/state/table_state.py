"""Module: table_state.py

Author: Michael Economou
Date: 2026-02-13

Table State - selection and sort state of one table instance.

The rendering layer forwards discrete input events here (clicks, drag
samples, key presses, header taps) with rows already resolved, and repaints
from the signals this object emits.

Features:
- One SelectionModel and one ColumnCatalog per table, no shared state
- Drag samples hit-tested against the latest reported row bounds
- Row reorders and sort truth changes never land in the middle of a drag
- Selection pruned when rows disappear
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from tableselect.core.click_selection import ClickSelectionResolver
from tableselect.core.column_catalog import ColumnCatalog
from tableselect.core.drag_selection import DragSelectionResolver
from tableselect.core.keyboard_navigation import KeyboardNavigationResolver
from tableselect.core.selection_model import SelectionModel
from tableselect.domain.column import Column
from tableselect.domain.geometry import Point, RowBounds, row_at
from tableselect.domain.keyboard import KeyboardModifier, NavigationKey
from tableselect.domain.selection import RowID, Selection, SelectionType
from tableselect.domain.sort_descriptor import SortDescriptor, sort_rows
from tableselect.utils.events import Observable, Signal
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass
class TableConfig:
    """Construction-time configuration of a table."""

    selection_type: SelectionType = SelectionType.MULTIPLE
    columns: list[Column] = field(default_factory=list)
    sort_descriptors: list[SortDescriptor] = field(default_factory=list)
    initial_selection: Any = None


class TableState(Observable):
    """Selection and sort state for one table.

    Signals:
        selection_changed(Selection): rows to highlight changed
        sort_descriptors_changed(list): the user picked a new sort (header tap)
        columns_changed(list): header needs a repaint
    """

    selection_changed = Signal(object)
    sort_descriptors_changed = Signal(list)
    columns_changed = Signal(list)

    def __init__(self, config: TableConfig | None = None, rows: Iterable[Any] = ()) -> None:
        """Initialize table state.

        Args:
            config: Selection type, columns, initial sort and selection
            rows: Row values in rendered order. Each row is identified by its
                ``id`` attribute when it has one, otherwise by the value itself.

        """
        super().__init__()
        self._config = config or TableConfig()

        self._rows: list[Any] = list(rows)
        self._row_ids: list[RowID] = [self._row_id(row) for row in self._rows]
        self._row_bounds: list[RowBounds] = []

        self._selection = SelectionModel(
            self._config.selection_type, self._config.initial_selection
        )
        self._catalog = ColumnCatalog(self._config.columns, self._config.sort_descriptors)

        self._clicks = ClickSelectionResolver(self._selection)
        self._drag = DragSelectionResolver(self._selection)
        self._keys = KeyboardNavigationResolver(self._selection, self._clicks)

        self._selection.selection_changed.connect(self.selection_changed.emit)
        self._catalog.sort_descriptors_changed.connect(self.sort_descriptors_changed.emit)
        self._catalog.columns_changed.connect(self.columns_changed.emit)

        logger.debug(
            "[TableState] Created %s table with %d row(s) and %d column(s)",
            self._config.selection_type.value,
            len(self._rows),
            len(self._catalog.columns),
            extra={"dev_only": True},
        )

    @staticmethod
    def _row_id(row: Any) -> RowID:
        return getattr(row, "id", row)

    # =====================================
    # State access
    # =====================================

    @property
    def selection_type(self) -> SelectionType:
        return self._selection.selection_type

    @property
    def selection(self) -> Selection:
        return self._selection.selection

    @property
    def selection_model(self) -> SelectionModel:
        return self._selection

    @property
    def rows(self) -> list[Any]:
        return list(self._rows)

    @property
    def row_ids(self) -> list[RowID]:
        return list(self._row_ids)

    @property
    def columns(self) -> list[Column]:
        return self._catalog.columns

    @property
    def sort_descriptors(self) -> list[SortDescriptor]:
        return self._catalog.sort_descriptors

    def is_selected(self, row_id: RowID) -> bool:
        return self._selection.is_selected(row_id)

    def is_active_sort_column(self, column: Column) -> bool:
        return self._catalog.is_active(column)

    def is_last_column(self, column: Column) -> bool:
        return self._catalog.is_last(column)

    def selected_rows(self) -> list[Any]:
        """Selected row values in rendered order."""
        return [row for row, row_id in zip(self._rows, self._row_ids) if self.is_selected(row_id)]

    # =====================================
    # Pointer and keyboard input
    # =====================================

    def pointer_down(self, row_id: RowID, modifiers: KeyboardModifier = KeyboardModifier.NONE) -> None:
        """A click on row_id (the rendering layer resolved the row)."""
        self._clicks.click(row_id, modifiers, self._row_ids)

    def drag_began(self, modifiers: KeyboardModifier = KeyboardModifier.NONE) -> None:
        self._drag.begin(modifiers)

    def drag_moved(self, row_id: RowID | None, location: Point, predicted_end: Point) -> bool:
        """One drag sample with the row already resolved. Returns False if ignored."""
        return self._drag.sample(row_id, location, predicted_end)

    def drag_moved_to(self, location: Point, predicted_end: Point) -> bool:
        """One drag sample, hit-tested against the last reported row bounds."""
        return self._drag.sample(row_at(self._row_bounds, location), location, predicted_end)

    def drag_ended(self) -> None:
        self._drag.end()

    def key_down(self, key: NavigationKey, modifiers: KeyboardModifier = KeyboardModifier.NONE) -> bool:
        """Handle a key press. Returns False when the key should propagate."""
        return self._keys.key_down(key, modifiers, self._row_ids)

    def header_tapped(self, column_index: int) -> list[SortDescriptor] | None:
        """Toggle the sort of a column. Returns the new sort truth, None for dividers."""
        self._end_drag_before("header tap")
        return self._catalog.tap(column_index)

    # =====================================
    # Updates from the caller
    # =====================================

    def update_row_bounds(self, bounds: Iterable[RowBounds]) -> None:
        """Latest on-screen bounds of the visible rows, used by drag_moved_to()."""
        self._row_bounds = list(bounds)

    def set_rows(self, rows: Iterable[Any]) -> None:
        """Replace rows (new data or a new order). Selection of vanished rows is dropped."""
        self._end_drag_before("row update")
        self._rows = list(rows)
        self._row_ids = [self._row_id(row) for row in self._rows]
        self._selection.retain(self._row_ids)

    def set_columns(self, columns: Sequence[Column]) -> bool:
        self._end_drag_before("column update")
        return self._catalog.set_columns(columns)

    def set_sort_descriptors(self, sort_descriptors: Sequence[SortDescriptor]) -> bool:
        self._end_drag_before("sort update")
        return self._catalog.set_sort_descriptors(sort_descriptors)

    def sorted_rows(self) -> list[Any]:
        """Rows ordered by the current sort truth (ids are preserved)."""
        return sort_rows(self._rows, self._catalog.sort_descriptors)

    def apply_sort(self) -> list[Any]:
        """Reorder the table's rows by the current sort truth and return them."""
        self.set_rows(self.sorted_rows())
        return self.rows

    def _end_drag_before(self, reason: str) -> None:
        # Row indexes used by the drag would be stale after a reorder
        if self._drag.active or self._selection.drag_in_progress:
            logger.warning("[TableState] %s during a drag, ending the drag first", reason)
            self._drag.end()
