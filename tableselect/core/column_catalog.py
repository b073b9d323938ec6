"""Module: column_catalog.py

Author: Michael Economou
Date: 2026-02-12

Column catalog and sort truth synchronization.

The sort truth (the list of active sort descriptors) is owned by the caller.
Columns passively mirror it: reconcile() copies the truth into the column
list so the header always shows the direction the rows are actually sorted
in, and header_tap() is the single path that changes a direction.

Functions:
    reconcile(columns, truth): re-index columns and adopt matching descriptors
    is_last_column(columns, column): trailing divider check for rendering
    is_active_sort_column(truth, column): header highlight / chevron check
    header_tap(column): toggle a column's direction and build the new truth
"""

from __future__ import annotations

from collections.abc import Sequence

from tableselect.core.exceptions import UnknownColumnError
from tableselect.domain.column import Column
from tableselect.domain.sort_descriptor import SortDescriptor, find_for_column
from tableselect.utils.events import Observable, Signal
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def reconcile(columns: Sequence[Column], truth: Sequence[SortDescriptor]) -> list[Column]:
    """Return columns re-indexed by position, with descriptors taken from truth.

    A column whose index has an entry in truth adopts that entry (direction
    and comparator included); the others keep their own default descriptor.
    The input columns are left untouched.
    """
    reconciled = []
    for position, column in enumerate(columns):
        column = column.with_index(position)
        descriptor = find_for_column(truth, position)
        if descriptor is not None:
            column = column.with_sort_descriptor(descriptor)
        reconciled.append(column)
    return reconciled


def is_last_column(columns: Sequence[Column], column: Column) -> bool:
    position = next((i for i, c in enumerate(columns) if c.index == column.index), 0)
    return position == len(columns) - 1


def is_active_sort_column(truth: Sequence[SortDescriptor], column: Column) -> bool:
    return find_for_column(truth, column.index) is not None


def header_tap(column: Column) -> tuple[Column, list[SortDescriptor] | None]:
    """Toggle the tapped column's direction.

    Returns the updated column and the new singleton truth list, or the
    unchanged column and None for divider placeholders. The column toggles
    from whatever flag it holds, even when it was not the active sort column.
    """
    if column.is_divider:
        return column, None

    updated = column.with_sort_descriptor(column.sort_descriptor.toggled())
    return updated, [updated.sort_descriptor]


class ColumnCatalog(Observable):
    """Ordered columns of one table, kept in sync with the sort truth.

    Signals:
        sort_descriptors_changed(list): a header tap produced a new truth
        columns_changed(list): the reconciled column list changed
    """

    sort_descriptors_changed = Signal(list)
    columns_changed = Signal(list)

    def __init__(
        self,
        columns: Sequence[Column] = (),
        sort_descriptors: Sequence[SortDescriptor] = (),
    ) -> None:
        super().__init__()
        # Builder output as last given, only used to detect changes
        self._given: list[Column] = list(columns)
        self._truth: list[SortDescriptor] = list(sort_descriptors)
        # Working copy: every adopted or toggled descriptor stays on its column
        self._source: list[Column] = reconcile(self._given, self._truth)
        self._columns: list[Column] = list(self._source)

        logger.debug(
            "[ColumnCatalog] %d column(s), sorted by %s",
            len(self._columns),
            [d.column_index for d in self._truth],
            extra={"dev_only": True},
        )

    @property
    def columns(self) -> list[Column]:
        return list(self._columns)

    @property
    def sort_descriptors(self) -> list[SortDescriptor]:
        return list(self._truth)

    def column(self, column_index: int) -> Column:
        if not 0 <= column_index < len(self._columns):
            raise UnknownColumnError(
                f"column {column_index} out of range (0..{len(self._columns) - 1})"
            )
        return self._columns[column_index]

    def is_active(self, column: Column) -> bool:
        return is_active_sort_column(self._truth, column)

    def is_last(self, column: Column) -> bool:
        return is_last_column(self._columns, column)

    def set_columns(self, columns: Sequence[Column]) -> bool:
        """Replace the builder output. Returns True if the column list changed."""
        columns = list(columns)
        if columns == self._given:
            return False

        self._given = columns
        self._source = list(columns)
        return self._refresh()

    def set_sort_descriptors(self, sort_descriptors: Sequence[SortDescriptor]) -> bool:
        """Adopt a new sort truth from the caller. Returns True if the truth changed."""
        sort_descriptors = list(sort_descriptors)
        if sort_descriptors == self._truth:
            return False

        if len(sort_descriptors) > 1:
            logger.warning(
                "[ColumnCatalog] %d sort descriptors given, only the first one sorts rows",
                len(sort_descriptors),
            )
        self._truth = sort_descriptors
        self._refresh()
        return True

    def tap(self, column_index: int) -> list[SortDescriptor] | None:
        """Handle a header tap. Returns the new truth, or None for dividers."""
        column = self.column(column_index)
        updated, truth = header_tap(column)
        if truth is None:
            logger.debug(
                "[ColumnCatalog] Ignoring tap on divider column %d",
                column_index,
                extra={"dev_only": True},
            )
            return None

        self._source[column_index] = updated
        self._truth = truth
        self._columns[column_index] = updated

        logger.info(
            "[ColumnCatalog] Sort by column %d (%s)",
            column_index,
            "ascending" if updated.ascending else "descending",
        )
        self.sort_descriptors_changed.emit(self.sort_descriptors)
        self.columns_changed.emit(self.columns)
        return self.sort_descriptors

    def _refresh(self) -> bool:
        columns = reconcile(self._source, self._truth)
        self._source = list(columns)
        if columns == self._columns:
            return False
        self._columns = columns
        self.columns_changed.emit(self.columns)
        return True
