"""Domain layer: pure value types for selection, sorting, columns and input.

No UI dependencies.
"""

from tableselect.domain.column import Column, ColumnAlignment, ColumnListBuilder
from tableselect.domain.dragged_row import DraggedRow
from tableselect.domain.geometry import Point, Rect, RowBounds, row_at
from tableselect.domain.keyboard import KeyboardModifier, NavigationKey
from tableselect.domain.selection import (
    DragDirection,
    MultipleSelection,
    RowID,
    Selection,
    SelectionType,
    SingleSelection,
)
from tableselect.domain.sort_descriptor import SortDescriptor, sort_rows

__all__ = [
    "Column",
    "ColumnAlignment",
    "ColumnListBuilder",
    "DragDirection",
    "DraggedRow",
    "KeyboardModifier",
    "MultipleSelection",
    "NavigationKey",
    "Point",
    "Rect",
    "RowBounds",
    "RowID",
    "Selection",
    "SelectionType",
    "SingleSelection",
    "SortDescriptor",
    "row_at",
    "sort_rows",
]
