"""tableselect - selection and sort state engine for multi-column tables.

Author: Michael Economou
Date: 2026-02-10

Keeps single or multiple row selection consistent with clicks, Shift/Ctrl
clicks, drags and arrow keys the way a desktop file list does, and keeps
column headers in sync with an externally owned sort order.

Usage:
    from tableselect import TableConfig, TableState

    table = TableState(TableConfig(columns=columns, sort_descriptors=sort), rows)
    table.selection_changed.connect(view.repaint_selection)
"""

from tableselect.app.state.table_state import TableConfig, TableState
from tableselect.config import APP_VERSION as __version__
from tableselect.domain import (
    Column,
    ColumnAlignment,
    ColumnListBuilder,
    DragDirection,
    KeyboardModifier,
    MultipleSelection,
    NavigationKey,
    Point,
    Rect,
    RowBounds,
    SelectionType,
    SingleSelection,
    SortDescriptor,
    sort_rows,
)

__all__ = [
    "Column",
    "ColumnAlignment",
    "ColumnListBuilder",
    "DragDirection",
    "KeyboardModifier",
    "MultipleSelection",
    "NavigationKey",
    "Point",
    "Rect",
    "RowBounds",
    "SelectionType",
    "SingleSelection",
    "SortDescriptor",
    "TableConfig",
    "TableState",
    "__version__",
    "sort_rows",
]
