"""Core selection and sort synchronization logic.

Author: Michael Economou
Date: 2026-02-12

This package holds the table state machines: the selection model, the
column catalog and the resolvers turning clicks, drags and key presses into
selection changes.
"""

from __future__ import annotations

from .click_selection import ClickSelectionResolver
from .column_catalog import ColumnCatalog, header_tap, is_last_column, reconcile
from .drag_selection import DragSelectionResolver
from .exceptions import SelectionTypeError, TableSelectError, UnknownColumnError
from .keyboard_navigation import KeyboardNavigationResolver
from .selection_model import SelectionModel

__all__ = [
    "ClickSelectionResolver",
    "ColumnCatalog",
    "DragSelectionResolver",
    "KeyboardNavigationResolver",
    "SelectionModel",
    "SelectionTypeError",
    "TableSelectError",
    "UnknownColumnError",
    "header_tap",
    "is_last_column",
    "reconcile",
]
