"""Module: qt_input.py

Author: Michael Economou
Date: 2026-02-14

Translation of PyQt5 input values into tableselect domain types.

A QTableView/QListView subclass forwards its mouse and key events to a
TableState through these helpers. PyQt5 is imported lazily so that the core
packages stay importable (and testable) without Qt.

Usage:
    def keyPressEvent(self, event):
        key = navigation_key_from_qt(event.key())
        if not self.table_state.key_down(key, modifiers_from_qt(event.modifiers())):
            super().keyPressEvent(event)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tableselect.domain.geometry import Point
from tableselect.domain.keyboard import KeyboardModifier, NavigationKey

if TYPE_CHECKING:
    from PyQt5.QtCore import Qt


def modifiers_from_qt(modifiers: Qt.KeyboardModifiers) -> KeyboardModifier:
    """Map Qt keyboard modifiers to KeyboardModifier.

    On macOS Qt already reports Command as ControlModifier, so Cmd-click and
    Ctrl-click both end up as CTRL here.
    """
    from PyQt5.QtCore import Qt

    mapping = (
        (Qt.ControlModifier, KeyboardModifier.CTRL),
        (Qt.ShiftModifier, KeyboardModifier.SHIFT),
        (Qt.AltModifier, KeyboardModifier.ALT),
        (Qt.MetaModifier, KeyboardModifier.META),
        (Qt.KeypadModifier, KeyboardModifier.KEYPAD),
    )

    result = KeyboardModifier.NONE
    for qt_flag, flag in mapping:
        if modifiers & qt_flag:
            result |= flag
    return result


def navigation_key_from_qt(key: int) -> NavigationKey:
    """Map a Qt.Key value to NavigationKey (NONE for keys the table ignores)."""
    from PyQt5.QtCore import Qt

    keys = {
        Qt.Key_Up: NavigationKey.UP_ARROW,
        Qt.Key_Down: NavigationKey.DOWN_ARROW,
        Qt.Key_Left: NavigationKey.LEFT_ARROW,
        Qt.Key_Right: NavigationKey.RIGHT_ARROW,
    }
    return keys.get(key, NavigationKey.NONE)


def point_from_qt(pos: Any) -> Point:
    """Convert a QPoint/QPointF to Point."""
    return Point(float(pos.x()), float(pos.y()))
