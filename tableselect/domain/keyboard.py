"""Module: keyboard.py

Author: Michael Economou
Date: 2026-02-10

Domain types for keyboard and pointer modifier handling.

Pure domain layer - no UI dependencies.
"""

from __future__ import annotations

from enum import Enum, Flag, auto


class KeyboardModifier(Flag):
    """Keyboard modifier keys held during a click, drag or key press.

    Uses Flag enum for bitwise operations (multiple modifiers can be active).

    Example:
        >>> mods = KeyboardModifier.CTRL | KeyboardModifier.SHIFT
        >>> bool(mods & KeyboardModifier.CTRL)
        True
        >>> bool(mods & KeyboardModifier.ALT)
        False

    """

    NONE = 0
    CTRL = auto()
    SHIFT = auto()
    ALT = auto()
    META = auto()  # Windows key / Command key
    KEYPAD = auto()  # arrow keys report themselves as keypad keys on some platforms
    FUNCTION = auto()  # ... and as function keys on macOS


# Flags that carry no selection meaning, stripped before a key press is
# replayed as a click
NOISE_MODIFIERS = KeyboardModifier.KEYPAD | KeyboardModifier.FUNCTION

# CTRL on Windows/Linux, Command (META) on macOS
TOGGLE_MODIFIERS = KeyboardModifier.CTRL | KeyboardModifier.META


def strip_noise(modifiers: KeyboardModifier) -> KeyboardModifier:
    """Remove keypad/function flags from a modifier set."""
    return modifiers & ~NOISE_MODIFIERS


def is_range_modifier(modifiers: KeyboardModifier) -> bool:
    return bool(modifiers & KeyboardModifier.SHIFT)


def is_toggle_modifier(modifiers: KeyboardModifier) -> bool:
    return bool(modifiers & TOGGLE_MODIFIERS)


class NavigationKey(Enum):
    """Keys the table reacts to. Everything else maps to NONE."""

    NONE = "none"
    UP_ARROW = "up_arrow"
    DOWN_ARROW = "down_arrow"
    LEFT_ARROW = "left_arrow"
    RIGHT_ARROW = "right_arrow"
