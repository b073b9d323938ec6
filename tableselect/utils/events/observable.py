"""Module: observable.py

Author: Michael Economou
Date: 2026-02-10

Observable - Pure Python observer pattern used by the table state objects.

Provides Qt signal-like functionality without a Qt dependency, so the
selection and sort state can be driven from any toolkit (or from tests):
- Signal descriptor for declaring events on a class
- Observable base class with signal blocking
- connect/disconnect/emit interface
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class SelectionModel(Observable):
            selection_changed = Signal(object)

        model.selection_changed.connect(callback)
        model.selection_changed.emit(selection)
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types (documentation only)."""
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types, obj)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Bound signal for a specific observable object."""

    def __init__(self, name: str, arg_types: tuple[type, ...], owner: Observable):
        self.name = name
        self.arg_types = arg_types
        self._owner = owner
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect callback to signal (connecting twice is a no-op)."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)
            logger.debug(
                "Signal connected: %s -> %s",
                self.name,
                getattr(callback, "__name__", repr(callback)),
                extra={"dev_only": True},
            )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal. If None, removes all callbacks."""
        if callback is None:
            self._callbacks.clear()
        elif callback in self._callbacks:
            self._callbacks.remove(callback)

    def receivers(self) -> int:
        """Number of connected callbacks."""
        return len(self._callbacks)

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        A failing observer is logged and does not prevent delivery to the others.
        """
        if self._owner.signals_blocked():
            return

        for callback in list(self._callbacks):
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )


class Observable:
    """Base class for objects with observable signals.

        class Counter(Observable):
            value_changed = Signal(int)

            def increment(self):
                self._value += 1
                self.value_changed.emit(self._value)
    """

    def __init__(self) -> None:
        super().__init__()
        self._signals_blocked = False

    def block_signals(self, blocked: bool) -> bool:
        """Block or unblock emission of all signals. Returns the previous state."""
        previous = self._signals_blocked
        self._signals_blocked = blocked
        return previous

    def signals_blocked(self) -> bool:
        return getattr(self, "_signals_blocked", False)
