"""Module: __init__.py

Author: Michael Economou
Date: 2026-02-10

Event system.

Pure Python event/signal implementation for decoupling the rendering layer
from selection and sort state changes.
"""

from tableselect.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
