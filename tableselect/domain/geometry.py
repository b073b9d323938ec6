"""Module: geometry.py

Author: Michael Economou
Date: 2026-02-11

Minimal geometry for drag hit-testing.

The rendering layer reports the bounds of every visible row in the table's
own coordinate space; row_at() maps a pointer location back to a row id.
Coordinates grow downwards (y increases towards the bottom of the list).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tableselect.domain.selection import RowID


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        # Half-open on the far edges so adjacent rows never both match
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


@dataclass(frozen=True)
class RowBounds:
    row_id: RowID
    rect: Rect


def row_at(bounds: Iterable[RowBounds], point: Point) -> RowID | None:
    """Row id whose rect contains point, or None (e.g. the gap between rows)."""
    for entry in bounds:
        if entry.rect.contains(point):
            return entry.row_id
    return None
