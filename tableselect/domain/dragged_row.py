"""Module: dragged_row.py

Author: Michael Economou
Date: 2026-02-11

Per-row direction history recorded during one drag gesture.

As the pointer moves up and down over a row, the direction of each pass is
recorded, collapsing consecutive duplicates. A row ends up selected when the
number of UP passes differs from the number of DOWN passes: crossing a row
and then crossing it back cancels out, exactly like dragging in a Finder list.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tableselect.domain.selection import DragDirection


@dataclass
class DraggedRow:
    directions: list[DragDirection] = field(default_factory=list)

    def append_direction(self, direction: DragDirection) -> None:
        """Record direction unless it repeats the last recorded one."""
        if not self.directions or self.directions[-1] != direction:
            self.directions.append(direction)

    @property
    def ups(self) -> int:
        return sum(1 for d in self.directions if d is DragDirection.UP)

    @property
    def downs(self) -> int:
        return sum(1 for d in self.directions if d is DragDirection.DOWN)

    @property
    def is_selected(self) -> bool:
        return self.ups != self.downs
