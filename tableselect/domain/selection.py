"""Module: selection.py

Author: Michael Economou
Date: 2026-02-11

Selection value types.

A table is either single- or multiple-selection for its whole lifetime. The
current selection handed to the rendering layer is one of:
- None (nothing selected)
- SingleSelection(row_id)
- MultipleSelection(frozenset of row ids)
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Union

# Opaque, hashable row identity, stable across re-sorts
RowID = Hashable


class SelectionType(Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


class DragDirection(Enum):
    """Vertical direction of a drag sample or of the last range extension."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class SingleSelection:
    row_id: RowID

    def __contains__(self, row_id: object) -> bool:
        return row_id == self.row_id

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True)
class MultipleSelection:
    row_ids: frozenset

    def __contains__(self, row_id: object) -> bool:
        return row_id in self.row_ids

    def __len__(self) -> int:
        return len(self.row_ids)


Selection = Union[SingleSelection, MultipleSelection, None]
