"""Module: column.py

Author: Michael Economou
Date: 2026-02-11

Column metadata for multi-column tables.

A Column describes header title, width constraints, alignment and the sort
descriptor the column sorts with. Cell content is a capability supplied by
the caller (Column.cell); the selection and sort logic never looks at it.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from tableselect.config import (
    DEFAULT_COLUMN_WIDTH,
    DIVIDER_COLUMN_WIDTH,
    SORT_ICON_ASCENDING,
    SORT_ICON_DESCENDING,
)
from tableselect.domain.sort_descriptor import Compare, SortDescriptor


class ColumnAlignment(Enum):
    """Horizontal alignment of header title and cells."""

    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


@dataclass
class Column:
    """One table column.

    Width rules (applied on construction):
    - ideal_width pins min_width and max_width to the same value
    - max_width (including math.inf for a flexible column) clears ideal_width

    The column's sort descriptor always points at the column's own index.
    """

    index: int
    title: str = ""
    min_width: float | None = None
    ideal_width: float | None = None
    max_width: float | None = None
    alignment: ColumnAlignment = ColumnAlignment.CENTER
    sort_descriptor: SortDescriptor = field(default_factory=SortDescriptor)
    text_color: str | None = None
    is_divider: bool = False
    cell: Callable[[Any], Any] | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.ideal_width is not None:
            self.min_width = self.ideal_width
            self.max_width = self.ideal_width
        if self.max_width is not None and self.max_width != self.ideal_width:
            self.ideal_width = None
        self.sort_descriptor = self.sort_descriptor.with_column_index(self.index)

    @classmethod
    def fixed(
        cls,
        index: int,
        title: str = "",
        width: float = DEFAULT_COLUMN_WIDTH,
        alignment: ColumnAlignment = ColumnAlignment.CENTER,
        **kwargs: Any,
    ) -> Column:
        """Column with the same min, ideal and max width."""
        return cls(index=index, title=title, ideal_width=width, alignment=alignment, **kwargs)

    @classmethod
    def divider(cls, index: int, width: float = DIVIDER_COLUMN_WIDTH) -> Column:
        """Spacer placeholder. Header taps on dividers are ignored."""
        return cls(index=index, ideal_width=width, is_divider=True)

    @property
    def ascending(self) -> bool:
        return self.sort_descriptor.ascending

    @property
    def icon_name(self) -> str:
        """Header chevron for the column's current direction."""
        return SORT_ICON_ASCENDING if self.sort_descriptor.ascending else SORT_ICON_DESCENDING

    @property
    def is_flexible(self) -> bool:
        return self.max_width is not None and math.isinf(self.max_width)

    def render(self, row: Any) -> Any:
        """Build the cell for row, or None when the column has no content."""
        if self.cell is None:
            return None
        return self.cell(row)

    def with_index(self, index: int) -> Column:
        """Copy of the column moved to index (its descriptor follows)."""
        return replace(
            self,
            index=index,
            sort_descriptor=self.sort_descriptor.with_column_index(index),
        )

    def with_sort_descriptor(self, descriptor: SortDescriptor) -> Column:
        return replace(self, sort_descriptor=descriptor.with_column_index(self.index))


class ColumnListBuilder:
    """Fluent builder for ordered column lists.

    Indices are assigned from the position of each column in the list.

        columns = (
            ColumnListBuilder()
            .add("Year", ideal_width=130, sort_key=lambda car: car.year)
            .add_divider()
            .add_if(show_model, "Model", max_width=math.inf)
            .build()
        )
    """

    def __init__(self) -> None:
        self._columns: list[Column] = []

    def add(
        self,
        title: str = "",
        *,
        sort_key: Callable[[Any], Any] | None = None,
        compare: Compare | None = None,
        ascending: bool = False,
        **kwargs: Any,
    ) -> ColumnListBuilder:
        index = len(self._columns)
        if sort_key is not None:
            descriptor = SortDescriptor.for_key(sort_key, ascending=ascending, column_index=index)
        else:
            descriptor = SortDescriptor(compare=compare, ascending=ascending, column_index=index)
        self._columns.append(Column(index=index, title=title, sort_descriptor=descriptor, **kwargs))
        return self

    def add_divider(self, width: float = DIVIDER_COLUMN_WIDTH) -> ColumnListBuilder:
        self._columns.append(Column.divider(len(self._columns), width=width))
        return self

    def add_if(self, condition: bool, title: str = "", **kwargs: Any) -> ColumnListBuilder:
        if condition:
            self.add(title, **kwargs)
        return self

    def build(self) -> list[Column]:
        return list(self._columns)
