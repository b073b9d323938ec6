"""Module: sort_descriptor.py

Author: Michael Economou
Date: 2026-02-11

Sort descriptors for table columns.

A SortDescriptor pairs a column index with a comparator and an ascending
flag. Equality (and hashing) only looks at (column_index, ascending): the
comparator is a function and cannot be compared meaningfully, while callers
routinely rebuild descriptors from indices alone between renders.

The "sort truth" handed around by the table is a list of descriptors. Only
one-key sorting is supported, so every path that produces a truth list
produces a singleton.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from functools import cmp_to_key
from typing import Any

from tableselect.config import DEFAULT_SORT_COLUMN_INDEX
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# "less than" predicate over two row values
Compare = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class SortDescriptor:
    """Immutable sort descriptor for one column."""

    compare: Compare | None = field(default=None, compare=False, repr=False)
    ascending: bool = False
    column_index: int = DEFAULT_SORT_COLUMN_INDEX

    @classmethod
    def for_key(
        cls,
        key: Callable[[Any], Any],
        ascending: bool = False,
        column_index: int = DEFAULT_SORT_COLUMN_INDEX,
    ) -> SortDescriptor:
        """Build a descriptor ordering rows by key(row).

        Example:
            >>> d = SortDescriptor.for_key(lambda car: car.year, ascending=True)
        """
        return cls(
            compare=lambda lhs, rhs: key(lhs) < key(rhs),
            ascending=ascending,
            column_index=column_index,
        )

    def toggled(self) -> SortDescriptor:
        """Same descriptor with the ascending flag flipped."""
        return replace(self, ascending=not self.ascending)

    def with_column_index(self, column_index: int) -> SortDescriptor:
        if column_index == self.column_index:
            return self
        return replace(self, column_index=column_index)

    def comparator(self, lhs: Any, rhs: Any) -> bool:
        """True if lhs sorts before rhs in this descriptor's direction."""
        if self.compare is None:
            return False
        return self.compare(lhs, rhs) if self.ascending else self.compare(rhs, lhs)


def create(
    compare: Compare | None,
    ascending: bool = False,
    column_index: int = DEFAULT_SORT_COLUMN_INDEX,
) -> SortDescriptor:
    return SortDescriptor(compare=compare, ascending=ascending, column_index=column_index)


def equals(a: SortDescriptor, b: SortDescriptor) -> bool:
    """Descriptor equality; the comparator is ignored."""
    return a.column_index == b.column_index and a.ascending == b.ascending


def toggle_ascending(descriptor: SortDescriptor) -> SortDescriptor:
    return descriptor.toggled()


def find_for_column(
    truth: Sequence[SortDescriptor], column_index: int
) -> SortDescriptor | None:
    """First descriptor in the truth list that targets column_index."""
    return next((d for d in truth if d.column_index == column_index), None)


def sort_rows(rows: Sequence[Any], truth: Sequence[SortDescriptor]) -> list[Any]:
    """Return a sorted copy of rows according to the active descriptor.

    Rows are never rebuilt, so their identities survive the sort. An empty
    truth list, or a descriptor without comparator, leaves the order as is.
    """
    if not truth:
        return list(rows)

    descriptor = truth[0]
    if descriptor.compare is None:
        logger.debug(
            "[SortDescriptor] Column %d has no comparator, keeping row order",
            descriptor.column_index,
            extra={"dev_only": True},
        )
        return list(rows)

    def _cmp(lhs: Any, rhs: Any) -> int:
        if descriptor.comparator(lhs, rhs):
            return -1
        if descriptor.comparator(rhs, lhs):
            return 1
        return 0

    return sorted(rows, key=cmp_to_key(_cmp))
