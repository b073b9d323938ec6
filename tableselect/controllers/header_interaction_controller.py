"""Module: header_interaction_controller.py

Author: Michael Economou
Date: 2026-02-13

UI-agnostic controller for header interactions.
Decides whether a header press/release pair is a click and turns header
clicks into sort changes, without toolkit dependencies.
"""

from __future__ import annotations

from typing import Protocol

from tableselect.config import HEADER_CLICK_DRAG_THRESHOLD
from tableselect.domain.column import Column
from tableselect.domain.sort_descriptor import SortDescriptor
from tableselect.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class TableStateProtocol(Protocol):
    """Protocol for the table state interface needed by HeaderInteractionController."""

    @property
    def columns(self) -> list[Column]:
        """Reconciled columns in header order."""
        ...

    def header_tapped(self, column_index: int) -> list[SortDescriptor] | None:
        """Toggle the sort of a column."""
        ...


class HeaderInteractionController:
    """UI-agnostic controller for header interactions.

    Separates the click/drag decision and the sort toggle from the widget
    drawing the header.
    """

    def __init__(self, table_state: TableStateProtocol) -> None:
        """Initialize controller with table state reference.

        Args:
            table_state: Table state implementing the required protocol.

        """
        self._table_state = table_state

    def is_divider_column(self, column_index: int) -> bool:
        """Check if the column at column_index is a divider placeholder.

        Args:
            column_index: Column index in header order.

        Returns:
            True for dividers and for indices outside the header.

        """
        columns = self._table_state.columns
        if not 0 <= column_index < len(columns):
            return True
        return columns[column_index].is_divider

    def should_handle_click(
        self,
        pressed_index: int,
        released_index: int,
        manhattan_length: int,
        click_actions_enabled: bool = True,
    ) -> bool:
        """Determine if a header press/release should trigger a sort.

        Args:
            pressed_index: Column index where the pointer was pressed.
            released_index: Column index where the pointer was released.
            manhattan_length: Manhattan distance of pointer movement.
            click_actions_enabled: Whether click actions are enabled.

        Returns:
            True if the release completes a click on a sortable column.

        """
        if not click_actions_enabled:
            logger.debug("[CONTROLLER] Header click actions disabled")
            return False

        if manhattan_length > HEADER_CLICK_DRAG_THRESHOLD:
            logger.debug(
                "[CONTROLLER] Header click ignored - drag detected (manhattan=%d)",
                manhattan_length,
            )
            return False

        if released_index != pressed_index or released_index == -1:
            logger.debug(
                "[CONTROLLER] Header click ignored - position mismatch (pressed=%d, released=%d)",
                pressed_index,
                released_index,
            )
            return False

        return not self.is_divider_column(released_index)

    def handle_sort(self, column_index: int) -> list[SortDescriptor] | None:
        """Handle sort by column action.

        Args:
            column_index: Column index to sort by. Tapping the active column
                flips its direction.

        Returns:
            The new sort descriptors, or None if the tap was ignored.

        """
        if self.is_divider_column(column_index):
            logger.debug("[CONTROLLER] Sort ignored for column %d", column_index)
            return None

        logger.info("[CONTROLLER] Sort by column %d", column_index)
        return self._table_state.header_tapped(column_index)

    def handle_release(
        self,
        pressed_index: int,
        released_index: int,
        manhattan_length: int,
        click_actions_enabled: bool = True,
    ) -> list[SortDescriptor] | None:
        """Pointer released over the header: sort if it was a click."""
        if not self.should_handle_click(
            pressed_index, released_index, manhattan_length, click_actions_enabled
        ):
            return None
        return self.handle_sort(released_index)
