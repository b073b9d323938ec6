"""
Unit tests for DragSelectionResolver.

Drag samples are fed with the row already resolved; the direction of a
sample comes from its location relative to the predicted end location.
"""

import pytest

from tableselect.core.drag_selection import DragSelectionResolver, sample_direction
from tableselect.domain.geometry import Point
from tableselect.domain.keyboard import KeyboardModifier
from tableselect.domain.selection import DragDirection

# location, predicted end
DOWN = (Point(10, 10), Point(10, 60))
UP = (Point(10, 60), Point(10, 10))


@pytest.fixture
def drag(multiple_model):
    return DragSelectionResolver(multiple_model)


class TestSampleDirection:
    def test_down(self):
        assert sample_direction(*DOWN) is DragDirection.DOWN

    def test_up(self):
        assert sample_direction(*UP) is DragDirection.UP

    def test_tie_counts_as_up(self):
        assert sample_direction(Point(0, 5), Point(40, 5)) is DragDirection.UP


class TestMultipleDrag:
    def test_single_pass_selects_row(self, drag, multiple_model):
        drag.begin()
        drag.sample("r5", *DOWN)
        drag.end()

        assert multiple_model.selected_ids == frozenset({"r5"})

    def test_reversal_over_row_unselects_it(self, drag, multiple_model):
        drag.begin()
        drag.sample("r3", *DOWN)
        drag.sample("r3", *UP)
        drag.end()

        assert not multiple_model.is_selected("r3")

    def test_paint_then_unpaint(self, drag, multiple_model):
        drag.begin()
        for row_id in ("r1", "r2", "r3", "r4"):
            drag.sample(row_id, *DOWN)
        assert multiple_model.selected_ids == frozenset({"r1", "r2", "r3", "r4"})

        drag.sample("r4", *UP)
        drag.sample("r3", *UP)

        assert multiple_model.selected_ids == frozenset({"r1", "r2"})

    def test_repeated_samples_collapse(self, drag, multiple_model):
        drag.begin()
        for _ in range(5):
            drag.sample("r2", *DOWN)

        assert multiple_model.dragged_rows["r2"].directions == [DragDirection.DOWN]
        assert multiple_model.is_selected("r2")

    def test_first_sample_seeds_history(self, drag, multiple_model):
        drag.begin()
        drag.sample("r2", *UP)

        assert multiple_model.dragged_rows["r2"].directions == [DragDirection.UP]

    def test_plain_begin_clears_previous_selection(self, drag, multiple_model):
        multiple_model.select("r8")
        drag.begin()
        drag.sample("r1", *DOWN)

        assert multiple_model.selected_ids == frozenset({"r1"})

    def test_toggle_begin_keeps_untouched_rows(self, drag, multiple_model):
        multiple_model.select("r8")
        drag.begin(KeyboardModifier.CTRL)
        drag.sample("r1", *DOWN)

        assert multiple_model.selected_ids == frozenset({"r1", "r8"})

    def test_cancelled_row_ends_unselected_even_if_selected_before(self, drag, multiple_model):
        multiple_model.select("r3")
        drag.begin(KeyboardModifier.META)
        drag.sample("r3", *DOWN)
        drag.sample("r3", *UP)
        drag.end()

        assert not multiple_model.is_selected("r3")

    def test_gap_sample_is_ignored(self, drag, multiple_model):
        drag.begin()
        drag.sample("r1", *DOWN)

        assert drag.sample(None, *DOWN) is False
        assert multiple_model.selected_ids == frozenset({"r1"})

    def test_sample_without_begin_starts_gesture(self, drag, multiple_model):
        multiple_model.select("r9")
        assert drag.sample("r0", *DOWN) is True
        assert drag.active
        assert multiple_model.selected_ids == frozenset({"r0"})

    def test_end_clears_accumulator_and_keeps_selection(self, drag, multiple_model):
        drag.begin()
        drag.sample("r1", *DOWN)
        drag.sample("r2", *DOWN)
        drag.end()

        assert not drag.active
        assert not multiple_model.drag_in_progress
        assert multiple_model.drag_direction is None
        assert multiple_model.selected_ids == frozenset({"r1", "r2"})

    def test_new_gesture_starts_fresh(self, drag, multiple_model):
        drag.begin()
        drag.sample("r1", *DOWN)
        drag.end()

        drag.begin()
        drag.sample("r4", *DOWN)
        drag.end()

        assert multiple_model.selected_ids == frozenset({"r4"})


class TestSingleDrag:
    def test_each_sample_reselects(self, single_model):
        drag = DragSelectionResolver(single_model)
        drag.begin()
        drag.sample("r1", *DOWN)
        drag.sample("r2", *DOWN)
        drag.sample("r2", *UP)

        assert single_model.selected_ids == frozenset({"r2"})
        assert not single_model.drag_in_progress

    def test_begin_keeps_selection(self, single_model):
        single_model.select("r4")
        DragSelectionResolver(single_model).begin()
        assert single_model.is_selected("r4")
