"""
Unit tests for column reconciliation and header taps.
"""

from unittest.mock import Mock

import pytest

from tableselect.core.column_catalog import (
    ColumnCatalog,
    header_tap,
    is_active_sort_column,
    is_last_column,
    reconcile,
)
from tableselect.core.exceptions import TableSelectError, UnknownColumnError
from tableselect.domain.column import Column
from tableselect.domain.sort_descriptor import SortDescriptor


class TestReconcile:
    def test_matching_column_adopts_truth(self):
        columns = [Column(index=0, title="A"), Column(index=1, title="B")]
        truth = [SortDescriptor(column_index=1, ascending=True)]

        result = reconcile(columns, truth)

        assert result[1].ascending is True
        assert result[0].sort_descriptor == SortDescriptor(column_index=0, ascending=False)

    def test_reindexes_by_position(self):
        columns = [Column(index=5, title="A"), Column(index=9, title="B")]
        result = reconcile(columns, [])
        assert [c.index for c in result] == [0, 1]
        assert [c.sort_descriptor.column_index for c in result] == [0, 1]

    def test_adopts_truth_comparator(self):
        compare = Mock(return_value=True)
        truth = [SortDescriptor(compare=compare, column_index=0, ascending=True)]

        result = reconcile([Column(index=0)], truth)

        assert result[0].sort_descriptor.compare is compare

    def test_idempotent(self, car_columns):
        truth = [SortDescriptor(column_index=1, ascending=True)]
        once = reconcile(car_columns, truth)
        assert reconcile(once, truth) == once

    def test_inputs_untouched(self, car_columns):
        reconcile(car_columns, [SortDescriptor(column_index=0, ascending=True)])
        assert car_columns[0].ascending is False

    def test_preserves_order(self, car_columns):
        titles = [c.title for c in reconcile(car_columns, [])]
        assert titles == ["Year", "Make", "", "Model"]


class TestHeaderTap:
    def test_toggle_twice(self):
        column = Column(index=2, sort_descriptor=SortDescriptor(column_index=2))

        column, truth = header_tap(column)
        assert truth == [SortDescriptor(column_index=2, ascending=True)]

        column, truth = header_tap(column)
        assert truth == [SortDescriptor(column_index=2, ascending=False)]

    def test_divider_is_noop(self):
        divider = Column.divider(1)
        column, truth = header_tap(divider)
        assert column is divider
        assert truth is None

    def test_stale_flag_is_toggled_as_is(self):
        stale = Column(index=0, sort_descriptor=SortDescriptor(ascending=True))
        _, truth = header_tap(stale)
        assert truth == [SortDescriptor(column_index=0, ascending=False)]


class TestColumnHelpers:
    def test_is_last_column(self, car_columns):
        assert is_last_column(car_columns, car_columns[3])
        assert not is_last_column(car_columns, car_columns[0])

    def test_is_active_sort_column(self, car_columns):
        truth = [SortDescriptor(column_index=1)]
        assert is_active_sort_column(truth, car_columns[1])
        assert not is_active_sort_column(truth, car_columns[0])


class TestColumnCatalog:
    @pytest.fixture
    def catalog(self, car_columns):
        return ColumnCatalog(car_columns, [SortDescriptor(column_index=0, ascending=True)])

    def test_construction_reconciles(self, catalog):
        assert catalog.column(0).ascending is True
        assert catalog.is_active(catalog.column(0))
        assert catalog.is_last(catalog.column(3))

    def test_tap_emits_new_truth(self, catalog):
        sort_changed = Mock()
        columns_changed = Mock()
        catalog.sort_descriptors_changed.connect(sort_changed)
        catalog.columns_changed.connect(columns_changed)

        truth = catalog.tap(1)

        assert truth == [SortDescriptor(column_index=1, ascending=True)]
        assert catalog.sort_descriptors == truth
        sort_changed.assert_called_once_with(truth)
        columns_changed.assert_called_once()
        assert catalog.column(1).ascending is True
        assert catalog.is_active(catalog.column(1))
        assert not catalog.is_active(catalog.column(0))

    def test_tap_on_divider_changes_nothing(self, catalog):
        sort_changed = Mock()
        catalog.sort_descriptors_changed.connect(sort_changed)

        assert catalog.tap(2) is None
        assert catalog.sort_descriptors == [SortDescriptor(column_index=0, ascending=True)]
        sort_changed.assert_not_called()

    def test_tap_out_of_range(self, catalog):
        with pytest.raises(UnknownColumnError):
            catalog.tap(9)

    def test_unknown_column_is_index_error(self, catalog):
        with pytest.raises(IndexError):
            catalog.column(-1)
        with pytest.raises(TableSelectError):
            catalog.column(4)

    def test_toggled_flag_survives_column_update(self, catalog, car_columns):
        catalog.tap(1)
        catalog.set_sort_descriptors([SortDescriptor(column_index=0)])

        # Column 1 keeps the direction it was toggled to
        assert catalog.column(1).ascending is True
        assert catalog.column(0).ascending is False

    @pytest.mark.parametrize("refresh_between", [False, True])
    def test_adopted_flag_is_kept_by_column(self, refresh_between):
        truth = [SortDescriptor(column_index=1, ascending=True)]
        catalog = ColumnCatalog([Column(index=0), Column(index=1)], truth)
        if refresh_between:
            catalog.set_sort_descriptors([SortDescriptor(column_index=0)])
            catalog.set_sort_descriptors(truth)

        catalog.tap(0)
        result = catalog.tap(1)

        # Column 1 adopted ascending at construction and toggles from there
        assert result == [SortDescriptor(column_index=1, ascending=False)]

    def test_adopted_flag_survives_truth_change(self):
        catalog = ColumnCatalog(
            [Column(index=0), Column(index=1)],
            [SortDescriptor(column_index=1, ascending=True)],
        )

        catalog.set_sort_descriptors([SortDescriptor(column_index=0)])

        assert catalog.column(1).ascending is True
        assert not catalog.is_active(catalog.column(1))

    def test_set_sort_descriptors(self, catalog):
        columns_changed = Mock()
        catalog.columns_changed.connect(columns_changed)

        changed = catalog.set_sort_descriptors([SortDescriptor(column_index=3, ascending=True)])

        assert changed is True
        assert catalog.column(3).ascending is True
        # Column 0 keeps the direction it adopted from the previous truth
        assert catalog.column(0).ascending is True
        assert not catalog.is_active(catalog.column(0))
        columns_changed.assert_called_once()

    def test_same_sort_descriptors_no_change(self, catalog):
        columns_changed = Mock()
        catalog.columns_changed.connect(columns_changed)

        assert catalog.set_sort_descriptors([SortDescriptor(column_index=0, ascending=True)]) is False
        columns_changed.assert_not_called()

    def test_set_columns_hides_column(self, catalog, car_columns):
        shown = [car_columns[0], car_columns[1], car_columns[3]]

        assert catalog.set_columns(shown) is True

        assert [c.title for c in catalog.columns] == ["Year", "Make", "Model"]
        assert [c.index for c in catalog.columns] == [0, 1, 2]
        assert catalog.column(0).ascending is True

    def test_set_same_columns_is_noop(self, catalog, car_columns):
        assert catalog.set_columns(car_columns) is False

    def test_columns_returns_copy(self, catalog):
        catalog.columns.clear()
        assert len(catalog.columns) == 4
