"""
Unit tests for Column and ColumnListBuilder.
"""

import math

from tableselect.config import SORT_ICON_ASCENDING, SORT_ICON_DESCENDING
from tableselect.domain.column import Column, ColumnAlignment, ColumnListBuilder
from tableselect.domain.sort_descriptor import SortDescriptor


class TestColumnWidths:
    def test_ideal_width_pins_min_and_max(self):
        column = Column(index=0, ideal_width=130)
        assert column.min_width == 130
        assert column.max_width == 130
        assert column.ideal_width == 130

    def test_max_width_clears_ideal(self):
        column = Column(index=0, min_width=180, max_width=math.inf)
        assert column.ideal_width is None
        assert column.is_flexible

    def test_fixed_factory(self):
        column = Column.fixed(1, "Size", width=70, alignment=ColumnAlignment.TRAILING)
        assert (column.min_width, column.ideal_width, column.max_width) == (70, 70, 70)
        assert column.alignment is ColumnAlignment.TRAILING

    def test_divider(self):
        column = Column.divider(2)
        assert column.is_divider
        assert column.ideal_width == 2


class TestColumnSortDescriptor:
    def test_descriptor_follows_column_index(self):
        column = Column(index=4, sort_descriptor=SortDescriptor(column_index=0))
        assert column.sort_descriptor.column_index == 4

    def test_with_index_moves_descriptor(self):
        column = Column(index=1).with_index(3)
        assert column.index == 3
        assert column.sort_descriptor.column_index == 3

    def test_with_sort_descriptor_keeps_own_index(self):
        column = Column(index=2).with_sort_descriptor(
            SortDescriptor(column_index=7, ascending=True)
        )
        assert column.sort_descriptor == SortDescriptor(column_index=2, ascending=True)

    def test_icon_name(self):
        column = Column(index=0)
        assert column.icon_name == SORT_ICON_DESCENDING
        assert column.with_sort_descriptor(column.sort_descriptor.toggled()).icon_name == (
            SORT_ICON_ASCENDING
        )


class TestColumnRender:
    def test_render_uses_cell(self):
        column = Column(index=0, cell=lambda row: f"<{row}>")
        assert column.render("a") == "<a>"

    def test_render_without_cell(self):
        assert Column(index=0).render("a") is None


class TestColumnListBuilder:
    def test_indices_follow_position(self):
        columns = (
            ColumnListBuilder()
            .add("Year", sort_key=lambda car: car.year, ideal_width=130)
            .add_divider()
            .add("Model", max_width=math.inf)
            .build()
        )

        assert [c.index for c in columns] == [0, 1, 2]
        assert [c.sort_descriptor.column_index for c in columns] == [0, 1, 2]
        assert columns[1].is_divider
        assert columns[0].sort_descriptor.compare is not None

    def test_add_if_skips_hidden_columns(self):
        columns = ColumnListBuilder().add("A").add_if(False, "B").add_if(True, "C").build()
        assert [c.title for c in columns] == ["A", "C"]
        assert [c.index for c in columns] == [0, 1]

    def test_build_returns_copy(self):
        builder = ColumnListBuilder().add("A")
        first = builder.build()
        first.clear()
        assert len(builder.build()) == 1
