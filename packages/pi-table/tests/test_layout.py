"""Tests for pi.table.layout -- column width resolution."""

from __future__ import annotations

import logging

import pytest

from pi.table.layout import minimum_width, resolve_widths
from pi.table.types import ColumnSpec, Expandable, Fixed, Slim


def _columns(*layouts) -> list[ColumnSpec]:
    return [ColumnSpec(layout=layout) for layout in layouts]


class TestMinimumWidth:
    def test_fixed_ignores_header_and_padding(self) -> None:
        assert minimum_width(ColumnSpec(layout=Fixed(7)), "A LONG HEADER", 3) == 7

    def test_slim_fits_header_and_padding(self) -> None:
        assert minimum_width(ColumnSpec(layout=Slim()), "NAME", 2) == 8

    def test_expandable_fits_header_and_padding(self) -> None:
        assert minimum_width(ColumnSpec(layout=Expandable(50)), "NAME", 1) == 6

    def test_no_header_is_zero(self) -> None:
        assert minimum_width(ColumnSpec(layout=Slim()), None, 2) == 0


class TestResolveWidths:
    """Distribute leftover table width among expandable columns."""

    def test_mixed_fixed_and_expandable(self) -> None:
        columns = _columns(Fixed(8), Fixed(4), Fixed(10), Expandable(30), Expandable(150))
        headers = ["ID", "NAME", "ROLE", "PERMISSION", "DESCRIPTION"]
        resolve_widths(columns, headers, 0, 80)
        widths = [c.width for c in columns]
        assert widths == [8, 4, 10, 25, 80 - 6 - 8 - 4 - 10 - 25]
        assert sum(widths) + len(columns) + 1 == 80

    def test_slim_table_below_minimum_keeps_minimums(self) -> None:
        columns = _columns(Slim(), Slim(), Fixed(10), Expandable(30), Expandable(50))
        headers = ["ID", "NAME", "ROLE", "PERMISSION", "DESCRIPTION"]
        min_width = resolve_widths(columns, headers, 0, 0)
        assert [c.width for c in columns] == [2, 4, 10, 10, 11]
        assert min_width == 2 + 4 + 10 + 10 + 11 + 6

    def test_returns_minimum_table_width(self) -> None:
        columns = _columns(Slim(), Fixed(3))
        assert resolve_widths(columns, ["AB", None], 1, 100) == 4 + 3 + 3

    def test_two_columns_split_with_floor_division(self) -> None:
        columns = _columns(Expandable(100), Expandable(100))
        resolve_widths(columns, [None, None], 0, 3 + 5)
        assert [c.width for c in columns] == [2, 3]

    def test_each_column_divides_what_is_left(self) -> None:
        columns = _columns(Expandable(100), Expandable(100), Expandable(100))
        resolve_widths(columns, [None, None, None], 0, 4 + 10)
        assert [c.width for c in columns] == [3, 3, 4]

    def test_capped_column_leaves_excess_for_later_columns(self) -> None:
        columns = _columns(Expandable(5), Expandable(100))
        resolve_widths(columns, [None, None], 0, 3 + 40)
        assert [c.width for c in columns] == [5, 35]

    def test_all_columns_capped_leaves_table_narrower(self) -> None:
        columns = _columns(Expandable(5), Expandable(5))
        resolve_widths(columns, [None, None], 0, 100)
        assert [c.width for c in columns] == [5, 5]

    def test_expandable_never_exceeds_max(self) -> None:
        for target in range(0, 200, 7):
            columns = _columns(Fixed(3), Expandable(12), Slim(), Expandable(40))
            resolve_widths(columns, ["A", "BB", "CCC", "DDDD"], 1, target)
            assert columns[1].width <= 12
            assert columns[3].width <= 40

    def test_fixed_and_slim_do_not_depend_on_target(self) -> None:
        for target in (0, 20, 60, 500):
            columns = _columns(Fixed(6), Slim(), Expandable(1000))
            resolve_widths(columns, ["X", "HEAD", "Y"], 2, target)
            assert columns[0].width == 6
            assert columns[1].width == 8

    def test_sum_matches_target_when_room_allows(self) -> None:
        for target in range(30, 120):
            columns = _columns(Fixed(4), Slim(), Expandable(60), Expandable(200))
            resolve_widths(columns, ["ID", "NAME", "A", "B"], 1, target)
            assert sum(c.width for c in columns) + len(columns) + 1 == target

    def test_header_wider_than_max_does_not_shrink(self) -> None:
        columns = _columns(Expandable(3))
        resolve_widths(columns, ["LONG HEADER"], 0, 40)
        assert columns[0].width == 11

    def test_no_columns(self) -> None:
        assert resolve_widths([], [], 1, 10) == 1

    def test_header_count_must_match(self) -> None:
        with pytest.raises(ValueError):
            resolve_widths(_columns(Slim()), [], 0, 10)

    def test_logs_when_below_minimum(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pi.table.layout"):
            resolve_widths(_columns(Fixed(20)), [None], 0, 5)
        assert "below the minimum" in caplog.text
