"""Unit tests for header-driven sort state."""

from __future__ import annotations

from core.types import ColumnSort, SortIndicator, SortUpdate, TableHeadEvent
from table.sort_state import SortState, sort_indicator, sort_rows


def _click(state: SortState, index: int) -> SortUpdate:
    return state.handle_head_event(TableHeadEvent(index, f"col{index}", pointer_event={"button": 0}))


def test_three_clicks_cycle_one_column() -> None:
    """Clicks should visit ascending, descending, then none with matching ranks."""
    state = SortState()

    updates = [_click(state, 0) for _ in range(3)]

    assert updates == [
        SortUpdate(0, ColumnSort.ASCENDING, 0),
        SortUpdate(0, ColumnSort.DESCENDING, 0),
        SortUpdate(0, ColumnSort.NONE, None),
    ]


def test_new_sorted_column_gets_next_priority() -> None:
    """Each column entering ascending should be ranked after existing sorts."""
    state = SortState()

    _click(state, 2)
    _click(state, 0)
    update = _click(state, 1)

    assert update.priority == 2


def test_unsorting_closes_priority_gap() -> None:
    """Removing a sorted column should shift later ranks down by one."""
    state = SortState()
    for index in (2, 0, 1):
        _click(state, index)

    _click(state, 2)
    _click(state, 2)

    assert [state.priority(index) for index in (0, 1, 2)] == [0, 1, None]


def test_direction_change_keeps_priority() -> None:
    """Switching ascending to descending should not change a column's rank."""
    state = SortState()
    _click(state, 3)
    _click(state, 1)

    update = _click(state, 3)

    assert update == SortUpdate(3, ColumnSort.DESCENDING, 0)


def test_sort_spec_lists_primary_first() -> None:
    """The sort spec should follow priority order."""
    state = SortState()
    _click(state, 4)
    _click(state, 1)
    _click(state, 1)

    assert state.sort_spec() == ((4, ColumnSort.ASCENDING), (1, ColumnSort.DESCENDING))


def test_sort_indicator_uses_icon_and_one_based_priority() -> None:
    """Header hints should show the direction glyph and a one-based rank."""
    indicators = [
        sort_indicator(ColumnSort.ASCENDING, 0),
        sort_indicator(ColumnSort.DESCENDING, 2),
        sort_indicator(ColumnSort.NONE, None),
    ]

    assert indicators == [
        SortIndicator("▲", "1"),
        SortIndicator("▼", "3"),
        SortIndicator("", ""),
    ]


def test_sort_rows_breaks_ties_with_secondary_column() -> None:
    """Rows equal on the primary column should be ordered by the next one."""
    rows = [("b", 1), ("a", 2), ("b", 3), ("a", 1)]

    ordered = sort_rows(
        rows,
        ((0, ColumnSort.ASCENDING), (1, ColumnSort.DESCENDING)),
        lambda row, column: row[column],
    )

    assert ordered == [("a", 2), ("a", 1), ("b", 3), ("b", 1)]


def test_sort_rows_is_stable_for_equal_keys() -> None:
    """Rows equal on every sorted column should keep their input order."""
    rows = [("x", "first"), ("x", "second"), ("x", "third")]

    ordered = sort_rows(rows, ((0, ColumnSort.DESCENDING),), lambda row, column: row[column])

    assert ordered == rows


def test_sort_rows_without_spec_keeps_order() -> None:
    """An empty sort spec should return rows unchanged."""
    rows = [3, 1, 2]

    assert sort_rows(rows, (), lambda row, column: row) == [3, 1, 2]


def test_sort_rows_places_none_first_when_ascending() -> None:
    """Missing values should sort before present ones without raising."""
    rows = [("x",), (None,), ("a",), (None,)]

    ordered = sort_rows(rows, ((0, ColumnSort.ASCENDING),), lambda row, column: row[column])

    assert ordered == [(None,), (None,), ("a",), ("x",)]


def test_sort_rows_places_none_last_when_descending() -> None:
    """Descending order should put missing values at the end."""
    rows = [(None,), ("a",), ("x",)]

    ordered = sort_rows(rows, ((0, ColumnSort.DESCENDING),), lambda row, column: row[column])

    assert ordered == [("x",), ("a",), (None,)]
