"""Column sort state driven by header clicks.

Each click on a column header cycles its direction through
none, ascending and descending. Sorted columns carry a dense priority
rank (0 = primary) in the order they started sorting; when a column stops
sorting the ranks behind it close the gap.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

from core.constants import SORT_ICON_ASCENDING, SORT_ICON_DESCENDING
from core.logging_config import get_logger
from core.types import ColumnSort, SortIndicator, SortUpdate, TableHeadEvent

T = TypeVar("T")

SortSpec = tuple[tuple[int, ColumnSort], ...]

_LOGGER = get_logger(__name__)


class SortState:
    """Per-column sort directions and their priority order."""

    def __init__(self) -> None:
        self._directions: dict[int, ColumnSort] = {}
        self._priority_order: list[int] = []

    def direction(self, index: int) -> ColumnSort:
        return self._directions.get(index, ColumnSort.NONE)

    def priority(self, index: int) -> int | None:
        """Return the zero-based sort rank of a column, None when unsorted."""
        if index not in self._priority_order:
            return None
        return self._priority_order.index(index)

    def handle_head_event(self, event: TableHeadEvent) -> SortUpdate:
        """Advance the clicked column to its next sort direction.

        Args:
            event: Header click from the rendering layer.

        Returns:
            The column's new direction and priority.
        """
        index = event.index
        previous = self.direction(index)
        direction = previous.next()
        if direction is ColumnSort.NONE:
            self._directions.pop(index, None)
            self._priority_order.remove(index)
        else:
            self._directions[index] = direction
            if previous is ColumnSort.NONE:
                self._priority_order.append(index)
        update = SortUpdate(index=index, direction=direction, priority=self.priority(index))
        _LOGGER.debug(
            "sort_changed",
            column=event.column,
            direction=direction.value,
            priority=update.priority,
        )
        return update

    def sort_spec(self) -> SortSpec:
        """Return sorted columns as (index, direction) pairs, primary first."""
        return tuple((index, self._directions[index]) for index in self._priority_order)

    def indicator(self, index: int) -> SortIndicator:
        return sort_indicator(self.direction(index), self.priority(index))


def sort_indicator(direction: ColumnSort, priority: int | None) -> SortIndicator:
    """Build header display hints for a column.

    Args:
        direction: Column sort direction.
        priority: Zero-based rank, None when unsorted.

    Returns:
        Icon glyph and one-based priority label.
    """
    if direction is ColumnSort.ASCENDING:
        icon = SORT_ICON_ASCENDING
    elif direction is ColumnSort.DESCENDING:
        icon = SORT_ICON_DESCENDING
    else:
        icon = ""
    priority_label = "" if priority is None else str(priority + 1)
    return SortIndicator(icon=icon, priority_label=priority_label)


def sort_rows(
    rows: Iterable[T],
    sort_spec: Sequence[tuple[int, ColumnSort]],
    value_of: Callable[[T, int], Any],
) -> list[T]:
    """Order rows lexicographically by the sorted columns.

    The primary column decides first and later columns break ties.
    Rows equal on every sorted column keep their input order. None sorts
    before every other value, so it comes last when descending.

    Args:
        rows: Rows to order.
        sort_spec: (column index, direction) pairs, primary first.
        value_of: Returns the cell value of a row for a column index.

    Returns:
        New sorted list.
    """
    result = list(rows)
    # Stable sorts applied from lowest to highest priority.
    for index, direction in reversed(tuple(sort_spec)):
        if direction is ColumnSort.NONE:
            continue
        result.sort(
            key=lambda row, column=index: _none_first_key(value_of(row, column)),
            reverse=direction is ColumnSort.DESCENDING,
        )
    return result


def _none_first_key(value: Any) -> tuple[Any, ...]:
    if value is None:
        return (0,)
    return (1, value)
