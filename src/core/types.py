"""Shared typed models.

This module defines immutable data models used by the storage,
sorting, and cell editing layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColumnSort(Enum):
    """Sort direction of one column."""

    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def next(self) -> "ColumnSort":
        """Return the direction reached by one more header click."""
        if self is ColumnSort.NONE:
            return ColumnSort.ASCENDING
        if self is ColumnSort.ASCENDING:
            return ColumnSort.DESCENDING
        return ColumnSort.NONE


class EditTrigger(Enum):
    """What produced an edit event.

    INPUT is an in-progress keystroke. BLUR and COMMIT mark the text as final.
    """

    INPUT = "input"
    BLUR = "blur"
    COMMIT = "commit"

    @property
    def is_commit(self) -> bool:
        return self is not EditTrigger.INPUT


@dataclass(frozen=True)
class ColumnOptions:
    """Per-column configuration declared on a row field.

    Attributes:
        editable: Cell text may be edited and committed back.
        sortable: Header clicks change the column sort. None inherits the table default.
        format_spec: Optional format string overriding the type default.
        key: Field is the row's identity source.
        skip: Field is excluded from the visible schema.
    """

    editable: bool = False
    sortable: bool | None = None
    format_spec: str | None = None
    key: bool = False
    skip: bool = False


@dataclass(frozen=True)
class EditEvent:
    """Transient cell edit produced by the input collaborator.

    Attributes:
        column_index: Visible column index, starting at 0.
        text: Current text of the cell.
        trigger: Keystroke or commit signal.
    """

    column_index: int
    text: str
    trigger: EditTrigger = EditTrigger.COMMIT


@dataclass(frozen=True)
class TableHeadEvent:
    """Event emitted when a table head cell is clicked.

    Attributes:
        index: Column index, starting at 0 in field declaration order.
        column: Column name.
        pointer_event: Opaque pointer payload from the rendering layer.
    """

    index: int
    column: str
    pointer_event: object = None


@dataclass(frozen=True)
class SortUpdate:
    """Sort state of one column after a header event.

    Attributes:
        index: Column index.
        direction: New sort direction.
        priority: Zero-based rank, None when the column is not sorted.
    """

    index: int
    direction: ColumnSort
    priority: int | None


@dataclass(frozen=True)
class SortIndicator:
    """Display hints for a sorted column header.

    Attributes:
        icon: Direction glyph, empty when not sorted.
        priority_label: One-based priority text, empty when not sorted.
    """

    icon: str
    priority_label: str
