"""View-model facade over row storage.

This module ties a storage backend, a row schema, and sort state into
the operations a virtualized table view drives: fetch the visible
window, react to header clicks, and commit cell edits by row key.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from core.config import TableConfig
from core.logging_config import get_logger
from core.types import EditEvent, SortIndicator, SortUpdate, TableHeadEvent
from store.table_storage import TableDataStorage
from table.cell_edit import CellEditor
from table.column_config import TableSchema
from table.sort_state import SortState, sort_rows

T = TypeVar("T")

_LOGGER = get_logger(__name__)


class TableView(Generic[T]):
    """Window, sort, and edit state of one table."""

    def __init__(
        self,
        storage: TableDataStorage[T, Any],
        schema: TableSchema[T],
        config: TableConfig | None = None,
    ) -> None:
        """Create a view over a storage backend.

        Args:
            storage: Row backend.
            schema: Visible columns and identity of the row type.
            config: Optional runtime configuration.
        """
        self._config = config or TableConfig.from_env()
        self._storage = storage
        self._schema = schema
        self._sort_state = SortState()
        self._window = range(0, self._config.window_size)

    @property
    def schema(self) -> TableSchema[T]:
        return self._schema

    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    @property
    def window(self) -> range:
        """Currently requested half-open row range."""
        return self._window

    def scroll_to(self, start: int) -> range:
        """Move the window to begin at `start`.

        Args:
            start: First requested row position; negatives are treated as 0.

        Returns:
            The new window.
        """
        first = max(start, 0)
        self._window = range(first, first + self._config.window_size)
        return self._window

    async def visible_rows(self) -> list[T]:
        """Fetch the window and order it by the current sort.

        Raises:
            TableStoreError: If the storage read fails.
        """
        rows = await self._storage.get_rows(self._window)
        return sort_rows(rows, self._sort_state.sort_spec(), self._schema.value_of)

    def handle_head_event(self, event: TableHeadEvent) -> SortUpdate | None:
        """Apply a header click, ignoring columns that are not sortable."""
        if not self._schema.column(event.index).sortable:
            return None
        return self._sort_state.handle_head_event(event)

    def header_indicator(self, column_index: int) -> SortIndicator:
        return self._sort_state.indicator(column_index)

    def cell_text(self, row: T, column_index: int) -> str:
        column = self._schema.column(column_index)
        return column.format(getattr(row, column.name))

    def cell_editor(
        self,
        row: T,
        column_index: int,
        on_change: Callable[[Any], None],
    ) -> CellEditor[Any]:
        """Build the edit state for one cell of a row.

        Args:
            row: Row shown in the table.
            column_index: Visible column index.
            on_change: Receives each committed, parsed value.

        Returns:
            Cell editor configured from the column options.
        """
        column = self._schema.column(column_index)
        return CellEditor(
            column.codec,
            getattr(row, column.name),
            on_change,
            format_spec=column.format_spec,
            editable=column.editable,
        )

    async def commit_cell_edit(self, row: T, event: EditEvent) -> T | None:
        """Parse a committed cell edit and write the updated row.

        Keystroke events and text that fails to parse change nothing.

        Args:
            row: Row being edited.
            event: Edit event for one of the row's cells.

        Returns:
            The stored replacement row, or None when the edit was not applied.

        Raises:
            TableStoreError: If the storage write fails.
        """
        committed: list[Any] = []
        editor = self.cell_editor(row, event.column_index, committed.append)
        if not editor.handle(event):
            return None
        updated = self._schema.with_value(row, event.column_index, committed[0])
        await self._storage.set_row(self._schema.key_of(row), updated)
        _LOGGER.info(
            "cell_edit_committed",
            column=self._schema.column(event.column_index).name,
            key=str(self._schema.key_of(row)),
        )
        return updated
