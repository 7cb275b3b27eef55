"""Public SDK surface for tablestore.

This module provides a stable import path for table view code.
It re-exports the storage contract, backends, and view helpers.
"""

from __future__ import annotations

from core.config import TableConfig
from core.errors import (
    CellParseError,
    StoreLockContentionError,
    TableBackendError,
    TableError,
    TableSchemaError,
    TableStoreError,
)
from core.logging_config import configure_logging
from core.types import (
    ColumnOptions,
    ColumnSort,
    EditEvent,
    EditTrigger,
    SortIndicator,
    SortUpdate,
    TableHeadEvent,
)
from store.memory_storage import MemoryStorage
from store.range_clamp import clamp_range, get_vec_range_clamped
from store.table_storage import TableDataEntry, TableDataStorage, backend_errors, entry_key
from table.cell_codecs import CellCodec, UtcDateTime, codec_for_type
from table.cell_edit import CellEditor
from table.column_config import ColumnDefinition, TableSchema, table_column
from table.sort_state import SortState, sort_indicator, sort_rows
from table.table_view import TableView

__all__ = [
    "CellCodec",
    "CellEditor",
    "CellParseError",
    "ColumnDefinition",
    "ColumnOptions",
    "ColumnSort",
    "EditEvent",
    "EditTrigger",
    "MemoryStorage",
    "SortIndicator",
    "SortState",
    "SortUpdate",
    "StoreLockContentionError",
    "TableBackendError",
    "TableConfig",
    "TableDataEntry",
    "TableDataStorage",
    "TableError",
    "TableHeadEvent",
    "TableSchema",
    "TableSchemaError",
    "TableStoreError",
    "TableView",
    "UtcDateTime",
    "backend_errors",
    "clamp_range",
    "codec_for_type",
    "configure_logging",
    "entry_key",
    "get_vec_range_clamped",
    "sort_indicator",
    "sort_rows",
    "table_column",
]
