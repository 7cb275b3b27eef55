"""In-memory reference storage.

This module keeps table rows in a list behind a non-blocking
reader/writer lock shared by every clone of the storage handle.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, TypeVar

from core.logging_config import get_logger
from store.range_clamp import get_vec_range_clamped
from store.rw_lock import NonBlockingRWLock
from store.table_storage import TableDataStorage, entry_key

T = TypeVar("T")
K = TypeVar("K")

_LOGGER = get_logger(__name__)


@dataclass
class _RowSet(Generic[T]):
    """Authoritative row list and the lock gating it."""

    rows: list[T]
    lock: NonBlockingRWLock = field(default_factory=NonBlockingRWLock)


class MemoryStorage(TableDataStorage[T, K]):
    """Storage that keeps the rows given at construction in memory.

    Cloning the handle shares the same rows, so a write through any
    clone is visible to all of them. Rows are copied on the way in and
    out, so stored rows only change under the exclusive lock. All
    operations fail immediately with StoreLockContentionError instead of
    waiting for the lock.
    Key lookups scan the rows linearly.
    """

    def __init__(
        self,
        rows: Iterable[T] = (),
        key_of: Callable[[T], K] | None = None,
    ) -> None:
        """Create a storage holding the given rows.

        Args:
            rows: Initial rows, each copied into the storage.
            key_of: Identity extractor; defaults to calling row.key().
        """
        self._row_set: _RowSet[T] = _RowSet(rows=[copy.copy(row) for row in rows])
        self._key_of: Callable[[T], Any] = key_of or entry_key

    @property
    def lock(self) -> NonBlockingRWLock:
        """Reader/writer lock shared by all clones of this storage."""
        return self._row_set.lock

    def clone(self) -> "MemoryStorage[T, K]":
        """Return another handle to the same rows."""
        return copy.copy(self)

    async def len_rows(self) -> int:
        """Return the current number of rows.

        Raises:
            StoreLockContentionError: If a writer holds the lock.
        """
        with self._row_set.lock.read_locked():
            return len(self._row_set.rows)

    async def get_rows(self, rows_range: range) -> list[T]:
        """Return copies of the rows in the clamped window.

        Raises:
            StoreLockContentionError: If a writer holds the lock.
        """
        with self._row_set.lock.read_locked():
            window = get_vec_range_clamped(self._row_set.rows, rows_range)
            return [copy.copy(row) for row in window]

    async def set_row(self, key: K, row: T) -> None:
        """Replace the first row whose key equals `key`.

        Raises:
            StoreLockContentionError: If the lock is held.
        """
        with self._row_set.lock.write_locked():
            index = self._find_index(key)
            if index is None:
                _LOGGER.warning("row_not_found", operation="set_row", key=str(key))
                return
            self._row_set.rows[index] = copy.copy(row)

    async def append_row(self, row: T) -> None:
        """Append a row at the end.

        Raises:
            StoreLockContentionError: If the lock is held.
        """
        with self._row_set.lock.write_locked():
            self._row_set.rows.append(copy.copy(row))
            row_count = len(self._row_set.rows)
        _LOGGER.debug("row_appended", row_count=row_count)

    async def remove_row(self, key: K) -> None:
        """Remove the first row whose key equals `key`.

        Raises:
            StoreLockContentionError: If the lock is held.
        """
        with self._row_set.lock.write_locked():
            index = self._find_index(key)
            if index is None:
                _LOGGER.warning("row_not_found", operation="remove_row", key=str(key))
                return
            del self._row_set.rows[index]

    def _find_index(self, key: K) -> int | None:
        for index, row in enumerate(self._row_set.rows):
            if self._key_of(row) == key:
                return index
        return None
