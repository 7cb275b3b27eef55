"""Row storage contract and entry identity.

This module defines the interface every table data backend implements.
Identity extraction is a separate capability so backends can share it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, Protocol, TypeVar, runtime_checkable

from core.errors import TableBackendError, TableStoreError

T = TypeVar("T")
K = TypeVar("K")
K_co = TypeVar("K_co", covariant=True)

KeyExtractor = Callable[[T], K]


@runtime_checkable
class TableDataEntry(Protocol[K_co]):
    """Row type that carries its own stable identity."""

    def key(self) -> K_co:
        """Return the unique identifier of the entry."""
        ...


def entry_key(row: TableDataEntry[K]) -> K:
    """Default identity extractor for rows implementing TableDataEntry.

    Args:
        row: Row instance.

    Returns:
        Row key.

    Raises:
        TableStoreError: If the row provides no key method.
    """
    if not isinstance(row, TableDataEntry) or not callable(getattr(row, "key", None)):
        raise TableStoreError(
            f"Row type {type(row).__name__} has no key() method. "
            "Implement key() on the row or pass key_of to the storage."
        )
    return row.key()


class TableDataStorage(ABC, Generic[T, K]):
    """Interface for a table data backend.

    The view only ever asks for a window of rows and mutates rows by key,
    never by position. Every operation is a coroutine and may suspend on
    lock availability or backend I/O. Failures raise TableStoreError
    subclasses. Operations issued through one handle are observed in order.
    """

    @abstractmethod
    async def get_rows(self, rows_range: range) -> list[T]:
        """Return the rows in `rows_range`, clamped to the stored rows.

        The range comes from visibility alone and may be out of bounds.
        Implementations clamp it with get_vec_range_clamped.
        """

    @abstractmethod
    async def set_row(self, key: K, row: T) -> None:
        """Replace the row identified by `key`.

        A missing key is a no-op reported through a warning log event.
        """

    @abstractmethod
    async def append_row(self, row: T) -> None:
        """Append `row` to the end of the table data."""

    @abstractmethod
    async def remove_row(self, key: K) -> None:
        """Remove the first row identified by `key`.

        A missing key is a no-op reported through a warning log event.
        """


@contextmanager
def backend_errors(operation: str) -> Iterator[None]:
    """Map backend-specific failures into the storage error channel.

    Args:
        operation: Storage operation name used in the error message.

    Raises:
        TableBackendError: If the wrapped block raises a non-storage error.
    """
    try:
        yield
    except TableStoreError:
        raise
    except Exception as error:
        raise TableBackendError(
            f"Storage operation '{operation}' failed: {error}. "
            "Check the backend connection and row payload."
        ) from error
