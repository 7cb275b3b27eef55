"""Unit tests for the storage contract helpers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import pytest

from core.errors import StoreLockContentionError, TableBackendError, TableStoreError
from store.memory_storage import MemoryStorage
from store.table_storage import TableDataEntry, TableDataStorage, backend_errors, entry_key
from tests.fixture_rows import sample_books


def test_entry_key_reads_row_key() -> None:
    """Default identity should come from the row's key() method."""
    book = sample_books()[2]

    assert entry_key(book) == 3


def test_rows_with_key_method_are_table_entries() -> None:
    """Rows implementing key() should satisfy the entry protocol."""
    assert isinstance(sample_books()[0], TableDataEntry)


def test_entry_key_raises_for_rows_without_key() -> None:
    """Rows without key() should fail with a storage error."""
    with pytest.raises(TableStoreError):
        entry_key({"id": 1})  # type: ignore[arg-type]


def test_storage_contract_cannot_be_instantiated() -> None:
    """The contract should require all four operations to be implemented."""
    with pytest.raises(TypeError):
        TableDataStorage()  # type: ignore[abstract]


def test_backend_errors_wraps_foreign_exceptions() -> None:
    """Backend failures should surface as TableBackendError."""
    with pytest.raises(TableBackendError) as error_info:
        with backend_errors("get_rows"):
            raise ConnectionError("socket closed")

    assert isinstance(error_info.value.__cause__, ConnectionError)


def test_backend_errors_keeps_storage_errors() -> None:
    """Storage errors should pass through unchanged."""
    with pytest.raises(StoreLockContentionError):
        with backend_errors("set_row"):
            raise StoreLockContentionError("locked")


def test_entry_key_raises_for_key_data_field() -> None:
    """A non-callable key attribute should not count as row identity."""

    @dataclass
    class _KeyField:
        key: str

    with pytest.raises(TableStoreError):
        entry_key(_KeyField("a"))  # type: ignore[arg-type]


def test_remove_row_with_key_data_field_raises_storage_error() -> None:
    """Storage writes should report missing identity as a storage error."""

    @dataclass
    class _KeyField:
        key: str

    storage: MemoryStorage[_KeyField, str] = MemoryStorage([_KeyField("a")])

    with pytest.raises(TableStoreError):
        asyncio.run(storage.remove_row("a"))
