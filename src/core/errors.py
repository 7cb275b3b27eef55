"""Tablestore exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class TableError(Exception):
    """Base exception for all tablestore failures."""


class TableConfigError(TableError):
    """Raised for invalid runtime configuration."""


class TableSchemaError(TableError):
    """Raised for invalid row types or column options."""


class TableStoreError(TableError):
    """Raised for row storage failures."""


class StoreLockContentionError(TableStoreError):
    """Raised when a non-blocking lock acquisition finds the lock held."""


class TableBackendError(TableStoreError):
    """Raised for backend-specific storage failures."""


class CellParseError(TableError):
    """Raised when edited cell text cannot be parsed into a value."""
