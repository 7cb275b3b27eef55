"""Core constants used across tablestore modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_WINDOW_SIZE = 100
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
COLUMN_METADATA_KEY = "tablestore"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
DEFAULT_TIME_FORMAT = "%H:%M:%S"
DEFAULT_AWARE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S%:z"
SORT_ICON_ASCENDING = "▲"
SORT_ICON_DESCENDING = "▼"
TRUE_TEXT_VALUES = ("true", "yes", "1")
FALSE_TEXT_VALUES = ("false", "no", "0")
