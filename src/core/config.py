"""Runtime configuration model for tablestore.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, DEFAULT_WINDOW_SIZE, SUPPORTED_LOG_LEVELS
from core.errors import TableConfigError


@dataclass(frozen=True)
class TableConfig:
    """Validated runtime configuration.

    Attributes:
        window_size: Number of rows requested per visible window.
        log_level: Minimum structured log level name, passed once to
            configure_logging by the application entry point.
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "TableConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TableConfigError: If environment values are invalid.
        """
        window_size_value = os.getenv("TABLESTORE_WINDOW_SIZE", str(DEFAULT_WINDOW_SIZE))
        log_level_value = os.getenv("TABLESTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            window_size=_parse_window_size(window_size_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_window_size(raw_value: str) -> int:
    """Parse the window size environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive window size.

    Raises:
        TableConfigError: If value is not a positive integer.
    """
    try:
        window_size = int(raw_value)
    except ValueError as error:
        raise TableConfigError(
            "Invalid TABLESTORE_WINDOW_SIZE value: "
            f"expected integer, got '{raw_value}'. "
            "Set TABLESTORE_WINDOW_SIZE to a positive number of rows."
        ) from error
    if window_size < 1:
        raise TableConfigError(
            f"Invalid TABLESTORE_WINDOW_SIZE value: {window_size}. "
            "The window must contain at least one row."
        )
    return window_size


def _parse_log_level(raw_value: str) -> str:
    log_level = raw_value.strip().upper()
    if log_level not in SUPPORTED_LOG_LEVELS:
        raise TableConfigError(
            f"Invalid TABLESTORE_LOG_LEVEL value: '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return log_level
