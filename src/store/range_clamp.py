"""Range clamping for virtualized row windows.

Views request windows by visibility alone, so a requested range may run
past the row count, start beyond it, or be inverted. These helpers turn
any such request into a valid slice without raising.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def clamp_range(length: int, requested: range) -> range:
    """Clamp a half-open range against a sequence length.

    The start is clamped to the last valid index and the end to the length,
    so `0 <= start <= length` and `end <= length` always hold. The result may
    be empty (`end <= start`). Negative bounds are treated as 0 and the step
    of `requested` is ignored.

    Args:
        length: Number of rows in the sequence.
        requested: Requested window, possibly out of bounds.

    Returns:
        Clamped range, empty when `length` is 0.
    """
    if length <= 0:
        return range(0, 0)
    start = min(max(requested.start, 0), length - 1)
    end = min(max(requested.stop, 0), length)
    return range(start, max(start, end))


def get_vec_range_clamped(rows: Sequence[T], requested: range) -> list[T]:
    """Return `rows[requested.start:requested.stop]` clamped to the rows.

    Args:
        rows: Source rows.
        requested: Requested window, possibly out of bounds.

    Returns:
        Copied sub-list of rows, possibly empty.
    """
    bounds = clamp_range(len(rows), requested)
    return list(rows[bounds.start : bounds.stop])
