"""Unit tests for range clamping."""

from __future__ import annotations

import sys

from store.range_clamp import clamp_range, get_vec_range_clamped


def test_empty_rows_return_empty_for_any_range() -> None:
    """Empty input should yield no rows for in- and out-of-bounds requests."""
    requests = [range(0, 0), range(5, 10), range(0, sys.maxsize), range(7, 2)]

    results = [get_vec_range_clamped([], requested) for requested in requests]

    assert results == [[], [], [], []]


def test_in_bounds_range_returns_slice() -> None:
    """A valid range should return the matching slice."""
    rows = ["a", "b", "c", "d"]

    assert get_vec_range_clamped(rows, range(1, 3)) == ["b", "c"]


def test_end_past_length_is_clamped() -> None:
    """An end beyond the rows should stop at the last row."""
    rows = ["a", "b", "c"]

    assert get_vec_range_clamped(rows, range(1, 1000)) == ["b", "c"]


def test_start_past_length_clamps_to_last_index() -> None:
    """A start beyond the rows should clamp to the last valid index."""
    rows = ["a", "b", "c"]

    assert get_vec_range_clamped(rows, range(5, 10)) == ["c"]


def test_inverted_range_returns_empty() -> None:
    """A start after the end should produce an empty slice, not an error."""
    rows = ["a", "b", "c"]

    assert get_vec_range_clamped(rows, range(2, 1)) == []


def test_negative_bounds_are_floored_at_zero() -> None:
    """Negative bounds should never wrap around to the end of the rows."""
    rows = ["a", "b", "c"]

    assert get_vec_range_clamped(rows, range(-2, 2)) == ["a", "b"]


def test_result_length_matches_clamp_formula() -> None:
    """Result length should follow min(e, N) - min(s, N - 1), floored at zero."""
    mismatches = []
    for length in range(0, 6):
        rows = list(range(length))
        for start in range(0, 9):
            for end in range(0, 9):
                expected = max(0, min(end, length) - min(start, max(length - 1, 0)))
                result = get_vec_range_clamped(rows, range(start, end))
                if len(result) != expected:
                    mismatches.append((length, start, end))

    assert mismatches == []


def test_clamp_range_stays_within_bounds() -> None:
    """Clamped bounds should always satisfy 0 <= start <= end <= length."""
    violations = []
    for length in range(0, 5):
        for start in range(-3, 8):
            for end in range(-3, 8):
                bounds = clamp_range(length, range(start, end))
                if not 0 <= bounds.start <= bounds.stop <= length:
                    violations.append((length, start, end))

    assert violations == []


def test_result_is_a_copy() -> None:
    """Mutating the returned list should not touch the source rows."""
    rows = ["a", "b"]

    window = get_vec_range_clamped(rows, range(0, 2))
    window.append("c")

    assert rows == ["a", "b"]
