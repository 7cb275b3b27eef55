"""Unit tests for the cell edit protocol."""

from __future__ import annotations

from datetime import date

from core.types import EditEvent, EditTrigger
from table.cell_codecs import DATE_CODEC, INT_CODEC
from table.cell_edit import CellEditor


def _date_editor(received: list[date], editable: bool = True) -> CellEditor[date]:
    return CellEditor(DATE_CODEC, date(2024, 1, 1), received.append, editable=editable)


def test_text_uses_codec_format() -> None:
    """Display text should come from the codec's formatter."""
    editor = CellEditor(DATE_CODEC, date(2024, 5, 6), lambda value: None, format_spec="%d.%m.%Y")

    assert editor.text == "06.05.2024"


def test_keystroke_does_not_parse_or_notify() -> None:
    """In-progress input should only update the draft."""
    received: list[date] = []
    editor = _date_editor(received)

    applied = editor.handle(EditEvent(0, "2024-02-0", EditTrigger.INPUT))

    assert (applied, received, editor.draft) == (False, [], "2024-02-0")


def test_commit_parses_and_calls_update_callback() -> None:
    """A committed valid text should update the value and notify."""
    received: list[date] = []
    editor = _date_editor(received)

    applied = editor.handle(EditEvent(0, "2024-02-29", EditTrigger.COMMIT))

    assert (applied, received, editor.value) == (True, [date(2024, 2, 29)], date(2024, 2, 29))


def test_blur_counts_as_commit() -> None:
    """Losing focus should commit the text like an explicit commit."""
    received: list[int] = []
    editor = CellEditor(INT_CODEC, 1, received.append)

    editor.handle(EditEvent(2, "42", EditTrigger.BLUR))

    assert received == [42]


def test_failed_parse_is_discarded_silently() -> None:
    """Malformed committed text should keep the old value without raising."""
    received: list[date] = []
    editor = _date_editor(received)

    applied = editor.handle(EditEvent(0, "not a date", EditTrigger.COMMIT))

    assert (applied, received, editor.value, editor.draft) == (
        False,
        [],
        date(2024, 1, 1),
        "2024-01-01",
    )


def test_read_only_cell_ignores_edits() -> None:
    """Non-editable cells should never notify."""
    received: list[date] = []
    editor = _date_editor(received, editable=False)

    applied = editor.handle(EditEvent(0, "2024-03-03", EditTrigger.COMMIT))

    assert (applied, received) == (False, [])
