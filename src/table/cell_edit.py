"""Cell edit protocol.

A cell shows its value through the column codec's formatter. Keystrokes
only update the draft text. When the input commits (blur or an explicit
commit), the draft is parsed and, on success, handed to the update
callback. Text that fails to parse is discarded and the previous value
stays in place; nothing is raised to the caller or the storage.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from core.errors import CellParseError
from core.logging_config import get_logger
from core.types import EditEvent
from table.cell_codecs import CellCodec

V = TypeVar("V")

_LOGGER = get_logger(__name__)


class CellEditor(Generic[V]):
    """Edit state of one cell.

    Args:
        codec: Format/parse pair for the cell's value type.
        value: Current value.
        on_change: Called with each successfully parsed committed value.
        format_spec: Optional column format overriding the codec default.
        editable: When false every edit event is ignored.
    """

    def __init__(
        self,
        codec: CellCodec[V],
        value: V,
        on_change: Callable[[V], None],
        format_spec: str | None = None,
        editable: bool = True,
    ) -> None:
        self._codec = codec
        self._value = value
        self._on_change = on_change
        self._format_spec = format_spec
        self._editable = editable
        self._draft: str | None = None

    @property
    def value(self) -> V:
        return self._value

    @property
    def text(self) -> str:
        """Display text of the current value."""
        return self._codec.format(self._value, self._format_spec)

    @property
    def draft(self) -> str:
        """Text currently in the input, the display text when untouched."""
        return self.text if self._draft is None else self._draft

    def handle(self, event: EditEvent) -> bool:
        """Apply one edit event.

        Args:
            event: Keystroke or commit event for this cell.

        Returns:
            True when a committed value was parsed and passed to on_change.
        """
        if not self._editable:
            return False
        self._draft = event.text
        if not event.trigger.is_commit:
            return False
        # Parse failures are dropped without surfacing; only a debug event is logged.
        try:
            parsed = self._codec.parse(event.text, self._format_spec)
        except CellParseError as error:
            _LOGGER.debug(
                "cell_edit_discarded",
                codec=self._codec.name,
                column_index=event.column_index,
                reason=str(error),
            )
            self._draft = None
            return False
        self._value = parsed
        self._draft = None
        self._on_change(parsed)
        return True
