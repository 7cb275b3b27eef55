"""Text round-trip codecs for cell values.

Each editable value type has one codec pairing a formatter for display
with a parser for committed edits. A column picks its codec from the
declared type of its row field, and may override the type's default
format string.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Annotated, Any, Callable, Generic, TypeVar, get_args, get_origin

from core.constants import (
    DEFAULT_AWARE_DATETIME_FORMAT,
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_TIME_FORMAT,
    FALSE_TEXT_VALUES,
    TRUE_TEXT_VALUES,
)
from core.errors import CellParseError, TableSchemaError

V = TypeVar("V")

Formatter = Callable[[Any, str], str]
Parser = Callable[[str, str], Any]

COLON_OFFSET_DIRECTIVE = "%:z"

_INT_BASES = {"x": 16, "X": 16, "o": 8, "b": 2}


class _UtcMarker:
    def __repr__(self) -> str:
        return "UTC"


UTC_MARKER = _UtcMarker()

# Timezone-aware timestamp field. Parsed values are normalized to UTC.
UtcDateTime = Annotated[datetime, UTC_MARKER]


@dataclass(frozen=True)
class CellCodec(Generic[V]):
    """Format/parse pair for one value type.

    Attributes:
        name: Codec name used in log events and errors.
        default_format: Format string used when a column sets none.
        formatter: Callable rendering a value with a format string.
        parser: Callable reading a value from text with a format string.
        presentation_types: Format presentation types the parser can read
            back, None when any format string is accepted.
    """

    name: str
    default_format: str
    formatter: Formatter
    parser: Parser
    presentation_types: tuple[str, ...] | None = None

    def check_format(self, format_spec: str | None) -> None:
        """Reject column formats whose output the parser cannot read.

        Args:
            format_spec: Optional column format.

        Raises:
            TableSchemaError: If the format uses an unsupported presentation type.
        """
        if format_spec is None or self.presentation_types is None:
            return
        if _presentation_type(format_spec) not in self.presentation_types:
            allowed = ", ".join(repr(item) for item in self.presentation_types)
            raise TableSchemaError(
                f"Format '{format_spec}' cannot be parsed back as {self.name}. "
                f"Use one of the presentation types: {allowed}."
            )

    def format(self, value: V, format_spec: str | None = None) -> str:
        """Render a value as display text.

        Args:
            value: Cell value.
            format_spec: Optional column format overriding the default.

        Returns:
            Display text.
        """
        return self.formatter(value, self._resolve(format_spec))

    def parse(self, text: str, format_spec: str | None = None) -> V:
        """Reconstruct a value from committed cell text.

        Args:
            text: Edited cell text.
            format_spec: Optional column format overriding the default.

        Returns:
            Parsed value.

        Raises:
            CellParseError: If the text does not match the type and format.
        """
        resolved = self._resolve(format_spec)
        try:
            return self.parser(text, resolved)
        except (ValueError, TypeError) as error:
            raise CellParseError(
                f"Cannot parse '{text}' as {self.name} with format '{resolved}': {error}"
            ) from error

    def _resolve(self, format_spec: str | None) -> str:
        return self.default_format if format_spec is None else format_spec


def _format_with_strftime(value: date | time, format_spec: str) -> str:
    return value.strftime(format_spec)


def _parse_date(text: str, format_spec: str) -> date:
    return datetime.strptime(text.strip(), format_spec).date()


def _parse_datetime(text: str, format_spec: str) -> datetime:
    return datetime.strptime(text.strip(), format_spec)


def _parse_time(text: str, format_spec: str) -> time:
    return datetime.strptime(text.strip(), format_spec).time()


def _format_utc_datetime(value: datetime, format_spec: str) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    format_spec = format_spec.replace(COLON_OFFSET_DIRECTIVE, _colon_offset(value))
    return value.strftime(format_spec)


def _colon_offset(value: datetime) -> str:
    offset = value.strftime("%z")
    parts = [offset[:3], offset[3:5]]
    if len(offset) > 5:
        parts.append(offset[5:7])
    return ":".join(parts)


def _parse_utc_datetime(text: str, format_spec: str) -> datetime:
    # strptime %z also reads offsets written with a colon.
    format_spec = format_spec.replace(COLON_OFFSET_DIRECTIVE, "%z")
    parsed = datetime.strptime(text.strip(), format_spec)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _format_builtin(value: object, format_spec: str) -> str:
    return format(value, format_spec)


def _strip_number(text: str, format_spec: str) -> str:
    stripped = text.strip()
    if "," in format_spec:
        stripped = stripped.replace(",", "")
    if "_" in format_spec:
        stripped = stripped.replace("_", "")
    return stripped


def _presentation_type(format_spec: str) -> str:
    if format_spec and (format_spec[-1].isalpha() or format_spec[-1] == "%"):
        return format_spec[-1]
    return ""


def _parse_int(text: str, format_spec: str) -> int:
    base = _INT_BASES.get(_presentation_type(format_spec), 10)
    return int(_strip_number(text, format_spec), base)


def _parse_float(text: str, format_spec: str) -> float:
    stripped = _strip_number(text, format_spec)
    if _presentation_type(format_spec) == "%":
        return float(stripped.rstrip("%")) / 100
    return float(stripped)


def _parse_str(text: str, format_spec: str) -> str:
    return text


def _format_bool(value: bool, format_spec: str) -> str:
    return "true" if value else "false"


def _parse_bool(text: str, format_spec: str) -> bool:
    normalized = text.strip().lower()
    if normalized in TRUE_TEXT_VALUES:
        return True
    if normalized in FALSE_TEXT_VALUES:
        return False
    raise ValueError(f"expected one of {TRUE_TEXT_VALUES + FALSE_TEXT_VALUES}")


def _format_display_only(value: object, format_spec: str) -> str:
    return str(value)


def _parse_display_only(text: str, format_spec: str) -> Any:
    raise ValueError("column type has no text parser")


DATE_CODEC: CellCodec[date] = CellCodec(
    "date", DEFAULT_DATE_FORMAT, _format_with_strftime, _parse_date
)
DATETIME_CODEC: CellCodec[datetime] = CellCodec(
    "datetime", DEFAULT_DATETIME_FORMAT, _format_with_strftime, _parse_datetime
)
UTC_DATETIME_CODEC: CellCodec[datetime] = CellCodec(
    "utc_datetime", DEFAULT_AWARE_DATETIME_FORMAT, _format_utc_datetime, _parse_utc_datetime
)
TIME_CODEC: CellCodec[time] = CellCodec(
    "time", DEFAULT_TIME_FORMAT, _format_with_strftime, _parse_time
)
STR_CODEC: CellCodec[str] = CellCodec("str", "", _format_builtin, _parse_str)
INT_CODEC: CellCodec[int] = CellCodec(
    "int", "", _format_builtin, _parse_int, ("", "d", "n", "x", "X", "o", "b")
)
FLOAT_CODEC: CellCodec[float] = CellCodec(
    "float", "", _format_builtin, _parse_float, ("", "e", "E", "f", "F", "g", "G", "n", "%")
)
BOOL_CODEC: CellCodec[bool] = CellCodec("bool", "", _format_bool, _parse_bool)
DISPLAY_ONLY_CODEC: CellCodec[Any] = CellCodec(
    "display_only", "", _format_display_only, _parse_display_only
)

# datetime is a subclass of date and bool of int, so lookups are by exact type.
_CODECS_BY_TYPE: dict[type, CellCodec[Any]] = {
    date: DATE_CODEC,
    datetime: DATETIME_CODEC,
    time: TIME_CODEC,
    str: STR_CODEC,
    int: INT_CODEC,
    float: FLOAT_CODEC,
    bool: BOOL_CODEC,
}


def codec_for_type(value_type: Any) -> CellCodec[Any]:
    """Select the codec for a declared field type.

    Args:
        value_type: Resolved field annotation, e.g. `date` or `UtcDateTime`.

    Returns:
        Codec handling the type.

    Raises:
        TableSchemaError: If no codec supports the type.
    """
    if get_origin(value_type) is Annotated:
        base_type, *markers = get_args(value_type)
        if base_type is datetime and UTC_MARKER in markers:
            return UTC_DATETIME_CODEC
        return codec_for_type(base_type)
    codec = _CODECS_BY_TYPE.get(value_type) if isinstance(value_type, type) else None
    if codec is None:
        raise TableSchemaError(
            f"No cell codec for field type {value_type!r}. "
            "Use a supported type (str, int, float, bool, date, datetime, time, "
            "UtcDateTime) or mark the column as not editable."
        )
    return codec
