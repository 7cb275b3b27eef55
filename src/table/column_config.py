"""Column configuration for dataclass row types.

Row types are plain dataclasses. Fields declare their column options with
table_column(), and TableSchema reads them back into ordered column
definitions with a codec for each visible column.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar, get_type_hints

from core.constants import COLUMN_METADATA_KEY
from core.errors import TableSchemaError
from core.types import ColumnOptions
from table.cell_codecs import DISPLAY_ONLY_CODEC, CellCodec, codec_for_type

T = TypeVar("T")


def table_column(
    *,
    editable: bool = False,
    sortable: bool | None = None,
    format_spec: str | None = None,
    key: bool = False,
    skip: bool = False,
    default: Any = dataclasses.MISSING,
    default_factory: Callable[[], Any] | Any = dataclasses.MISSING,
) -> Any:
    """Declare a dataclass field with table column options.

    Args:
        editable: Cell text may be edited and committed.
        sortable: Override the table-level sortable default.
        format_spec: Format string overriding the type's default format.
        key: Field is the row identity.
        skip: Field is hidden from the table.
        default: Field default value.
        default_factory: Field default factory.

    Returns:
        A dataclasses.field carrying ColumnOptions metadata.
    """
    options = ColumnOptions(
        editable=editable,
        sortable=sortable,
        format_spec=format_spec,
        key=key,
        skip=skip,
    )
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={COLUMN_METADATA_KEY: options},
    )


@dataclass(frozen=True)
class ColumnDefinition:
    """One visible column of a table.

    Attributes:
        index: Visible column index, starting at 0.
        name: Row field name.
        value_type: Resolved field annotation.
        editable: Cell text may be edited.
        sortable: Header clicks change the sort.
        format_spec: Optional format override.
        codec: Format/parse pair for the field type.
    """

    index: int
    name: str
    value_type: Any
    editable: bool
    sortable: bool
    format_spec: str | None
    codec: CellCodec[Any]

    def format(self, value: Any) -> str:
        return self.codec.format(value, self.format_spec)


class TableSchema(Generic[T]):
    """Visible columns and identity of a dataclass row type."""

    def __init__(
        self,
        row_type: type[T],
        columns: Sequence[ColumnDefinition],
        key_field: str | None,
    ) -> None:
        self._row_type = row_type
        self._columns = tuple(columns)
        self._key_field = key_field

    @classmethod
    def from_dataclass(cls, row_type: type[T], sortable: bool = False) -> "TableSchema[T]":
        """Build a schema from a dataclass row type.

        Args:
            row_type: Dataclass whose fields define the columns.
            sortable: Table-level default for columns that do not set sortable.

        Returns:
            Schema with one column per non-skipped field.

        Raises:
            TableSchemaError: If the type is not a dataclass, declares more than
                one key field, or has an editable column of an unsupported type
                or with a format its parser cannot read back.
        """
        if not dataclasses.is_dataclass(row_type):
            raise TableSchemaError(
                f"Row type {row_type!r} is not a dataclass. "
                "Declare table rows with @dataclass."
            )
        type_hints = get_type_hints(row_type, include_extras=True)
        columns: list[ColumnDefinition] = []
        key_fields: list[str] = []
        for row_field in dataclasses.fields(row_type):
            options = row_field.metadata.get(COLUMN_METADATA_KEY, ColumnOptions())
            if options.key:
                key_fields.append(row_field.name)
            if options.skip:
                continue
            value_type = type_hints[row_field.name]
            columns.append(
                ColumnDefinition(
                    index=len(columns),
                    name=row_field.name,
                    value_type=value_type,
                    editable=options.editable,
                    sortable=sortable if options.sortable is None else options.sortable,
                    format_spec=options.format_spec,
                    codec=_resolve_codec(value_type, options),
                )
            )
        if len(key_fields) > 1:
            raise TableSchemaError(
                f"Row type {row_type.__name__} declares several key fields: "
                f"{', '.join(key_fields)}. Mark exactly one field with key=True."
            )
        return cls(row_type, columns, key_fields[0] if key_fields else None)

    @property
    def row_type(self) -> type[T]:
        return self._row_type

    @property
    def columns(self) -> tuple[ColumnDefinition, ...]:
        return self._columns

    @property
    def key_field(self) -> str | None:
        return self._key_field

    def column(self, index: int) -> ColumnDefinition:
        """Return the column at a visible index.

        Raises:
            TableSchemaError: If the index is out of range.
        """
        if not 0 <= index < len(self._columns):
            raise TableSchemaError(
                f"Column index {index} is out of range for {self._row_type.__name__} "
                f"with {len(self._columns)} visible columns."
            )
        return self._columns[index]

    def key_of(self, row: T) -> Any:
        """Extract the row identity from the key field.

        Raises:
            TableSchemaError: If the row type declares no key field.
        """
        if self._key_field is None:
            raise TableSchemaError(
                f"Row type {self._row_type.__name__} has no key field. "
                "Mark the identity field with table_column(key=True)."
            )
        return getattr(row, self._key_field)

    def value_of(self, row: T, column_index: int) -> Any:
        return getattr(row, self.column(column_index).name)

    def format_row(self, row: T) -> list[str]:
        """Render every visible cell of a row as display text."""
        return [column.format(getattr(row, column.name)) for column in self._columns]

    def with_value(self, row: T, column_index: int, value: Any) -> T:
        """Return a copy of the row with one column replaced."""
        return dataclasses.replace(row, **{self.column(column_index).name: value})  # type: ignore[type-var]


def _resolve_codec(value_type: Any, options: ColumnOptions) -> CellCodec[Any]:
    try:
        codec = codec_for_type(value_type)
    except TableSchemaError:
        if options.editable:
            raise
        return DISPLAY_ONLY_CODEC
    if options.editable:
        codec.check_format(options.format_spec)
    return codec
