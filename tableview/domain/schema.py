"""
Field schemas: which fields a listing shows, how each is typed, and which
ones feed the free-text search.

The pipeline stages never look at record classes directly; they read values
through a TableSchema so the generic listing and the user listing share one
implementation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

from tableview.utils.display import format_number, format_plain, format_timestamp

_TIMESTAMP_NAMES = frozenset({"created_at", "createdAt"})


class FieldType(str, Enum):
    NUMERIC = "numeric"
    STRING = "string"
    TIMESTAMP = "timestamp"


def get_value(record: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-bearing record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: FieldType = FieldType.STRING
    label: str = ""
    searchable: bool = True
    timestamp_style: str = "datetime"
    # Pins this field's timestamp rendering regardless of the view locale.
    locale: Optional[str] = None

    @property
    def heading(self) -> str:
        return self.label or self.name.replace("_", " ").capitalize()

    def value(self, record: Any) -> Any:
        return get_value(record, self.name)

    def render(self, record: Any, locale: str = "en-US", tz: str = "UTC") -> str:
        """Natural display form of this field's value."""
        value = self.value(record)
        if self.type is FieldType.TIMESTAMP:
            return format_timestamp(
                value, locale=self.locale or locale, tz=tz, style=self.timestamp_style
            )
        if self.type is FieldType.NUMERIC and value is not None:
            return format_number(value)
        return format_plain(value)


@dataclass(frozen=True)
class TableSchema:
    """
    Ordered field table for one listing.

    Attributes
    ----------
    fields : tuple[FieldSpec, ...]
        Columns in display order.
    default_sort_key : str | None
        Field the view sorts by before the user picks one.
    """

    fields: Tuple[FieldSpec, ...]
    default_sort_key: Optional[str] = "id"
    _index: Mapping[str, FieldSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {spec.name: spec for spec in self.fields})
        if self.default_sort_key is not None:
            self.field(self.default_sort_key)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def searchable(self) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.searchable)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def field(self, name: str) -> FieldSpec:
        try:
            return self._index[name]
        except KeyError:
            raise ValueError(
                f"Unknown field '{name}'. Available: {', '.join(self.names)}"
            ) from None


RECORD_SCHEMA = TableSchema(
    fields=(
        FieldSpec("id", FieldType.NUMERIC, "ID"),
        FieldSpec("name", FieldType.STRING, "Name"),
        FieldSpec("email", FieldType.STRING, "Email"),
        FieldSpec("role", FieldType.STRING, "Role"),
        FieldSpec("created_at", FieldType.TIMESTAMP, "Created at"),
    ),
)

# The user listing searches by name, email, and role only, and always shows
# join dates in Indonesian short form.
USER_SCHEMA = TableSchema(
    fields=(
        FieldSpec("id", FieldType.NUMERIC, "ID", searchable=False),
        FieldSpec("name", FieldType.STRING, "Name"),
        FieldSpec("email", FieldType.STRING, "Email"),
        FieldSpec("role", FieldType.STRING, "Role"),
        FieldSpec(
            "created_at",
            FieldType.TIMESTAMP,
            "Created At",
            searchable=False,
            timestamp_style="date",
            locale="id-ID",
        ),
        FieldSpec("status", FieldType.STRING, "Status", searchable=False),
    ),
)


def _field_names(record: Any) -> Sequence[str]:
    if isinstance(record, Mapping):
        return [str(key) for key in record.keys()]
    model_fields = getattr(type(record), "model_fields", None)
    if model_fields is not None:
        return list(model_fields)
    return [name for name in vars(record) if not name.startswith("_")]


def _infer_type(name: str, value: Any) -> FieldType:
    if isinstance(value, bool):
        return FieldType.STRING
    if isinstance(value, (int, float, Decimal)):
        return FieldType.NUMERIC
    if isinstance(value, date) or name in _TIMESTAMP_NAMES:
        return FieldType.TIMESTAMP
    return FieldType.STRING


def infer_schema(records: Iterable[Any]) -> TableSchema:
    """
    Build a schema for arbitrary records from the first one.

    Empty input yields the generic record schema.
    """
    first = next(iter(records), None)
    if first is None:
        return RECORD_SCHEMA
    names = _field_names(first)
    specs = tuple(FieldSpec(name, _infer_type(name, get_value(first, name))) for name in names)
    if not specs:
        return TableSchema(fields=(), default_sort_key=None)
    default_key = "id" if "id" in names else specs[0].name
    return TableSchema(fields=specs, default_sort_key=default_key)


__all__ = [
    "FieldSpec",
    "FieldType",
    "RECORD_SCHEMA",
    "TableSchema",
    "USER_SCHEMA",
    "get_value",
    "infer_schema",
]
