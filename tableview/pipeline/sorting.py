"""
Sort stage: total order over the filtered records for one field.

Comparison policy by field type:
- numeric: numeric value
- timestamp: parsed instant; unparsable values sort after every valid one
- string: locale-aware collation key

Descending reverses each comparison rather than the output, so records
with equal keys keep their source order in both directions.
"""

from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any, Callable, List, Sequence, Tuple

from tableview.domain.models import Direction, SortConfig
from tableview.domain.schema import FieldSpec, FieldType, TableSchema
from tableview.utils.display import collation_key, format_plain, parse_timestamp

# (0, value) for comparable values; (1, 0) pushes missing/unparsable values last.
_MISSING: Tuple[int, Any] = (1, 0)


def _numeric_key(value: Any) -> Tuple[int, Any]:
    if isinstance(value, (Real, Decimal)) and not isinstance(value, bool) and value == value:
        return (0, value)
    return _MISSING


def _timestamp_key(value: Any) -> Tuple[int, Any]:
    parsed = parse_timestamp(value)
    if parsed is None:
        return _MISSING
    return (0, parsed.timestamp())


def _string_key(value: Any) -> Tuple[int, Any]:
    return (0, collation_key(format_plain(value)))


def sort_key_for(spec: FieldSpec) -> Callable[[Any], Tuple[int, Any]]:
    """Build the key function ``sorted`` uses for one field."""
    if spec.type is FieldType.NUMERIC:
        convert = _numeric_key
    elif spec.type is FieldType.TIMESTAMP:
        convert = _timestamp_key
    else:
        convert = _string_key
    return lambda record: convert(spec.value(record))


def sort_records(records: Sequence[Any], sort: SortConfig, schema: TableSchema) -> List[Any]:
    """
    Return a new list ordered by ``sort``; the input is left untouched.

    ``sort.key`` of None keeps source order.
    """
    if sort.key is None:
        return list(records)
    key = sort_key_for(schema.field(sort.key))
    return sorted(records, key=key, reverse=sort.direction is Direction.DESC)


__all__ = ["sort_key_for", "sort_records"]
