"""
Filter stage: reduce a record store to the records matching a free-text query.

A record matches when the trimmed, case-folded query is a substring of the
case-folded, space-joined display values of the schema's searchable fields.
Timestamps take part in their rendered form (see ``utils.display``), so the
display locale is an explicit input.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from tableview.domain.schema import TableSchema


def normalize_query(query: str) -> str:
    return query.strip().casefold()


def search_text(record: Any, schema: TableSchema, locale: str = "en-US", tz: str = "UTC") -> str:
    """Case-folded haystack the query is matched against."""
    return " ".join(spec.render(record, locale=locale, tz=tz) for spec in schema.searchable).casefold()


def filter_records(
    records: Sequence[Any],
    query: str,
    schema: TableSchema,
    *,
    locale: str = "en-US",
    tz: str = "UTC",
) -> List[Any]:
    """
    Return the records matching ``query``, in source order.

    An empty (or whitespace-only) query matches everything.
    """
    needle = normalize_query(query)
    if not needle:
        return list(records)
    return [record for record in records if needle in search_text(record, schema, locale, tz)]


__all__ = ["filter_records", "normalize_query", "search_text"]
