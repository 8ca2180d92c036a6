"""
The filter → sort → paginate pipeline.

Each stage is a pure function over an in-memory sequence; ``run_pipeline``
composes them in their fixed order for one ViewState.
"""

from __future__ import annotations

from typing import Any, Sequence

from tableview.domain.models import PageResult, ViewState
from tableview.domain.schema import TableSchema
from tableview.pipeline.filtering import filter_records, normalize_query, search_text
from tableview.pipeline.pagination import clamp_page, paginate, total_pages_for
from tableview.pipeline.sorting import sort_key_for, sort_records


def run_pipeline(
    records: Sequence[Any],
    state: ViewState,
    schema: TableSchema,
    *,
    locale: str = "en-US",
    tz: str = "UTC",
) -> PageResult:
    """Run all three stages for ``state`` and return the resulting page."""
    matching = filter_records(records, state.query, schema, locale=locale, tz=tz)
    ordered = sort_records(matching, state.sort, schema)
    return paginate(ordered, state.pagination.page_size, state.pagination.current_page)


__all__ = [
    "clamp_page",
    "filter_records",
    "normalize_query",
    "paginate",
    "run_pipeline",
    "search_text",
    "sort_key_for",
    "sort_records",
    "total_pages_for",
]
