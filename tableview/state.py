"""
Interaction state transitions for a table view.

Every function takes the current ViewState and returns a new one; nothing is
mutated in place. Transitions that narrow or reorder the result set reset the
page to 1. Page numbers are not validated here, because the pagination
stage clamps them on the next recomputation.
"""

from __future__ import annotations

from typing import Any, Optional

from tableview.domain.models import (
    Direction,
    PageResult,
    PaginationState,
    SortConfig,
    ViewState,
)
from tableview.domain.schema import TableSchema


def initial_state(schema: TableSchema, page_size: int = 10) -> ViewState:
    """Defaults: sorted ascending by the schema's default key, page 1."""
    return ViewState(
        query="",
        sort=SortConfig(key=schema.default_sort_key, direction=Direction.ASC),
        pagination=PaginationState(page_size=page_size, current_page=1),
    )


def _with_page(state: ViewState, page: int) -> ViewState:
    pagination = state.pagination.model_copy(update={"current_page": page})
    return state.model_copy(update={"pagination": pagination})


def parse_page_input(value: Any) -> Optional[int]:
    """
    Interpret a page-jump input; None when it is not an integer.

    Accepts ints and strings such as ``"3"`` or ``" 3 "``. Empty strings,
    bools, floats and non-numeric text are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def set_query(state: ViewState, query: str) -> ViewState:
    return _with_page(state.model_copy(update={"query": query}), 1)


def toggle_sort(state: ViewState, field: str, schema: TableSchema) -> ViewState:
    """
    Sort by ``field``: flip the direction if it is already the sort key,
    otherwise switch to it ascending.
    """
    schema.field(field)
    current = state.sort
    if current.key == field:
        sort = SortConfig(key=field, direction=current.direction.flipped())
    else:
        sort = SortConfig(key=field, direction=Direction.ASC)
    return _with_page(state.model_copy(update={"sort": sort}), 1)


def set_page_size(state: ViewState, page_size: int) -> ViewState:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
    return state.model_copy(
        update={"pagination": PaginationState(page_size=page_size, current_page=1)}
    )


def go_to_page(state: ViewState, value: Any) -> ViewState:
    page = parse_page_input(value)
    if page is None:
        return state
    return _with_page(state, page)


def first_page(state: ViewState) -> ViewState:
    return _with_page(state, 1)


def prev_page(state: ViewState, page: PageResult) -> ViewState:
    return _with_page(state, max(1, page.effective_page - 1))


def next_page(state: ViewState, page: PageResult) -> ViewState:
    return _with_page(state, min(page.total_pages, page.effective_page + 1))


def last_page(state: ViewState, page: PageResult) -> ViewState:
    return _with_page(state, page.total_pages)


__all__ = [
    "first_page",
    "go_to_page",
    "initial_state",
    "last_page",
    "next_page",
    "parse_page_input",
    "prev_page",
    "set_page_size",
    "set_query",
    "toggle_sort",
]
