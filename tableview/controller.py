"""
View controller: owns one table's interaction state and recomputes the
pipeline after every transition.

Usage:
    from tableview.controller import ViewController
    from tableview.sample_data import sample_users
    from tableview.domain.schema import USER_SCHEMA

    view = ViewController(sample_users(), USER_SCHEMA)
    result = view.set_query("admin")
    print(result.page.summary())

Each public operation returns the fresh TableView. The effective (clamped)
page is written back into the state, so ``controller.state`` never points
past the end of the current result set.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple

from tableview import state as transitions
from tableview.config import Settings, get_settings
from tableview.domain.models import PageResult, SortConfig, TableView, ViewState
from tableview.domain.schema import TableSchema, infer_schema
from tableview.pipeline import filter_records, paginate, sort_records
from tableview.utils.logging import get_logger

log = get_logger(__name__)


class ViewController:
    """
    Stateful facade over the pure transitions in ``tableview.state``.

    Parameters
    ----------
    records : Sequence
        The record store. It is copied to a tuple and never mutated.
    schema : TableSchema | None
        Field table for the records. Inferred from the first record when omitted.
    settings : Settings | None
        Source of the page size default and the display locale/timezone.
    """

    def __init__(
        self,
        records: Sequence[Any],
        schema: Optional[TableSchema] = None,
        *,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._records: Tuple[Any, ...] = tuple(records)
        self.schema = schema or infer_schema(self._records)
        self._state = transitions.initial_state(self.schema, self._settings.default_page_size)
        self._filtered: Optional[Tuple[str, List[Any]]] = None
        self._sorted: Optional[Tuple[Tuple[str, SortConfig], List[Any]]] = None
        self._view = self._recompute("init")

    @property
    def records(self) -> Tuple[Any, ...]:
        return self._records

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def view(self) -> TableView:
        return self._view

    @property
    def page(self) -> PageResult:
        return self._view.page

    def _filter(self) -> List[Any]:
        cache_key = self._state.query
        if self._filtered is None or self._filtered[0] != cache_key:
            matching = filter_records(
                self._records,
                self._state.query,
                self.schema,
                locale=self._settings.display_locale,
                tz=self._settings.display_timezone,
            )
            self._filtered = (cache_key, matching)
        return self._filtered[1]

    def _sort(self, matching: List[Any]) -> List[Any]:
        cache_key = (self._state.query, self._state.sort)
        if self._sorted is None or self._sorted[0] != cache_key:
            self._sorted = (cache_key, sort_records(matching, self._state.sort, self.schema))
        return self._sorted[1]

    def _recompute(self, operation: str) -> TableView:
        ordered = self._sort(self._filter())
        pagination = self._state.pagination
        page = paginate(ordered, pagination.page_size, pagination.current_page)
        if page.effective_page != pagination.current_page:
            self._state = transitions.go_to_page(self._state, page.effective_page)
        self._view = TableView(state=self._state, page=page)
        log.debug(
            "Recomputed table view",
            extra={
                "operation": operation,
                "query": self._state.query,
                "sort_key": self._state.sort.key,
                "direction": self._state.sort.direction.value,
                "page": page.effective_page,
                "total_pages": page.total_pages,
                "total_count": page.total_count,
            },
        )
        return self._view

    def _apply(self, operation: str, transition: Callable[[ViewState], ViewState]) -> TableView:
        self._state = transition(self._state)
        return self._recompute(operation)

    def refresh(self) -> TableView:
        return self._recompute("refresh")

    def set_records(self, records: Sequence[Any]) -> TableView:
        """Replace the record store, keeping query, sort and page (clamped)."""
        self._records = tuple(records)
        self._filtered = None
        self._sorted = None
        return self._recompute("set_records")

    def set_query(self, query: str) -> TableView:
        return self._apply("set_query", lambda s: transitions.set_query(s, query))

    def toggle_sort(self, field: str) -> TableView:
        return self._apply("toggle_sort", lambda s: transitions.toggle_sort(s, field, self.schema))

    def set_page_size(self, page_size: int) -> TableView:
        return self._apply("set_page_size", lambda s: transitions.set_page_size(s, page_size))

    def go_to_page(self, value: Any) -> TableView:
        return self._apply("go_to_page", lambda s: transitions.go_to_page(s, value))

    def first_page(self) -> TableView:
        return self._apply("first_page", transitions.first_page)

    def prev_page(self) -> TableView:
        return self._apply("prev_page", lambda s: transitions.prev_page(s, self.page))

    def next_page(self) -> TableView:
        return self._apply("next_page", lambda s: transitions.next_page(s, self.page))

    def last_page(self) -> TableView:
        return self._apply("last_page", lambda s: transitions.last_page(s, self.page))


__all__ = ["ViewController"]
