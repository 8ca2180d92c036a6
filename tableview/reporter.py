from __future__ import annotations

from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tableview.domain.models import Direction, TableView
from tableview.domain.schema import FieldSpec, FieldType, TableSchema

_ROLE_STYLES = {"Admin": "magenta", "Editor": "blue"}
_STATUS_STYLES = {"active": "green", "inactive": "red"}


def _sort_icon(view: TableView, spec: FieldSpec) -> str:
    sort = view.state.sort
    if sort.key != spec.name:
        return "[dim]↕[/dim]"
    return "↑" if sort.direction is Direction.ASC else "↓"


def _cell(spec: FieldSpec, record: Any, locale: str, tz: str) -> str:
    text = spec.render(record, locale=locale, tz=tz)
    if spec.name == "role" and text in _ROLE_STYLES:
        return f"[{_ROLE_STYLES[text]}]{text}[/]"
    if spec.name == "status" and text in _STATUS_STYLES:
        return f"[{_STATUS_STYLES[text]}]{text}[/]"
    return text


def build_table(
    view: TableView,
    schema: TableSchema,
    locale: str = "en-US",
    tz: str = "UTC",
    title: Optional[str] = None,
) -> Table:
    """
    Render one page of a table view as a rich table.

    Column headers carry the sort indicator; the caption carries the
    "Showing X to Y of Z entries" window and the page position.
    """
    page = view.page
    caption = f"{page.summary()} │ Page {page.effective_page} / {page.total_pages}"
    if view.state.query.strip():
        caption = f'{caption} │ Search: "{view.state.query.strip()}"'

    table = Table(title=title, box=box.ROUNDED, caption=caption)
    for spec in schema.fields:
        justify = "right" if spec.type is FieldType.NUMERIC else "left"
        table.add_column(f"{spec.heading} {_sort_icon(view, spec)}", justify=justify, no_wrap=True)

    if not page.items:
        table.add_row("[yellow]No records found[/yellow]", *([""] * (len(schema.fields) - 1)))
    for record in page.items:
        table.add_row(*(_cell(spec, record, locale, tz) for spec in schema.fields))
    return table


def print_view(
    view: TableView,
    schema: TableSchema,
    locale: str = "en-US",
    tz: str = "UTC",
    title: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    (console or Console()).print(build_table(view, schema, locale=locale, tz=tz, title=title))


def view_payload(view: TableView, schema: TableSchema) -> Dict[str, Any]:
    """JSON-friendly dict of a table view: state, page metadata and rows."""
    page = view.page
    rows = []
    for record in page.items:
        if hasattr(record, "model_dump"):
            rows.append(record.model_dump(mode="json"))
        else:
            rows.append({spec.name: spec.value(record) for spec in schema.fields})
    return {
        "query": view.state.query,
        "sort": view.state.sort.model_dump(mode="json"),
        "page": page.effective_page,
        "page_size": page.page_size,
        "total_pages": page.total_pages,
        "total_count": page.total_count,
        "window_start": page.window_start,
        "window_end": page.window_end,
        "items": rows,
    }


__all__ = ["build_table", "print_view", "view_payload"]
