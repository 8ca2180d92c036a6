from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from tableview.config import Settings, get_settings
from tableview.controller import ViewController
from tableview.domain.models import SortConfig
from tableview.domain.schema import RECORD_SCHEMA, USER_SCHEMA, TableSchema
from tableview.pipeline import filter_records, paginate, sort_records
from tableview.reporter import print_view, view_payload
from tableview.sample_data import generate_records, read_records_csv, sample_users
from tableview.state import parse_page_input
from tableview.utils.logging import configure_logging, get_logger
from tableview.utils.profiler import profile_block

app = typer.Typer(help="Search, sort and paginate record listings.")
log = get_logger(__name__)

TABLES = ("records", "users")


def _settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _load(table: str, csv_path: Optional[Path]):
    settings = _settings()
    if table not in TABLES:
        raise typer.BadParameter(f"Unknown table '{table}'. Available: {', '.join(TABLES)}")
    schema: TableSchema = USER_SCHEMA if table == "users" else RECORD_SCHEMA
    if csv_path is not None:
        try:
            records = read_records_csv(csv_path)
        except (OSError, ValueError) as exc:
            raise typer.BadParameter(f"Cannot load {csv_path}: {exc}") from exc
    elif table == "users":
        records = sample_users()
    else:
        records = generate_records(settings.sample_rows, seed=settings.sample_seed)
    log.info(
        "Loaded record store",
        extra={"table": table, "rows": len(records), "source": str(csv_path or "sample")},
    )
    return records, schema


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = _settings()
    typer.echo(
        f"page_size={settings.default_page_size} options={settings.page_size_options} | "
        f"locale={settings.display_locale} tz={settings.display_timezone} | "
        f"sample_rows={settings.sample_rows} seed={settings.sample_seed} | "
        f"log_level={settings.log_level}"
    )


@app.command()
def show(
    table: str = typer.Option("users", "--table", "-t", help="Listing to show: records or users."),
    csv_path: Optional[Path] = typer.Option(
        None, "--csv", help="Load the record store from a CSV file instead of sample data."
    ),
    query: str = typer.Option("", "--query", "-q", help="Free-text search."),
    sort: Optional[str] = typer.Option(None, "--sort", "-s", help="Field to sort by."),
    desc: bool = typer.Option(False, "--desc", help="Sort descending."),
    page: str = typer.Option("1", "--page", "-p", help="Page to show (clamped to the last page)."),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", help="Rows per page (default from settings)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the page as JSON."),
) -> None:
    """
    Render one page of a listing after search and sort.
    """
    settings = _settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    records, schema = _load(table, csv_path)
    if page_size is not None and page_size not in settings.page_size_options:
        typer.echo(
            f"Note: page size {page_size} is not one of {settings.page_size_options}.", err=True
        )

    controller = ViewController(records, schema, settings=settings)
    try:
        if page_size is not None:
            controller.set_page_size(page_size)
        if sort is not None:
            if controller.state.sort.key != sort:
                controller.toggle_sort(sort)
            if desc:
                controller.toggle_sort(sort)
        elif desc and controller.state.sort.key is not None:
            controller.toggle_sort(controller.state.sort.key)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    controller.set_query(query)
    view = controller.go_to_page(page)

    if as_json:
        typer.echo(json.dumps(view_payload(view, schema), indent=2, default=str))
        return
    print_view(
        view,
        schema,
        locale=settings.display_locale,
        tz=settings.display_timezone,
        title="Users" if table == "users" else "Records",
    )


@app.command()
def bench(
    rows: int = typer.Option(100_000, "--rows", "-r", help="Number of generated records."),
    query: str = typer.Option("admin", "--query", "-q", help="Search used by the filter stage."),
    sort: str = typer.Option("created_at", "--sort", "-s", help="Field to sort by."),
    page: str = typer.Option("1", "--page", "-p", help="Page to slice."),
) -> None:
    """
    Profile each pipeline stage over a generated record store.
    """
    settings = _settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    try:
        RECORD_SCHEMA.field(sort)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    records = generate_records(rows, seed=settings.sample_seed)
    sort_config = SortConfig(key=sort)
    current_page = parse_page_input(page) or 1

    with profile_block("filter") as filter_stats:
        matching = filter_records(
            records,
            query,
            RECORD_SCHEMA,
            locale=settings.display_locale,
            tz=settings.display_timezone,
        )
    with profile_block("sort") as sort_stats:
        ordered = sort_records(matching, sort_config, RECORD_SCHEMA)
    with profile_block("paginate") as page_stats:
        result = paginate(ordered, settings.default_page_size, current_page)

    filter_stats.extra["rows_out"] = len(matching)
    sort_stats.extra["rows_out"] = len(ordered)
    page_stats.extra["rows_out"] = len(result.items)

    summary = Table(title=f"Pipeline profile ({rows:,} records)")
    summary.add_column("Stage", style="cyan", no_wrap=True)
    summary.add_column("Rows out", justify="right", style="magenta")
    summary.add_column("Duration (ms)", justify="right", style="green")
    summary.add_column("Peak traced (KB)", justify="right", style="yellow")
    for stats in (filter_stats, sort_stats, page_stats):
        log.debug("Stage profile", extra=stats.as_dict())
        traced = stats.peak_traced_bytes or 0
        summary.add_row(
            stats.label,
            f"{stats.extra['rows_out']:,}",
            f"{stats.duration_seconds * 1000:.2f}",
            f"{traced / 1024:,.1f}",
        )
    Console().print(summary)
    log.info("Benchmark complete", extra={"rows": rows, "page": result.effective_page})


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
