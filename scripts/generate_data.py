"""
Data generation script for tableview.

Writes a deterministic pseudo-random record store to CSV so a large listing
can be browsed with ``tableview show --csv``.
"""

from __future__ import annotations

import sys
import tempfile
import time
from pathlib import Path

import typer

from tableview.sample_data import generate_records, write_records_csv

app = typer.Typer(help="Generate a synthetic record store as CSV.")


def _generate_rows_csv(csv_path: Path, rows: int, seed: int, users: bool = False) -> int:
    records = generate_records(rows, seed=seed, users=users)
    return write_records_csv(csv_path, records)


@app.command()
def main(
    rows: int = typer.Option(
        1_000,
        "--rows",
        "-r",
        help="Number of rows to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional CSV output path (if omitted, a temp file will be used).",
    ),
    users: bool = typer.Option(
        False,
        "--users",
        help="Generate user rows (adds the active/inactive status column).",
    ),
) -> None:
    """
    Generate synthetic records and write them to CSV.
    """
    start = time.perf_counter()
    if output:
        csv_path = output
        csv_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="tableview_csv_"))
        csv_path = tmpdir / "records.csv"

    typer.echo(f"Generating {rows:,} rows -> {csv_path} (seed={seed}, users={users})")
    written = _generate_rows_csv(csv_path, rows=rows, seed=seed, users=users)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {written:,} rows in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
