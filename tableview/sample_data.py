"""
Record stores for the listing views.

Provides the fixed 15-user sample shown by the user listing, a deterministic
pseudo-random generator for larger stores, and CSV read/write so a store can
be produced once and browsed repeatedly from the CLI.
"""

from __future__ import annotations

import csv
import random
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from tableview.domain.models import Record, UserRecord, UserStatus

CSV_COLUMNS = ["id", "name", "email", "role", "created_at"]
USER_CSV_COLUMNS = CSV_COLUMNS + ["status"]

_SAMPLE_USERS = [
    (1, "John Doe", "john@example.com", "Admin", "2024-01-15", "active"),
    (2, "Jane Smith", "jane@example.com", "User", "2024-01-16", "active"),
    (3, "Bob Johnson", "bob@example.com", "Editor", "2024-01-17", "inactive"),
    (4, "Alice Brown", "alice@example.com", "User", "2024-01-18", "active"),
    (5, "Charlie Wilson", "charlie@example.com", "Admin", "2024-01-19", "active"),
    (6, "Diana Miller", "diana@example.com", "User", "2024-01-20", "inactive"),
    (7, "Edward Davis", "edward@example.com", "Editor", "2024-01-21", "active"),
    (8, "Fiona Garcia", "fiona@example.com", "User", "2024-01-22", "active"),
    (9, "George Martinez", "george@example.com", "Admin", "2024-01-23", "inactive"),
    (10, "Hannah Lee", "hannah@example.com", "User", "2024-01-24", "active"),
    (11, "Ian Taylor", "ian@example.com", "Editor", "2024-01-25", "active"),
    (12, "Julia Clark", "julia@example.com", "User", "2024-01-26", "active"),
    (13, "Kevin Lewis", "kevin@example.com", "User", "2024-01-27", "inactive"),
    (14, "Lisa Walker", "lisa@example.com", "Admin", "2024-01-28", "active"),
    (15, "Mike Hall", "mike@example.com", "User", "2024-01-29", "active"),
]

_FIRST_NAMES = ["Ava", "Budi", "Chen", "Dewi", "Elif", "Farah", "Gita", "Hugo", "Ines", "Joko"]
_LAST_NAMES = ["Santoso", "Nguyen", "Okafor", "Larsen", "Putri", "Silva", "Tanaka", "Wijaya"]
_ROLES = ["Admin", "Editor", "User", "User"]


def sample_users() -> List[UserRecord]:
    """The fixed user store: ids 1-15, created on consecutive days from 2024-01-15."""
    return [
        UserRecord(
            id=uid,
            name=name,
            email=email,
            role=role,
            created_at=created,
            status=UserStatus(status),
        )
        for uid, name, email, role, created, status in _SAMPLE_USERS
    ]


def generate_records(rows: int, seed: int = 42, users: bool = False) -> List[Record]:
    """
    Generate ``rows`` deterministic records with strictly increasing created_at.

    The same (rows, seed, users) always yields the same store.
    """
    rng = random.Random(seed)
    start = datetime(2024, 1, 1, tzinfo=UTC)
    moment = start
    records: List[Record] = []
    for i in range(1, rows + 1):
        moment += timedelta(minutes=rng.randint(1, 6 * 60))
        first = rng.choice(_FIRST_NAMES)
        last = rng.choice(_LAST_NAMES)
        fields = dict(
            id=i,
            name=f"{first} {last}",
            email=f"{first.lower()}.{last.lower()}{i}@example.com",
            role=rng.choice(_ROLES),
            created_at=moment.isoformat().replace("+00:00", "Z"),
        )
        if users:
            status = UserStatus.ACTIVE if rng.random() < 0.75 else UserStatus.INACTIVE
            records.append(UserRecord(status=status, **fields))
        else:
            records.append(Record(**fields))
    return records


def write_records_csv(csv_path: Path, records: Sequence[Record]) -> int:
    """Write a record store with a header row; returns the number of rows written."""
    columns = USER_CSV_COLUMNS if any(isinstance(r, UserRecord) for r in records) else CSV_COLUMNS
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=columns)
        writer.writeheader()
        for record in records:
            writer.writerow(record.model_dump(mode="json", include=set(columns)))
    return len(records)


def read_records_csv(csv_path: Union[Path, str]) -> List[Record]:
    """
    Load a store written by ``write_records_csv``.

    Files with a ``status`` column load as UserRecord. Malformed rows raise
    pydantic's ValidationError (a ValueError).
    """
    with Path(csv_path).open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        model = UserRecord if "status" in (reader.fieldnames or []) else Record
        return [model.model_validate(row) for row in _rows(reader)]


def _rows(reader: Iterable[dict]) -> Iterable[dict]:
    for row in reader:
        yield {key: value for key, value in row.items() if key is not None}


__all__ = [
    "CSV_COLUMNS",
    "USER_CSV_COLUMNS",
    "generate_records",
    "read_records_csv",
    "sample_users",
    "write_records_csv",
]
