"""
Display helpers shared by the filter stage and the console reporter.

Timestamps are rendered through an explicit locale and timezone rather than
the process locale, so the free-text search over a rendered date matches the
same way on every machine. Supported locales:

- ``en-US``: ``1/15/2024, 10:30:00 AM`` (datetime) / ``Jan 15, 2024`` (date)
- ``id-ID``: ``15/1/2024, 10.30.00`` (datetime) / ``15 Jan 2024`` (date)
- ``iso``:   ``2024-01-15 10:30:00`` (datetime) / ``2024-01-15`` (date)
"""

from __future__ import annotations

import unicodedata
from datetime import date, datetime, timezone, tzinfo
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Tuple
from zoneinfo import ZoneInfo

INVALID_DATE = "Invalid Date"

_EN_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_ID_MONTHS = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")


@lru_cache(maxsize=32)
def resolve_timezone(name: str) -> tzinfo:
    """Map a timezone name to a tzinfo; ``UTC`` needs no tz database."""
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a stored timestamp into an aware datetime, or None if unparsable.

    Accepts datetime/date instances and ISO-8601 strings (date-only, with or
    without a time part, ``Z`` suffix allowed). Naive values are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "zZ":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_datetime(moment: datetime, locale: str) -> str:
    if locale == "en-US":
        hour = moment.hour % 12 or 12
        meridiem = "AM" if moment.hour < 12 else "PM"
        return (
            f"{moment.month}/{moment.day}/{moment.year}, "
            f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
        )
    if locale == "id-ID":
        return (
            f"{moment.day}/{moment.month}/{moment.year}, "
            f"{moment.hour:02d}.{moment.minute:02d}.{moment.second:02d}"
        )
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def _format_date(moment: datetime, locale: str) -> str:
    if locale == "en-US":
        return f"{_EN_MONTHS[moment.month - 1]} {moment.day}, {moment.year}"
    if locale == "id-ID":
        return f"{moment.day} {_ID_MONTHS[moment.month - 1]} {moment.year}"
    return moment.strftime("%Y-%m-%d")


def format_timestamp(
    value: Any,
    locale: str = "en-US",
    tz: str = "UTC",
    style: str = "datetime",
) -> str:
    """
    Render a stored timestamp for display in ``locale``, converted to ``tz``.

    Unparsable values render as ``Invalid Date``. A moment whose conversion
    would leave the representable range (year 1 to 9999) keeps its own offset.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return INVALID_DATE
    try:
        moment = parsed.astimezone(resolve_timezone(tz))
    except OverflowError:
        moment = parsed
    if style == "date":
        return _format_date(moment, locale)
    return _format_datetime(moment, locale)


def format_number(value: Any) -> str:
    """Decimal rendering of a numeric value; integral floats drop the ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_plain(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def collation_key(text: str) -> Tuple[str, str, Tuple[bool, ...], str]:
    """
    Sort key approximating locale-aware string collation.

    Compares base letters first ignoring case and accents, then accents,
    then case with lowercase first, and finally raw code points so distinct
    strings never collate equal.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        base.casefold(),
        decomposed.casefold(),
        tuple(ch.isupper() for ch in base),
        text,
    )


__all__ = [
    "INVALID_DATE",
    "collation_key",
    "format_number",
    "format_plain",
    "format_timestamp",
    "parse_timestamp",
    "resolve_timezone",
]
