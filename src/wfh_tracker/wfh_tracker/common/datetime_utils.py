from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Iterator

from dateutil import parser as date_parser

from ..core.exceptions import ValidationError

_MONTH_KEY_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def month_key_from(value: str) -> str:
    """Derive the ``yyyy-mm`` key from any parseable date string.

    Accepts a bare month key, an ISO date, or a full timestamp such as
    ``2025-03-10T22:00:00.000Z``. The calendar date written in the string is
    used as-is; no timezone conversion is applied.
    """

    v = (value or "").strip()
    if _MONTH_KEY_RE.match(v):
        return v
    try:
        parsed = date_parser.isoparse(v)
    except ValueError:
        try:
            parsed = date_parser.parse(v)
        except (ValueError, OverflowError):
            raise ValidationError(f"Unparseable date: {value!r}")
    return parsed.strftime("%Y-%m")


def iter_month_days(key: str) -> Iterator[date]:
    """Yield every calendar day of the ``yyyy-mm`` month."""

    if not _MONTH_KEY_RE.match(key or ""):
        raise ValidationError(f"Invalid month key: {key!r}")
    year, month = int(key[:4]), int(key[5:7])
    _, last = calendar.monthrange(year, month)
    for d in range(1, last + 1):
        yield date(year, month, d)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
