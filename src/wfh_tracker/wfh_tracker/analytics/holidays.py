from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from ..common.datetime_utils import is_weekend, parse_iso_date
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Holiday:
    day: date
    name: str


# South African public holidays, 2025.
DEFAULT_HOLIDAYS = (
    Holiday(date(2025, 1, 1), "New Year's Day"),
    Holiday(date(2025, 3, 21), "Human Rights Day"),
    Holiday(date(2025, 4, 18), "Good Friday"),
    Holiday(date(2025, 4, 21), "Family Day"),
    Holiday(date(2025, 4, 27), "Freedom Day"),
    Holiday(date(2025, 5, 1), "Workers' Day"),
    Holiday(date(2025, 6, 16), "Youth Day"),
    Holiday(date(2025, 8, 9), "National Women's Day"),
    Holiday(date(2025, 9, 24), "Heritage Day"),
    Holiday(date(2025, 12, 16), "Day of Reconciliation"),
    Holiday(date(2025, 12, 25), "Christmas Day"),
    Holiday(date(2025, 12, 26), "Day of Goodwill"),
)


class HolidayCalendar:
    def __init__(self, holidays: Iterable[Holiday] = DEFAULT_HOLIDAYS):
        self._by_day = {h.day: h for h in holidays}

    @classmethod
    def from_json(cls, path: str | Path) -> "HolidayCalendar":
        """Load ``[{"date": "yyyy-mm-dd", "name": "..."}]`` from a file."""

        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
            return cls(Holiday(parse_iso_date(h["date"]), str(h["name"])) for h in raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise ValidationError(f"Invalid holidays file {path}: {e}") from e

    def name_for(self, day: date) -> Optional[str]:
        h = self._by_day.get(day)
        return h.name if h else None

    def is_holiday(self, day: date) -> bool:
        return day in self._by_day

    def is_non_working_day(self, day: date) -> bool:
        return is_weekend(day) or self.is_holiday(day)
