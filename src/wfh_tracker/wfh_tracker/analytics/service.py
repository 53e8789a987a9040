from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.datetime_utils import is_weekend, iter_month_days, month_key_from, parse_iso_date
from ..common.validators import require_iso_date
from ..core.enums import WorkStatus
from ..roster.service import RosterService
from ..statuses.model import StatusRecord
from ..statuses.repository import StatusRepository
from .holidays import HolidayCalendar


@dataclass(frozen=True)
class DayTrend:
    date: str
    label: str
    total: int
    wfh: int
    office: int
    is_weekend: bool
    holiday: Optional[str]

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "label": self.label,
            "total": self.total,
            "wfh": self.wfh,
            "office": self.office,
            "is_weekend": self.is_weekend,
            "holiday": self.holiday,
        }


def _count_by_status(records: Sequence[StatusRecord]) -> dict[str, int]:
    """Counts for every status code (zero-filled); unknown codes are kept as-is."""

    counts = {s.value: 0 for s in WorkStatus}
    counts.update(Counter(r.status for r in records))
    return counts


class AnalyticsService:
    """Read-side computations over a snapshot of the store and the roster."""

    def __init__(self, statuses: StatusRepository, roster: RosterService, holidays: HolidayCalendar):
        self._statuses = statuses
        self._roster = roster
        self._holidays = holidays

    def _day_records(self, day: str) -> list[StatusRecord]:
        return [r for r in self._statuses.list_by_month(day[:7]) if r.date == day]

    def daily_status_counts(self, day: str) -> dict[str, int]:
        """Raw per-status counts on ``day``; weekends and holidays are not filtered."""

        day = require_iso_date(day)
        return _count_by_status(self._day_records(day))

    def dashboard_stats(self, day: str) -> dict:
        day = require_iso_date(day)
        counts = self.daily_status_counts(day)
        d = parse_iso_date(day)
        total_people = len(self._roster.list_people())
        working = not self._holidays.is_non_working_day(d)
        return {
            "date": day,
            "total_users": total_people,
            "working_from_home": counts[WorkStatus.HOME.value],
            "in_office": counts[WorkStatus.OFFICE.value],
            "on_leave": counts[WorkStatus.LEAVE.value],
            "in_training": counts[WorkStatus.TRAINING.value],
            "sick": counts[WorkStatus.SICK.value],
            "is_working_day": working,
            "holiday": self._holidays.name_for(d),
            "expected": total_people if working else 0,
            "counts": counts,
        }

    def monthly_status_distribution(self, value: str) -> dict[str, int]:
        return _count_by_status(self._statuses.list_by_month(month_key_from(value)))

    def daily_trend(self, value: str) -> list[DayTrend]:
        """One entry per calendar day; weekends, holidays and empty days are zero."""

        key = month_key_from(value)
        by_day: dict[str, list[StatusRecord]] = {}
        for r in self._statuses.list_by_month(key):
            by_day.setdefault(r.date, []).append(r)

        out = []
        for d in iter_month_days(key):
            iso = d.isoformat()
            holiday = self._holidays.name_for(d)
            weekend = is_weekend(d)
            rows = [] if (weekend or holiday) else by_day.get(iso, [])
            out.append(
                DayTrend(
                    date=iso,
                    label=d.strftime("%b %d"),
                    total=len(rows),
                    wfh=sum(1 for r in rows if r.status == WorkStatus.HOME.value),
                    office=sum(1 for r in rows if r.status == WorkStatus.OFFICE.value),
                    is_weekend=weekend,
                    holiday=holiday,
                )
            )
        return out

    def wfh_rate(self, value: str) -> float:
        """Home records as a percentage of all records in the month; 0 when empty."""

        records = self._statuses.list_by_month(month_key_from(value))
        if not records:
            return 0.0
        home = sum(1 for r in records if r.status == WorkStatus.HOME.value)
        return home / len(records) * 100.0

    def monthly_summary(self, value: str) -> dict:
        key = month_key_from(value)
        distribution = self.monthly_status_distribution(key)
        return {
            "month": key,
            "total": sum(distribution.values()),
            "distribution": [
                {"status": code, "label": _label(code), "count": n} for code, n in distribution.items()
            ],
            "trend": [t.to_dict() for t in self.daily_trend(key)],
            "wfh_rate": round(self.wfh_rate(key), 1),
        }

    def hierarchy_day_view(self, day: str) -> dict:
        """The management tree annotated with each person's status on ``day``."""

        day = require_iso_date(day)
        by_email = {r.email.lower(): r for r in self._day_records(day)}

        def annotate(nodes: list[dict]) -> list[dict]:
            out = []
            for n in nodes:
                person = n["person"]
                rec = by_email.get(person.email.lower())
                out.append(
                    {
                        **person.to_dict(),
                        "status": rec.status if rec else None,
                        "comment": rec.comment if rec else None,
                        "reports": annotate(n["reports"]),
                    }
                )
            return out

        return {"date": day, "root": self._roster.find_root(), "tree": annotate(self._roster.build_tree())}


def _label(code: str) -> str:
    try:
        return WorkStatus(code).label
    except ValueError:
        return code
