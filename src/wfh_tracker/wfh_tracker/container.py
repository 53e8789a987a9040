from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .analytics.holidays import HolidayCalendar
from .analytics.service import AnalyticsService
from .audit.mysql_audit_repository import MySQLAuditRepository
from .audit.repository import AuditRepository
from .audit.service import AuditLog
from .core.constants import DEFAULT_AUDIT_LIMIT, SEED_LOCK_NAME, SEED_LOCK_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .roster.json_roster_repository import JsonRosterRepository
from .roster.repository import RosterRepository
from .roster.service import RosterService
from .seeding.service import SeedService
from .statuses.mysql_status_repository import MySQLStatusRepository
from .statuses.repository import StatusRepository
from .statuses.service import StatusService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    statuses_repo: StatusRepository
    audit_repo: AuditRepository
    roster_repo: RosterRepository

    audit_log: AuditLog
    status_service: StatusService
    roster_service: RosterService
    analytics_service: AnalyticsService
    seed_service: SeedService

    allow_reset: bool = False

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def wire_container(
    *,
    statuses_repo: StatusRepository,
    audit_repo: AuditRepository,
    roster_repo: RosterRepository,
    conn: Optional[DatabaseConnection] = None,
    holidays: Optional[HolidayCalendar] = None,
    seed_start: date = date(2025, 1, 1),
    seed_end: date = date(2025, 3, 31),
    seed_random_seed: Optional[int] = None,
    strict: bool = True,
    audit_limit: int = DEFAULT_AUDIT_LIMIT,
    allow_reset: bool = False,
    clock=None,
) -> Container:
    """Assemble services over the given repositories."""

    clock_kw = {"clock": clock} if clock else {}
    audit_log = AuditLog(audit_repo, default_limit=audit_limit, **clock_kw)
    status_service = StatusService(statuses_repo, audit_log, strict=strict, **clock_kw)
    roster_service = RosterService(roster_repo)
    analytics_service = AnalyticsService(statuses_repo, roster_service, holidays or HolidayCalendar())

    lock = None
    if conn is not None:
        lock = lambda: conn.advisory_lock(SEED_LOCK_NAME, timeout=SEED_LOCK_TIMEOUT_SECONDS)
    seed_service = SeedService(
        statuses_repo,
        audit_repo,
        roster_service,
        start=seed_start,
        end=seed_end,
        rng=random.Random(seed_random_seed),
        lock=lock,
        **clock_kw,
    )

    return Container(
        conn=conn,
        statuses_repo=statuses_repo,
        audit_repo=audit_repo,
        roster_repo=roster_repo,
        audit_log=audit_log,
        status_service=status_service,
        roster_service=roster_service,
        analytics_service=analytics_service,
        seed_service=seed_service,
        allow_reset=allow_reset,
    )


def build_container(*, db_config: dict, roster_path: str, holidays_path: Optional[str] = None, **options) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    holidays = HolidayCalendar.from_json(holidays_path) if holidays_path else HolidayCalendar()

    return wire_container(
        statuses_repo=MySQLStatusRepository(conn),
        audit_repo=MySQLAuditRepository(conn),
        roster_repo=JsonRosterRepository(roster_path),
        conn=conn,
        holidays=holidays,
        **options,
    )
