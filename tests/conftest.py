"""Shared fixtures: in-memory repositories and a controllable clock."""

from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "testing")

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional, Sequence

import pytest

from src.wfh_tracker.wfh_tracker.audit.model import AuditLogEntry, NewAuditEntry
from src.wfh_tracker.wfh_tracker.container import wire_container
from src.wfh_tracker.wfh_tracker.roster.model import Person
from src.wfh_tracker.wfh_tracker.statuses.model import NewStatus, StatusRecord


class InMemoryStatuses:
    def __init__(self):
        self._by_key: dict[tuple[str, str], StatusRecord] = {}
        self._id = 0

    def get(self, email: str, date: str) -> Optional[StatusRecord]:
        return self._by_key.get((email, date))

    def list_by_month(self, month_key: str) -> Sequence[StatusRecord]:
        items = [r for r in self._by_key.values() if r.date.startswith(month_key)]
        items.sort(key=lambda r: (r.date, r.record_id))
        return items

    def upsert(self, *, email, date, status, comment, now) -> None:
        existing = self._by_key.get((email, date))
        if existing:
            self._by_key[(email, date)] = replace(existing, status=status, comment=comment, updated_at=now)
            return
        self._id += 1
        self._by_key[(email, date)] = StatusRecord(
            record_id=self._id,
            email=email,
            date=date,
            status=status,
            comment=comment,
            created_at=now,
            updated_at=now,
        )

    def delete(self, email: str, date: str) -> bool:
        return self._by_key.pop((email, date), None) is not None

    def count(self) -> int:
        return len(self._by_key)

    def insert_many_if_absent(self, records: Sequence[NewStatus], *, now) -> int:
        inserted = 0
        for r in records:
            if (r.email, r.date) in self._by_key:
                continue
            self.upsert(email=r.email, date=r.date, status=r.status, comment=r.comment, now=now)
            inserted += 1
        return inserted

    def delete_all(self) -> int:
        n = len(self._by_key)
        self._by_key.clear()
        return n


class InMemoryAudit:
    def __init__(self):
        self.entries: list[AuditLogEntry] = []
        self.fail_appends = False

    def append(self, entry: NewAuditEntry) -> int:
        if self.fail_appends:
            raise RuntimeError("audit storage down")
        audit_id = len(self.entries) + 1
        self.entries.append(
            AuditLogEntry(
                audit_id=audit_id,
                timestamp=entry.timestamp,
                actor=entry.actor,
                action=entry.action,
                details=entry.details,
                created_at=entry.timestamp,
            )
        )
        return audit_id

    def append_many(self, entries) -> int:
        for e in entries:
            self.append(e)
        return len(entries)

    def recent(self, limit: int):
        items = sorted(self.entries, key=lambda e: (e.timestamp, e.audit_id), reverse=True)
        return items[:limit]

    def delete_all(self) -> int:
        n = len(self.entries)
        self.entries.clear()
        return n


class StaticRoster:
    def __init__(self, people):
        self._people = list(people)

    def list_all(self):
        return list(self._people)


def make_person(name: str, reports_to: str, *, area: str = "Engineering", pid: Optional[str] = None) -> Person:
    slug = name.lower().replace(" ", ".")
    return Person(
        person_id=pid or slug,
        full_name=name,
        job_title="Engineer",
        area=area,
        email=f"{slug}@x.com",
        reports_to=reports_to,
    )


class StepClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self._now = start
        self._step = step

    def __call__(self) -> datetime:
        current = self._now
        self._now += self._step
        return current


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> StepClock:
    return StepClock(fixed_now)


@pytest.fixture
def status_repo() -> InMemoryStatuses:
    return InMemoryStatuses()


@pytest.fixture
def audit_repo() -> InMemoryAudit:
    return InMemoryAudit()


@pytest.fixture
def person_factory():
    return make_person


@pytest.fixture
def roster_factory():
    return StaticRoster


@pytest.fixture
def people() -> list[Person]:
    return [
        make_person("Alice", "CEO"),
        make_person("Bob", "Alice"),
        make_person("Carol", "Alice", area="Operations"),
        make_person("Dave", "Bob"),
    ]


@pytest.fixture
def roster_repo(people) -> StaticRoster:
    return StaticRoster(people)


@pytest.fixture
def container(status_repo, audit_repo, roster_repo, clock):
    return wire_container(
        statuses_repo=status_repo,
        audit_repo=audit_repo,
        roster_repo=roster_repo,
        seed_random_seed=7,
        allow_reset=True,
        clock=clock,
    )


@pytest.fixture
def client(container):
    from src.wfh_tracker.wfh_tracker.main import create_app

    app = create_app(container=container)
    return app.test_client()
