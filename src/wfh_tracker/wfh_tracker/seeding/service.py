from __future__ import annotations

import logging
import random
from contextlib import nullcontext
from datetime import date, datetime, timedelta
from typing import Callable, ContextManager, Iterator, Optional, Sequence

from ..audit.model import NewAuditEntry
from ..audit.repository import AuditRepository
from ..audit.service import encode_details
from ..common.datetime_utils import is_weekend, now_local
from ..core.constants import SEED_ENTRY_PROBABILITY, SYSTEM_ACTOR
from ..core.enums import AuditAction, WorkStatus
from ..core.exceptions import RosterUnavailableError, ValidationError
from ..roster.model import Person
from ..roster.service import RosterService
from ..statuses.model import NewStatus
from ..statuses.repository import StatusRepository

logger = logging.getLogger(__name__)


def _days(start: date, end: date) -> Iterator[date]:
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def pick_status(rng: random.Random) -> WorkStatus:
    """Weighted demo status: 60% office/home, 20% leave, 10% training, 10% sick."""

    roll = rng.random()
    if roll < 0.6:
        return WorkStatus.OFFICE if rng.random() < 0.5 else WorkStatus.HOME
    if roll < 0.8:
        return WorkStatus.LEAVE
    if roll < 0.9:
        return WorkStatus.TRAINING
    return WorkStatus.SICK


class SeedService:
    """Populate an empty store with demo statuses for every roster person.

    The "is the store empty" check and the seed writes run inside ``lock``
    so that two instances starting together cannot both seed.
    """

    def __init__(
        self,
        statuses: StatusRepository,
        audit: AuditRepository,
        roster: RosterService,
        *,
        start: date,
        end: date,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = now_local,
        lock: Optional[Callable[[], ContextManager[bool]]] = None,
    ):
        if end < start:
            raise ValidationError("Seed end date is before start date")
        self._statuses = statuses
        self._audit = audit
        self._roster = roster
        self._start = start
        self._end = end
        self._rng = rng or random.Random()
        self._clock = clock
        self._lock = lock or (lambda: nullcontext(True))

    def generate(self, people: Sequence[Person]) -> tuple[list[NewStatus], list[NewAuditEntry]]:
        statuses: list[NewStatus] = []
        entries: list[NewAuditEntry] = []
        for day in _days(self._start, self._end):
            if is_weekend(day):
                continue
            iso = day.isoformat()
            for person in people:
                if self._rng.random() >= SEED_ENTRY_PROBABILITY:
                    continue
                status = pick_status(self._rng).value
                comment = f"Auto-generated {status} status for {person.full_name}"
                statuses.append(NewStatus(email=person.email, date=iso, status=status, comment=comment))
                entries.append(
                    NewAuditEntry(
                        timestamp=datetime.combine(day, datetime.min.time()),
                        actor=person.email,
                        action=AuditAction.SET_STATUS.value,
                        details=encode_details({"email": person.email, "date": iso, "status": status, "comment": comment}),
                    )
                )
        return statuses, entries

    def seed_if_empty(self) -> int:
        """Seed when the store holds no statuses. Returns the number of rows inserted."""

        with self._lock() as acquired:
            if not acquired:
                logger.warning("Seed lock busy; another instance is seeding, skipping")
                return 0

            existing = self._statuses.count()
            if existing > 0:
                logger.info("Found %d existing entries, skipping seed", existing)
                return 0

            try:
                people = self._roster.list_people()
            except RosterUnavailableError as e:
                logger.warning("Seeding aborted, roster unavailable: %s", e)
                return 0

            statuses, entries = self.generate(people)
            now = self._clock()
            inserted = self._statuses.insert_many_if_absent(statuses, now=now)
            self._audit.append_many(entries)
            self._audit.append(
                NewAuditEntry(
                    timestamp=now,
                    actor=SYSTEM_ACTOR,
                    action=AuditAction.SEED_DATA.value,
                    details=encode_details(
                        {"entries": inserted, "start": self._start.isoformat(), "end": self._end.isoformat()}
                    ),
                )
            )
            logger.info("Seeded %d status entries for %d people", inserted, len(people))
            return inserted

    def reset(self) -> int:
        """Wipe statuses and audit logs, then reseed."""

        removed = self._statuses.delete_all()
        self._audit.delete_all()
        logger.warning("Database reset: removed %d status entries", removed)
        return self.seed_if_empty()
