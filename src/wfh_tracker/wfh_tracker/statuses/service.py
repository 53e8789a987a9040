from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..audit.service import AuditLog
from ..common.datetime_utils import month_key_from, now_local
from ..common.validators import optional_text, require_iso_date, require_non_empty, require_status
from ..core.enums import AuditAction
from .model import StatusRecord
from .repository import StatusRepository

logger = logging.getLogger(__name__)


def _snapshot(record: Optional[StatusRecord]) -> Optional[dict]:
    if record is None:
        return None
    return {"status": record.status, "comment": record.comment}


class StatusService:
    """Use case: read and mutate per-person daily statuses.

    Every successful mutation appends one audit entry. The record write and the
    audit append are separate writes: if the append fails the status change
    stays in place and the error propagates to the caller.
    """

    def __init__(
        self,
        statuses: StatusRepository,
        audit_log: AuditLog,
        *,
        clock: Callable[[], datetime] = now_local,
        strict: bool = True,
    ):
        self._statuses = statuses
        self._audit_log = audit_log
        self._clock = clock
        self._strict = bool(strict)

    def _check_key(self, email: str, date: str) -> tuple[str, str]:
        email = require_non_empty(email, "email")
        date = require_iso_date(date) if self._strict else require_non_empty(date, "date")
        return email, date

    def get_status(self, email: str, date: str) -> Optional[StatusRecord]:
        if not email or not date:
            return None
        return self._statuses.get(email, date)

    def get_monthly_statuses(self, value: str) -> Sequence[StatusRecord]:
        """All records of the month ``value`` falls in, ascending by date.

        ``value`` may be a month key, an ISO date or a timestamp.
        """

        return self._statuses.list_by_month(month_key_from(value))

    def set_status(self, *, email: str, date: str, status: str, comment: Optional[str] = None) -> StatusRecord:
        email, date = self._check_key(email, date)
        if self._strict:
            status = require_status(status).value
        else:
            status = require_non_empty(status, "status")
        comment = optional_text(comment, "comment")

        before = self._statuses.get(email, date)
        now = self._clock()
        self._statuses.upsert(email=email, date=date, status=status, comment=comment, now=now)
        logger.debug("status %s %s -> %s", email, date, status)

        self._audit_log.append(
            actor=email,
            action=AuditAction.SET_STATUS.value,
            details={
                "date": date,
                "status": status,
                "comment": comment,
                "before": _snapshot(before),
            },
            timestamp=now,
        )

        return StatusRecord(
            email=email,
            date=date,
            status=status,
            comment=comment,
            created_at=before.created_at if before else now,
            updated_at=now,
            record_id=before.record_id if before else None,
        )

    def clear_status(self, *, email: str, date: str) -> bool:
        """Delete the record if present. Returns whether a record was removed."""

        email, date = self._check_key(email, date)

        before = self._statuses.get(email, date)
        removed = self._statuses.delete(email, date)
        logger.debug("status %s %s cleared (removed=%s)", email, date, removed)

        self._audit_log.append(
            actor=email,
            action=AuditAction.CLEAR_STATUS.value,
            details={"date": date, "before": _snapshot(before)},
        )
        return removed

    def count_all(self) -> int:
        return self._statuses.count()
