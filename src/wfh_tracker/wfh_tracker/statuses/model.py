from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import WorkStatus


@dataclass(frozen=True)
class StatusRecord:
    """Domain entity: one person's work-location status for one day.

    At most one record exists per (email, date).
    """

    email: str
    date: str
    status: str
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    record_id: Optional[int] = None

    @property
    def month_key(self) -> str:
        return self.date[:7]

    @property
    def work_status(self) -> Optional[WorkStatus]:
        try:
            return WorkStatus(self.status)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "email": self.email,
            "date": self.date,
            "status": self.status,
            "comment": self.comment,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class NewStatus:
    """Write-model for bulk inserts (seeding)."""

    email: str
    date: str
    status: str
    comment: Optional[str] = None
