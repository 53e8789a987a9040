from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class AuditLogEntry:
    """Append-only record of one mutation of the status store."""

    audit_id: int
    timestamp: datetime
    actor: str
    action: str
    details: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def details_data(self) -> Any:
        """Details decoded from JSON; plain-text details are returned unchanged."""
        if self.details is None:
            return None
        try:
            return json.loads(self.details)
        except ValueError:
            return self.details

    def to_dict(self) -> dict:
        return {
            "id": self.audit_id,
            "timestamp": self.timestamp.isoformat(),
            "user_id": self.actor,
            "action": self.action,
            "details": self.details,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class NewAuditEntry:
    timestamp: datetime
    actor: str
    action: str
    details: Optional[str] = None
