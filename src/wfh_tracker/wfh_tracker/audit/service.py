from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import parse_limit, require_non_empty
from ..core.constants import DEFAULT_AUDIT_LIMIT, MAX_AUDIT_LIMIT
from .model import AuditLogEntry, NewAuditEntry
from .repository import AuditRepository

logger = logging.getLogger(__name__)


def encode_details(details: Any) -> Optional[str]:
    if details is None or isinstance(details, str):
        return details
    return json.dumps(details, ensure_ascii=False, sort_keys=True, default=str)


class AuditLog:
    """Use case: append to and read back the audit trail."""

    def __init__(
        self,
        audit: AuditRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        default_limit: int = DEFAULT_AUDIT_LIMIT,
    ):
        self._audit = audit
        self._clock = clock
        self._default_limit = int(default_limit)

    def append(self, *, actor: str, action: str, details: Any = None, timestamp: datetime | None = None) -> int:
        actor = require_non_empty(actor, "actor")
        action = require_non_empty(action, "action")
        entry = NewAuditEntry(
            timestamp=timestamp or self._clock(),
            actor=actor,
            action=action,
            details=encode_details(details),
        )
        audit_id = self._audit.append(entry)
        logger.debug("audit #%s %s by %s", audit_id, action, actor)
        return audit_id

    def recent(self, limit=None) -> Sequence[AuditLogEntry]:
        n = parse_limit(limit, default=self._default_limit, maximum=MAX_AUDIT_LIMIT)
        return self._audit.recent(n)
