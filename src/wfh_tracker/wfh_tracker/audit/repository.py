from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditLogEntry, NewAuditEntry


class AuditRepository(Protocol):
    def append(self, entry: NewAuditEntry) -> int:
        """Store one entry and return its sequence id."""

        raise NotImplementedError

    def append_many(self, entries: Sequence[NewAuditEntry]) -> int:
        raise NotImplementedError

    def recent(self, limit: int) -> Sequence[AuditLogEntry]:
        """Up to ``limit`` entries, newest timestamp first, ties by newest id."""

        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
