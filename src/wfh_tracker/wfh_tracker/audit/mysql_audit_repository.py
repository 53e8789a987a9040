from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_datetime
from .model import AuditLogEntry, NewAuditEntry
from .repository import AuditRepository


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, entry: NewAuditEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audit_logs(timestamp, user_id, action, details)
                VALUES(%s,%s,%s,%s)
                """,
                (entry.timestamp, entry.actor, entry.action, entry.details),
            )
            return int(cur.lastrowid)

    def append_many(self, entries: Sequence[NewAuditEntry]) -> int:
        if not entries:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO audit_logs(timestamp, user_id, action, details)
                VALUES(%s,%s,%s,%s)
                """,
                [(e.timestamp, e.actor, e.action, e.details) for e in entries],
            )
            return max(int(cur.rowcount), 0)

    def recent(self, limit: int) -> Sequence[AuditLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, timestamp, user_id, action, details, created_at
                FROM audit_logs
                ORDER BY timestamp DESC, id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                AuditLogEntry(
                    audit_id=int(r["id"]),
                    timestamp=normalize_mysql_datetime(r["timestamp"]),
                    actor=r["user_id"],
                    action=r["action"],
                    details=r.get("details"),
                    created_at=normalize_mysql_datetime(r.get("created_at")),
                )
                for r in fetchall(cur)
            ]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM audit_logs")
            return cur.rowcount
