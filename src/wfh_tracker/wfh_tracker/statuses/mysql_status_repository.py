from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_datetime
from .model import NewStatus, StatusRecord
from .repository import StatusRepository

_COLUMNS = "id, email, date, status, comment, created_at, updated_at"


def _to_record(r: dict) -> StatusRecord:
    return StatusRecord(
        record_id=int(r["id"]),
        email=r["email"],
        date=r["date"],
        status=r["status"],
        comment=r.get("comment"),
        created_at=normalize_mysql_datetime(r.get("created_at")),
        updated_at=normalize_mysql_datetime(r.get("updated_at")),
    )


class MySQLStatusRepository(StatusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, email: str, date: str) -> Optional[StatusRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM status_entries
                WHERE email=%s AND date=%s
                """,
                (email, date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_by_month(self, month_key: str) -> Sequence[StatusRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM status_entries
                WHERE date LIKE %s
                ORDER BY date ASC, id ASC
                """,
                (f"{month_key}%",),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(self, *, email: str, date: str, status: str, comment: Optional[str], now: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO status_entries(email, date, status, comment, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status),
                    comment=VALUES(comment),
                    updated_at=VALUES(updated_at)
                """,
                (email, date, status, comment, now, now),
            )

    def delete(self, email: str, date: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM status_entries WHERE email=%s AND date=%s", (email, date))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS count FROM status_entries")
            r = fetchone(cur)
            return int(r["count"]) if r else 0

    def insert_many_if_absent(self, records: Sequence[NewStatus], *, now: datetime) -> int:
        if not records:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT IGNORE INTO status_entries(email, date, status, comment, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                [(r.email, r.date, r.status, r.comment, now, now) for r in records],
            )
            return max(int(cur.rowcount), 0)

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM status_entries")
            return cur.rowcount
