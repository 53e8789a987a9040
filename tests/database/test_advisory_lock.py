from __future__ import annotations

import mysql.connector
import pytest

from src.wfh_tracker.wfh_tracker.core.exceptions import StoreUnavailableError
from src.wfh_tracker.wfh_tracker.database.connection import DBConfig, DatabaseConnection


class LockCursor:
    def __init__(self, granted: int, error=None):
        self.granted = granted
        self.error = error
        self.executed: list[tuple[str, tuple]] = []
        self.closed = False

    def execute(self, sql, params=None):
        if self.error:
            raise self.error
        self.executed.append((sql, params))

    def fetchone(self):
        sql = self.executed[-1][0]
        return (self.granted,) if "GET_LOCK" in sql else (1,)

    def close(self):
        self.closed = True


class LockConn:
    def __init__(self, cursor: LockCursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def close(self):
        self.closed = True


def _db(monkeypatch, cursor: LockCursor):
    db = DatabaseConnection(DBConfig.from_dict({}))
    conn = LockConn(cursor)
    monkeypatch.setattr(db, "connect", lambda: conn)
    return db, conn


def test_lock_acquired_and_released(monkeypatch):
    cur = LockCursor(granted=1)
    db, conn = _db(monkeypatch, cur)

    with db.advisory_lock("wfh_seed", timeout=5) as acquired:
        assert acquired is True
        assert len(cur.executed) == 1

    assert cur.executed[0] == ("SELECT GET_LOCK(%s, %s)", ("wfh_seed", 5))
    assert cur.executed[1] == ("SELECT RELEASE_LOCK(%s)", ("wfh_seed",))
    assert cur.closed and conn.closed


def test_busy_lock_yields_false_and_releases_nothing(monkeypatch):
    cur = LockCursor(granted=0)
    db, conn = _db(monkeypatch, cur)

    with db.advisory_lock("wfh_seed", timeout=5) as acquired:
        assert acquired is False

    assert [sql for sql, _ in cur.executed] == ["SELECT GET_LOCK(%s, %s)"]
    assert conn.closed


def test_lock_released_when_block_raises(monkeypatch):
    cur = LockCursor(granted=1)
    db, _ = _db(monkeypatch, cur)

    with pytest.raises(RuntimeError):
        with db.advisory_lock("wfh_seed", timeout=5):
            raise RuntimeError("seed failed")

    assert cur.executed[-1][0] == "SELECT RELEASE_LOCK(%s)"


def test_driver_error_surfaces_as_store_unavailable(monkeypatch):
    cur = LockCursor(granted=1, error=mysql.connector.Error("gone away"))
    db, conn = _db(monkeypatch, cur)

    with pytest.raises(StoreUnavailableError):
        with db.advisory_lock("wfh_seed", timeout=5):
            pass
    assert conn.closed


def test_closed_store_refuses_connections():
    db = DatabaseConnection(DBConfig.from_dict({}))
    db.close()
    with pytest.raises(StoreUnavailableError):
        db.connect()
