from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

import mysql.connector

from ..core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "wfh_status_db")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """DB connection factory owned by the application container.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    The factory is opened when the container is built and closed at shutdown;
    a closed factory refuses to hand out connections.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._closed = False

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def connect(self):
        if self._closed:
            raise StoreUnavailableError("Status store is closed")
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as e:
            raise StoreUnavailableError(f"Cannot connect to {self._config.describe()}: {e}") from e

    def close(self) -> None:
        if not self._closed:
            logger.info("Closing status store %s", self._config.describe())
        self._closed = True

    @contextmanager
    def advisory_lock(self, name: str, *, timeout: int) -> Iterator[bool]:
        """Hold a MySQL named lock for the duration of the block.

        Yields True when the lock was acquired, False on timeout.
        """

        conn = self.connect()
        try:
            cur = conn.cursor()
            try:
                cur.execute("SELECT GET_LOCK(%s, %s)", (name, int(timeout)))
                row = cur.fetchone()
                acquired = bool(row and row[0] == 1)
                try:
                    yield acquired
                finally:
                    if acquired:
                        cur.execute("SELECT RELEASE_LOCK(%s)", (name,))
                        cur.fetchone()
            finally:
                cur.close()
        except mysql.connector.Error as e:
            raise StoreUnavailableError(str(e)) from e
        finally:
            conn.close()
