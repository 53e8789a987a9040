from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import NewStatus, StatusRecord


class StatusRepository(Protocol):
    """Storage port for status records.

    Implementations must enforce uniqueness of (email, date) atomically.
    """

    def get(self, email: str, date: str) -> Optional[StatusRecord]:
        raise NotImplementedError

    def list_by_month(self, month_key: str) -> Sequence[StatusRecord]:
        """Records whose date string starts with ``month_key``, ascending by date."""

        raise NotImplementedError

    def upsert(self, *, email: str, date: str, status: str, comment: Optional[str], now: datetime) -> None:
        """Insert, or replace status/comment and bump updated_at on conflict.

        created_at of an existing record is left untouched.
        """

        raise NotImplementedError

    def delete(self, email: str, date: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def insert_many_if_absent(self, records: Sequence[NewStatus], *, now: datetime) -> int:
        """Insert records in one batch, skipping (email, date) pairs already present.

        Returns the number of rows inserted.
        """

        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
