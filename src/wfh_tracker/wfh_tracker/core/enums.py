from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Work-location status codes as stored and sent over the wire."""

    HOME = "H"
    OFFICE = "O"
    LEAVE = "L"
    TRAINING = "T"
    SICK = "S"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    WorkStatus.HOME: "Home",
    WorkStatus.OFFICE: "Office",
    WorkStatus.LEAVE: "Leave",
    WorkStatus.TRAINING: "Training",
    WorkStatus.SICK: "Sick",
}


class AuditAction(str, Enum):
    """Kinds of audit log entries."""

    SET_STATUS = "UPDATE_STATUS"
    CLEAR_STATUS = "DELETE_STATUS"
    SEED_DATA = "SEED_DATA"
