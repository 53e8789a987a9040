from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import WorkStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value, field_name: str) -> Optional[str]:
    """Stripped text, or None for a missing or blank value. Non-strings are rejected."""

    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip() or None


def require_iso_date(value: str, field_name: str = "date") -> str:
    """Return the value if it is a real ``yyyy-mm-dd`` calendar date."""

    value = require_non_empty(value, field_name)
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO date (yyyy-mm-dd): {value!r}")
    if len(value) != 10:
        # strptime accepts "2025-3-1"; prefix matching needs zero padding.
        raise ValidationError(f"{field_name} must be zero-padded (yyyy-mm-dd): {value!r}")
    return value


def require_status(value: str) -> WorkStatus:
    """Accept a wire code (``H``) or its label (``Home``, any case)."""

    try:
        return WorkStatus(value)
    except ValueError:
        pass
    key = str(value or "").strip().casefold()
    for s in WorkStatus:
        if key in (s.value.casefold(), s.label.casefold()):
            return s
    allowed = ", ".join(f"{s.value} ({s.label})" for s in WorkStatus)
    raise ValidationError(f"Invalid status {value!r}; expected one of {allowed}")


def parse_limit(value, *, default: int, maximum: int) -> int:
    """Parse a ``limit`` query value; blank or non-numeric falls back to the default."""

    if value is None or str(value).strip() == "":
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return default
    if limit <= 0:
        return default
    return min(limit, maximum)
