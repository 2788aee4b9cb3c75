"""Time-related helpers."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def current_year(override: int | None = None) -> int:
    """Return ``override`` when given, otherwise the current UTC year."""

    if override is not None:
        return override
    return utc_now().year
