# Shared day/time helpers for the insight analyzers.
# All day boundaries are UTC calendar days.
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List

ONE_DAY = timedelta(days=1)


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def day_key(moment: datetime) -> date:
    """UTC calendar day a moment falls on."""
    return ensure_utc(moment).date()


def distinct_days(moments: Iterable[datetime]) -> List[date]:
    """Sorted (oldest first) distinct UTC days for the given moments."""
    return sorted({day_key(m) for m in moments})


def whole_days_between(earlier: datetime, later: datetime) -> int:
    """
    Number of whole 24-hour periods from ``earlier`` to ``later``.

    Floors toward negative infinity, so a future ``earlier`` gives a
    negative result.
    """
    return (ensure_utc(later) - ensure_utc(earlier)) // ONE_DAY
