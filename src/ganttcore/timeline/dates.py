from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Iterator, Optional


def parse_date(value: Any) -> Optional[date]:
    """Best-effort conversion to a calendar date; ``None`` when not possible."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    if not s or s.lower() in {"nan", "nat", "none", "null"}:
        return None
    try:
        # tolerate full timestamps, only the day part matters
        return date.fromisoformat(s[:10])
    except ValueError:
        return None


def days_between(start: date, end: date) -> int:
    return (end - start).days


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def iter_days(start: date, count: int) -> Iterator[date]:
    for i in range(max(0, count)):
        yield start + timedelta(days=i)
