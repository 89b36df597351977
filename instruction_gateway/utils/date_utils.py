"""Date manipulation utilities"""

from datetime import date, datetime, timezone
from typing import Optional


def utc_today() -> date:
    """Current calendar date in UTC"""
    return datetime.now(timezone.utc).date()


def calendar_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a proleptic Gregorian date, or None if the triple is not a real day"""
    try:
        built = date(year, month, day)
    except ValueError:
        return None
    if (built.year, built.month, built.day) != (year, month, day):
        return None
    return built
