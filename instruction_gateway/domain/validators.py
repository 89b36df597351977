"""Lexical checks for amount and date literals"""

import re
from datetime import date
from typing import Optional

from instruction_gateway.utils.date_utils import calendar_date, utc_today

DIGITS = "0123456789"
DATE_LENGTH = 10
# Minor units; keeps every amount within a signed 64-bit range
MAX_AMOUNT_DIGITS = 18

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _all_digits(text: str) -> bool:
    return all(ch in DIGITS for ch in text)


def is_valid_amount(literal: Optional[str]) -> bool:
    """
    Amount must be a plain positive integer literal.

    No sign, no decimal point, ASCII digits only, at most MAX_AMOUNT_DIGITS
    digits, strictly greater than zero.
    """
    if not literal:
        return False
    trimmed = literal.strip()
    if not trimmed or len(trimmed) > MAX_AMOUNT_DIGITS or not _all_digits(trimmed):
        return False
    return any(ch != "0" for ch in trimmed)


def leading_integer(literal: Optional[str]) -> Optional[int]:
    """
    Integer prefix of a literal, or None when it has none.

    Used to echo back what the caller wrote when the amount is rejected:
    "-50" -> -50, "12.5" -> 12, "abc" -> None. Prefixes longer than
    MAX_AMOUNT_DIGITS digits are not echoed.
    """
    if literal is None:
        return None
    match = _LEADING_INT.match(literal)
    if not match or len(match.group(1).lstrip("+-")) > MAX_AMOUNT_DIGITS:
        return None
    return int(match.group(1))


def parse_date(literal: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD literal into a date.

    Returns None unless the text is exactly ten characters with hyphens at
    positions 4 and 7, digit-only segments, month 1-12, day 1-31, and the
    triple names a real calendar day (2025-02-30 and 2025-04-31 are rejected).
    """
    if not literal:
        return None
    trimmed = literal.strip()
    if len(trimmed) != DATE_LENGTH or trimmed[4] != "-" or trimmed[7] != "-":
        return None

    year, month, day = trimmed[:4], trimmed[5:7], trimmed[8:]
    if not (_all_digits(year) and _all_digits(month) and _all_digits(day)):
        return None

    month_num = int(month)
    day_num = int(day)
    if not 1 <= month_num <= 12 or not 1 <= day_num <= 31:
        return None

    return calendar_date(int(year), month_num, day_num)


def is_valid_date(literal: Optional[str]) -> bool:
    return parse_date(literal) is not None


def is_future_date(literal: str, today: Optional[date] = None) -> bool:
    """True if the date is strictly after today's UTC calendar date"""
    parsed = parse_date(literal)
    if parsed is None:
        return False
    if today is None:
        today = utc_today()
    return (parsed.year, parsed.month, parsed.day) > (today.year, today.month, today.day)
