"""
GS1 Value Helpers

Shared low-level checks and conversions used by the field decoders:
- Numeric validation (ASCII digits only)
- Date validation and resolution (YYMMDD with day 00)
- Decimal position handling for measure and amount AIs

Based on GS1 General Specifications (section 7.12 for the century rule).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta


NUMERIC = frozenset('0123456789')

# Two-digit years at or above the pivot belong to the 20th century
CENTURY_PIVOT = 51


def is_numeric(value: str) -> bool:
    """True if value is non-empty and made of ASCII digits only."""
    return bool(value) and all(c in NUMERIC for c in value)


def expand_year(yy: int, century_pivot: int = CENTURY_PIVOT) -> int:
    """
    Map a two-digit year to a full year.

    - YY >= 51: 19YY (1951-1999)
    - YY < 51: 20YY (2000-2050)
    """
    return 1900 + yy if yy >= century_pivot else 2000 + yy


def last_day_of_month(year: int, month: int) -> date:
    """Return the last calendar day of the given month."""
    return date(year, month, 1) + relativedelta(day=31)


def check_valid_date(year: int, month: int, day: int) -> bool:
    """
    Check that year/month/day names an existing calendar day.

    Month is 1-based. Day 0 is accepted for any valid month; it stands for
    "day unknown" and resolves to the last day of that month.
    """
    if month < 1 or month > 12:
        return False
    if day == 0:
        return True
    return 1 <= day <= last_day_of_month(year, month).day


def resolve_yymmdd(value: str, century_pivot: int = CENTURY_PIVOT) -> date:
    """
    Convert a GS1 YYMMDD string to a date.

    Examples:
        "150129" -> 2015-01-29
        "221200" -> 2022-12-31 (day 00 = last day of month)
        "991231" -> 1999-12-31

    Raises:
        ValueError: if the value is not six digits or is no valid date
    """
    if len(value) != 6 or not is_numeric(value):
        raise ValueError(f"YYMMDD date must be 6 digits, got {value!r}")

    year = expand_year(int(value[0:2]), century_pivot)
    month = int(value[2:4])
    day = int(value[4:6])

    if not check_valid_date(year, month, day):
        raise ValueError(f"Day {day} invalid for month {month} in year {year}")

    if day == 0:
        return last_day_of_month(year, month)
    return date(year, month, day)


def insert_decimal_point(digits: str, decimal_positions: int) -> Decimal:
    """
    Decode a numeric string with implied decimal positions.

    The decimal point is inserted into the string before conversion, so no
    binary floating point is involved.

    Example: "000235" with 2 decimal positions -> Decimal("2.35")

    Raises:
        ValueError: if digits is empty or not numeric
    """
    if not is_numeric(digits):
        raise ValueError(f"Value must be numeric, got {digits!r}")

    if decimal_positions == 0:
        return Decimal(digits)

    # Pad with leading zeros if needed
    if len(digits) <= decimal_positions:
        digits = digits.zfill(decimal_positions + 1)

    int_part = digits[:-decimal_positions]
    dec_part = digits[-decimal_positions:]
    return Decimal(f"{int_part}.{dec_part}")
