"""
Validation helpers for the GS1 decoder.
"""

from .validators import (
    is_numeric,
    expand_year,
    last_day_of_month,
    check_valid_date,
    resolve_yymmdd,
    insert_decimal_point,
    CENTURY_PIVOT,
    NUMERIC,
)

__all__ = [
    "is_numeric",
    "expand_year",
    "last_day_of_month",
    "check_valid_date",
    "resolve_yymmdd",
    "insert_decimal_point",
    "CENTURY_PIVOT",
    "NUMERIC",
]
