"""
metrum.core.calendar
--------------------
Proleptic Gregorian leap-year oracle and the civil day-of-year mapping.
Total over all integer years (year 0 and negative years included).
"""

from __future__ import annotations

from .constants import DAYS_PER_COMMON_YEAR, DAYS_PER_LEAP_YEAR, TICKS_PER_DAY

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return DAYS_PER_LEAP_YEAR if is_leap_year(year) else DAYS_PER_COMMON_YEAR


def days_in_month(month: int, year: int) -> int:
    """Length of civil month 1..12 in the given year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def year_day(year: int, month: int, day_of_month: int) -> int:
    """
    Zero-based day of the year for a civil (year, month, day_of_month).
    No range check on day_of_month; callers validate it first.
    """
    yd = day_of_month - 1
    for m in range(1, month):
        yd += days_in_month(m, year)
    return yd


def year_ticks(year: int) -> int:
    """Ticks in the whole of the given year."""
    return days_in_year(year) * TICKS_PER_DAY


def leap_years_before(year: int) -> int:
    """
    Count of leap years in [1, year) for year >= 1, extended with floor
    division so that differences are exact for any pair of years.
    """
    y = year - 1
    return y // 4 - y // 100 + y // 400


def days_between_years(start: int, end: int) -> int:
    """Days from Jan 1 of `start` to Jan 1 of `end` (negative if end < start)."""
    return DAYS_PER_COMMON_YEAR * (end - start) + leap_years_before(end) - leap_years_before(start)
