"""Calendar predicates and day arithmetic for day count computation.

Dates are datetime.date values supplied by the caller. Nothing here
validates them: an impossible (day, month) pair simply fails the
predicates.
"""

from __future__ import annotations

from datetime import date

from yearfrac.core.config import BASIS_365, BASIS_366

_MONTHS_31: frozenset[int] = frozenset({1, 3, 5, 7, 8, 10, 12})
_MONTHS_30: frozenset[int] = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_end_of_month(day: int, month: int, year: int) -> bool:
    """True iff day is the last calendar day of month in year.

    A month outside 1..12 is never an end of month.
    """
    if month in _MONTHS_31:
        return day == 31
    if month in _MONTHS_30:
        return day == 30
    if month != 2:
        return False
    return day == (29 if is_leap_year(year) else 28)


def is_last_day_of_february(d: date) -> bool:
    return d.month == 2 and is_end_of_month(d.day, d.month, d.year)


def days_in_year(year: int) -> float:
    return BASIS_366 if is_leap_year(year) else BASIS_365


def days_between(start: date, end: date) -> int:
    """Signed actual-day count from start to end (end - start)."""
    return (end - start).days
