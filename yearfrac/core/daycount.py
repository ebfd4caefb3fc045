"""Day count conventions and year fraction computation.

Replicates the spreadsheet YEARFRAC function for its five bases:

    0  nasd30/360   US (NASD) 30/360
    1  act/act      actual/actual
    2  act360       actual/360
    3  act365       actual/365
    4  eur30/360    European 30/360

Every convention is a (day difference, basis) pair; the year fraction is
their quotient. All functions are pure and hold no shared state, so they
may be called concurrently from any number of threads.
"""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import assert_never

from yearfrac.core.calendar import (
    days_between,
    days_in_year,
    is_last_day_of_february,
    is_leap_year,
)
from yearfrac.core.config import (
    BASIS_360,
    BASIS_365,
    BASIS_366,
    CONVENTION_NAMES,
    NASD_METHOD_ALTERNATE,
    NASD_METHOD_DEFAULT,
    NASD_METHODS,
    NASD_USE_EOM_DEFAULT,
)
from yearfrac.core.errors import InvalidValueError
from yearfrac.core.result import Err, Ok

logger = logging.getLogger(__name__)


class DayCountConvention(Enum):
    """Spreadsheet YEARFRAC bases. Values are the canonical spellings."""

    US30360 = "nasd30/360"
    ACT_ACT = "act/act"
    ACT_360 = "act360"
    ACT_365 = "act365"
    EU30360 = "eur30/360"

    @property
    def code(self) -> int:
        """Integer basis code, 0..4."""
        return CONVENTION_NAMES.index(self.value)

    # -- selectors ---------------------------------------------------------

    @staticmethod
    def from_int(code: int) -> Ok[DayCountConvention] | Err[InvalidValueError]:
        """Select a convention by its integer basis code (0..4).

        bool is rejected even though it subclasses int.
        """
        if isinstance(code, int) and not isinstance(code, bool):
            if 0 <= code < len(CONVENTION_NAMES):
                return Ok(DayCountConvention(CONVENTION_NAMES[code]))
        return _reject(code, "DayCountConvention.from_int")

    @staticmethod
    def from_str(name: str) -> Ok[DayCountConvention] | Err[InvalidValueError]:
        """Select a convention by canonical spelling. Exact, case-sensitive."""
        if isinstance(name, str) and name in CONVENTION_NAMES:
            return Ok(DayCountConvention(name))
        return _reject(name, "DayCountConvention.from_str")

    @staticmethod
    def parse(raw: int | str) -> Ok[DayCountConvention] | Err[InvalidValueError]:
        """Select by integer code or by name, whichever raw is."""
        if isinstance(raw, str):
            return DayCountConvention.from_str(raw)
        return DayCountConvention.from_int(raw)

    # -- computation -------------------------------------------------------

    def yearfrac(self, start: date, end: date) -> float:
        """Fraction of a year between two dates, in either order. Never negative."""
        if start == end:
            return 0.0
        if start > end:
            start, end = end, start
        return self._day_difference(start, end) / self._basis(start, end)

    def yearfrac_signed(self, start: date, end: date) -> float:
        """Like yearfrac, but negative when start is after end."""
        yf = self.yearfrac(start, end)
        return -yf if start > end else yf

    def _day_difference(self, start: date, end: date) -> float:
        """Numerator in days. Precondition: start <= end."""
        match self:
            case (
                DayCountConvention.ACT_ACT
                | DayCountConvention.ACT_360
                | DayCountConvention.ACT_365
            ):
                return float(days_between(start, end))
            case DayCountConvention.US30360:
                return float(nasd_days360(start, end))
            case DayCountConvention.EU30360:
                return float(euro_days360(start, end))
            case _never:
                assert_never(_never)

    def _basis(self, start: date, end: date) -> float:
        """Denominator in days per year. Precondition: start <= end."""
        match self:
            case (
                DayCountConvention.US30360
                | DayCountConvention.ACT_360
                | DayCountConvention.EU30360
            ):
                return BASIS_360
            case DayCountConvention.ACT_365:
                return BASIS_365
            case DayCountConvention.ACT_ACT:
                return act_act_basis(start, end)
            case _never:
                assert_never(_never)


def _reject(raw: object, source: str) -> Err[InvalidValueError]:
    logger.debug("Rejected day count convention selector %r in %s", raw, source)
    return Err(InvalidValueError.create(raw, source=f"yearfrac.core.daycount.{source}"))


# ---------------------------------------------------------------------------
# Day difference (numerator)
# ---------------------------------------------------------------------------


def days360(
    start_day: int, start_month: int, start_year: int,
    end_day: int, end_month: int, end_year: int,
) -> int:
    """30-day-month difference on already-adjusted day numbers."""
    return (
        (end_year - start_year) * 360
        + (end_month - start_month) * 30
        + (end_day - start_day)
    )


def nasd_days360(
    start: date,
    end: date,
    method: int = NASD_METHOD_DEFAULT,
    use_eom: bool = NASD_USE_EOM_DEFAULT,
) -> int:
    """US (NASD) 30/360 day difference. Precondition: start <= end.

    method 0 is the YEARFRAC behaviour. method 3 additionally clamps an
    end date on the last day of February, and an end day of 31, regardless
    of the start date. use_eom treats a start on the last day of February
    as day 30.
    """
    if method not in NASD_METHODS:
        raise ValueError(
            f"nasd_days360: method must be one of {NASD_METHODS}, got {method!r}"
        )
    alternate = method == NASD_METHOD_ALTERNATE
    start_day, end_day = start.day, end.day
    start_feb_eom = is_last_day_of_february(start)

    if is_last_day_of_february(end) and (start_feb_eom or alternate):
        end_day = 30
    if end_day == 31 and (start_day >= 30 or alternate):
        end_day = 30
    if start_day == 31:
        start_day = 30
    if use_eom and start_feb_eom:
        start_day = 30

    return days360(start_day, start.month, start.year, end_day, end.month, end.year)


def euro_days360(start: date, end: date) -> int:
    """European 30/360 day difference: every 31st counts as the 30th."""
    start_day = min(start.day, 30)
    end_day = min(end.day, 30)
    return days360(start_day, start.month, start.year, end_day, end.month, end.year)


# ---------------------------------------------------------------------------
# Basis (denominator)
# ---------------------------------------------------------------------------


def act_act_basis(start: date, end: date) -> float:
    """Actual/actual days-per-year. Precondition: start <= end.

    Same year: that year's length. Less than a full year across one New
    Year: 366 if a Feb 29 of either year can fall inside the period,
    else 365. Anything longer: mean year length over start.year..end.year
    inclusive.
    """
    if start.year == end.year:
        return days_in_year(start.year)

    crosses_one_new_year = end.year == start.year + 1 and (
        end.month < start.month or (end.month == start.month and end.day < start.day)
    )
    if crosses_one_new_year:
        if is_leap_year(start.year):
            return BASIS_366 if start.month <= 2 else BASIS_365
        if is_leap_year(end.year):
            return BASIS_366 if end.month > 2 or (end.month == 2 and end.day == 29) else BASIS_365
        return BASIS_365

    years = range(start.year, end.year + 1)
    return sum(days_in_year(y) for y in years) / len(years)


# ---------------------------------------------------------------------------
# Spreadsheet-style entry point
# ---------------------------------------------------------------------------


def yearfrac(
    start: date, end: date, basis: int | str = 0,
) -> Ok[float] | Err[InvalidValueError]:
    """YEARFRAC(start, end, basis): select the convention, then compute.

    basis is an integer code (0..4) or a canonical spelling.
    """
    return DayCountConvention.parse(basis).map(lambda c: c.yearfrac(start, end))
