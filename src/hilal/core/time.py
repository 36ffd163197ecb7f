from __future__ import annotations
from datetime import date
from typing import Tuple

from .types import Weekday

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(month: int, year: int) -> int:
    """Day count of a proleptic-Gregorian month. Caller guarantees 1 <= month <= 12."""
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic-Gregorian date to its Julian Day Number (JDN).

    Days past the end of a month roll over into the next one.
    """
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn; returns (year, month, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def date_to_jdn(d: date) -> int:
    return to_jdn(d.year, d.month, d.day)


def weekday_from_jdn(jdn: int) -> Weekday:
    # JDN 0 fell on a Monday
    return Weekday(jdn % 7)
