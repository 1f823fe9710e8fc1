from __future__ import annotations
from datetime import date
from typing import Tuple

# Astronomical year numbering throughout: year 0 = 1 BCE, year -500 = 501 BCE.

YMD = Tuple[int, int, int]

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def amod(x: int, n: int) -> int:
    """Adjusted remainder: like x % n but in 1..n instead of 0..n-1."""
    return (x - 1) % n + 1


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to Julian Day Number (Fliegel-Van Flandern)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> YMD:
    """Inverse of gregorian_to_jdn. Floor division keeps BCE years exact."""
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


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Julian calendar date to Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_julian(jdn: int) -> YMD:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


def days_in_gregorian_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def days_in_julian_month(year: int, month: int) -> int:
    if month == 2 and is_julian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def day_of_week(jdn: int) -> int:
    """Weekday of a JDN: 0 = Sunday ... 6 = Saturday."""
    return (jdn + 1) % 7


def date_to_jdn(d: date) -> int:
    """Convert a stdlib date (years 1..9999 only) to JDN."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def jdn_to_date(jdn: int) -> date:
    """JDN -> stdlib date. Raises ValueError outside years 1..9999."""
    y, m, d = jdn_to_gregorian(jdn)
    return date(y, m, d)
