"""
polycal.engines.hebrew
----------------------
Arithmetic Hebrew calendar (Hillel II rules).

Months are numbered from Nisan = 1 to Elul = 6, then Tishrei = 7 ... Adar = 12
and, in leap years, Adar II = 13; the year number changes on 1 Tishrei.

The year start is fixed by the molad (mean conjunction) of Tishrei, counted
in parts (1/1080 hour) from the epoch molad BaHaRaD, and the postponement
rules (dehiyyot). The lengths of Cheshvan and Kislev follow from the year
length (353-355 or 383-385 days).
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Any

from ..core.errors import ConversionNonConvergentError
from ..core.time import julian_to_jdn
from ..core.types import CalendarDate
from .base import BaseConverter

logger = logging.getLogger(__name__)

# 1 Tishrei AM 1 = 7 October 3761 BCE (Julian).
HEBREW_EPOCH = julian_to_jdn(-3760, 10, 7)

TISHREI = 7
NISAN = 1
ADAR = 12
ADAR_II = 13

PARTS_PER_DAY = 25920  # 24 * 1080
MONTH_PARTS = 29 * PARTS_PER_DAY + 13753  # 29d 12h 793p
MEAN_YEAR_DAYS = Fraction(35975351, 98496)


def is_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17 and 19 of the 19-year cycle have Adar II."""
    return (7 * year + 1) % 19 < 7


def _months_elapsed(year: int) -> int:
    """Lunations from the epoch molad to the molad of Tishrei of `year`."""
    return (235 * year - 234) // 19


def _elapsed_days(year: int) -> int:
    """Days from the epoch to Rosh Hashanah of `year`, before the 356/382-day corrections."""
    months = _months_elapsed(year)
    parts = 12084 + 13753 * months
    days = 29 * months + parts // PARTS_PER_DAY
    # Lo ADU Rosh: 1 Tishrei never on Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def _year_length_correction(year: int) -> int:
    ny0 = _elapsed_days(year - 1)
    ny1 = _elapsed_days(year)
    ny2 = _elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


def new_year(year: int) -> int:
    """JDN of 1 Tishrei of `year`."""
    return HEBREW_EPOCH + _elapsed_days(year) + _year_length_correction(year)


def days_in_year(year: int) -> int:
    return new_year(year + 1) - new_year(year)


def molad(year: int, month: int) -> Fraction:
    """
    Moment of the molad of `month` in `year` as a fractional day count on the
    JDN scale (floor() gives the civil day, Jerusalem mean time).
    """
    y = year + 1 if month < TISHREI else year
    months = month - TISHREI + _months_elapsed(y)
    return HEBREW_EPOCH - Fraction(876, PARTS_PER_DAY) + months * Fraction(MONTH_PARTS, PARTS_PER_DAY)


class HebrewConverter(BaseConverter):
    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def months_in_year(self, year: int) -> int:
        return ADAR_II if is_leap_year(year) else ADAR

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month in (2, 4, 6, 10, ADAR_II):
            return 29
        if month == ADAR and not is_leap_year(year):
            return 29
        length = days_in_year(year)
        if month == 8:  # Cheshvan: 30 only in "complete" years
            return 30 if length % 10 == 5 else 29
        if month == 9:  # Kislev: 29 only in "deficient" years
            return 29 if length % 10 == 3 else 30
        return 30

    def month_name(self, d: CalendarDate, *, short: bool = False) -> str:
        if d.month == ADAR and is_leap_year(d.year):
            return "Ada I" if short else "Adar I"
        return super().month_name(d, short=short)

    def _month_start(self, year: int, month: int) -> int:
        start = new_year(year)
        if month < TISHREI:
            for m in range(TISHREI, self.months_in_year(year) + 1):
                start += self.days_in_month(year, m)
            for m in range(NISAN, month):
                start += self.days_in_month(year, m)
        else:
            for m in range(TISHREI, month):
                start += self.days_in_month(year, m)
        return start

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return self._month_start(year, month) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = math.floor((jdn - HEBREW_EPOCH) / MEAN_YEAR_DAYS) + 1
        for step in range(self.max_steps):
            if new_year(year) > jdn:
                year -= 1
            elif new_year(year + 1) <= jdn:
                year += 1
            else:
                break
        else:
            raise ConversionNonConvergentError(
                f"Hebrew year search did not converge for JDN {jdn}",
                calendar=self.id, jdn=jdn, steps=self.max_steps,
            )
        logger.debug("hebrew year %d for JDN %d after %d steps", year, jdn, step)

        month = TISHREI if jdn < self._month_start(year, NISAN) else NISAN
        while jdn >= self._month_start(year, month) + self.days_in_month(year, month):
            month = NISAN if month == self.months_in_year(year) else month + 1
        day = jdn - self._month_start(year, month) + 1
        return self._make(year, month, day, {"leap_year": is_leap_year(year)})
