from __future__ import annotations

from typing import Any

from ..core.time import gregorian_to_jdn, is_gregorian_leap_year, jdn_to_gregorian
from ..core.types import CalendarDate
from .base import BaseConverter

MOONS = 13
DAYS_PER_MOON = 28  # floor(365.25 / 13)


class IroquoisConverter(BaseConverter):
    """Thirteen moons over the Gregorian year.

    Moons 1..12 have 28 days; the thirteenth takes the rest of the year
    (29 days, 30 in Gregorian leap years).
    """

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year)

    def months_in_year(self, year: int) -> int:
        return MOONS

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month < MOONS:
            return DAYS_PER_MOON
        year_length = 366 if is_gregorian_leap_year(year) else 365
        return year_length - DAYS_PER_MOON * (MOONS - 1)

    def _to_jdn(self, d: CalendarDate) -> int:
        year, moon, day = self._fields(d)
        return gregorian_to_jdn(year, 1, 1) + DAYS_PER_MOON * (moon - 1) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0]
        doy = jdn - gregorian_to_jdn(year, 1, 1)
        moon = min(MOONS, doy // DAYS_PER_MOON + 1)
        return self._make(year, moon, doy - DAYS_PER_MOON * (moon - 1) + 1)
