"""
polycal.engines.persian
-----------------------
Solar Hijri (Jalali) calendar, astronomical form.

Nowruz (1 Farvardin) is the Tehran civil day on which the March equinox
falls if the equinox comes at or before local apparent noon at 51.42 E;
otherwise it is the following day. Farvardin..Shahrivar have 31 days,
Mehr..Bahman 30, and Esfand 29 or 30 depending on the next Nowruz.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from ..core.time import gregorian_to_jdn, jdn_to_gregorian
from ..core.types import CalendarDate
from ..reference import solar
from ..reference import time_scales as ts
from ..reference.events import SPRING
from .base import BaseConverter

logger = logging.getLogger(__name__)

PERSIAN_OFFSET = 621  # year y begins in Gregorian year y + 621
PERSIAN_EPOCH = 1948321  # 1 Farvardin 1 = 19 March 622 (Julian)

TEHRAN_OFFSET_HOURS = 3.5
TEHRAN_LONGITUDE = 51.42


@lru_cache(maxsize=4096)
def nowruz(year: int, max_steps: int = 64) -> int:
    """JDN of 1 Farvardin of `year`."""
    start = ts.jdn_to_jd(gregorian_to_jdn(year + PERSIAN_OFFSET, 3, 1))
    equinox = solar.solar_longitude_after(SPRING, start, max_steps=max_steps)
    day = ts.local_jdn(equinox, TEHRAN_OFFSET_HOURS)
    if equinox <= solar.apparent_noon_ut(day, TEHRAN_LONGITUDE):
        return day
    return day + 1


def _days_before_month(month: int) -> int:
    if month <= 7:
        return 31 * (month - 1)
    return 186 + 30 * (month - 7)


class PersianConverter(BaseConverter):
    def _nowruz(self, year: int) -> int:
        return nowruz(year, self.max_steps)

    def is_leap_year(self, year: int) -> bool:
        return self._nowruz(year + 1) - self._nowruz(year) == 366

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month <= 6:
            return 31
        if month <= 11:
            return 30
        return 30 if self.is_leap_year(year) else 29

    def _validate(self, d: CalendarDate) -> None:
        self._check_year(d.year, PERSIAN_OFFSET)
        super()._validate(d)

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return self._nowruz(year) + _days_before_month(month) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0] - PERSIAN_OFFSET
        if jdn < self._nowruz(year):
            year -= 1
        doy = jdn - self._nowruz(year)
        month = doy // 31 + 1 if doy < 186 else (doy - 186) // 30 + 7
        day = doy - _days_before_month(month) + 1
        logger.debug("persian %d-%d-%d for JDN %d", year, month, day, jdn)
        return self._make(year, month, day)
