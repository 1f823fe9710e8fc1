from __future__ import annotations

from typing import Any

from ..core.time import julian_to_jdn
from ..core.types import CalendarDate
from .base import BaseConverter

# Civil ("Friday") epoch: 1 Muharram 1 AH = 16 July 622 (Julian).
ISLAMIC_EPOCH = julian_to_jdn(622, 7, 16)

# Leap years of the 30-year cycle: 2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29.
LEAP_YEARS_IN_CYCLE = (2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29)


def _days_before_month(month: int) -> int:
    # Months alternate 30, 29, 30, ...: ceil(29.5 * (month - 1))
    return (59 * (month - 1) + 1) // 2


def _new_year(year: int) -> int:
    return ISLAMIC_EPOCH + 354 * (year - 1) + (3 + 11 * year) // 30


class IslamicConverter(BaseConverter):
    """Tabular Hijri calendar (arithmetic, not observational).

    Odd months have 30 days, even months 29; Dhu al-Hijjah gains a 30th day
    in the 11 leap years of each 30-year cycle.
    """

    def is_leap_year(self, year: int) -> bool:
        return (14 + 11 * year) % 30 < 11

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month == 12 and self.is_leap_year(year):
            return 30
        return 30 if month % 2 == 1 else 29

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return _new_year(year) + _days_before_month(month) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = (30 * (jdn - ISLAMIC_EPOCH) + 10646) // 10631
        prior_days = jdn - _new_year(year)
        month = (11 * prior_days + 330) // 325
        day = jdn - _new_year(year) - _days_before_month(month) + 1
        return self._make(year, month, day)
