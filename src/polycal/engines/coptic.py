from __future__ import annotations

from typing import Any

from ..core.time import julian_to_jdn
from ..core.types import CalendarDate
from .base import BaseConverter

# Era of the Martyrs: 1 Thout 1 = 29 August 284 (Julian).
COPTIC_EPOCH = julian_to_jdn(284, 8, 29)


class CopticConverter(BaseConverter):
    """Alexandrian solar calendar: 12 x 30 days plus an epagomenal month of 5 or 6.

    The year before every Julian leap year is leap (year % 4 == 3), so the
    sixth epagomenal day falls just before the Julian 29 February cycle.
    """

    epoch = COPTIC_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def months_in_year(self, year: int) -> int:
        return 13

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month < 13:
            return 30
        return 6 if self.is_leap_year(year) else 5

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return self.epoch - 1 + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = (4 * (jdn - self.epoch) + 1463) // 1461
        start = self.epoch - 1 + 365 * (year - 1) + year // 4 + 1
        month = (jdn - start) // 30 + 1
        day = jdn - start - 30 * (month - 1) + 1
        return self._make(year, month, day)
