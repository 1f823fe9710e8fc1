from __future__ import annotations

from typing import Any

from ..core.time import gregorian_to_jdn, is_gregorian_leap_year, jdn_to_gregorian
from ..core.types import CalendarDate
from .base import BaseConverter

SAKA_OFFSET = 78  # Saka year y starts in Gregorian year y + 78
SAKA_EPOCH = gregorian_to_jdn(1 + SAKA_OFFSET, 3, 22)


def _chaitra_1(year: int) -> int:
    g = year + SAKA_OFFSET
    return gregorian_to_jdn(g, 3, 21 if is_gregorian_leap_year(g) else 22)


class SakaConverter(BaseConverter):
    """Indian national calendar (1957 reform).

    Chaitra 1 is 22 March, or 21 March in Gregorian leap years, when Chaitra
    has 31 days. Vaisakha..Bhadra have 31 days, Ashwin..Phalguna 30.
    """

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year + SAKA_OFFSET)

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month == 1:
            return 31 if self.is_leap_year(year) else 30
        return 31 if month <= 6 else 30

    def _days_before(self, year: int, month: int) -> int:
        return sum(self.days_in_month(year, m) for m in range(1, month))

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return _chaitra_1(year) + self._days_before(year, month) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0] - SAKA_OFFSET
        if jdn < _chaitra_1(year):
            year -= 1
        rem = jdn - _chaitra_1(year)
        month = 1
        while rem >= self.days_in_month(year, month):
            rem -= self.days_in_month(year, month)
            month += 1
        return self._make(year, month, rem + 1)
