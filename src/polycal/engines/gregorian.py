from __future__ import annotations

from typing import Any

from ..core.time import days_in_gregorian_month, gregorian_to_jdn, is_gregorian_leap_year, jdn_to_gregorian
from ..core.types import CalendarDate
from .base import BaseConverter

GREGORIAN_EPOCH = gregorian_to_jdn(1, 1, 1)


class GregorianConverter(BaseConverter):
    """Proleptic Gregorian calendar, astronomical year numbering.

    Subclasses reuse the structure with a shifted year count (`year_offset`
    is added to the Gregorian year to obtain the displayed year).
    """

    year_offset = 0

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year - self.year_offset)

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        return days_in_gregorian_month(year - self.year_offset, month)

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return gregorian_to_jdn(year - self.year_offset, month, day)

    def _from_jdn(self, jdn: int) -> CalendarDate:
        y, m, d = jdn_to_gregorian(jdn)
        return self._make(y + self.year_offset, m, d)
