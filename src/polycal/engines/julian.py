from __future__ import annotations

from typing import Any

from ..core.time import days_in_julian_month, is_julian_leap_year, jdn_to_julian, julian_to_jdn
from ..core.types import CalendarDate
from .base import BaseConverter

JULIAN_EPOCH = julian_to_jdn(1, 1, 1)


class JulianConverter(BaseConverter):
    """Proleptic Julian calendar: every fourth year is leap, no century rule."""

    def is_leap_year(self, year: int) -> bool:
        return is_julian_leap_year(year)

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        return days_in_julian_month(year, month)

    def _to_jdn(self, d: CalendarDate) -> int:
        return julian_to_jdn(*self._fields(d))

    def _from_jdn(self, jdn: int) -> CalendarDate:
        return self._make(*jdn_to_julian(jdn))
