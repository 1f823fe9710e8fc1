from __future__ import annotations

from typing import Any

from ..core.time import julian_to_jdn
from ..core.types import CalendarDate
from .base import BaseConverter

# Caso correlation: 13 August 1521 (Julian), the fall of Tenochtitlan, was
# 2 Xocotlhuetzi. Day 2 of month 10 is day 181 of the year counted from 0.
CORRELATION_JDN = julian_to_jdn(1521, 8, 13)
AZTEC_EPOCH = CORRELATION_JDN - 181

NEMONTEMI = 19
DAYS_PER_YEAR = 365
XIUHMOLPILLI_YEARS = 52


def xiuhmolpilli(year: int) -> int:
    """Ordinal of the 52-year bundle containing `year`."""
    return (year - 1) // XIUHMOLPILLI_YEARS + 1


class AztecConverter(BaseConverter):
    """Xiuhpohualli: 18 veintenas of 20 days and the 5 Nemontemi days.

    There are no leap days, so the count drifts against the seasons; year 1
    is the one that contains the correlation date.
    """

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        return 5 if month == NEMONTEMI else 20

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return AZTEC_EPOCH + (year - 1) * DAYS_PER_YEAR + (month - 1) * 20 + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        years, doy = divmod(jdn - AZTEC_EPOCH, DAYS_PER_YEAR)
        return self._make(years + 1, doy // 20 + 1, doy % 20 + 1)
