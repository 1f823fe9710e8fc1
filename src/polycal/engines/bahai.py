from __future__ import annotations

from typing import Any, Tuple

from ..core.time import gregorian_to_jdn, jdn_to_gregorian
from ..core.types import CalendarDate
from .base import BaseConverter

BAHAI_OFFSET = 1843  # year y begins in Gregorian year y + 1843
BAHAI_EPOCH = gregorian_to_jdn(1844, 3, 21)

AYYAM_I_HA = 0  # month number of the intercalary days
AYYAM_I_HA_NAME = "Ayyám-i-Há"
DAYS_PER_MONTH = 19


def _naw_ruz(year: int) -> int:
    return gregorian_to_jdn(year + BAHAI_OFFSET, 3, 21)


class BahaiConverter(BaseConverter):
    """Badíʻ calendar with Naw-Rúz fixed on 21 March.

    Months 1..18 (19 days each), then Ayyám-i-Há (month 0, 4 or 5 days),
    then month 19 ('Alá', the month of fasting).
    """

    def _year_length(self, year: int) -> int:
        return _naw_ruz(year + 1) - _naw_ruz(year)

    def is_leap_year(self, year: int) -> bool:
        return self._year_length(year) == 366

    def months_in_year(self, year: int) -> int:
        return 20  # 19 months plus Ayyám-i-Há

    def month_range(self, year: int) -> Tuple[int, int]:
        return AYYAM_I_HA, 19

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        if month == AYYAM_I_HA:
            return self._year_length(year) - 19 * DAYS_PER_MONTH
        return DAYS_PER_MONTH

    def month_name(self, d: CalendarDate, *, short: bool = False) -> str:
        if d.month == AYYAM_I_HA:
            return "Ayy" if short else AYYAM_I_HA_NAME
        return super().month_name(d, short=short)

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        start = _naw_ruz(year)
        if month == AYYAM_I_HA:
            return start + 18 * DAYS_PER_MONTH + day - 1
        if month == 19:
            return start + self._year_length(year) - DAYS_PER_MONTH + day - 1
        return start + DAYS_PER_MONTH * (month - 1) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0] - BAHAI_OFFSET
        if jdn < _naw_ruz(year):
            year -= 1
        doy = jdn - _naw_ruz(year)
        length = self._year_length(year)
        if doy < 18 * DAYS_PER_MONTH:
            return self._make(year, doy // DAYS_PER_MONTH + 1, doy % DAYS_PER_MONTH + 1)
        if doy < length - DAYS_PER_MONTH:
            return self._make(year, AYYAM_I_HA, doy - 18 * DAYS_PER_MONTH + 1)
        return self._make(year, 19, doy - (length - DAYS_PER_MONTH) + 1)
