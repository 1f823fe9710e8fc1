"""
polycal.engines.mayan
---------------------
The three Maya day counts, all anchored by the GMT correlation: the Long
Count date 0.0.0.0.0 4 Ajaw 8 Kumk'u is JDN 584283 (11 August 3114 BCE,
Gregorian).

None of these has years in the civil sense, so the CalendarDate fields are
reused as positional slots:

- Long Count: year = baktun, month = katun, day = tun, extra = {uinal, kin}.
- Tzolk'in: year = completed 260-day rounds, month = day name 1..20,
  day = number 1..13.
- Haab': year = completed 365-day rounds, month = 1..19 (19 = Wayeb'),
  day = 0..19 (the seating day is 0).
"""

from __future__ import annotations

from typing import Any, Tuple

from ..core.errors import InvalidDateError
from ..core.types import CalendarDate
from .base import BaseConverter

MAYAN_EPOCH = 584283

KIN = 1
UINAL = 20
TUN = 360
KATUN = 7200
BAKTUN = 144000

TZOLKIN_DAYS = 260
HAAB_DAYS = 365
WAYEB = 19

# Position of the epoch inside each cycle: 4 Ajaw, 8 Kumk'u.
_TZOLKIN_NUMBER_SHIFT = 3
_TZOLKIN_NAME_SHIFT = 19
_HAAB_SHIFT = 17 * 20 + 8


class LongCountConverter(BaseConverter):
    def month_range(self, year: int) -> Tuple[int, int]:
        return 0, 19

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        return 20  # tuns per katun

    def day_range(self, year: int, month: int, **extra: Any) -> Tuple[int, int]:
        return 0, 19

    def _validate(self, d: CalendarDate) -> None:
        super()._validate(d)
        uinal, kin = d.get("uinal", 0), d.get("kin", 0)
        if not 0 <= uinal <= 17:
            raise InvalidDateError(f"uinal {uinal} not in 0..17", calendar=self.id)
        if not 0 <= kin <= 19:
            raise InvalidDateError(f"kin {kin} not in 0..19", calendar=self.id)

    def _to_jdn(self, d: CalendarDate) -> int:
        baktun, katun, tun = self._fields(d)
        days = baktun * BAKTUN + katun * KATUN + tun * TUN + d.get("uinal", 0) * UINAL + d.get("kin", 0) * KIN
        return MAYAN_EPOCH + days

    def _from_jdn(self, jdn: int) -> CalendarDate:
        days = jdn - MAYAN_EPOCH
        baktun, rem = divmod(days, BAKTUN)
        katun, rem = divmod(rem, KATUN)
        tun, rem = divmod(rem, TUN)
        uinal, kin = divmod(rem, UINAL)
        return self._make(baktun, katun, tun, {"uinal": uinal, "kin": kin})


def long_count_string(d: CalendarDate) -> str:
    """Dotted form, e.g. 13.0.0.0.0."""
    return f"{d.year}.{d.month}.{d.day}.{d.get('uinal', 0)}.{d.get('kin', 0)}"


class TzolkinConverter(BaseConverter):
    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        return 13

    def _to_jdn(self, d: CalendarDate) -> int:
        rounds, name, number = self._fields(d)
        # the unique p in 0..259 with the requested name (mod 20) and number (mod 13)
        p = (name - 1 - _TZOLKIN_NAME_SHIFT) % 20
        while (p + _TZOLKIN_NUMBER_SHIFT) % 13 + 1 != number:
            p += 20
        return MAYAN_EPOCH + rounds * TZOLKIN_DAYS + p

    def _from_jdn(self, jdn: int) -> CalendarDate:
        rounds, p = divmod(jdn - MAYAN_EPOCH, TZOLKIN_DAYS)
        number = (p + _TZOLKIN_NUMBER_SHIFT) % 13 + 1
        name = (p + _TZOLKIN_NAME_SHIFT) % 20 + 1
        return self._make(rounds, name, number, {"name": self.descriptor.month_names[name - 1]})


class HaabConverter(BaseConverter):
    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        return 5 if month == WAYEB else 20

    def day_range(self, year: int, month: int, **extra: Any) -> Tuple[int, int]:
        return 0, self.days_in_month(year, month) - 1

    def _to_jdn(self, d: CalendarDate) -> int:
        rounds, month, day = self._fields(d)
        return MAYAN_EPOCH + rounds * HAAB_DAYS + (month - 1) * 20 + day - _HAAB_SHIFT

    def _from_jdn(self, jdn: int) -> CalendarDate:
        rounds, count = divmod(jdn - MAYAN_EPOCH + _HAAB_SHIFT, HAAB_DAYS)
        return self._make(rounds, count // 20 + 1, count % 20)
