"""
polycal.engines.chinese
-----------------------
Chinese lunisolar calendar (modern 時憲 rules, computed astronomically).

Conventions
-----------
- Months begin on the local day of a new moon (Beijing time, UTC+8 from 1929;
  the local mean time of Beijing before that).
- The winter solstice always falls in month 11. A sui (solstice to solstice)
  with 13 new moons has one leap month: the first month without a major
  solar term (zhongqi).
- `year` is the Gregorian year in which the Chinese year starts; the
  sexagenary name and zodiac animal are carried in `extra`.
- A leap month repeats the number of the month before it and is marked by
  `extra["leap_month"] = True`.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Any, Dict, Tuple

from ..core.errors import ConversionNonConvergentError, InvalidDateError
from ..core.time import amod, gregorian_to_jdn, jdn_to_gregorian
from ..core.types import CalendarDate
from ..reference import events
from ..reference.astro_args import MEAN_SYNODIC_MONTH
from .base import BaseConverter

logger = logging.getLogger(__name__)

CHINESE_EPOCH = gregorian_to_jdn(-2636, 2, 15)
YEAR_OFFSET = 2637  # elapsed years since the epoch = year + 2637

STEMS = "甲乙丙丁戊己庚辛壬癸"
BRANCHES = "子丑寅卯辰巳午未申酉戌亥"
ANIMALS = (
    "Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
    "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig",
)
LEAP_PREFIX = "闰"

_ZONE_CHANGE = gregorian_to_jdn(1929, 1, 1)


def zone_hours(jdn: int) -> float:
    """UT offset of Chinese civil time on day `jdn`."""
    if jdn < _ZONE_CHANGE:
        return 1397.0 / 180.0  # Beijing LMT, 116 deg 25 min E
    return 8.0


def sexagenary(year: int) -> Tuple[int, int, int]:
    """(cycle, stem index, branch index) of a Chinese year; 2024 is 甲辰 in cycle 78."""
    elapsed = year + YEAR_OFFSET
    cycle = (elapsed - 1) // 60 + 1
    pos = amod(elapsed, 60)
    return cycle, (pos - 1) % 10, (pos - 1) % 12


def stem_branch(year: int) -> str:
    _, stem, branch = sexagenary(year)
    return STEMS[stem] + BRANCHES[branch]


class _Astro:
    """Day-level astronomy in Chinese civil time, bounded by `max_steps`."""

    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps

    def new_moon_on_or_after(self, jdn: int) -> int:
        return events.new_moon_after(jdn, zone_hours(jdn), max_steps=self.max_steps)

    def new_moon_before(self, jdn: int) -> int:
        return events.new_moon_before(jdn, zone_hours(jdn), max_steps=self.max_steps)

    def major_term(self, jdn: int) -> int:
        """Index 1..12 of the last major solar term at the start of `jdn` (1 = 雨水)."""
        lon = events.solar_longitude(jdn, zone_hours(jdn))
        return amod(2 + math.floor(lon / 30.0), 12)

    def no_major_term(self, month_start: int) -> bool:
        return self.major_term(month_start) == self.major_term(self.new_moon_on_or_after(month_start + 1))

    def winter_solstice_on_or_before(self, jdn: int) -> int:
        s = events.solar_term_after(events.WINTER, jdn - 370, zone_hours(jdn), max_steps=self.max_steps)
        for _ in range(self.max_steps):
            nxt = events.solar_term_after(events.WINTER, s + 1, zone_hours(s + 1), max_steps=self.max_steps)
            if nxt > jdn:
                return s
            s = nxt
        raise ConversionNonConvergentError(
            "winter solstice search did not converge", calendar="chinese", jdn=jdn, steps=self.max_steps
        )

    def prior_leap_month(self, m12: int, m: int) -> bool:
        """True if a month without a major term lies in [m12, m]."""
        for _ in range(self.max_steps):
            if m < m12:
                return False
            if self.no_major_term(m):
                return True
            m = self.new_moon_before(m)
        raise ConversionNonConvergentError(
            "leap month scan did not converge", calendar="chinese", jdn=m, steps=self.max_steps
        )

    def sui(self, jdn: int) -> Tuple[int, bool]:
        """(month-12 start, leap sui) for the sui containing `jdn`."""
        s1 = self.winter_solstice_on_or_before(jdn)
        s2 = self.winter_solstice_on_or_before(s1 + 370)
        m12 = self.new_moon_on_or_after(s1 + 1)
        next_m11 = self.new_moon_before(s2 + 1)
        return m12, round((next_m11 - m12) / MEAN_SYNODIC_MONTH) == 12

    def new_year_in_sui(self, jdn: int) -> int:
        m12, leap = self.sui(jdn)
        m13 = self.new_moon_on_or_after(m12 + 1)
        if leap and (self.no_major_term(m12) or self.no_major_term(m13)):
            return self.new_moon_on_or_after(m13 + 1)
        return m13

    def new_year_on_or_before(self, jdn: int) -> int:
        ny = self.new_year_in_sui(jdn)
        if jdn >= ny:
            return ny
        return self.new_year_in_sui(jdn - 180)


@lru_cache(maxsize=1024)
def new_year(year: int, max_steps: int = 64) -> int:
    """JDN of 正月 1 of Chinese `year` (always between 21 January and 20 February)."""
    return _Astro(max_steps).new_year_on_or_before(gregorian_to_jdn(year, 7, 1))


def _from_jdn(jdn: int, max_steps: int) -> Tuple[int, int, int, bool]:
    """(year, month, day, leap) of day `jdn`."""
    astro = _Astro(max_steps)
    m12, leap_sui = astro.sui(jdn)
    m = astro.new_moon_before(jdn + 1)
    count = round((m - m12) / MEAN_SYNODIC_MONTH)
    if leap_sui and astro.prior_leap_month(m12, m):
        count -= 1
    month = amod(count, 12)
    leap = leap_sui and astro.no_major_term(m) and not astro.prior_leap_month(m12, astro.new_moon_before(m))
    year = jdn_to_gregorian(astro.new_year_on_or_before(jdn))[0]
    return year, month, jdn - m + 1, leap


@lru_cache(maxsize=4096)
def _month_start(year: int, month: int, leap: bool, max_steps: int) -> int:
    astro = _Astro(max_steps)
    p = astro.new_moon_on_or_after(new_year(year, max_steps) + (month - 1) * 29)
    _, m, _, is_leap = _from_jdn(p, max_steps)
    if m != month or is_leap != leap:
        p = astro.new_moon_on_or_after(p + 1)
    _, m, _, is_leap = _from_jdn(p, max_steps)
    if m != month or is_leap != leap:
        kind = "leap month" if leap else "month"
        raise InvalidDateError(f"chinese year {year} has no {kind} {month}", calendar="chinese")
    return p


class ChineseConverter(BaseConverter):
    def _leap(self, extra: Dict[str, Any]) -> bool:
        return bool(extra.get("leap_month", False))

    def is_leap_year(self, year: int) -> bool:
        """True if the year (正月 1 to the next 正月 1) contains a leap month."""
        span = new_year(year + 1, self.max_steps) - new_year(year, self.max_steps)
        return round(span / MEAN_SYNODIC_MONTH) == 13

    def months_in_year(self, year: int) -> int:
        return 13 if self.is_leap_year(year) else 12

    def month_range(self, year: int) -> Tuple[int, int]:
        return 1, 12

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        start = _month_start(year, month, self._leap(extra), self.max_steps)
        return _Astro(self.max_steps).new_moon_on_or_after(start + 1) - start

    def month_name(self, d: CalendarDate, *, short: bool = False) -> str:
        name = super().month_name(d, short=short)
        return LEAP_PREFIX + name if d.get("leap_month") else name

    def _validate(self, d: CalendarDate) -> None:
        self._check_year(d.year, 0)
        super()._validate(d)

    def _to_jdn(self, d: CalendarDate) -> int:
        year, month, day = self._fields(d)
        return _month_start(year, month, self._leap(d.extra or {}), self.max_steps) + day - 1

    def _from_jdn(self, jdn: int) -> CalendarDate:
        year, month, day, leap = _from_jdn(jdn, self.max_steps)
        if _month_start(year, month, leap, self.max_steps) + day - 1 != jdn:
            raise ConversionNonConvergentError(
                f"chinese date {year}-{month}-{day} does not map back to JDN {jdn}",
                calendar=self.id, jdn=jdn, steps=self.max_steps,
            )
        cycle, stem, branch = sexagenary(year)
        logger.debug("chinese %d-%s%d-%d for JDN %d", year, "L" if leap else "", month, day, jdn)
        return self._make(
            year,
            month,
            day,
            {
                "leap_month": leap,
                "cycle": cycle,
                "stem_branch": STEMS[stem] + BRANCHES[branch],
                "animal": ANIMALS[branch],
            },
        )
