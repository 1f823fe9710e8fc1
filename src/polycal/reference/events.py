"""Calendar-facing astronomical primitives.

Everything here takes and returns whole Julian Day Numbers in a local time
given as a fixed UT offset. Instants are mapped to days by
`time_scales.local_jdn` (round half up at local midnight), so repeated calls
always agree on the day.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..core.time import gregorian_to_jdn
from . import lunar
from . import solar
from . import time_scales as ts

SPRING = 0.0
SUMMER = 90.0
AUTUMN = 180.0
WINTER = 270.0


def solar_longitude(jdn: int, offset_hours: float = 0.0) -> float:
    """Apparent solar longitude (degrees) at the local midnight starting `jdn`."""
    return solar.apparent_longitude_ut(ts.local_midnight_ut(jdn, offset_hours))


def new_moon_before(jdn: int, offset_hours: float = 0.0, *, max_steps: int = 64) -> int:
    """Local day of the last new moon strictly before the start of day `jdn`."""
    t = lunar.new_moon_before(ts.local_midnight_ut(jdn, offset_hours), max_steps=max_steps)
    return ts.local_jdn(t, offset_hours)


def new_moon_after(jdn: int, offset_hours: float = 0.0, *, max_steps: int = 64) -> int:
    """Local day of the first new moon at or after the start of day `jdn`."""
    t = lunar.new_moon_at_or_after(ts.local_midnight_ut(jdn, offset_hours), max_steps=max_steps)
    return ts.local_jdn(t, offset_hours)


def solar_term_after(target_deg: float, jdn: int, offset_hours: float = 0.0, *, max_steps: int = 64) -> int:
    """Local day on which the Sun next reaches `target_deg`, searching from the start of `jdn`."""
    t = solar.solar_longitude_after(target_deg, ts.local_midnight_ut(jdn, offset_hours), max_steps=max_steps)
    return ts.local_jdn(t, offset_hours)


def equinox_or_solstice_ut(year: int, target_deg: float, *, max_steps: int = 64) -> float:
    """Instant (JD UT) of the equinox/solstice at `target_deg` in Gregorian `year`."""
    # Each event lies within a few days of the 20th of Mar/Jun/Sep/Dec.
    month = 3 + int(target_deg // 90) * 3
    start = gregorian_to_jdn(year, month, 1)
    return solar.solar_longitude_after(target_deg, ts.jdn_to_jd(start), max_steps=max_steps)


@dataclass(frozen=True)
class Seasons:
    """Local days of the four cardinal solar events of a Gregorian year."""
    year: int
    march_equinox: int
    june_solstice: int
    september_equinox: int
    december_solstice: int


def seasons(year: int, offset_hours: float = 0.0, *, max_steps: int = 64) -> Seasons:
    days = [
        ts.local_jdn(equinox_or_solstice_ut(year, lam, max_steps=max_steps), offset_hours)
        for lam in (SPRING, SUMMER, AUTUMN, WINTER)
    ]
    return Seasons(year, *days)


def moon_phases(start_jdn: int, end_jdn: int, offset_hours: float = 0.0, *, max_steps: int = 64) -> List[Tuple[int, str]]:
    """Principal lunar phases with local day in [start_jdn, end_jdn], in order."""
    out: List[Tuple[int, str]] = []
    for phase, name in lunar.PHASE_NAMES.items():
        t = ts.local_midnight_ut(start_jdn, offset_hours)
        end = ts.local_midnight_ut(end_jdn + 1, offset_hours)
        for _ in range(max_steps):
            t = lunar.lunar_phase_at_or_after(phase, t, max_steps=max_steps)
            if t >= end:
                break
            out.append((ts.local_jdn(t, offset_hours), name))
            t += 1.0
    out.sort()
    return out
