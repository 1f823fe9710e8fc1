# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

from ..core.errors import ConversionNonConvergentError
from . import astro_args as aa
from . import time_scales as ts
from .solar import solar_longitude


@dataclass(frozen=True)
class LunarCoordinates:
    """True and apparent lunar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


# (d, m, m', f, coefficient in microdegrees), Meeus table 47.A.
# Enough terms to keep the elongation error near 20", i.e. new-moon
# instants good to about a minute.
LUNAR_LON_TERMS = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2011),
    (2, 0, 1, -2, -1977),
    (4, 0, -3, 0, -1736),
    (4, -1, -1, 0, -1671),
    (2, 1, 1, 0, -1557),
    (1, 1, -2, 0, 1492),
    (2, 0, -4, 0, -1422),
    (4, -1, -2, 0, -1205),
    (2, 1, 0, -2, -1111),
    (2, -1, 1, -2, -1100),
    (2, -1, 2, 0, -811),
    (0, 0, 4, 0, 769),
    (2, 0, -2, 2, 717),
    (0, 0, 2, 2, -712),
    (1, 0, 2, 0, -663),
    (1, 1, -1, 0, -565),
    (1, 0, -2, 0, -523),
    (4, 0, -4, 0, 492),
    (4, -2, -1, 0, -488),
    (2, 2, -1, 0, -469),
    (2, 2, 0, 0, -440),
    (0, 1, 3, 0, -425),
    (4, 0, 1, 0, -418),
    (0, 0, 2, -2, 386),
    (2, 0, -5, 0, 371),
    (2, 2, -2, 0, 362),
    (1, 1, 1, 0, 317),
    (2, 0, -3, 2, -310),
    (0, 2, -1, 0, -307),
    (2, 0, 3, 0, -293),
)

# Additive longitude terms (Venus, Jupiter, flattening), microdegrees.
_A1_RATE = 131.849
_A2_RATE = 479264.290

# Mean motion of the Moon-Sun elongation, degrees per day.
ELONGATION_RATE_DEG = 360.0 / aa.MEAN_SYNODIC_MONTH

# Phase instants are only used for day boundaries; ~1 second is plenty.
_TOL_DAYS = 1e-5

PHASE_NAMES = {0: "new moon", 90: "first quarter", 180: "full moon", 270: "last quarter"}


def lunar_position(jd_tt: float) -> LunarCoordinates:
    """
    Lunar true/apparent longitude for a JD(TT) (Meeus ch. 47, longitude only).
    """
    T = aa.T_centuries(jd_tt)
    fa = aa.fundamental_args(T)
    E = aa.eccentricity_factor(T)

    D_rad = math.radians(fa.D_deg)
    M_rad = math.radians(fa.M_deg)
    Mp_rad = math.radians(fa.Mp_deg)
    F_rad = math.radians(fa.F_deg)

    lon_sum_microdeg = 0.0
    for d, m, mp, f, coef in LUNAR_LON_TERMS:
        term_coef = coef
        if abs(m) == 1:
            term_coef *= E
        elif abs(m) == 2:
            term_coef *= E * E
        lon_sum_microdeg += term_coef * math.sin(d * D_rad + m * M_rad + mp * Mp_rad + f * F_rad)

    A1 = math.radians(119.75 + _A1_RATE * T)
    A2 = math.radians(53.09 + _A2_RATE * T)
    Lp_rad = math.radians(fa.Lp_deg)
    lon_sum_microdeg += 3958 * math.sin(A1) + 1962 * math.sin(Lp_rad - F_rad) + 318 * math.sin(A2)

    L_true = aa.wrap_deg(fa.Lp_deg + lon_sum_microdeg * 1e-6)

    # Leading nutation term
    L_app = aa.wrap_deg(L_true - 0.00478 * math.sin(math.radians(fa.Omega_deg)))
    return LunarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def elongation_deg(jd_tt: float) -> float:
    """Apparent Moon - Sun longitude in [0,360): 0 new, 90 first quarter, 180 full."""
    return aa.wrap_deg(lunar_position(jd_tt).L_app_deg - solar_longitude(jd_tt).L_app_deg)


@lru_cache(maxsize=8192)
def _phase_instant_tt(k: int, quarter: int, max_steps: int) -> float:
    """
    True instant (JD TT) of phase `quarter` (0..3) in lunation k.

    Seeded by the Meeus mean phase, then Picard iteration on the mean
    elongation rate.
    """
    target = 90.0 * quarter
    t = aa.jde_mean_new_moon(k + quarter / 4.0)
    for _ in range(max_steps):
        step = aa.wrap180(target - elongation_deg(t)) / ELONGATION_RATE_DEG
        t += step
        if abs(step) < _TOL_DAYS:
            return t
    raise ConversionNonConvergentError(
        f"lunar phase {target:.0f} deg of lunation {k} did not converge within {max_steps} steps",
        steps=max_steps,
    )


def phase_instant_ut(k: int, quarter: int = 0, *, max_steps: int = 64) -> float:
    """Instant (JD UT) of a lunar phase; quarter 0 is the new moon of lunation k."""
    return ts.jd_tt_to_jd_ut(_phase_instant_tt(k, quarter, max_steps))


def lunar_phase_at_or_after(phase_deg: float, jd_ut: float, *, max_steps: int = 64) -> float:
    """First instant (JD UT) at or after jd_ut of a principal phase (0, 90, 180 or 270 deg)."""
    quarter = int(round(aa.wrap_deg(phase_deg) / 90.0)) % 4
    k = math.floor(aa.lunation_index(jd_ut) - quarter / 4.0) - 1
    for _ in range(max_steps):
        t = phase_instant_ut(k, quarter, max_steps=max_steps)
        if t >= jd_ut:
            return t
        k += 1
    raise ConversionNonConvergentError(
        f"no lunar phase {phase_deg} found after JD {jd_ut} within {max_steps} lunations",
        jdn=ts.jd_to_jdn(jd_ut),
        steps=max_steps,
    )


def new_moon_at_or_after(jd_ut: float, *, max_steps: int = 64) -> float:
    """First new moon instant (JD UT) at or after jd_ut."""
    return lunar_phase_at_or_after(0.0, jd_ut, max_steps=max_steps)


def new_moon_before(jd_ut: float, *, max_steps: int = 64) -> float:
    """Last new moon instant (JD UT) strictly before jd_ut."""
    k = math.floor(aa.lunation_index(jd_ut)) + 1
    for _ in range(max_steps):
        t = phase_instant_ut(k, 0, max_steps=max_steps)
        if t < jd_ut:
            return t
        k -= 1
    raise ConversionNonConvergentError(
        f"no new moon found before JD {jd_ut} within {max_steps} lunations",
        jdn=ts.jd_to_jdn(jd_ut),
        steps=max_steps,
    )
