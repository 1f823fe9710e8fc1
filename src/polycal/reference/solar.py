# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.errors import ConversionNonConvergentError
from . import astro_args as aa
from . import time_scales as ts

# Mean motion of the Sun in longitude, degrees per day.
SOLAR_RATE_DEG = 360.0 / aa.MEAN_TROPICAL_YEAR

# Stop refining once a step moves the instant by less than this (days, ~0.01 s).
_TOL_DAYS = 1e-7


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    True and apparent solar longitude for a JD(TT) from the truncated
    Meeus series (accurate to ~0.01 deg).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    fa = aa.fundamental_args(T)

    M_rad = math.radians(sm.M_deg)

    # Equation of center
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = aa.wrap_deg(sm.L0_deg + C_sun)

    # Aberration and leading nutation term
    Omega_rad = math.radians(fa.Omega_deg)
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def apparent_longitude_ut(jd_ut: float) -> float:
    """Apparent solar longitude (degrees) at an instant given in UT."""
    return solar_longitude(ts.jd_ut_to_jd_tt(jd_ut)).L_app_deg


def equation_of_time_minutes(jd_tt: float) -> float:
    """
    Equation of Time (apparent minus mean solar time) in minutes.
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    eps_rad = math.radians(aa.mean_obliquity_deg(T))
    L_app_rad = math.radians(solar_longitude(jd_tt).L_app_deg)

    # Right ascension; atan2 keeps the quadrant
    y = math.cos(eps_rad) * math.sin(L_app_rad)
    x = math.cos(L_app_rad)
    alpha_sun_deg = aa.wrap_deg(math.degrees(math.atan2(y, x)))

    return 4.0 * aa.wrap180(sm.L0_deg - alpha_sun_deg)


def apparent_noon_ut(jdn: int, longitude_deg_east: float) -> float:
    """
    JD(UT) of local apparent noon on civil day `jdn` at a longitude.

    Mean noon at the meridian is 12h LMT; apparent noon is earlier by the
    equation of time.
    """
    mean_noon = float(jdn) - longitude_deg_east / 360.0
    eot = equation_of_time_minutes(ts.jd_ut_to_jd_tt(mean_noon))
    return mean_noon - eot / 1440.0


def solar_longitude_after(target_deg: float, jd_ut: float, *, max_steps: int = 64) -> float:
    """
    First instant (JD UT) at or after jd_ut when the apparent solar longitude
    equals target_deg.

    Picard iteration on the mean solar motion:
        t_{n+1} = t_n + wrap180(target - L(t_n)) / rate
    The true rate differs from the mean by ~3%, so each step shrinks the
    error by a factor ~30.
    """
    target = aa.wrap_deg(target_deg)
    t = jd_ut + aa.wrap_deg(target - apparent_longitude_ut(jd_ut)) / SOLAR_RATE_DEG
    for _ in range(max_steps):
        step = aa.wrap180(target - apparent_longitude_ut(t)) / SOLAR_RATE_DEG
        t += step
        if abs(step) < _TOL_DAYS:
            return t
    raise ConversionNonConvergentError(
        f"solar longitude {target:.3f} deg not reached within {max_steps} steps",
        jdn=ts.jd_to_jdn(jd_ut),
        steps=max_steps,
    )
