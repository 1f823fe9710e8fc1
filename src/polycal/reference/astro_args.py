from __future__ import annotations

from dataclasses import dataclass
from math import fmod


# ------------------------------------------------------------
# Angles
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def wrap180(deg: float) -> float:
    """Wrap degrees to [-180,180)."""
    return (deg + 180.0) % 360.0 - 180.0


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


# ------------------------------------------------------------
# Mean periods (days)
# ------------------------------------------------------------

MEAN_TROPICAL_YEAR = 365.242189
MEAN_SYNODIC_MONTH = 29.530588861


def tropical_year_days(T: float) -> float:
    """Mean tropical year (Laskar): 365.2421896698 - 6.15359e-6 T - 7.29e-10 T^2 + 2.64e-10 T^3."""
    return 365.2421896698 - 6.15359e-6 * T - 7.29e-10 * (T * T) + 2.64e-10 * (T * T * T)


def synodic_month_days(T: float) -> float:
    """Mean synodic month, consistent with the rate of the mean elongation D."""
    return 29.5305888531 + 2.1621e-7 * T - 3.64e-10 * (T * T)


# ------------------------------------------------------------
# Fundamental arguments (Meeus ch. 47, degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """Mean lunar/solar arguments, degrees wrapped to [0,360)."""
    Lp_deg: float
    D_deg: float
    M_deg: float
    Mp_deg: float
    F_deg: float
    Omega_deg: float


def fundamental_args(T: float) -> FundamentalArgs:
    """
    Mean elements of the Moon and Sun:
      L' = 218.3164477 + 481267.88123421 T - 0.0015786 T^2 + T^3/538841 - T^4/65194000
      D  = 297.8501921 + 445267.1114034  T - 0.0018819 T^2 + T^3/545868  - T^4/113065000
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699   - T^4/14712000
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000
      Ω  = 125.04452   - 1934.136261    T + 0.0020708 T^2 + T^3/450000
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    Lp = 218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0
    D = 297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0
    M = 357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0
    Mp = 134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0
    F = 93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0

    return FundamentalArgs(
        Lp_deg=wrap_deg(Lp),
        D_deg=wrap_deg(D),
        M_deg=wrap_deg(M),
        Mp_deg=wrap_deg(Mp),
        F_deg=wrap_deg(F),
        Omega_deg=wrap_deg(Omega),
    )


def eccentricity_factor(T: float) -> float:
    """Eccentricity factor E scaling lunar terms that contain the Sun's anomaly."""
    return 1.0 - 0.002516 * T - 0.0000074 * (T * T)


def mean_obliquity_deg(T: float) -> float:
    """Mean obliquity of the ecliptic (IAU 2006 polynomial), degrees."""
    T2 = T * T
    eps_arcsec = (
        84381.406
        - 46.836769 * T
        - 0.0001831 * T2
        + 0.00200340 * T2 * T
        - 0.000000576 * T2 * T2
        - 0.0000000434 * T2 * T2 * T
    )
    return eps_arcsec / 3600.0


# ------------------------------------------------------------
# Sun mean elements (Meeus ch. 25)
# ------------------------------------------------------------

@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # geometric mean longitude
    M_deg: float   # mean anomaly


def solar_mean_elements(T: float) -> SolarMean:
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M))


# ------------------------------------------------------------
# Mean lunar phases (Meeus 49.1)
# ------------------------------------------------------------

def lunation_index(jd: float) -> float:
    """Fractional Meeus lunation index k (k=0 is the new moon of 2000-01-06)."""
    return (jd - 2451550.09766) / MEAN_SYNODIC_MONTH


def jde_mean_new_moon(k: float) -> float:
    """
    Mean JDE (TT) of lunation k; quarter phases use k + 0.25, 0.5, 0.75:
      JDE = 2451550.09766 + 29.530588861 k
            + 0.00015437 T^2 - 0.000000150 T^3 + 0.00000000073 T^4,
      T = k / 1236.85.
    """
    T = k / 1236.85
    T2 = T * T
    return (
        2451550.09766
        + MEAN_SYNODIC_MONTH * k
        + 0.00015437 * T2
        - 0.000000150 * T2 * T
        + 0.00000000073 * T2 * T2
    )
