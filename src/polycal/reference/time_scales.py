from __future__ import annotations

import math

from .deltat import delta_t_seconds


# ============================================================
# Basic JD / JDN helpers
# ============================================================

def jd_to_jdn(jd: float) -> int:
    """
    Convert Julian Date (days from noon) to the Julian Day Number of the civil day containing it.

      JDN = floor(JD + 0.5)

    This is the one rounding rule used for every day boundary: round half up,
    so an instant exactly at midnight belongs to the day it starts.
    """
    return int(math.floor(jd + 0.5))


def jdn_to_jd(jdn: int) -> float:
    """
    JD at the midnight that starts civil day `jdn`.
    """
    return float(jdn) - 0.5


def decimal_year(jd: float) -> float:
    """Decimal year of a JD, close enough for ΔT lookups."""
    return 2000.0 + (jd - 2451544.5) / 365.2425


# ============================================================
# TT <-> UT conversions (via ΔT)
# ============================================================

def jd_ut_to_jd_tt(jd_ut: float) -> float:
    """
    JD(UT) -> JD(TT), with TT = UT + ΔT.
    """
    return jd_ut + delta_t_seconds(decimal_year(jd_ut)) / 86400.0


def jd_tt_to_jd_ut(jd_tt: float) -> float:
    """
    Approximate inverse of jd_ut_to_jd_tt.

    Two fixed-point iterations: ΔT varies slowly, so this is consistent
    to well under a second.
    """
    jd_ut = jd_tt
    for _ in range(2):
        jd_ut = jd_tt - delta_t_seconds(decimal_year(jd_ut)) / 86400.0
    return jd_ut


# ============================================================
# Local time helpers
# ============================================================

def lmt_offset_hours(longitude_deg_east: float) -> float:
    """
    Offset (hours) of Local Mean Time from UT at a longitude.
    Positive east longitudes mean LMT ahead of UT:
      360° -> 24h  =>  1° -> 4 minutes.
    """
    return longitude_deg_east / 15.0


def local_to_ut(jd_local: float, offset_hours: float) -> float:
    """JD expressed in a fixed-offset local time -> JD(UT)."""
    return jd_local - offset_hours / 24.0


def ut_to_local(jd_ut: float, offset_hours: float) -> float:
    """JD(UT) -> JD expressed in a fixed-offset local time."""
    return jd_ut + offset_hours / 24.0


def local_midnight_ut(jdn: int, offset_hours: float) -> float:
    """JD(UT) of the local midnight starting civil day `jdn`."""
    return local_to_ut(jdn_to_jd(jdn), offset_hours)


def local_jdn(jd_ut: float, offset_hours: float) -> int:
    """Local civil day containing the instant jd_ut."""
    return jd_to_jdn(ut_to_local(jd_ut, offset_hours))
