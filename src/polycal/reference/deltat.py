"""
polycal.reference.deltat

ΔT (= TT − UT) in seconds from the Espenak–Meeus (NASA Five Millennium Canon)
piecewise polynomials, valid across roughly −1999..+3000 and extended by the
long-term parabola outside that span.

No tabulated IERS data: calendar day boundaries only need ΔT to a few seconds
in the modern era, and the results must not depend on installed data files.
"""

from __future__ import annotations

from typing import Tuple


def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def _long_term(y: float) -> float:
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def delta_t_em2006(y: float) -> float:
    """
    Espenak–Meeus ΔT(y) in seconds; y is a decimal year.
    """
    if y < -500.0:
        dt = _long_term(y)
    elif y < 500.0:
        dt = _poly(y / 100.0, (
            10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521,
        ))
    elif y < 1600.0:
        dt = _poly((y - 1000.0) / 100.0, (
            1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073,
        ))
    elif y < 1700.0:
        t = y - 1600.0
        dt = 120.0 - 0.9808 * t - 0.01532 * t * t + (t ** 3) / 7129.0
    elif y < 1800.0:
        t = y - 1700.0
        dt = 8.83 + 0.1603 * t - 0.0059285 * t * t + 0.00013336 * (t ** 3) - (t ** 4) / 1174000.0
    elif y < 1860.0:
        dt = _poly(y - 1800.0, (
            13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875,
        ))
    elif y < 1900.0:
        t = y - 1860.0
        dt = 7.62 + 0.5737 * t - 0.251754 * (t ** 2) + 0.01680668 * (t ** 3) - 0.0004473624 * (t ** 4) + (t ** 5) / 233174.0
    elif y < 1920.0:
        t = y - 1900.0
        dt = -2.79 + 1.494119 * t - 0.0598939 * (t ** 2) + 0.0061966 * (t ** 3) - 0.000197 * (t ** 4)
    elif y < 1941.0:
        t = y - 1920.0
        dt = 21.20 + 0.84493 * t - 0.076100 * (t ** 2) + 0.0020936 * (t ** 3)
    elif y < 1961.0:
        t = y - 1950.0
        dt = 29.07 + 0.407 * t - (t ** 2) / 233.0 + (t ** 3) / 2547.0
    elif y < 1986.0:
        t = y - 1975.0
        dt = 45.45 + 1.067 * t - (t ** 2) / 260.0 - (t ** 3) / 718.0
    elif y < 2005.0:
        dt = _poly(y - 2000.0, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599))
    elif y < 2050.0:
        t = y - 2000.0
        dt = 62.92 + 0.32217 * t + 0.005589 * (t ** 2)
    elif y < 2150.0:
        # blends into the long-term parabola at 2150
        dt = _long_term(y) - 0.5628 * (2150.0 - y)
    else:
        dt = _long_term(y)
    return float(dt)


def delta_t_seconds(y: float) -> float:
    """ΔT(y) in seconds for decimal year y."""
    return delta_t_em2006(y)
