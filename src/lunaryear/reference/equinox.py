# reference/equinox.py

"""
March (vernal) equinox, Meeus ch. 27.

The low-accuracy instant comes from the mean-equinox polynomials (table 27.A
before year 1000, 27.B from 1000 on) and the 24-term periodic correction of
table 27.C. The high-accuracy instant refines that seed against the VSOP87
apparent solar longitude with a fixed budget of passes.

Both return TT instants. No range check: the low-accuracy tables cover about
-1000..+3000 and the result simply drifts outside that window.
"""

from __future__ import annotations

import logging
import math

from ..core.types import Instant
from .astro_args import J2000_TT, poly_eval, to_rad, wrap180
from .solar import solar_longitude_jd

LOGGER = logging.getLogger(__name__)

TABLE_SWITCH_YEAR = 1000
MAX_PASSES = 5
TOLERANCE_DEG = 0.000001
DAYS_PER_RADIAN = 58.0


# Meeus table 27.C, page 179: S = Σ A cos(B + C*T)
# (A, B, C)
EQUINOX_TERMS = (
    (  8.0,  15.45,  16859.074),
    (  9.0, 227.73,   1222.114),
    ( 12.0, 320.81,  34777.259),
    ( 12.0, 287.11,  31931.756),
    ( 12.0,  95.39,  14577.848),
    ( 14.0, 199.76,  31436.921),
    ( 16.0, 198.04,  62894.029),
    ( 17.0, 288.79,   4562.452),
    ( 18.0, 155.12,  67555.328),
    ( 29.0,  60.93,   4443.417),
    ( 44.0, 325.15,  31555.956),
    ( 45.0, 247.54,  29929.562),
    ( 50.0,  21.02,   2281.226),
    ( 52.0, 297.17,    150.678),
    ( 58.0, 119.81,  33718.147),
    ( 70.0, 243.58,   9037.513),
    ( 74.0, 296.72,   3034.906),
    ( 77.0, 222.54,  65928.934),
    (136.0, 171.52,  22518.443),
    (156.0,  73.14,  45036.886),
    (182.0,  27.85, 445267.112),
    (199.0, 342.08,     20.186),
    (203.0, 337.23,  32964.467),
    (485.0, 324.96,   1934.136),
)

# March mean equinox, highest power first
_MEAN_EQUINOX_BEFORE_1000 = (-0.00071, 0.00111, 0.06134, 365242.13740, 1721139.29189)
_MEAN_EQUINOX_FROM_1000 = (-0.00057, -0.00411, 0.05169, 365242.37404, 2451623.80984)


def mean_equinox_jde(year: int) -> float:
    """JDE of the March mean equinox (Meeus tables 27.A / 27.B)."""
    if year >= TABLE_SWITCH_YEAR:
        y = (year - 2000.0) / 1000.0
        return poly_eval(_MEAN_EQUINOX_FROM_1000, y)
    y = year / 1000.0
    return poly_eval(_MEAN_EQUINOX_BEFORE_1000, y)


def vernal_equinox_low_accuracy_jde(year: int) -> float:
    jdme = mean_equinox_jde(year)

    # Julian centuries from J2000.0
    t = (jdme - J2000_TT) / 36525.0

    w = to_rad(35999.373 * t - 2.47)
    lam = 1.0 + 0.0334 * math.cos(w) + 0.0007 * math.cos(2.0 * w)
    s = 0.0
    for a, b, c in EQUINOX_TERMS:
        s += a * math.cos(to_rad(b + c * t))

    return jdme + 0.00001 * s / lam


def vernal_equinox_jde(year: int) -> float:
    """
    Refine the low-accuracy seed: at most MAX_PASSES evaluations of the
    apparent solar longitude, stepping 58*sin(-lambda) days each time.
    Running out of passes is not an error; the last estimate is returned.
    """
    jde = vernal_equinox_low_accuracy_jde(year)

    for i in range(MAX_PASSES):
        lon = wrap180(solar_longitude_jd(jde))
        LOGGER.debug("equinox %d pass %d: jde=%.8f lambda=%.3e deg", year, i, jde, lon)
        if abs(lon) < TOLERANCE_DEG:
            return jde
        jde += DAYS_PER_RADIAN * math.sin(-to_rad(lon))

    LOGGER.debug("equinox %d: pass budget spent, returning jde=%.8f", year, jde)
    return jde


def date_of_vernal_equinox_low_accuracy(year: int) -> Instant:
    """
    Vernal equinox, low accuracy (TT).

      date_of_vernal_equinox_low_accuracy(1999)   # 1999-03-21 01:46:59 TT
    """
    return Instant(vernal_equinox_low_accuracy_jde(year), "TT")


def date_of_vernal_equinox(year: int) -> Instant:
    """
    Vernal equinox, higher accuracy (TT).

      date_of_vernal_equinox(1999)   # 1999-03-21 01:46:56 TT
    """
    return Instant(vernal_equinox_jde(year), "TT")
