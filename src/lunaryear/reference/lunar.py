# reference/lunar.py

"""
Phases of the Moon (Meeus, Astronomical Algorithms, ch. 49).

Lunation k = 0 is the first New Moon of 2000 (2000 January 6). The phase adds
a quarter offset: k, k+0.25, k+0.5, k+0.75 are New, First Quarter, Full and
Last Quarter of synodic month k.

Good for roughly -1999..+3000. There is no range check; outside that window
the instants just grow less accurate.
"""

from __future__ import annotations

import math
from typing import Union

from ..core.types import Instant, Phase
from .astro_args import normalize360, poly_eval, to_rad

JDE_LUNATION_0 = 2451550.09766
SYNODIC_MONTH = 29.530588861
LUNATIONS_PER_YEAR = 12.3685


# Meeus p. 351, New and Full Moon corrections.
# (new moon, full moon, power of E, F, M, M', Omega)
NEW_FULL_TERMS = (
    ( 0.00002,  0.00002, 0,  0.0,  0.0,  4.0,  0.0),
    (-0.00002, -0.00002, 0,  0.0,  1.0,  3.0,  0.0),
    (-0.00002, -0.00002, 0, -2.0, -1.0,  1.0,  0.0),
    ( 0.00003,  0.00003, 0,  2.0, -1.0,  1.0,  0.0),
    (-0.00003, -0.00003, 0,  2.0,  1.0,  1.0,  0.0),
    ( 0.00003,  0.00003, 0,  2.0,  0.0,  2.0,  0.0),
    ( 0.00003,  0.00003, 0, -2.0,  1.0,  1.0,  0.0),
    ( 0.00004,  0.00004, 0,  0.0,  3.0,  0.0,  0.0),
    ( 0.00004,  0.00004, 0, -2.0,  0.0,  2.0,  0.0),
    (-0.00007, -0.00007, 0,  0.0,  2.0,  1.0,  0.0),
    (-0.00017, -0.00017, 0,  0.0,  0.0,  0.0,  1.0),
    (-0.00024, -0.00024, 1,  0.0, -1.0,  2.0,  0.0),
    ( 0.00038,  0.00038, 1, -2.0,  1.0,  0.0,  0.0),
    ( 0.00042,  0.00042, 1,  2.0,  1.0,  0.0,  0.0),
    (-0.00042, -0.00042, 0,  0.0,  0.0,  3.0,  0.0),
    ( 0.00056,  0.00056, 1,  0.0,  1.0,  2.0,  0.0),
    (-0.00057, -0.00057, 0,  2.0,  0.0,  1.0,  0.0),
    (-0.00111, -0.00111, 0, -2.0,  0.0,  1.0,  0.0),
    ( 0.00208,  0.00209, 2,  0.0,  2.0,  0.0,  0.0),
    (-0.00514, -0.00515, 1,  0.0,  1.0,  1.0,  0.0),
    ( 0.00739,  0.00734, 1,  0.0, -1.0,  1.0,  0.0),
    ( 0.01039,  0.01043, 0,  2.0,  0.0,  0.0,  0.0),
    ( 0.01608,  0.01614, 0,  0.0,  0.0,  2.0,  0.0),
    ( 0.17241,  0.17302, 1,  0.0,  1.0,  0.0,  0.0),
    (-0.40720, -0.40614, 0,  0.0,  0.0,  1.0,  0.0),
)

# Meeus p. 352, First and Last Quarter corrections.
# (coefficient, power of E, F, M, M', Omega)
QUARTER_TERMS = (
    (-0.00002, 0,  0.0,  1.0,  3.0,  0.0),
    ( 0.00002, 0,  2.0, -1.0,  1.0,  0.0),
    ( 0.00002, 0, -2.0,  0.0,  2.0,  0.0),
    ( 0.00003, 0,  0.0,  3.0,  0.0,  0.0),
    ( 0.00003, 0, -2.0,  1.0,  1.0,  0.0),
    ( 0.00004, 0,  0.0, -2.0,  1.0,  0.0),
    (-0.00004, 0,  2.0,  1.0,  1.0,  0.0),
    ( 0.00004, 0,  2.0,  0.0,  2.0,  0.0),
    (-0.00005, 0, -2.0, -1.0,  1.0,  0.0),
    (-0.00017, 0,  0.0,  0.0,  0.0,  1.0),
    ( 0.00027, 1,  0.0,  1.0,  2.0,  0.0),
    (-0.00028, 2,  0.0,  2.0,  1.0,  0.0),
    ( 0.00032, 1, -2.0,  1.0,  0.0,  0.0),
    ( 0.00032, 1,  2.0,  1.0,  0.0,  0.0),
    (-0.00034, 1,  0.0, -1.0,  2.0,  0.0),
    (-0.00040, 0,  0.0,  0.0,  3.0,  0.0),
    (-0.00070, 0,  2.0,  0.0,  1.0,  0.0),
    (-0.00180, 0, -2.0,  0.0,  1.0,  0.0),
    ( 0.00204, 2,  0.0,  2.0,  0.0,  0.0),
    ( 0.00454, 1,  0.0, -1.0,  1.0,  0.0),
    ( 0.00804, 0,  2.0,  0.0,  0.0,  0.0),
    ( 0.00862, 0,  0.0,  0.0,  2.0,  0.0),
    (-0.01183, 1,  0.0,  1.0,  1.0,  0.0),
    ( 0.17172, 1,  0.0,  1.0,  0.0,  0.0),
    (-0.62801, 0,  0.0,  0.0,  1.0,  0.0),
)

# Meeus p. 351, planetary arguments, all phases.
# (A, rate per lunation, coefficient, T^2 term)
PLANETARY_TERMS = (
    (299.77,  0.107408, 0.000325, -0.009173),
    (251.88,  0.016321, 0.000165,  0.0),
    (251.83, 26.651886, 0.000164,  0.0),
    (349.42, 36.412478, 0.000126,  0.0),
    ( 84.66, 18.206239, 0.000110,  0.0),
    (141.74, 53.303771, 0.000062,  0.0),
    (207.14,  2.453732, 0.000060,  0.0),
    (154.84,  7.306860, 0.000056,  0.0),
    ( 34.52, 27.261239, 0.000047,  0.0),
    (207.19,  0.121824, 0.000042,  0.0),
    (291.34,  1.844379, 0.000040,  0.0),
    (161.72, 24.198154, 0.000037,  0.0),
    (239.56, 25.513099, 0.000035,  0.0),
    (331.55,  3.592518, 0.000023,  0.0),
)


def mean_new_moon_jde(k: float) -> float:
    """(49.1) JDE of the mean phase for (fractional) lunation k."""
    t = k / 1236.85
    return JDE_LUNATION_0 + SYNODIC_MONTH * k + poly_eval((0.00000000073, -0.000000150, 0.00015437, 0.0, 0.0), t)


def _periodic_sum(terms, col: int, e: float, f: float, m: float, m_lun: float, o: float) -> float:
    """Σ coef * E^n * sin(nF + nM + nM' + nΩ) over a correction table."""
    acc = 0.0
    p = len(terms[0]) - 5  # index of the E power column
    for term in terms:
        t1 = term[col]
        for _ in range(term[p]):
            t1 *= e
        t2 = term[p + 1] * f
        t2 += term[p + 2] * m
        t2 += term[p + 3] * m_lun
        t2 += term[p + 4] * o
        acc += t1 * math.sin(to_rad(normalize360(t2)))
    return acc


def date_of_moon_jde(k: float, phase: Union[Phase, int]) -> float:
    """JDE (TT) of `phase` in lunation k."""
    phase = Phase(phase)
    k += phase.offset

    # Julian centuries from J2000.0
    t = k / 1236.85

    jde = mean_new_moon_jde(k)

    # Eccentricity of Earth's orbit
    e = poly_eval((-0.0000074, -0.002516, 1.0), t)
    # Sun's mean anomaly
    m = 2.5534 + 29.10535670 * k + poly_eval((-0.00000011, -0.0000014, 0.0, 0.0), t)
    # Moon's mean anomaly
    m_lun = 201.5643 + 385.81693528 * k + poly_eval((-0.000000058, 0.00001238, 0.0107582, 0.0, 0.0), t)
    # Moon's argument of latitude
    f = 160.7108 + 390.67050284 * k + poly_eval((0.000000011, -0.00000227, -0.0016118, 0.0, 0.0), t)
    # Longitude of the ascending node of the lunar orbit
    o = 124.7746 - 1.56375588 * k + poly_eval((0.00000215, 0.0020672, 0.0, 0.0), t)

    if phase in (Phase.NEW, Phase.FULL):
        col = 0 if phase == Phase.NEW else 1
        jde += _periodic_sum(NEW_FULL_TERMS, col, e, f, m, m_lun, o)
    else:
        jde += _periodic_sum(QUARTER_TERMS, 0, e, f, m, m_lun, o)

        w = (
            0.00002 * math.cos(to_rad(2.0 * f))
            + 0.00002 * math.cos(to_rad(m_lun + m))
            - 0.00002 * math.cos(to_rad(m_lun - m))
            + 0.00026 * math.cos(to_rad(m_lun))
            - 0.00038 * e * math.cos(to_rad(m))
            + 0.00306
        )
        if phase == Phase.FIRST_QUARTER:
            jde += w
        else:
            jde -= w

    # Planetary corrections, all phases
    corr = 0.0
    t2 = t * t
    for a0, rate, coef, quad in PLANETARY_TERMS:
        a = a0
        a += rate * k
        a += quad * t2
        corr += math.sin(to_rad(normalize360(a))) * coef

    return jde + corr


def date_of_moon(k: float, phase: Union[Phase, int] = Phase.NEW) -> Instant:
    """
    Instant (TT) of `phase` in lunation k.

      date_of_moon(87, Phase.NEW)   # 2007-01-19 04:01:45 TT
    """
    return Instant(date_of_moon_jde(k, phase), "TT")


def first_lunation_of_year(year: int) -> int:
    """
    Index of the first New Moon whose TT civil date falls in `year`.

      first_lunation_of_year(1776)   # -2770
    """
    k = math.floor((year - 2000) * LUNATIONS_PER_YEAR)
    while date_of_moon(k, Phase.NEW).year < year:
        k += 1
    return k
