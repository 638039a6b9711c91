# reference/nutation.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .astro_args import T_centuries, normalize360, poly_eval, to_rad

if TYPE_CHECKING:
    from ..core.types import Instant


# Meeus Table 22.A, periodic terms for nutation in longitude.
# (D, M, M', F, Omega, A, B): term = (A + B*T) * sin(arg), unit 0.0001"
NUTATION_LON_TERMS = (
    ( 2, -1,  0,  2,  2,       -3,      0),
    ( 0,  0,  3,  2,  2,       -3,      0),
    ( 2, -1, -1,  2,  2,       -3,      0),
    ( 0, -1,  1,  2,  2,       -3,      0),
    ( 0,  1,  1,  0,  0,       -3,      0),
    (-1, -1,  1,  0,  0,       -3,      0),
    ( 0,  0, -2,  2,  2,       -3,      0),
    ( 0,  0,  1,  2,  0,        3,      0),
    ( 1,  0,  0,  0,  0,       -4,      0),
    (-2,  1,  0,  0,  0,       -4,      0),
    (-1,  0,  1,  0,  0,       -4,      0),
    ( 0,  0,  1, -2,  0,        4,      0),
    (-2,  1,  0,  2,  1,        4,      0),
    (-2,  0,  2,  0,  1,        4,      0),
    ( 0,  0,  2,  2,  1,       -5,      0),
    (-2,  0,  0,  0,  1,       -5,      0),
    (-2, -1,  0,  2,  1,       -5,      0),
    ( 0, -1,  1,  0,  0,        5,      0),
    ( 2,  0,  0,  0,  1,       -6,      0),
    ( 2,  0, -2,  0,  1,       -6,      0),
    (-2,  0,  1,  2,  1,        6,      0),
    (-2,  0,  2,  2,  2,        6,      0),
    ( 2,  0,  1,  0,  0,        6,      0),
    ( 2,  0,  0,  2,  1,       -7,      0),
    ( 0, -1,  0,  2,  2,       -7,      0),
    (-2,  1,  1,  0,  0,       -7,      0),
    ( 0,  1,  0,  2,  2,        7,      0),
    ( 2,  0,  1,  2,  2,       -8,      0),
    ( 2,  0, -1,  2,  1,      -10,      0),
    ( 0,  0,  2, -2,  0,       11,      0),
    ( 0, -1,  0,  0,  1,      -12,      0),
    (-2,  0,  1,  0,  1,      -13,      0),
    ( 0,  1,  0,  0,  1,      -15,      0),
    (-2,  2,  0,  2,  2,      -16,    0.1),
    ( 2,  0, -1,  0,  1,       16,      0),
    ( 0,  2,  0,  0,  0,       17,   -0.1),
    ( 0,  0, -1,  2,  1,       21,      0),
    (-2,  0,  0,  2,  0,      -22,      0),
    ( 0,  0,  0,  2,  0,       26,      0),
    (-2,  0,  1,  2,  2,       29,      0),
    ( 0,  0,  2,  0,  0,       29,      0),
    ( 0,  0,  2,  2,  2,      -31,      0),
    ( 2,  0,  0,  2,  2,      -38,      0),
    ( 0,  0, -2,  2,  1,       46,      0),
    (-2,  0,  2,  0,  0,       48,      0),
    ( 0,  0,  1,  2,  1,      -51,      0),
    ( 0,  0, -1,  0,  1,      -58,   -0.1),
    ( 2,  0, -1,  2,  2,      -59,      0),
    ( 0,  0,  1,  0,  1,       63,    0.1),
    ( 2,  0,  0,  0,  0,       63,      0),
    ( 0,  0, -1,  2,  2,      123,      0),
    (-2,  0,  0,  2,  1,      129,    0.1),
    (-2,  0,  1,  0,  0,     -158,      0),
    (-2, -1,  0,  2,  2,      217,   -0.5),
    ( 0,  0,  1,  2,  2,     -301,      0),
    ( 0,  0,  0,  2,  1,     -386,   -0.4),
    (-2,  1,  0,  2,  2,     -517,    1.2),
    ( 0,  0,  1,  0,  0,      712,    0.1),
    ( 0,  1,  0,  0,  0,     1426,   -3.4),
    ( 0,  0,  0,  0,  2,     2062,    0.2),
    ( 0,  0,  0,  2,  2,    -2274,   -0.2),
    (-2,  0,  0,  2,  2,   -13187,   -1.6),
    ( 0,  0,  0,  0,  1,  -171996, -174.2),
)


@dataclass(frozen=True)
class NutationArgs:
    """Fundamental arguments of the nutation series (degrees, wrapped to [0,360))."""
    D_deg: float
    M_deg: float
    Mp_deg: float
    F_deg: float
    Omega_deg: float


def nutation_args(T: float) -> NutationArgs:
    """
    Meeus (22.x) cubic polynomials in T (Julian centuries from J2000.0 TT).
    """
    # Mean elongation of the Moon from the Sun
    D = normalize360(poly_eval((1.0/189474.0, -0.0019142, 445267.111480, 297.85036), T))
    # Mean anomaly of the Sun (Earth)
    M = normalize360(poly_eval((-1.0/300000.0, -0.0001603, 35999.050340, 357.52772), T))
    # Mean anomaly of the Moon
    Mp = normalize360(poly_eval((1.0/56250.0, 0.0086972, 477198.867398, 134.96298), T))
    # Moon's argument of latitude
    F = normalize360(poly_eval((1.0/327270.0, -0.0036825, 483202.017538, 93.27191), T))
    # Longitude of the ascending node of the Moon's mean orbit
    Omega = normalize360(poly_eval((1.0/450000.0, 0.0020708, -1934.136261, 125.04452), T))
    return NutationArgs(D_deg=D, M_deg=M, Mp_deg=Mp, F_deg=F, Omega_deg=Omega)


def nutation_in_longitude_jd(jd_tt: float) -> float:
    """Δψ in degrees for JD(TT)."""
    T = T_centuries(jd_tt)
    a = nutation_args(T)

    nutation = 0.0
    for d, m, mp, f, om, A, B in NUTATION_LON_TERMS:
        arg = d * a.D_deg + m * a.M_deg + mp * a.Mp_deg + f * a.F_deg + om * a.Omega_deg
        nutation += (A + B * T) * math.sin(to_rad(arg)) / 36000000.0
    return nutation


def nutation_in_longitude(instant: "Instant") -> float:
    """
    Nutation in longitude of Earth's pole (Meeus ch. 22), in degrees.
    A UT instant is moved to TT first.
    """
    return nutation_in_longitude_jd(instant.to_tt().jd)
