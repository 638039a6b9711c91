# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .astro_args import T_centuries, normalize360, poly_eval, to_rad
from .nutation import nutation_in_longitude_jd
from .vsop87_earth import heliocentric_longitude_deg, radius_vector_au

if TYPE_CHECKING:
    from ..core.types import Instant


FK5_CORRECTION_DEG = -2.509167e-5
ABERRATION_CONSTANT_DEG = 0.0056916111  # 20.4898" at 1 AU


@dataclass(frozen=True)
class SolarCoordinates:
    """Apparent geocentric solar longitude and its ingredients (degrees, AU)."""
    L_helio_deg: float
    R_au: float
    nutation_deg: float
    aberration_deg: float
    L_app_deg: float


def solar_longitude_low_accuracy_jd(jd_tt: float) -> float:
    """
    Apparent solar longitude, Meeus ch. 25 low accuracy (~0.01 deg).
    """
    T = T_centuries(jd_tt)

    # Mean longitude and mean anomaly of the Sun
    L0 = normalize360(poly_eval((0.0003032, 36000.76983, 280.46646), T))
    M = normalize360(poly_eval((-0.0001537, 35999.05029, 357.52911), T))

    # (25.4) Equation of center
    M_rad = to_rad(M)
    C = (
        poly_eval((-0.000014, -0.004817, 1.914602), T) * math.sin(M_rad)
        + poly_eval((-0.000101, 0.019993), T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = normalize360(L0 + C)

    # Aberration and leading nutation term
    omega = normalize360(125.04 - 1934.136 * T)
    return normalize360(L_true - 0.00569 - 0.00478 * math.sin(to_rad(omega)))


def solar_coordinates_jd(jd_tt: float) -> SolarCoordinates:
    """
    Apparent solar longitude, Meeus ch. 25 higher accuracy (VSOP87).
    Accurate to about 1" between -2000 and +6000.
    """
    L = heliocentric_longitude_deg(jd_tt)
    R = radius_vector_au(jd_tt)
    nutation = nutation_in_longitude_jd(jd_tt)
    aberration = -ABERRATION_CONSTANT_DEG / R

    lon = L
    lon -= 180.0                  # geocentric
    lon += FK5_CORRECTION_DEG
    lon += nutation
    lon += aberration
    return SolarCoordinates(
        L_helio_deg=L,
        R_au=R,
        nutation_deg=nutation,
        aberration_deg=aberration,
        L_app_deg=normalize360(lon),
    )


def solar_longitude_jd(jd_tt: float) -> float:
    return solar_coordinates_jd(jd_tt).L_app_deg


# ============================================================
# Instant-based API
# ============================================================

def solar_longitude_low_accuracy(instant: "Instant") -> float:
    """Low-accuracy apparent solar longitude in degrees."""
    return solar_longitude_low_accuracy_jd(instant.to_tt().jd)


def solar_longitude(instant: "Instant") -> float:
    """High-accuracy apparent solar longitude in degrees."""
    return solar_longitude_jd(instant.to_tt().jd)


def earth_heliocentric_longitude(instant: "Instant") -> float:
    return heliocentric_longitude_deg(instant.to_tt().jd)


def earth_radius_vector(instant: "Instant") -> float:
    return radius_vector_au(instant.to_tt().jd)
