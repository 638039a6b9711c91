from __future__ import annotations

import math
from typing import Iterable


# ------------------------------------------------------------
# Polynomials
# ------------------------------------------------------------

def poly_eval(coeffs: Iterable[float], x: float) -> float:
    """
    Horner evaluation, coefficient of the highest power first.

      poly_eval([1.0, -0.5, 3.0], 2.0) == 6.0   # x**2 - 0.5*x + 3

    Accumulates p = p*x + c from p = 0.0, in coefficient order.
    """
    p = 0.0
    for c in coeffs:
        p = p * x + c
    return p


# ------------------------------------------------------------
# Angles
# ------------------------------------------------------------

def to_rad(deg: float) -> float:
    return deg * math.pi / 180.0

def to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi

def normalize360(deg: float) -> float:
    """Wrap degrees to [0,360) with a floor modulo (-10 -> 350)."""
    return deg % 360.0

def wrap180(deg: float) -> float:
    """Wrap degrees to (-180,180]."""
    y = normalize360(deg)
    if y > 180.0:
        y -= 360.0
    return y


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


def T_millennia(jd_tt: float) -> float:
    """Julian millennia from J2000.0 in TT (the VSOP87 time variable)."""
    return (jd_tt - J2000_TT) / 365250.0
