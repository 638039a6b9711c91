"""
lunaryear.reference.deltat

ΔT (= TT − UT) from the Espenak–Meeus piecewise polynomials published by NASA
for the Five Millennium Canon of eclipses:
  http://sunearth.gsfc.nasa.gov/eclipse/SEcat5/deltatpoly.html

Good from about −1999 to +3000. Outside that window the long-term parabola
is still returned and simply grows less accurate; nothing is raised.

The branch is chosen on the calendar year, the polynomial is evaluated on
y = year + (month − 0.5)/12. Branches are half-open [lo, hi); the last one
catches everything from 2150 on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Tuple

from .astro_args import poly_eval

if TYPE_CHECKING:
    from ..core.types import Instant


class DeltaTModel(Protocol):
    """ΔT in seconds. `year` is the branch year, `y` the decimal year."""
    def delta_t_seconds(self, year: float, y: float) -> float: ...


@dataclass(frozen=True)
class PolyDeltaT:
    """
    ΔT = Σ coeff[i] * u^(n-i), u = (y - y0)/scale.
    Coefficients are ordered highest power first.
    """
    coeff: Tuple[float, ...]
    y0: float = 0.0
    scale: float = 1.0

    def delta_t_seconds(self, year: float, y: float) -> float:
        u = (y - self.y0) / self.scale
        return poly_eval(self.coeff, u)


@dataclass(frozen=True)
class LongTermDeltaT:
    """ΔT = -20 + 32 u^2, u = (year - 1820)/100, on the whole calendar year."""

    def delta_t_seconds(self, year: float, y: float) -> float:
        u = (year - 1820.0) / 100.0
        return -20.0 + 32.0 * u * u


@dataclass(frozen=True)
class BridgeDeltaT:
    """Long-term parabola with the linear term that joins it to the 2005-2050 fit."""

    def delta_t_seconds(self, year: float, y: float) -> float:
        return -20.0 + 32.0 * ((y - 1820.0) / 100.0) ** 2 - 0.5628 * (2150.0 - y)


@dataclass(frozen=True)
class DeltaTSegment:
    lo: float
    hi: float
    model: DeltaTModel


ESPENAK_MEEUS: Tuple[DeltaTSegment, ...] = (
    DeltaTSegment(-math.inf, -500.0, LongTermDeltaT()),
    DeltaTSegment(-500.0, 500.0, PolyDeltaT(
        (0.0090316521, 0.022174192, -0.1798452, -5.952053, 33.78311, -1014.41, 10583.6),
        y0=0.0, scale=100.0)),
    DeltaTSegment(500.0, 1600.0, PolyDeltaT(
        (0.0083572073, -0.005050998, -0.8503463, 0.319781, 71.23472, -556.01, 1574.2),
        y0=1000.0, scale=100.0)),
    DeltaTSegment(1600.0, 1700.0, PolyDeltaT(
        (1.0/7129.0, -0.01532, -0.9808, 120.0), y0=1600.0)),
    DeltaTSegment(1700.0, 1800.0, PolyDeltaT(
        (-1.0/1174000.0, 0.00013336, -0.0059285, 0.1603, 8.83), y0=1700.0)),
    DeltaTSegment(1800.0, 1860.0, PolyDeltaT(
        (0.000000000875, -0.0000001699, 0.0000121272, -0.00037436, 0.0041116, 0.0068612, -0.332447, 13.72),
        y0=1800.0)),
    DeltaTSegment(1860.0, 1900.0, PolyDeltaT(
        (1.0/233174.0, -0.0004473624, 0.01680668, -0.251754, 0.5737, 7.62), y0=1860.0)),
    DeltaTSegment(1900.0, 1920.0, PolyDeltaT(
        (-0.000197, 0.0061966, -0.0598939, 1.494119, -2.79), y0=1900.0)),
    DeltaTSegment(1920.0, 1941.0, PolyDeltaT(
        (0.0020936, -0.076100, 0.84493, 21.20), y0=1920.0)),
    DeltaTSegment(1941.0, 1961.0, PolyDeltaT(
        (1.0/2547.0, -1.0/233.0, 0.407, 29.07), y0=1950.0)),
    DeltaTSegment(1961.0, 1986.0, PolyDeltaT(
        (-1.0/718.0, -1.0/260.0, 1.067, 45.45), y0=1975.0)),
    DeltaTSegment(1986.0, 2005.0, PolyDeltaT(
        (0.00002373599, 0.000651814, 0.0017275, -0.060374, 0.3345, 63.86), y0=2000.0)),
    DeltaTSegment(2005.0, 2050.0, PolyDeltaT(
        (0.005589, 0.32217, 62.92), y0=2000.0)),
    DeltaTSegment(2050.0, 2150.0, BridgeDeltaT()),
    DeltaTSegment(2150.0, math.inf, LongTermDeltaT()),
)


def _segment(key: float) -> DeltaTSegment:
    for seg in ESPENAK_MEEUS:
        if key < seg.hi:
            return seg
    return ESPENAK_MEEUS[-1]


def delta_t_seconds(year: int, month: int = 1) -> float:
    """
    ΔT in seconds for a calendar month.

      delta_t_seconds(2007, 1)  # -> 65.465744703125
    """
    yr = float(year)
    y = yr + (float(month) - 0.5) / 12.0
    return _segment(yr).model.delta_t_seconds(yr, y)


def delta_t_decimal(y: float) -> float:
    """ΔT in seconds with both the branch and the polynomial keyed on decimal year y."""
    return _segment(y).model.delta_t_seconds(y, y)


def delta_t(instant: "Instant") -> float:
    """ΔT in seconds at the civil year/month of `instant`."""
    year, month, _ = instant.ymd()
    return delta_t_seconds(year, month)
