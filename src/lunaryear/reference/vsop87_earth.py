# reference/vsop87_earth.py

"""
Heliocentric ecliptic longitude and radius vector of the Earth from the
truncated VSOP87 series of Meeus, Astronomical Algorithms, Appendix III.

Each series is a tuple of (A, B, C) rows contributing A * cos(B + C*tau),
tau in Julian millennia from J2000.0 (TT). Amplitudes are in units of 1e-8
radian (longitude) or 1e-8 AU (radius). The literals are the published ones,
including the 5233.69 argument in L2.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from .astro_args import T_millennia, normalize360, poly_eval, to_deg

SeriesRow = Tuple[float, float, float]


EARTH_L0 = (
    (25.0, 3.16, 4690.48),
    (30.0, 2.74, 1349.87),
    (30.0, 0.44, 83996.85),
    (33.0, 0.59, 17789.85),
    (36.0, 1.78, 6812.77),
    (36.0, 1.71, 2352.87),
    (37.0, 2.57, 1059.38),
    (37.0, 6.04, 10213.29),
    (39.0, 6.17, 10447.39),
    (41.0, 2.40, 19651.05),
    (41.0, 5.37, 8429.24),
    (49.0, 0.49, 1194.45),
    (51.0, 0.28, 5856.48),
    (52.0, 1.33, 1748.02),
    (52.0, 0.19, 12139.55),
    (56.0, 3.47, 6279.55),
    (56.0, 4.39, 14143.50),
    (57.0, 2.78, 6286.60),
    (61.0, 1.82, 7084.90),
    (62.0, 3.98, 8827.39),
    (70.0, 0.83, 9437.76),
    (74.0, 4.68, 801.82),
    (74.0, 3.50, 3154.69),
    (75.0, 1.76, 5088.63),
    (79.0, 3.04, 12036.46),
    (80.0, 1.81, 17260.15),
    (85.0, 3.67, 71430.70),
    (85.0, 1.30, 6275.96),
    (86.0, 5.98, 161000.69),
    (98.0, 0.68, 155.42),
    (99.0, 6.21, 2146.17),
    (102.0, 4.267, 7.114),
    (102.0, 0.976, 15720.839),
    (103.0, 0.636, 4694.003),
    (115.0, 0.645, 0.980),
    (126.0, 1.083, 20.775),
    (132.0, 3.411, 2942.463),
    (156.0, 0.833, 213.299),
    (202.0, 2.458, 6069.777),
    (205.0, 1.869, 5573.143),
    (206.0, 4.806, 2544.314),
    (243.0, 0.345, 5486.778),
    (271.0, 0.315, 10977.079),
    (284.0, 1.899, 796.298),
    (317.0, 5.849, 11790.629),
    (357.0, 2.920, 0.067),
    (492.0, 4.205, 775.523),
    (505.0, 4.583, 18849.228),
    (753.0, 2.533, 5507.553),
    (780.0, 1.179, 5223.694),
    (857.0, 3.508, 398.149),
    (902.0, 2.045, 26.298),
    (990.0, 5.233, 5884.927),
    (1199.0, 1.1096, 1577.3435),
    (1273.0, 2.0371, 529.6910),
    (1324.0, 0.7425, 11506.7698),
    (2343.0, 6.1352, 3930.2097),
    (2676.0, 4.4181, 7860.4194),
    (3136.0, 3.6277, 77713.7715),
    (3418.0, 2.8289, 3.5231),
    (3497.0, 2.7441, 5753.3849),
    (34894.0, 4.62610, 12566.15170),
    (3341656.0, 4.6692568, 6283.0758500),
    (175347046.0, 0.0, 0.0),
)

EARTH_L1 = (
    (6.0, 4.67, 4690.48),
    (6.0, 2.65, 9437.76),
    (8.0, 5.30, 2352.87),
    (9.0, 5.64, 951.72),
    (9.0, 2.70, 242.73),
    (10.0, 4.24, 1349.87),
    (10.0, 1.30, 6286.60),
    (11.0, 0.77, 553.57),
    (12.0, 2.08, 4694.00),
    (12.0, 5.27, 1194.45),
    (12.0, 3.26, 5088.63),
    (12.0, 2.83, 1748.02),
    (15.0, 1.21, 10977.08),
    (16.0, 1.43, 2146.17),
    (16.0, 0.03, 2544.31),
    (17.0, 2.99, 6275.96),
    (19.0, 4.97, 213.30),
    (19.0, 1.85, 5486.78),
    (21.0, 5.34, 0.98),
    (29.0, 2.65, 7.11),
    (36.0, 0.47, 775.52),
    (45.0, 0.40, 796.30),
    (56.0, 2.17, 155.42),
    (59.0, 2.89, 5223.69),
    (67.0, 4.41, 5507.55),
    (68.0, 1.87, 398.15),
    (72.0, 1.14, 529.69),
    (93.0, 2.59, 18849.23),
    (109.0, 2.966, 1577.344),
    (119.0, 5.796, 26.298),
    (425.0, 1.590, 3.523),
    (4303.0, 2.6351, 12566.1517),
    (206059.0, 2.678235, 6283.075850),
    (628331966747.0, 0.0, 0.0),
)

EARTH_L2 = (
    (2.0, 3.75, 0.98),
    (2.0, 4.38, 5233.69),
    (3.0, 2.28, 553.57),
    (3.0, 0.31, 398.15),
    (3.0, 6.12, 529.69),
    (3.0, 1.19, 242.73),
    (3.0, 6.05, 5507.55),
    (3.0, 5.14, 796.30),
    (4.0, 3.44, 5573.14),
    (4.0, 1.03, 7.11),
    (5.0, 4.66, 1577.34),
    (7.0, 0.83, 775.52),
    (9.0, 2.06, 77713.77),
    (10.0, 0.76, 18849.23),
    (16.0, 3.68, 155.42),
    (16.0, 5.19, 26.30),
    (27.0, 0.05, 3.52),
    (309.0, 0.867, 12566.152),
    (8720.0, 1.0721, 6283.0758),
    (52919.0, 0.0, 0.0),
)

EARTH_L3 = (
    (1.0, 5.97, 242.73),
    (1.0, 5.30, 18849.23),
    (1.0, 4.72, 3.52),
    (3.0, 5.20, 155.42),
    (17.0, 5.49, 12566.15),
    (35.0, 0.0, 0.0),
    (289.0, 5.844, 6283.076),
)

EARTH_L4 = (
    (1.0, 3.84, 12566.15),
    (8.0, 4.13, 6283.08),
    (114.0, 3.142, 0.0),
)

EARTH_L5 = (
    (1.0, 3.14, 0.0),
)

EARTH_R0 = (
    (26, 4.59, 10447.39),
    (28, 1.90, 6279.55),
    (28, 1.21, 6286.60),
    (32, 1.78, 398.15),
    (32, 0.18, 5088.63),
    (33, 0.24, 7084.90),
    (35, 1.84, 2942.46),
    (36, 1.67, 12036.46),
    (37, 4.90, 12139.55),
    (37, 0.83, 19651.05),
    (38, 2.39, 8827.39),
    (39, 5.36, 4694.00),
    (43, 6.01, 6275.96),
    (45, 5.54, 9437.76),
    (47, 2.58, 775.52),
    (49, 3.25, 2544.31),
    (56, 5.24, 71430.70),
    (57, 2.01, 83996.85),
    (63, 0.92, 529.69),
    (65, 0.27, 17260.15),
    (86, 1.27, 161000.69),
    (86, 5.69, 15720.84),
    (98, 0.89, 6069.78),
    (110, 5.055, 5486.778),
    (175, 3.012, 18849.228),
    (186, 5.022, 10977.079),
    (212, 5.847, 1577.344),
    (243, 4.273, 11790.629),
    (307, 0.299, 5573.143),
    (329, 5.900, 5223.694),
    (346, 0.964, 5507.553),
    (472, 3.661, 5884.927),
    (542, 4.564, 3930.210),
    (925, 5.453, 11506.770),
    (1576, 2.8469, 7860.4194),
    (1628, 1.1739, 5753.3849),
    (3084, 5.1985, 77713.7715),
    (13956, 3.05525, 12566.15170),
    (1670700, 3.0984635, 6283.0758500),
    (100013989, 0, 0),
)

EARTH_R1 = (
    (9, 0.27, 5486.78),
    (9, 1.42, 6275.96),
    (10, 5.91, 10977.08),
    (18, 1.42, 1577.34),
    (25, 1.32, 5223.69),
    (31, 2.84, 5507.55),
    (32, 1.02, 18849.23),
    (702, 3.142, 0),
    (1721, 1.0644, 12566.1517),
    (103019, 1.107490, 6283.075850),
)

EARTH_R2 = (
    (3, 5.47, 18849.23),
    (6, 1.87, 5573.14),
    (9, 3.63, 77713.77),
    (12, 3.14, 0),
    (124, 5.579, 12566.152),
    (4359, 5.7846, 6283.0758),
)

EARTH_R3 = (
    (7, 3.92, 12566.15),
    (145, 4.273, 6283.076),
)

EARTH_R4 = (
    (4, 2.56, 6283.08),
)


def series_sum(rows: Sequence[SeriesRow], tau: float) -> float:
    """Σ A cos(B + C*tau), accumulated in table order."""
    acc = 0.0
    for a, b, c in rows:
        acc = acc + a * math.cos(b + c * tau)
    return acc


def heliocentric_longitude_deg(jd_tt: float) -> float:
    """Earth's heliocentric ecliptic longitude L (degrees, [0,360))."""
    tau = T_millennia(jd_tt)
    terms = [series_sum(s, tau) for s in (EARTH_L5, EARTH_L4, EARTH_L3, EARTH_L2, EARTH_L1, EARTH_L0)]
    return normalize360(to_deg(poly_eval(terms, tau) * 1e-8))


def radius_vector_au(jd_tt: float) -> float:
    """Earth-Sun distance R in AU."""
    tau = T_millennia(jd_tt)
    terms = [series_sum(s, tau) for s in (EARTH_R4, EARTH_R3, EARTH_R2, EARTH_R1, EARTH_R0)]
    return poly_eval(terms, tau) * 1e-8
