# tests/test_deltat.py

import math
from datetime import datetime

import pytest
from lunaryear.core.types import Instant
from lunaryear.reference import deltat as dt


def test_delta_t_january_2007():
    assert dt.delta_t_seconds(2007, 1) == pytest.approx(65.465744703125, abs=1e-9)


def test_delta_t_of_instant_uses_its_civil_month():
    inst = Instant.from_datetime(datetime(2007, 1, 15, 12, 0), "UT")
    assert dt.delta_t(inst) == dt.delta_t_seconds(2007, 1)


@pytest.mark.parametrize(
    "boundary",
    [-500, 500, 1600, 1700, 1800, 1860, 1900, 1920, 1941, 1961, 1986, 2005, 2050, 2150],
)
def test_branches_join_within_a_second(boundary):
    before = dt.delta_t_decimal(boundary - 1e-9)
    after = dt.delta_t_decimal(float(boundary))
    assert abs(after - before) < 1.0


def test_branch_table_is_contiguous():
    segs = dt.ESPENAK_MEEUS
    assert segs[0].lo == -math.inf
    assert segs[-1].hi == math.inf
    for a, b in zip(segs, segs[1:]):
        assert a.hi == b.lo


def test_half_open_branch_selection():
    # 1900 belongs to the 1900..1920 branch, not 1860..1900
    assert dt._segment(1900.0).lo == 1900.0
    assert dt._segment(1899.0).lo == 1860.0


def test_far_years_degrade_without_raising():
    # long-term parabola on both ends
    assert dt.delta_t_seconds(-3000) == pytest.approx(-20.0 + 32.0 * ((-3000 - 1820) / 100.0) ** 2)
    assert dt.delta_t_seconds(4000) == pytest.approx(-20.0 + 32.0 * ((4000 - 1820) / 100.0) ** 2)


def test_modern_values_are_plausible():
    # observed ΔT was about 29 s in 1950, 57 s in 1990, 64 s in 2000
    assert dt.delta_t_seconds(1950, 1) == pytest.approx(29.1, abs=1.0)
    assert dt.delta_t_seconds(1990, 1) == pytest.approx(56.9, abs=1.0)
    assert dt.delta_t_seconds(2000, 1) == pytest.approx(63.8, abs=1.0)


def test_segment_models_evaluate_directly():
    model = dt._segment(2007.0).model
    assert isinstance(model, dt.PolyDeltaT)
    assert model.delta_t_seconds(2007.0, 2007.0 + 0.5 / 12.0) == dt.delta_t_seconds(2007, 1)
    assert dt.LongTermDeltaT().delta_t_seconds(1820.0, 0.0) == -20.0
    assert dt.BridgeDeltaT().delta_t_seconds(0.0, 2150.0) == pytest.approx(-20.0 + 32.0 * 3.3 ** 2)
