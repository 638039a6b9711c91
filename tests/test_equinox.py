# tests/test_equinox.py

import logging
from datetime import datetime

import pytest
from lunaryear.core.time import datetime_to_jd
from lunaryear.reference import equinox
from lunaryear.reference.astro_args import wrap180
from lunaryear.reference.deltat import delta_t_seconds
from lunaryear.reference.solar import solar_longitude_jd

ONE_SECOND = 1.0 / 86400.0


def test_vernal_equinox_1999():
    """
    1999 March 21, 01:46:56 TT.

    The published 01:46:56 is the uncorrected series value, so it is TT and
    not UT; the UT reading is ΔT (about 64 s) earlier, 01:45:52.
    """
    inst = equinox.date_of_vernal_equinox(1999)
    assert inst.scale == "TT"
    expected = datetime_to_jd(datetime(1999, 3, 21, 1, 46, 56, 500000))
    assert inst.jd == pytest.approx(expected, abs=ONE_SECOND)


def test_vernal_equinox_1999_low_accuracy():
    """1999 March 21, 01:46:59 TT, three seconds late."""
    inst = equinox.date_of_vernal_equinox_low_accuracy(1999)
    expected = datetime_to_jd(datetime(1999, 3, 21, 1, 46, 59, 500000))
    assert inst.jd == pytest.approx(expected, abs=ONE_SECOND)


def test_ut_presentation_subtracts_delta_t():
    tt = equinox.date_of_vernal_equinox(1999)
    ut = tt.to_ut()
    # JD differences near 2.45e6 carry ~40 µs of rounding
    assert (tt.jd - ut.jd) * 86400.0 == pytest.approx(delta_t_seconds(1999, 3), abs=1e-4)
    assert ut.timestamp() == "1999-03-21 01:45:52"


@pytest.mark.parametrize("year", [1000, 1600, 1984, 2000, 2024, 2500])
def test_refined_equinox_sits_on_zero_longitude(year):
    jde = equinox.vernal_equinox_jde(year)
    assert abs(wrap180(solar_longitude_jd(jde))) < 1e-5


def test_tables_switch_at_year_1000():
    a = equinox.vernal_equinox_low_accuracy_jde(999)
    b = equinox.vernal_equinox_low_accuracy_jde(1000)
    assert b - a == pytest.approx(365.2422, abs=0.01)


@pytest.mark.parametrize("year", [-1000, 0, 500, 1582, 3000])
def test_equinox_falls_in_march(year):
    y, m, d = equinox.date_of_vernal_equinox(year).ymd()
    assert (y, m) == (year, 3)
    assert 17 <= d <= 23


def test_iterations_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="lunaryear.reference.equinox"):
        equinox.date_of_vernal_equinox(2000)
    msgs = [r.getMessage() for r in caplog.records]
    assert any("equinox 2000 pass 0" in m for m in msgs)


def test_pass_budget_is_five(monkeypatch):
    calls = []

    def never_converges(jd):
        calls.append(jd)
        return 1.0

    monkeypatch.setattr(equinox, "solar_longitude_jd", never_converges)
    seed = equinox.vernal_equinox_low_accuracy_jde(2000)
    jde = equinox.vernal_equinox_jde(2000)
    assert len(calls) == 5
    assert jde == pytest.approx(seed - 5 * 58.0 * 0.017452406437283512, abs=1e-9)
