# tests/test_time_scales.py

import random
from datetime import date, datetime, timezone

import pytest
from lunaryear.core import time as ct
from lunaryear.core.errors import DateRangeError
from lunaryear.reference import time_scales as ts
from lunaryear.reference.deltat import delta_t_seconds


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d = ct.jdn_to_date(jdn_in)
        assert ct.date_to_jdn(d) == jdn_in


def test_jdn_ymd_roundtrip_before_year_one():
    for ymd in [(0, 1, 1), (-500, 3, 1), (-1000, 12, 31), (-4712, 1, 1)]:
        assert ct.jdn_to_ymd(ct.ymd_to_jdn(*ymd)) == ymd


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert ct.date_to_jdn(date(2000, 1, 1)) == 2451545
    # Meeus 7.a: 1957 October 4.81 -> JD 2436116.31
    assert ct.ymd_to_jdn(1957, 10, 4) == 2436116
    # Julian Day 0 is -4713 November 24 in the proleptic Gregorian calendar
    assert ct.jdn_to_ymd(0) == (-4713, 11, 24)

    # Unix epoch is 1970-01-01 00:00:00 UTC
    unix_dt = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert ct.datetime_to_jd(unix_dt) == 2440587.5


def test_jd_datetime_roundtrip():
    random.seed(42)
    for _ in range(1000):
        jd_in = random.uniform(2400000.5, 2500000.5)
        dt = ct.jd_to_datetime(jd_in)
        # 1e-8 days is roughly a millisecond
        assert ct.datetime_to_jd(dt) == pytest.approx(jd_in, abs=1e-8)


def test_day_truncation():
    assert ct.jd_to_jdn(2451544.5) == 2451545
    assert ct.jd_to_jdn(2451545.4999) == 2451545
    assert ct.jdn_to_jd(2451545) == 2451544.5


def test_date_out_of_range():
    with pytest.raises(DateRangeError):
        ct.jdn_to_date(ct.ymd_to_jdn(0, 6, 1))
    with pytest.raises(ValueError):
        ct.jdn_to_date(ct.ymd_to_jdn(10000, 1, 1))


def test_tt_to_ut_subtracts_delta_t():
    jd_tt = ct.jdn_to_jd(ct.ymd_to_jdn(2007, 1, 15))
    assert ts.delta_t_days_at(jd_tt) == pytest.approx(delta_t_seconds(2007, 1) / 86400.0, abs=1e-15)
    assert jd_tt - ts.tt_to_ut(jd_tt) == pytest.approx(delta_t_seconds(2007, 1) / 86400.0, abs=2e-9)


def test_ut_tt_conversion_stability():
    """
    The fixed-point iteration for UT -> TT inverts TT -> UT away from
    month boundaries.
    """
    jd_ut_initial = 2451545.0
    jd_tt = ts.ut_to_tt(jd_ut_initial)
    assert ts.tt_to_ut(jd_tt) == pytest.approx(jd_ut_initial, abs=1e-8)
