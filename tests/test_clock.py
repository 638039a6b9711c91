# tests/test_clock.py

from datetime import datetime, timedelta, timezone

import pytest
from lunaryear.core.types import LunarDate
from lunaryear.engines import clock


NOW = datetime(2007, 11, 18, 0, 0, tzinfo=timezone.utc)


def test_format_days():
    days = 28 + (14 * 3600 + 59 * 60 + 11.5) / 86400.0
    assert clock.format_days(days) == "28d 14:59:11"
    assert clock.format_days(0.0) == "0d 0:00:00"
    assert clock.format_days(1.0 / 24.0 + 1e-9) == "0d 1:00:00"


def test_poll_fills_an_empty_state():
    state, reading = clock.poll(clock.ClockState(), NOW)

    assert state.brackets is not None
    b = state.brackets
    assert reading.since_new + reading.until_new == pytest.approx(b.next_new - b.prev_new)
    assert reading.since_full + reading.until_full == pytest.approx(b.next_full - b.prev_full)
    # previous New Moon 2007-11-09 23:03:07 UT
    assert reading.since_new == pytest.approx(8.0395, abs=1e-3)
    assert reading.universal_time == NOW
    assert isinstance(reading.lunar_date, LunarDate)


def test_poll_reuses_cached_brackets_until_a_moon_passes():
    state1, _ = clock.poll(clock.ClockState(), NOW)
    state2, reading2 = clock.poll(state1, NOW + timedelta(seconds=1))
    assert state2.brackets is state1.brackets
    assert state2.day is state1.day

    # after the Full Moon of 2007-11-24 the brackets move on
    later = datetime(2007, 11, 25, tzinfo=timezone.utc)
    state3, reading3 = clock.poll(state2, later)
    assert state3.brackets is not state2.brackets
    assert state3.brackets.prev_full == state2.brackets.next_full
    assert reading3.since_full < 1.0


def test_lunar_date_follows_local_day():
    east = timezone(timedelta(hours=10))
    _, reading = clock.poll(clock.ClockState(), NOW.astimezone(east))
    _, utc_reading = clock.poll(clock.ClockState(), NOW)
    assert reading.local_time.date() == NOW.date()
    assert reading.lunar_date == utc_reading.lunar_date

    _, reading = clock.poll(clock.ClockState(), NOW.astimezone(timezone(timedelta(hours=-10))))
    assert reading.lunar_date.day == utc_reading.lunar_date.day - 1


def test_poll_requires_aware_now():
    with pytest.raises(ValueError):
        clock.poll(clock.ClockState(), datetime(2007, 11, 18))


def test_render_lists_every_field():
    _, reading = clock.poll(clock.ClockState(), NOW)
    text = reading.render()
    assert "Universal Time  2007-11-18 00:00:00" in text
    for label in ("Local Time", "Lunar Date", "Last New Moon", "Next New Moon", "Last Full Moon", "Next Full Moon"):
        assert label in text


def test_run_loops_count_times():
    out = []
    sleeps = []
    state = clock.run(count=3, interval=0.5, now=lambda: NOW, sleep=sleeps.append, write=out.append)
    assert sleeps == [0.5, 0.5]
    assert sum("Lunar Date" in s for s in out) == 3
    assert state.brackets is not None
