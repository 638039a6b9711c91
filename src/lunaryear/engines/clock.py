"""
lunaryear.engines.clock
-----------------------
Terminal moon clock: local time, UT, lunar date, and the time since the last
and until the next New and Full Moons.

The cached moon brackets live in a ClockState value that the caller threads
through `poll`; the calendar core itself stays stateless.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Optional, Tuple

from ..core.types import Instant, LunarDate, MoonBrackets
from .calendar import date_of_moons, lunar_date

LOGGER = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_days(days: float) -> str:
    """Fractional days as e.g. '28d 14:59:11'."""
    d, r = divmod(days, 1.0)
    h, r = divmod(24.0 * r, 1.0)
    m, r = divmod(60.0 * r, 1.0)
    s = math.floor(60.0 * r)
    return "%dd %d:%02d:%02d" % (d, h, m, s)


@dataclass(frozen=True)
class ClockState:
    brackets: Optional[MoonBrackets] = None
    day: Optional[Tuple[date, LunarDate]] = None


@dataclass(frozen=True)
class ClockReading:
    local_time: datetime
    universal_time: datetime
    lunar_date: LunarDate
    since_new: float
    until_new: float
    since_full: float
    until_full: float

    def render(self) -> str:
        return "\n".join([
            f"Local Time      {self.local_time:{DATETIME_FORMAT}}",
            f"Universal Time  {self.universal_time:{DATETIME_FORMAT}}",
            f"Lunar Date      {self.lunar_date}",
            f"Last New Moon   {format_days(self.since_new)}",
            f"Next New Moon   {format_days(self.until_new)}",
            f"Last Full Moon  {format_days(self.since_full)}",
            f"Next Full Moon  {format_days(self.until_full)}",
        ])


def poll(state: ClockState, now: datetime) -> Tuple[ClockState, ClockReading]:
    """
    One clock tick at the timezone-aware `now`.

    Brackets are recomputed only once `now` passes the cached next New or
    next Full Moon; the lunar date only when the local day changes.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    instant = Instant.from_datetime(now, "UT")

    brackets = state.brackets
    if brackets is None or instant > brackets.next_new or instant > brackets.next_full:
        brackets = date_of_moons(instant)
        LOGGER.debug("moon brackets refreshed at %s: next new %s, next full %s",
                     instant, brackets.next_new, brackets.next_full)

    today = now.date()
    day = state.day
    if day is None or day[0] != today:
        day = (today, lunar_date(today))

    reading = ClockReading(
        local_time=now,
        universal_time=now.astimezone(timezone.utc),
        lunar_date=day[1],
        since_new=instant - brackets.prev_new,
        until_new=brackets.next_new - instant,
        since_full=instant - brackets.prev_full,
        until_full=brackets.next_full - instant,
    )
    return ClockState(brackets=brackets, day=day), reading


def _local_now() -> datetime:
    return datetime.now().astimezone()


def run(
    count: Optional[int] = None,
    interval: float = 1.0,
    now: Callable[[], datetime] = _local_now,
    sleep: Callable[[float], None] = time.sleep,
    write: Callable[[str], None] = print,
) -> ClockState:
    """Print one reading every `interval` seconds; forever when count is None."""
    state = ClockState()
    n = 0
    while count is None or n < count:
        state, reading = poll(state, now())
        write(reading.render())
        n += 1
        if count is None or n < count:
            write("")
            sleep(interval)
    return state
