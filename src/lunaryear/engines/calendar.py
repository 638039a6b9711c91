"""
lunaryear.engines.calendar
--------------------------
Lunar calendar on top of the Moon-phase and equinox series.

Moonths begin on the civil day of the New Moon. The lunar year begins with
the moonth in which the vernal equinox falls, so it has 12 or 13 moonths.
Moonth and day are counted from zero.

Day boundaries are taken on the civil day of each New Moon's TT instant.
Moon brackets for the clock are reported in UT.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Tuple, Union

from ..core.time import date_to_jdn, jdn_to_date
from ..core.types import Instant, LunarDate, MoonBrackets, Phase
from ..reference.equinox import date_of_vernal_equinox
from ..reference.lunar import LUNATIONS_PER_YEAR, date_of_moon, first_lunation_of_year

LOGGER = logging.getLogger(__name__)

DateLike = Union[date, Instant]


def _civil_day(value: DateLike) -> Tuple[int, int]:
    """(Gregorian year, JDN) of the civil day holding `value`."""
    if isinstance(value, Instant):
        return value.year, value.jdn
    return value.year, date_to_jdn(value)


def _new_moon_jdn(k: int) -> int:
    return date_of_moon(k, Phase.NEW).jdn


class LunarCalendar:
    """
    Gregorian <-> lunar calendar conversions.

    Stateless; every call recomputes the lunations it needs.
    """

    # ---------------------------------------------------------
    # Year anchor
    # ---------------------------------------------------------

    def new_moon_before_vernal_equinox(self, year: int) -> int:
        """
        Lunation of the last New Moon before the vernal equinox of `year`.

          LunarCalendar().new_moon_before_vernal_equinox(1984)   # -196
        """
        equinox = date_of_vernal_equinox(year)
        lunation = first_lunation_of_year(year)
        while True:
            lunation += 1
            if date_of_moon(lunation, Phase.NEW) > equinox:
                return lunation - 1

    def moonths_in_year(self, year: int) -> int:
        """12 or 13."""
        return self.new_moon_before_vernal_equinox(year + 1) - self.new_moon_before_vernal_equinox(year)

    # ---------------------------------------------------------
    # Gregorian -> lunar
    # ---------------------------------------------------------

    def lunar_date(self, value: DateLike) -> LunarDate:
        """
        Lunar (year, moonth, day) of a civil day. Times of day are ignored.
        """
        year, target = _civil_day(value)

        lun0 = self.new_moon_before_vernal_equinox(year)
        if target < _new_moon_jdn(lun0):
            # Before this year's first moonth: still in last lunar year
            LOGGER.debug("JDN %d precedes lunation %d, using lunar year %d", target, lun0, year - 1)
            year -= 1
            lun0 = self.new_moon_before_vernal_equinox(year)

        prev_moon = _new_moon_jdn(lun0)
        lun = lun0
        while True:
            lun += 1
            new_moon = _new_moon_jdn(lun)
            if new_moon > target:
                break
            prev_moon = new_moon

        return LunarDate(year=year, moonth=lun - lun0 - 1, day=target - prev_moon)

    # ---------------------------------------------------------
    # Lunar -> Gregorian
    # ---------------------------------------------------------

    def to_jdn(self, lunar: LunarDate) -> int:
        lun0 = self.new_moon_before_vernal_equinox(lunar.year)
        return _new_moon_jdn(lun0 + lunar.moonth) + lunar.day

    def to_gregorian(self, lunar: LunarDate) -> date:
        """
        Civil day of a lunar date. The day is not checked against the length
        of the moonth; an overlong day count spills into the next moonth.
        """
        return jdn_to_date(self.to_jdn(lunar))

    # ---------------------------------------------------------
    # Moon brackets
    # ---------------------------------------------------------

    def date_of_moons(self, when: Union[datetime, Instant]) -> MoonBrackets:
        """
        Previous and next New Moon and previous and next Full Moon around
        `when`, all in UT. A naive datetime is read as UT.
        """
        if isinstance(when, Instant):
            now = when.to_ut()
        else:
            now = Instant.from_datetime(when, "UT")

        k = math.floor((now.year - 2000) * LUNATIONS_PER_YEAR) - 1
        prev_new, next_new = self._bracket(k, Phase.NEW, now)
        prev_full, next_full = self._bracket(k, Phase.FULL, now)
        return MoonBrackets(prev_new=prev_new, next_new=next_new, prev_full=prev_full, next_full=next_full)

    @staticmethod
    def _bracket(k: int, phase: Phase, now: Instant) -> Tuple[Instant, Instant]:
        prev_moon = date_of_moon(k, phase).to_ut()
        lun = k
        while True:
            lun += 1
            next_moon = date_of_moon(lun, phase).to_ut()
            if next_moon > now:
                return prev_moon, next_moon
            prev_moon = next_moon


# ============================================================
# Module-level convenience API
# ============================================================

_CALENDAR = LunarCalendar()


def new_moon_before_vernal_equinox(year: int) -> int:
    return _CALENDAR.new_moon_before_vernal_equinox(year)


def moonths_in_year(year: int) -> int:
    return _CALENDAR.moonths_in_year(year)


def lunar_date(value: DateLike) -> LunarDate:
    return _CALENDAR.lunar_date(value)


def to_gregorian(lunar: LunarDate) -> date:
    return _CALENDAR.to_gregorian(lunar)


def date_of_moons(when: Union[datetime, Instant]) -> MoonBrackets:
    return _CALENDAR.date_of_moons(when)
