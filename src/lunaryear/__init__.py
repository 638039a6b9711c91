"""lunaryear public API.

Moon phases, the vernal equinox, solar longitude, nutation and ΔT from the
Meeus series, plus the lunar calendar built on them. Instants are returned
on TT; call `.to_ut()` to present them.
"""

from .core.errors import DateRangeError, LunarYearError, TimeScaleMismatchError
from .core.types import Instant, LunarDate, MoonBrackets, Phase
from .engines.calendar import (
    LunarCalendar,
    date_of_moons,
    lunar_date,
    moonths_in_year,
    new_moon_before_vernal_equinox,
    to_gregorian,
)
from .reference.astro_args import normalize360, poly_eval
from .reference.deltat import delta_t, delta_t_seconds
from .reference.equinox import date_of_vernal_equinox, date_of_vernal_equinox_low_accuracy
from .reference.lunar import date_of_moon, first_lunation_of_year
from .reference.nutation import nutation_in_longitude
from .reference.solar import solar_longitude, solar_longitude_low_accuracy

__version__ = "0.1.0"

__all__ = [
    "date_of_vernal_equinox",
    "date_of_vernal_equinox_low_accuracy",
    "date_of_moon",
    "first_lunation_of_year",
    "Phase",
    "Instant",
    "LunarDate",
    "MoonBrackets",
    "LunarCalendar",
    "lunar_date",
    "to_gregorian",
    "moonths_in_year",
    "date_of_moons",
    "new_moon_before_vernal_equinox",
    "delta_t",
    "delta_t_seconds",
    "solar_longitude",
    "solar_longitude_low_accuracy",
    "nutation_in_longitude",
    "poly_eval",
    "normalize360",
    "LunarYearError",
    "TimeScaleMismatchError",
    "DateRangeError",
]
