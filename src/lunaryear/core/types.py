from __future__ import annotations
import functools
import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import Iterator, Literal, Tuple, Union

from .errors import TimeScaleMismatchError
from .time import date_to_jdn, datetime_to_jd, jd_to_datetime, jd_to_jdn, jdn_to_date, jdn_to_jd, jdn_to_ymd

TimeScale = Literal["TT", "UT"]


class Phase(IntEnum):
    """Moon phase; the value is the quarter offset in units of 1/4 lunation."""
    NEW = 0
    FIRST_QUARTER = 1
    FULL = 2
    LAST_QUARTER = 3

    @property
    def offset(self) -> float:
        return self.value / 4.0

    @classmethod
    def parse(cls, name: str) -> "Phase":
        key = name.strip().lower().replace("-", "_")
        aliases = {
            "new": cls.NEW,
            "first": cls.FIRST_QUARTER,
            "first_quarter": cls.FIRST_QUARTER,
            "full": cls.FULL,
            "last": cls.LAST_QUARTER,
            "last_quarter": cls.LAST_QUARTER,
        }
        if key not in aliases:
            raise ValueError(f"Unknown phase '{name}'. Available: {sorted(aliases)}")
        return aliases[key]


@functools.total_ordering
@dataclass(frozen=True)
class Instant:
    """
    A point in time as a Julian Date on a named scale.

    TT (Terrestrial/Dynamical Time) is the uniform scale every series is
    evaluated on; UT is the civil scale, TT - ΔT. Instants compare and
    subtract only against instants on the same scale.
    """
    jd: float
    scale: TimeScale = "TT"

    def __post_init__(self) -> None:
        if self.scale not in ("TT", "UT"):
            raise ValueError("scale must be 'TT' or 'UT'")

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_datetime(cls, dt: datetime, scale: TimeScale = "UT") -> "Instant":
        return cls(datetime_to_jd(dt), scale)

    @classmethod
    def from_date(cls, d: date, scale: TimeScale = "UT") -> "Instant":
        """Midnight starting the civil day `d`."""
        return cls(jdn_to_jd(date_to_jdn(d)), scale)

    # ---------------------------------------------------------
    # Arithmetic & ordering
    # ---------------------------------------------------------

    def _check(self, other: "Instant") -> None:
        if self.scale != other.scale:
            raise TimeScaleMismatchError(f"cannot mix {self.scale} and {other.scale} instants")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        self._check(other)
        return self.jd < other.jd

    def __add__(self, days: float) -> "Instant":
        if isinstance(days, Instant):
            return NotImplemented
        return Instant(self.jd + days, self.scale)

    __radd__ = __add__

    def __sub__(self, other: Union["Instant", float]) -> Union["Instant", float]:
        if isinstance(other, Instant):
            self._check(other)
            return self.jd - other.jd
        return Instant(self.jd - other, self.scale)

    # ---------------------------------------------------------
    # Calendar views (on the instant's own scale)
    # ---------------------------------------------------------

    @property
    def jdn(self) -> int:
        return jd_to_jdn(self.jd)

    def ymd(self) -> Tuple[int, int, int]:
        """Civil (year, month, day); valid for years before 1 as well."""
        return jdn_to_ymd(self.jdn)

    @property
    def year(self) -> int:
        return self.ymd()[0]

    @property
    def month(self) -> int:
        return self.ymd()[1]

    def calendar_date(self) -> date:
        """Drop the time of day, keep the civil day."""
        return jdn_to_date(self.jdn)

    def to_datetime(self) -> datetime:
        return jd_to_datetime(self.jd)

    # ---------------------------------------------------------
    # Scale conversion
    # ---------------------------------------------------------

    def to_ut(self) -> "Instant":
        if self.scale == "UT":
            return self
        from ..reference.time_scales import tt_to_ut
        return Instant(tt_to_ut(self.jd), "UT")

    def to_tt(self) -> "Instant":
        if self.scale == "TT":
            return self
        from ..reference.time_scales import ut_to_tt
        return Instant(ut_to_tt(self.jd), "TT")

    def timestamp(self) -> str:
        """'YYYY-MM-DD HH:MM:SS', seconds truncated; any year."""
        total = int(math.floor((self.jd + 0.5) * 86400.0))
        jdn, sod = divmod(total, 86400)
        y, m, d = jdn_to_ymd(jdn)
        hh, rem = divmod(sod, 3600)
        mm, ss = divmod(rem, 60)
        return f"{y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d}:{ss:02d}"

    def __str__(self) -> str:
        return f"{self.timestamp()} {self.scale}"


@dataclass(frozen=True)
class LunarDate:
    """Lunar calendar date; moonth and day are zero-based."""
    year: int
    moonth: int
    day: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.moonth, self.day))

    def __str__(self) -> str:
        return f"{self.year:4d}'{self.moonth:02d}'{self.day:02d}"


@dataclass(frozen=True)
class MoonBrackets:
    """New and Full Moons (UT) on either side of an instant."""
    prev_new: Instant
    next_new: Instant
    prev_full: Instant
    next_full: Instant

    def __iter__(self) -> Iterator[Instant]:
        return iter((self.prev_new, self.next_new, self.prev_full, self.next_full))
