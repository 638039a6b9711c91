from __future__ import annotations
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple

from .errors import DateRangeError


def date_to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return ymd_to_jdn(d.year, d.month, d.day)


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (year, month, day) -> JDN. Astronomical year numbering."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn; works for years before 1."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def jdn_to_date(jdn: int) -> date:
    y, m, d = jdn_to_ymd(jdn)
    if not (1 <= y <= 9999):
        raise DateRangeError(f"JDN {jdn} falls in year {y}, outside datetime.date range")
    return date(y, m, d)


def jd_to_jdn(jd: float) -> int:
    """JD (days from noon) -> JDN of the civil day containing it."""
    return int(math.floor(jd + 0.5))


def jdn_to_jd(jdn: int) -> float:
    """JD at midnight starting civil day `jdn`."""
    return float(jdn) - 0.5


def jd_to_datetime(jd: float) -> datetime:
    """
    JD -> naive datetime on the same time scale, rounded to the microsecond.
    """
    jdn = jd_to_jdn(jd)
    frac = jd + 0.5 - jdn
    return datetime.combine(jdn_to_date(jdn), time()) + timedelta(days=frac)


def datetime_to_jd(dt: datetime) -> float:
    """
    datetime -> JD. Aware datetimes are converted to UTC first;
    naive ones are taken to be on the wanted scale already.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
    return jdn_to_jd(date_to_jdn(dt.date())) + seconds / 86400.0
