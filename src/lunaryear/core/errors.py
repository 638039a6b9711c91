class LunarYearError(Exception):
    """Base error."""

class TimeScaleMismatchError(LunarYearError, ValueError):
    """Raised when instants on different time scales (TT, UT) are mixed."""

class DateRangeError(LunarYearError, ValueError):
    """Raised when a Julian Day has no representation as a Python date."""
