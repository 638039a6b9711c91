"""Ephemeris checks (optional).

Compares the analytical series against a JPL ephemeris read through skyfield.
Install with:
  pip install "lunaryear[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "lunaryear[ephemeris]"') from e
