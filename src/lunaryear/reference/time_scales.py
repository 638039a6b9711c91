from __future__ import annotations

from ..core.time import jd_to_jdn, jdn_to_ymd
from .deltat import delta_t_seconds


# ============================================================
# TT <-> UT conversions (via ΔT)
# ============================================================

def delta_t_days_at(jd: float) -> float:
    """ΔT in days, evaluated at the civil year/month of `jd`."""
    year, month, _ = jdn_to_ymd(jd_to_jdn(jd))
    return delta_t_seconds(year, month) / 86400.0


def tt_to_ut(jd_tt: float) -> float:
    """
    JD(TT) -> JD(UT):  UT = TT - ΔT

    ΔT is modelled, not measured; it is taken at the civil date of the TT
    instant itself.
    """
    return jd_tt - delta_t_days_at(jd_tt)


def ut_to_tt(jd_ut: float) -> float:
    """
    Approximate inverse of tt_to_ut.

    Solve:
      jd_ut = jd_tt - ΔT(jd_tt)/86400

    Two fixed-point iterations are enough, ΔT varies slowly; only at a
    month boundary can the result differ from an exact inverse.
    """
    jd_tt = jd_ut  # initial guess
    for _ in range(2):
        jd_tt = jd_ut + delta_t_days_at(jd_tt)
    return jd_tt
