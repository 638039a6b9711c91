#!/usr/bin/env python3
"""
Residuals of the Moon-phase and vernal-equinox series against skyfield's
almanac search on a JPL kernel (DE421 by default, fetched by skyfield's
loader into --load-dir on first use).

All comparisons are made on TT, in seconds (series minus ephemeris).
"""
from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from lunaryear.core.types import Phase
from lunaryear.ephemeris import require_ephemeris
from lunaryear.reference import equinox, lunar


@dataclass(frozen=True)
class Residual:
    label: str
    jd_tt: float
    seconds: float


def lunation_of(jd_tt: float, phase: Phase) -> int:
    """Nearest lunation index for an observed phase instant."""
    return int(round((jd_tt - lunar.JDE_LUNATION_0) / lunar.SYNODIC_MONTH - phase.offset))


def summarize(name: str, residuals: Sequence[Residual]) -> str:
    if not residuals:
        return f"{name}: no events"
    s = [r.seconds for r in residuals]
    n = len(s)
    mean = sum(s) / n
    rms = math.sqrt(sum(x * x for x in s) / n)
    worst = max(residuals, key=lambda r: abs(r.seconds))
    return (
        f"{name}: n={n} mean={mean:+.1f}s rms={rms:.1f}s "
        f"worst={worst.seconds:+.1f}s ({worst.label})"
    )


def moon_residuals(eph, ts, year0: int, year1: int) -> List[Residual]:
    from skyfield import almanac

    t, codes = almanac.find_discrete(ts.utc(year0, 1, 1), ts.utc(year1 + 1, 1, 1), almanac.moon_phases(eph))
    out: List[Residual] = []
    for jd_tt, code in zip(t.tt, codes):
        phase = Phase(int(code))
        k = lunation_of(float(jd_tt), phase)
        ours = lunar.date_of_moon_jde(k, phase)
        out.append(Residual(f"k={k} {phase.name}", float(jd_tt), (ours - float(jd_tt)) * 86400.0))
    return out


def equinox_residuals(eph, ts, year0: int, year1: int) -> List[Residual]:
    from skyfield import almanac

    t, codes = almanac.find_discrete(ts.utc(year0, 1, 1), ts.utc(year1 + 1, 1, 1), almanac.seasons(eph))
    out: List[Residual] = []
    for jd_tt, code, dt in zip(t.tt, codes, t.utc_datetime()):
        if int(code) != 0:
            continue
        ours = equinox.vernal_equinox_jde(dt.year)
        out.append(Residual(f"{dt.year}", float(jd_tt), (ours - float(jd_tt)) * 86400.0))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate Moon phases and vernal equinoxes against a JPL ephemeris.")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--kernel", default="de421.bsp", help="JPL SPK kernel name or path")
    p.add_argument("--load-dir", default=".", help="directory skyfield downloads kernels into")
    p.add_argument("--verbose", action="store_true", help="print every residual")
    args = p.parse_args(argv)

    if args.year_end < args.year_start:
        raise SystemExit("--year-end must be >= --year-start")

    require_ephemeris()
    from skyfield.api import Loader

    load = Loader(args.load_dir)
    ts = load.timescale()
    eph = load(args.kernel)

    print(f"Validating {args.year_start}..{args.year_end} against {args.kernel}...")
    moons = moon_residuals(eph, ts, args.year_start, args.year_end)
    equinoxes = equinox_residuals(eph, ts, args.year_start, args.year_end)

    if args.verbose:
        for r in moons + equinoxes:
            print(f"  {r.label:>24s}  JD(TT) {r.jd_tt:.5f}  {r.seconds:+8.1f}s")

    for phase in Phase:
        subset = [r for r in moons if r.label.endswith(phase.name)]
        print(summarize(f"moon {phase.name.lower()}", subset))
    print(summarize("vernal equinox", equinoxes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
