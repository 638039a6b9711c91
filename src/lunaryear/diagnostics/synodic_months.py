#!/usr/bin/env python3
"""
Length of successive synodic months (New Moon to New Moon) over a range of
lunations, with the mean month for reference. Makes the periodic terms of
the phase series visible as a ~14 month beat around 29.53 days.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from lunaryear.core.types import Phase
from lunaryear.reference import lunar


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lunaryear[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lunaryear[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot synodic month lengths from the Moon phase series.")
    p.add_argument("--k0", type=int, default=0, help="first lunation")
    p.add_argument("--k1", type=int, default=250, help="last lunation")
    p.add_argument("--phase", choices=["new", "first", "full", "last"], default="new")
    p.add_argument("--out", default="synodic_months.png", help="output image filename")
    args = p.parse_args(argv)

    if args.k1 <= args.k0:
        raise SystemExit("--k1 must be > --k0")

    np = _need_numpy()
    plt = _need_matplotlib()

    phase = Phase.parse(args.phase)
    ks = np.arange(args.k0, args.k1 + 1)
    jde = np.array([lunar.date_of_moon_jde(int(k), phase) for k in ks], dtype=float)
    months = np.diff(jde)

    print(f"lunations {args.k0}..{args.k1} ({phase.name}):")
    print(f"  min  = {months.min():.5f} d")
    print(f"  max  = {months.max():.5f} d")
    print(f"  mean = {months.mean():.5f} d")

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(ks[1:], months, linewidth=1.2)
    ax.axhline(lunar.SYNODIC_MONTH, color="0.5", linestyle="--", linewidth=1.0, label="mean synodic month")
    ax.set_title(f"Synodic month length ({phase.name.replace('_', ' ').lower()} to {phase.name.replace('_', ' ').lower()})")
    ax.set_xlabel("Lunation k")
    ax.set_ylabel("days")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
