#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional


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
    p = argparse.ArgumentParser(description="Plot Delta T (TT-UT) from the Espenak-Meeus polynomials.")
    p.add_argument("--y0", type=int, default=1600, help="start year")
    p.add_argument("--y1", type=int, default=2100, help="end year")
    p.add_argument("--step", type=float, default=0.25, help="sampling step in years (e.g., 0.1, 0.25, 1.0)")
    p.add_argument("--out", default="deltat.png", help="output image filename")
    p.add_argument("--monthly", action="store_true", help="also plot the per-month values used for UT conversion")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    from lunaryear.reference import deltat as dt

    # dense evaluation grid
    ys = np.arange(float(args.y0), float(args.y1) + 1e-12, float(args.step), dtype=float)
    smooth = np.array([dt.delta_t_decimal(float(y)) for y in ys], dtype=float)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(ys, smooth, linewidth=2, label="decimal year")

    if args.monthly:
        months = [(y, m) for y in range(args.y0, args.y1 + 1) for m in range(1, 13)]
        y_mon = np.array([y + (m - 0.5) / 12.0 for (y, m) in months], dtype=float)
        dt_mon = np.array([dt.delta_t_seconds(y, m) for (y, m) in months], dtype=float)
        ax.scatter(y_mon, dt_mon, s=4, alpha=0.6, label="calendar month")

    # branch boundaries inside the window
    for seg in dt.ESPENAK_MEEUS:
        if args.y0 < seg.lo <= args.y1:
            ax.axvline(seg.lo, color="0.6", linewidth=0.8, linestyle=":")

    ax.set_title("Delta T = TT − UT (seconds)")
    ax.set_xlabel("Year")
    ax.set_ylabel("ΔT (s)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
