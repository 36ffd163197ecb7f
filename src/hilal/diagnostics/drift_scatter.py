#!/usr/bin/env python3
from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Tuple

import argparse

from hilal.diagnostics.round_trip import drift_days


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "hilal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "hilal[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int, *, step: int, engine: str) -> Tuple["np.ndarray", "np.ndarray"]:
    d = date(start_year, 1, 1)
    end = date(end_year, 12, 31)
    xs, ys = [], []
    while d <= end:
        xs.append(d.year + (d - date(d.year, 1, 1)).days / 365.25)
        ys.append(drift_days(d, engine=engine))
        d += timedelta(days=step)
    return np.asarray(xs, dtype=float), np.asarray(ys, dtype=int)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the lunar round-trip drift over Gregorian years.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--step", type=int, default=1, help="Sample every STEP days")
    p.add_argument("--engine", default="approx")
    p.add_argument("--outbase", default="round_trip_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.start_year, args.end_year, step=args.step, engine=args.engine)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=4, c="tab:blue", alpha=0.35, linewidths=0.0)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Round-trip offset (days)")
    ax.set_yticks(sorted(set(int(v) for v in np.unique(y))))
    ax.set_title(f"Gregorian -> lunar -> Gregorian drift ({args.engine})")

    counts = {int(v): int(c) for v, c in zip(*np.unique(y, return_counts=True))}
    print("offset counts:", counts)

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
