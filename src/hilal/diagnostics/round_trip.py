from __future__ import annotations

import argparse
import random
from collections import Counter
from datetime import date, timedelta
from typing import List, Optional

import hilal
from hilal.core.types import CalendarDate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def drift_days(d0: date, *, engine: str = "approx") -> int:
    """Signed day offset after Gregorian -> lunar -> Gregorian."""
    back = hilal.to_gregorian(hilal.to_lunar(d0, engine=engine), engine=engine)
    return (back.to_date() - d0).days


def roundtrip_test(
    engine: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    bound: int,
    max_failures: int,
) -> Counter:
    random.seed(seed)
    hist: Counter = Counter()
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        off = drift_days(d0, engine=engine)
        hist[off] += 1
        if abs(off) > bound:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("d0:", d0)
            print("lunar:", hilal.to_lunar(d0, engine=engine))
            print("offset:", off)
            print("explain:", hilal.explain(CalendarDate.from_date(d0), engine=engine))
            if failures >= max_failures:
                break
    return hist


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip drift of Gregorian -> lunar -> Gregorian.")
    p.add_argument("--engine", default="approx")
    p.add_argument("--n", type=int, default=10000)
    p.add_argument("--start", type=str, default="1900-01-01")
    p.add_argument("--end", type=str, default="2100-12-31")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--bound", type=int, default=1, help="Largest accepted |offset| in days")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    hist = roundtrip_test(
        args.engine,
        args.n,
        parse_date(args.start),
        parse_date(args.end),
        args.seed,
        bound=args.bound,
        max_failures=args.max_failures,
    )

    total = sum(hist.values())
    print(f"engine={args.engine}  samples={total}  range={args.start}..{args.end}")
    for off in sorted(hist):
        print(f"  offset {off:+d}: {hist[off]:6d}  ({100.0 * hist[off] / total:5.1f}%)")
    worst = max((abs(o) for o in hist), default=0)
    print(f"max |offset| = {worst}")
    return 0 if worst <= args.bound else 1


if __name__ == "__main__":
    raise SystemExit(main())
