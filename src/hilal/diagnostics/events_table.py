from __future__ import annotations

import argparse
from typing import List, Optional

import hilal
from hilal.events.observances import OBSERVANCES
from hilal.core.types import CalendarDate


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates of every observance for a range of lunar years."
    )
    p.add_argument("--from-year", type=int, default=1445)
    p.add_argument("--to-year", type=int, default=1450)
    p.add_argument("--lang", choices=("en", "ar"), default="en")
    p.add_argument("--engine", default="approx")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    args = p.parse_args(argv)

    years = list(range(args.from_year, args.to_year + 1))
    names = [o.name(args.lang) for o in OBSERVANCES]
    w0 = max(len(n) for n in names)
    colw = 10 if args.dates == "iso" else 5

    print(" " * w0 + "  " + "  ".join(str(y).rjust(colw) for y in years))
    for o, name in zip(OBSERVANCES, names):
        cells = []
        for y in years:
            g = hilal.to_gregorian(CalendarDate.lunar(y, o.month, o.day), engine=args.engine)
            if args.dates == "iso":
                cells.append(f"{g.year:04d}-{g.month:02d}-{g.day:02d}")
            else:
                cells.append(f"{g.month:02d}-{g.day:02d}")
        print(name.ljust(w0) + "  " + "  ".join(c.rjust(colw) for c in cells))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
