from __future__ import annotations

import argparse
from datetime import datetime
import sys
import re
import importlib
import inspect

from hilal.core.types import CalendarDate, CalendarSystem, Language


_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str, system: str = "gregorian") -> CalendarDate:
    import hilal

    if not _DATE_RE.match(s):
        raise SystemExit(f"Expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    cd = CalendarDate(d, m, y, CalendarSystem(system))
    try:
        return hilal.validate_date(cd)
    except hilal.HilalError as e:
        raise SystemExit(f"Invalid date {s}: {e}") from e


def _fmt(d: CalendarDate, lang: str) -> str:
    import hilal

    return f"{d.day} {hilal.month_name(d.month, d.system, lang)} {d.year}"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import hilal

    p = argparse.ArgumentParser(prog="hilal day", description="Day record in both calendars")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lunar", action="store_true", help="date is a lunar date")
    p.add_argument("--engine", default="approx")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date, "lunar" if args.lunar else "gregorian")
    info = hilal.day_info(d, engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    print(info)
    return 0


def cmd_convert(argv: list[str]) -> int:
    import hilal

    p = argparse.ArgumentParser(prog="hilal convert", description="Convert a date to the other calendar.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--from", dest="system", choices=[s.value for s in CalendarSystem], default="gregorian")
    p.add_argument("--lang", choices=[lang.value for lang in Language], default="en")
    p.add_argument("--engine", default="approx")
    args = p.parse_args(argv)

    src = _parse_ymd(args.date, args.system)
    dst = hilal.convert(src, engine=args.engine)
    wd = hilal.weekday_of(src, engine=args.engine)

    print(f"{src.system.value.capitalize():<10}: {_fmt(src, args.lang)}")
    print(f"{dst.system.value.capitalize():<10}: {_fmt(dst, args.lang)}")
    print(f"{'Weekday':<10}: {hilal.weekday_name(wd, args.lang)}")
    return 0


def cmd_today(argv: list[str]) -> int:
    import hilal

    p = argparse.ArgumentParser(prog="hilal today", description="Current date in both calendars.")
    p.add_argument("--lang", choices=[lang.value for lang in Language], default="en")
    p.add_argument("--engine", default="approx")
    args = p.parse_args(argv)

    now = datetime.now()
    g = hilal.current_date("gregorian", on=now.date(), engine=args.engine)
    t = hilal.current_date("lunar", on=now.date(), engine=args.engine)
    print(f"Lunar: {_fmt(t, args.lang)} | Gregorian: {_fmt(g, args.lang)} | {now:%H:%M}")
    return 0


def cmd_events(argv: list[str]) -> int:
    import hilal

    p = argparse.ArgumentParser(prog="hilal events", description="Upcoming observances.")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--lunar", action="store_true", help="--date is a lunar date")
    p.add_argument("--count", type=int, default=hilal.DEFAULT_EVENT_COUNT)
    p.add_argument("--lang", choices=[lang.value for lang in Language], default="en")
    p.add_argument("--engine", default="approx")
    args = p.parse_args(argv)

    if args.date is None:
        cur = hilal.current_date("lunar", engine=args.engine)
    else:
        cur = _parse_ymd(args.date, "lunar" if args.lunar else "gregorian")

    events = hilal.upcoming_events(cur, args.count, engine=args.engine)
    rows = [
        (e.name(args.lang) + (" (next)" if i == 0 else ""), _fmt(e.lunar_date, args.lang), _fmt(e.gregorian_date, args.lang))
        for i, e in enumerate(events)
    ]
    header = ("Event", "Lunar date", "Gregorian date")
    widths = [max(len(r[k]) for r in rows + [header]) for k in range(3)]
    print("  ".join(h.ljust(w) for h, w in zip(header, widths)))
    print("  ".join("-" * w for w in widths))
    for r in rows:
        print("  ".join(c.ljust(w) for c, w in zip(r, widths)))
    return 0


def cmd_months(argv: list[str]) -> int:
    import hilal

    p = argparse.ArgumentParser(prog="hilal months", description="Month name table.")
    p.add_argument("--lang", choices=[lang.value for lang in Language], default="en")
    args = p.parse_args(argv)

    for m in range(1, 13):
        g = hilal.month_name(m, "gregorian", args.lang)
        t = hilal.month_name(m, "lunar", args.lang)
        print(f"{m:2d}  {g:<12} {t:<18} {hilal.max_day_for_month(m, 1, 'lunar')}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `hilal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="hilal", description="Approximate lunar calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Day record in both calendars", add_help=False)
    sub.add_parser("convert", help="Convert a date to the other calendar", add_help=False)
    sub.add_parser("today", help="Current date in both calendars", add_help=False)
    sub.add_parser("events", help="Upcoming observances", add_help=False)
    sub.add_parser("months", help="Month name table", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "drift-scatter", "events-table"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "convert": cmd_convert,
        "today": cmd_today,
        "events": cmd_events,
        "months": cmd_months,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "hilal.diagnostics.round_trip",
            "drift-scatter": "hilal.diagnostics.drift_scatter",
            "events-table": "hilal.diagnostics.events_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
