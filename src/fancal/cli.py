from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys
from dataclasses import asdict
from typing import Optional, Tuple


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    """'YEAR-MM-DD' (1-indexed month and day, year may be negative) -> (year, month0, day)."""
    m = _DATE_RE.match(s)
    if not m:
        raise SystemExit(f"Bad date '{s}': expected YEAR-MM-DD")
    y, mo, d = map(int, m.groups())
    return y, mo - 1, d


def _parse_hms(s: str) -> Tuple[int, int, int]:
    m = _TIME_RE.match(s)
    if not m:
        raise SystemExit(f"Bad time '{s}': expected HH:MM[:SS]")
    h, mi, sec = m.groups()
    return int(h), int(mi), int(sec or 0)


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


def _engine(calendar: str, path: Optional[str]):
    import fancal
    from fancal.engines.factory import engine_for

    if path:
        return engine_for(fancal.load_definition(path), family="imported")
    return fancal.get_calendar(calendar)


def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="fancal day", description="All calendar facts for one day")
    p.add_argument("date", help="YEAR-MM-DD (display year, 1-indexed month and day)")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--file", help="JSON calendar definition (overrides --calendar)")
    p.add_argument("--time", default="12:00", help="HH:MM[:SS]")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p.add_argument("--json", action="store_true", help="print JSON instead of a summary")
    args = p.parse_args(argv)

    from dataclasses import replace
    from fancal.attributes.registry import compute_attributes

    eng = _engine(args.calendar, args.file)
    y, m, d = _parse_ymd(args.date)
    h, mi, s = _parse_hms(args.time)
    pt = eng.point(y, m, d, h, mi, s)
    info = eng.day_info(pt)
    if args.attr:
        info = replace(info, attributes=compute_attributes(eng.definition, info, args.attr))

    if args.json:
        print(json.dumps(asdict(info), indent=2, ensure_ascii=False, default=str))
        return 0

    cal = eng.definition
    month = cal.months[m].name if 0 <= m < len(cal.months) else f"month {m + 1}"
    print(f"{cal.name}: {d} {month} {eng.format_year(y)}  (day {info.day_of_year + 1} of {info.days_in_year})")
    print(f"  leap year : {info.is_leap_year}")
    print(f"  season    : {info.season.name if info.season else '-'}")
    if info.era:
        print(f"  era       : {info.era.name} year {info.era.year_in_era}")
    for ph in info.moons:
        print(f"  moon      : {ph.moon}: {ph.sub_phase_name} ({ph.position:.3f})")
    if info.cycles.text:
        for line in info.cycles.text.splitlines():
            print(f"  cycles    : {line}")
    dl = info.daylight
    print(f"  sunrise   : {dl.sunrise:.2f}h  sunset: {dl.sunset:.2f}h  daylight: {dl.daylight_hours:.2f}h")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k:<10}: {v}")
    return 0


def cmd_leap(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="fancal leap", description="List leap years in a range")
    p.add_argument("start", type=int)
    p.add_argument("end", type=int)
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--file", help="JSON calendar definition (overrides --calendar)")
    args = p.parse_args(argv)

    eng = _engine(args.calendar, args.file)
    years = [y for y in range(args.start, args.end + 1) if eng.is_leap_year(y)]
    rule = eng.leap_rule()
    print(f"{eng.definition.name}: rule={rule.key} {rule.params or ''}".rstrip())
    print(" ".join(str(y) for y in years) if years else "(no leap years)")
    return 0


def cmd_validate(argv: list[str]) -> int:
    from fancal.engines.leap import validate_pattern

    p = argparse.ArgumentParser(prog="fancal validate-pattern", description="Check a leap-year pattern")
    p.add_argument("pattern", help='e.g. "400,!100,4"')
    args = p.parse_args(argv)

    v = validate_pattern(args.pattern)
    if v.valid:
        print("valid")
        return 0
    print(f"invalid: {v.error}")
    return 1


def cmd_info(argv: list[str]) -> int:
    import fancal

    p = argparse.ArgumentParser(prog="fancal info", description="Summary of a calendar")
    p.add_argument("calendar", nargs="?", default=None)
    args = p.parse_args(argv)

    if args.calendar is None:
        for name in fancal.list_calendars():
            print(name)
        return 0
    print(json.dumps(fancal.calendar_info(args.calendar), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if "-v" in argv or "--verbose" in argv:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        argv = [a for a in argv if a not in ("-v", "--verbose")]

    # Shorthand: `fancal YEAR-MM-DD ...` (gregorian day)
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="fancal", description="Fantasy calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars")
    sub.add_parser("info", help="Summary of a calendar")
    sub.add_parser("day", help="All calendar facts for one day")
    sub.add_parser("leap", help="List leap years in a range")
    sub.add_parser("validate-pattern", help="Check a leap-year pattern string")
    sub.add_parser("month", help="Print a month grid with moon phases (diagnostics)")

    p_diag = sub.add_parser("diag", help="Plotting diagnostics (requires the diagnostics extra)")
    p_diag.add_argument("tool", choices=["leap-barcode", "daylight-curve"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "list":
        return cmd_info([])

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "leap":
        return cmd_leap(rest)

    if args.cmd == "validate-pattern":
        return cmd_validate(rest)

    if args.cmd == "month":
        return _run_module_main("fancal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-barcode": "fancal.diagnostics.leap_barcode",
            "daylight-curve": "fancal.diagnostics.daylight_curve",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
