from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import fancal
from fancal.engines.calendar import CalendarEngine

# first letters of each word: "Waxing Crescent" -> "WC"
def phase_tag(name: str) -> str:
    return "".join(w[0] for w in name.split() if w)[:3]


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_grid(eng: CalendarEngine, year: int, month: int, *, width: int = 7, moon: int = 0) -> List[List[Tuple[str, str]]]:
    n = eng.days_in_month(month, year)
    rows: List[List[Tuple[str, str]]] = []
    row: List[Tuple[str, str]] = []
    for d in range(1, n + 1):
        pt = eng.point(year, month, d)
        ph = eng.moon_phase(moon, pt)
        fest = eng.festival(pt)
        bot = "*" + fest.name if fest is not None else (phase_tag(ph.sub_phase_name) if ph else "")
        row.append(cell(f"{d:2d}", bot))
        if len(row) == width:
            rows.append(row)
            row = []
    if row:
        while len(row) < width:
            row.append(cell("", ""))
        rows.append(row)
    return rows


def render_month(eng: CalendarEngine, year: int, month: int, *, width: int = 7, moon: int = 0) -> str:
    d = eng.definition
    if not (0 <= month < len(d.months)):
        raise SystemExit(f"Month index {month} out of range 0..{len(d.months) - 1}")
    first = eng.point(year, month, 1)
    season = eng.season(first)
    lines = [
        f"{d.name}  {d.months[month].name} {eng.format_year(year)}"
        + (f"   [{season.name}]" if season else "")
        + ("   (leap year)" if eng.is_leap_year(year) else "")
    ]
    for top, bot in (
        (" ".join(c[0] for c in r), " ".join(c[1] for c in r)) for r in month_grid(eng, year, month, width=width, moon=moon)
    ):
        lines += [top.rstrip(), bot.rstrip()]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a month grid with moon phases and festivals.")
    p.add_argument("--calendar", default="gregorian", help=f"one of {fancal.list_calendars()}")
    p.add_argument("--year", type=int, default=2024, help="display year")
    p.add_argument("--month", type=int, default=1, help="month number (1-indexed)")
    p.add_argument("--width", type=int, default=7, help="days per row")
    p.add_argument("--moon", type=int, default=0, help="moon index")
    args = p.parse_args(argv)

    eng = fancal.get_calendar(args.calendar)
    n = len(eng.definition.months)
    if not (1 <= args.month <= n):
        raise SystemExit(f"--month must be between 1 and {n}")
    print(render_month(eng, args.year, args.month - 1, width=args.width, moon=args.moon))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
