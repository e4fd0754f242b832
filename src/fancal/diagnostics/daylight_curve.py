#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import fancal
from fancal.engines.calendar import CalendarEngine

from . import _need_matplotlib, _need_numpy


def annual_curve(np, eng: CalendarEngine, year: int):
    """(day_of_year, sunrise, sunset) arrays for every day of a display year."""
    start = eng.to_days(eng.point(year, 0, 1))
    n = eng.days_in_year(year)
    doy = np.arange(n)
    rise = np.empty(n)
    sett = np.empty(n)
    for i in range(n):
        t = eng.daylight(eng.from_days(start + i))
        rise[i], sett[i] = t.sunrise, t.sunset
    return doy, rise, sett


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot sunrise/sunset across one calendar year.")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--year", type=int, default=2024, help="display year")
    p.add_argument("--out", default="daylight_curve.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    eng = fancal.get_calendar(args.calendar)
    doy, rise, sett = annual_curve(np, eng, args.year)
    hpd = eng.definition.hours_per_day

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.fill_between(doy, rise, sett, color="gold", alpha=0.4, label="daylight")
    ax.plot(doy, rise, color="darkorange", lw=1.2, label="sunrise")
    ax.plot(doy, sett, color="firebrick", lw=1.2, label="sunset")
    ax.set_xlim(0, len(doy) - 1)
    ax.set_ylim(0, hpd)
    ax.set_xlabel("Day of year")
    ax.set_ylabel("Hour")
    ax.set_title(f"{eng.definition.name}: daylight in {eng.format_year(args.year)}")
    ax.legend(loc="upper right", frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
