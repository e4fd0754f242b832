#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from fancal.core.types import LeapYearConfig
from fancal.engines.leap import is_leap_year, validate_pattern

from . import _need_matplotlib, _need_numpy


def parse_rules(s: str) -> List[Tuple[str, LeapYearConfig]]:
    """'gregorian;simple:4;custom:400,!100,4' -> labelled configs (1 to 4 rules)."""
    out = []
    for item in (x.strip() for x in s.split(";")):
        if not item:
            continue
        rule, _, arg = item.partition(":")
        if rule == "simple":
            out.append((item, LeapYearConfig(rule="simple", interval=int(arg or 4))))
        elif rule == "custom":
            v = validate_pattern(arg)
            if not v.valid:
                raise SystemExit(f"--rules: {v.error}")
            out.append((item, LeapYearConfig(rule="custom", pattern=arg)))
        elif rule in ("gregorian", "none"):
            out.append((item, LeapYearConfig(rule=rule)))
        else:
            raise SystemExit(f"--rules: unknown rule '{rule}'")
    if not (1 <= len(out) <= 4):
        raise SystemExit("--rules must contain 1 to 4 semicolon-separated rules")
    return out


def leap_matrix(np, rules, start_year: int, end_year: int, *, year_zero_exists: bool = True):
    years = np.arange(start_year, end_year + 1)
    Z = np.zeros((len(rules), len(years)), dtype=float)
    for i, (_, cfg) in enumerate(rules):
        Z[i] = [1.0 if is_leap_year(cfg, int(y), year_zero_exists) else 0.0 for y in years]
    return years, Z


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode diagram comparing leap rules.")
    p.add_argument("--start-year", type=int, default=1880)
    p.add_argument("--end-year", type=int, default=2120)
    p.add_argument("--rules", default="gregorian;simple:4;custom:4,!128",
                   help="Semicolon list of rules: gregorian | simple:N | custom:PATTERN")
    p.add_argument("--no-year-zero", action="store_true", help="Calendar has no year 0")
    p.add_argument("--out", default="leap_barcode.png")
    p.add_argument("--title", default="Leap years by rule")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    rules = parse_rules(args.rules)
    years, Z = leap_matrix(np, rules, args.start_year, args.end_year, year_zero_exists=not args.no_year_zero)

    fig, ax = plt.subplots(figsize=(16, 0.6 + 0.6 * len(rules)))
    x_edges = np.arange(args.start_year - 0.5, args.end_year + 1.5, 1.0)
    y_edges = np.arange(-0.5, len(rules) + 0.5, 1.0)
    ax.pcolormesh(x_edges, y_edges, Z, shading="flat", cmap="Greys", vmin=0, vmax=1)

    ax.tick_params(axis="both", which="both", length=0)
    ax.set_yticks(range(len(rules)))
    ax.set_yticklabels([label for label, _ in rules])
    ax.set_xlabel("Year")
    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
