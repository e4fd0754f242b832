"""
fancal.engines.leap
-------------------
Leap-year rules expressed as comma-separated interval patterns with
allow/deny voting (Fantasy-Calendar compatible).

Pattern syntax:
  "4"           every 4 years
  "400,!100,4"  Gregorian: div by 400, or div by 4 but not by 100
  "!n"          a matching interval votes *against* leap status
  "+n"          the interval ignores the rule's start offset

Each interval votes allow (+1), deny (-1) or abstain (0). A year is leap iff
the total is strictly positive, so a tie is a common year.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Tuple

from ..core.types import LeapYearConfig, PatternValidation, RuleDescription

_LOG = logging.getLogger(__name__)

Vote = Literal["allow", "deny", "abstain"]

GREGORIAN_PATTERN = "400,!100,4"

_SEGMENT_RE = re.compile(r"^[!+]?\d+$")
_DIGITS_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Interval:
    interval: int
    subtracts: bool
    offset: int


def parse_interval(spec: object, offset: int = 0) -> Interval:
    s = str(spec).strip()
    subtracts = "!" in s
    ignores_offset = "+" in s
    m = _DIGITS_RE.match(s.replace("!", "").replace("+", ""))
    n = int(m.group(0)) if m else 0
    interval = max(1, abs(n)) if n else 1

    if interval == 1 or ignores_offset:
        norm = 0
    else:
        norm = ((interval + offset) % interval + interval) % interval
    return Interval(interval=interval, subtracts=subtracts, offset=norm)


def parse_pattern(pattern: Optional[str], offset: int = 0) -> List[Interval]:
    if not pattern or not isinstance(pattern, str):
        return []
    return [parse_interval(s, offset) for s in (p.strip() for p in pattern.split(",")) if s]


def vote_on_year(iv: Interval, year: int, year_zero_exists: bool = True) -> Vote:
    mod = year - iv.offset
    # no year 0: year -1 sits where year 0 would be
    if not year_zero_exists and year < 0:
        mod += 1
    if mod % iv.interval == 0:
        return "deny" if iv.subtracts else "allow"
    return "abstain"


_WEIGHT = {"allow": 1, "deny": -1, "abstain": 0}


def intersects_year(intervals: Sequence[Interval], year: int, year_zero_exists: bool = True) -> bool:
    if not intervals:
        return False
    return sum(_WEIGHT[vote_on_year(iv, year, year_zero_exists)] for iv in intervals) > 0


def rule_intervals(config: Optional[LeapYearConfig]) -> List[Interval]:
    """The interval list a config votes with ([] for rules that never leap)."""
    if config is None:
        return []
    rule = config.rule or "none"
    start = config.start or 0

    if rule == "none":
        return []
    if rule == "simple":
        if not config.interval or config.interval <= 0:
            return []
        return [parse_interval(str(config.interval), start)]
    if rule == "gregorian":
        return parse_pattern(GREGORIAN_PATTERN, start)
    if rule == "custom":
        return parse_pattern(config.pattern, start)

    _LOG.debug("Unknown leap rule %r; treating every year as common", rule)
    return []


def is_leap_year(config: Optional[LeapYearConfig], year: int, year_zero_exists: bool = True) -> bool:
    return intersects_year(rule_intervals(config), year, year_zero_exists)


def validate_pattern(pattern: object) -> PatternValidation:
    if not pattern or not isinstance(pattern, str):
        return PatternValidation(False, "Pattern is required")

    parts = [p.strip() for p in pattern.split(",")]
    for part in parts:
        if not _SEGMENT_RE.match(part):
            return PatternValidation(False, f'Invalid interval: "{part}"')
        if int(part.lstrip("!+")) < 1:
            return PatternValidation(False, f'Interval must be at least 1: "{part}"')
    return PatternValidation(True)


def describe_rule(config: Optional[LeapYearConfig]) -> RuleDescription:
    if config is None:
        return RuleDescription("none")
    rule = config.rule or "none"
    if rule == "simple":
        interval = config.interval if config.interval is not None else 4
        return RuleDescription("simple", {"interval": interval, "start": config.start or 0})
    if rule == "gregorian":
        return RuleDescription("gregorian")
    if rule == "custom":
        return RuleDescription("custom", {"pattern": config.pattern or ""})
    return RuleDescription("none")


# ============================================================
# Legacy interval/start configs
# ============================================================

def convert_legacy_config(legacy: Optional[dict]) -> Optional[LeapYearConfig]:
    """{'leapInterval': n, 'leapStart': s} -> simple LeapYearConfig (None if not convertible)."""
    if not legacy:
        return None
    if legacy.get("rule"):
        return LeapYearConfig(
            rule=legacy["rule"],
            interval=legacy.get("interval"),
            start=legacy.get("start") or 0,
            pattern=legacy.get("pattern"),
        )
    interval = legacy.get("leapInterval")
    if not interval or interval <= 0:
        return None
    return LeapYearConfig(rule="simple", interval=interval, start=legacy.get("leapStart") or 0)


def convert_to_legacy_config(config: Optional[LeapYearConfig]) -> Optional[dict]:
    """
    Best-effort inverse of convert_legacy_config. Gregorian degrades to a plain
    4-year interval; custom patterns cannot be expressed and map to interval 1.
    """
    if config is None:
        return None
    rule = config.rule or "none"
    if rule == "none":
        return None
    if rule == "simple":
        return {"leapInterval": config.interval, "leapStart": config.start or 0}
    if rule == "gregorian":
        return {"leapInterval": 4, "leapStart": config.start or 0}
    return {"leapInterval": 1, "leapStart": 0}


# ============================================================
# Counting
# ============================================================

def rule_period(intervals: Sequence[Interval]) -> int:
    """Least common multiple of the intervals; the vote pattern repeats with this period."""
    p = 1
    for iv in intervals:
        p = p * iv.interval // math.gcd(p, iv.interval)
    return p


def _count_direct(intervals: Sequence[Interval], lo: int, hi: int) -> int:
    return sum(1 for y in range(lo, hi) if intersects_year(intervals, y))


def _count_span(intervals: Tuple[Interval, ...], lo: int, hi: int) -> int:
    """
    Leap years in [lo, hi) on the plain pattern (year 0 exists).
    Costs O(min(span, period)) votes: short spans are counted year by year,
    long ones as whole periods plus a remainder window.
    """
    if hi <= lo:
        return 0
    period = rule_period(intervals)
    if hi - lo <= period:
        return _count_direct(intervals, lo, hi)
    q, r = divmod(hi - lo, period)
    # [lo + q*period, hi) is congruent to [lo, lo + r) modulo the period
    return q * _count_direct(intervals, 0, period) + _count_direct(intervals, lo, lo + r)


def count_leap_years(
    config: Optional[LeapYearConfig], lo: int, hi: int, year_zero_exists: bool = True
) -> int:
    """Number of leap years in the half-open range [lo, hi)."""
    if hi <= lo:
        return 0
    intervals = tuple(rule_intervals(config))
    if not intervals:
        return 0

    if year_zero_exists:
        return _count_span(intervals, lo, hi)

    # Without year 0, year y < 0 votes like y + 1 does on the plain pattern.
    total = 0
    if lo < 0:
        total += _count_span(intervals, lo + 1, min(hi, 0) + 1)
    if hi > 0:
        total += _count_span(intervals, max(lo, 0), hi)
    return total
