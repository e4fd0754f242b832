"""
fancal.engines.moons
--------------------
Moon phase from an absolute day count.

Eight-phase moons use the Fantasy-Calendar distribution: new (index 0) and
full (index 4) moon each get floor(L/8) days and the six secondary phases
share the rest, earliest first. A 30-day cycle gives [3, 4, 4, 4, 3, 4, 4, 4].
Any other phase count is split evenly.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from ..core.types import CalendarDefinition, Moon, MoonPhase, MoonPhaseResult, PointInTime, SubPhase
from ..core.time import components_to_days, point_days

_LOG = logging.getLogger(__name__)

PRIMARY_PHASES = (0, 4)


def build_phase_day_distribution(cycle_length: float, num_phases: int = 8) -> List[float]:
    if num_phases != 8:
        base = math.floor(cycle_length / num_phases)
        rem = cycle_length % num_phases
        return [base + (1 if i < rem else 0) for i in range(num_phases)]

    primary = math.floor(cycle_length / 8)
    remaining = cycle_length - 2 * primary
    secondary = math.floor(remaining / 6)
    extra = remaining % 6

    out: List[float] = []
    assigned = 0
    for i in range(8):
        if i in PRIMARY_PHASES:
            out.append(primary)
        else:
            out.append(secondary + (1 if assigned < extra else 0))
            assigned += 1
    return out


def sub_phase(phase: MoonPhase, day_within_phase: float, phase_duration: float) -> Tuple[SubPhase, str]:
    """Rising / peak / fading third of a phase, with its display name."""
    if phase_duration <= 1:
        return "peak", phase.name

    third = phase_duration / 3
    if day_within_phase < third:
        return "rising", phase.rising_name or f"Rising {phase.name}"
    if day_within_phase >= phase_duration - third:
        return "fading", phase.fading_name or f"Fading {phase.name}"
    return "peak", phase.name


def _fallback(moon: Moon) -> MoonPhaseResult:
    first = moon.phases[0]
    return MoonPhaseResult(
        moon=moon.name,
        name=first.name,
        sub_phase="peak",
        sub_phase_name=first.name,
        icon=first.icon or "",
        position=0.0,
        day_in_cycle=0,
        phase_index=0,
        day_within_phase=0,
        phase_duration=0,
    )


def phase_for_days(moon: Moon, days_since_reference: float) -> Optional[MoonPhaseResult]:
    """Phase of `moon` a given number of days after its reference date."""
    if not moon.phases:
        return None

    L = moon.cycle_length
    if not math.isfinite(days_since_reference) or not math.isfinite(L) or L <= 0:
        _LOG.debug("Moon %r: degenerate input (L=%r, delta=%r); using first phase", moon.name, L, days_since_reference)
        return _fallback(moon)

    adjust = moon.cycle_day_adjust if math.isfinite(moon.cycle_day_adjust) else 0
    days_into_cycle = (days_since_reference % L + adjust) % L
    position = days_into_cycle / L

    dist = build_phase_day_distribution(L, len(moon.phases))
    day_index = math.floor(days_into_cycle)

    idx, within = 0, 0
    cum = 0
    for i, n in enumerate(dist):
        if day_index < cum + n:
            idx, within = i, day_index - cum
            break
        cum += n

    phase = moon.phases[idx]
    duration = dist[idx]
    kind, label = sub_phase(phase, within, duration)
    return MoonPhaseResult(
        moon=moon.name,
        name=phase.name,
        sub_phase=kind,
        sub_phase_name=label,
        icon=phase.icon or "",
        position=position,
        day_in_cycle=day_index,
        phase_index=idx,
        day_within_phase=within,
        phase_duration=duration,
    )


def moon_phase(cal: CalendarDefinition, moon_index: int, p: PointInTime) -> Optional[MoonPhaseResult]:
    if not (0 <= moon_index < len(cal.moons)):
        return None
    moon = cal.moons[moon_index]
    ref = moon.reference_date
    ref_days = components_to_days(cal, ref.year, ref.month, ref.day - 1)
    return phase_for_days(moon, point_days(cal, p) - ref_days)


def all_moon_phases(cal: CalendarDefinition, p: PointInTime) -> List[MoonPhaseResult]:
    out = []
    for i in range(len(cal.moons)):
        r = moon_phase(cal, i, p)
        if r is not None:
            out.append(r)
    return out
