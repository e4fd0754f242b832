"""
fancal.engines.eras
-------------------
Era lookup and era-aware year formatting.

Eras may overlap. Candidates are tried latest-start first, so a newer era
supersedes an older open-ended one for every year both cover.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional, Sequence

from ..core.types import CalendarDefinition, Era, EraMatch, PointInTime
from ..core.time import display_year

_LOG = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")


def _match(era: Era, year_in_era: int) -> EraMatch:
    return EraMatch(
        name=era.name,
        abbreviation=era.abbreviation,
        format=era.format or "suffix",
        template=era.template or None,
        year_in_era=year_in_era,
    )


def resolve_era(eras: Sequence[Era], year: int) -> Optional[EraMatch]:
    """Era for a display year, or the first declared era when none covers it."""
    if not eras:
        return None

    for era in sorted(eras, key=lambda e: e.start_year, reverse=True):
        if era.start_year <= year and (era.end_year is None or year <= era.end_year):
            return _match(era, year - era.start_year + 1)

    # Eraless years keep the absolute year rather than an era-relative one.
    _LOG.debug("Year %d is outside every era; falling back to %r", year, eras[0].name)
    return _match(eras[0], year)


def current_era(cal: CalendarDefinition, p: PointInTime) -> Optional[EraMatch]:
    return resolve_era(cal.eras, display_year(cal, p))


def format_era_template(template: str, values: Mapping[str, Any]) -> str:
    """Replace {{token}} placeholders; unknown tokens are kept verbatim."""
    def sub(m: "re.Match[str]") -> str:
        key = m.group(1)
        return str(values[key]) if key in values else m.group(0)
    return _TOKEN_RE.sub(sub, template)


def format_year_with_era(cal: CalendarDefinition, year: int) -> str:
    """e.g. '1492 DR' (suffix), 'CY 591' (prefix), or a template rendering."""
    era = resolve_era(cal.eras, year)
    if era is None:
        return str(year)

    if era.template:
        return format_era_template(era.template, {
            "year": year,
            "abbreviation": era.abbreviation or "",
            "era": era.name or "",
            "yearInEra": era.year_in_era,
        })

    if not era.abbreviation:
        return str(year)
    if era.format == "prefix":
        return f"{era.abbreviation} {year}"
    return f"{year} {era.abbreviation}"
