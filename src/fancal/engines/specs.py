from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ..core.types import (
    CalendarDefinition,
    CalendarId,
    CalendarSpec,
    Cycle,
    CycleEntry,
    Daylight,
    Era,
    Festival,
    LeapYearConfig,
    Month,
    Moon,
    MoonPhase,
    ReferenceDate,
    Season,
)


# ============================================================
# SHARED BUILDING BLOCKS
# ============================================================

# Canonical eight phases; start/end are fractions of the cycle.
STANDARD_PHASES: Tuple[MoonPhase, ...] = (
    MoonPhase("New Moon", 0.0, 0.125, icon="new"),
    MoonPhase("Waxing Crescent", 0.125, 0.25, icon="waxing-crescent"),
    MoonPhase("First Quarter", 0.25, 0.375, icon="first-quarter"),
    MoonPhase("Waxing Gibbous", 0.375, 0.5, icon="waxing-gibbous"),
    MoonPhase("Full Moon", 0.5, 0.625, icon="full"),
    MoonPhase("Waning Gibbous", 0.625, 0.75, icon="waning-gibbous"),
    MoonPhase("Last Quarter", 0.75, 0.875, icon="last-quarter"),
    MoonPhase("Waning Crescent", 0.875, 1.0, icon="waning-crescent"),
)

SYNODIC_MONTH = 29.53059


def months(spec: Sequence[Tuple]) -> Tuple[Month, ...]:
    """(name, abbr, days[, leap_days]) rows -> Month tuple with 1-based ordinals."""
    out = []
    for i, row in enumerate(spec, start=1):
        name, abbr, days = row[:3]
        leap_days = row[3] if len(row) > 3 else None
        out.append(Month(name=name, abbreviation=abbr, days=days, ordinal=i, leap_days=leap_days))
    return tuple(out)


def entries(*names: str) -> Tuple[CycleEntry, ...]:
    return tuple(CycleEntry(n) for n in names)


def builtin(name: str, definition: CalendarDefinition, version: str = "1") -> CalendarSpec:
    return CalendarSpec(CalendarId("builtin", name, version), definition)


# ============================================================
# GREGORIAN
# ============================================================

GREGORIAN = CalendarDefinition(
    name="gregorian",
    months=months([
        ("January", "Jan", 31), ("February", "Feb", 28, 29), ("March", "Mar", 31),
        ("April", "Apr", 30), ("May", "May", 31), ("June", "Jun", 30),
        ("July", "Jul", 31), ("August", "Aug", 31), ("September", "Sep", 30),
        ("October", "Oct", 31), ("November", "Nov", 30), ("December", "Dec", 31),
    ]),
    leap_year=LeapYearConfig(rule="gregorian"),
    moons=(
        # 2000-01-06 18:14 UT new moon
        Moon("Luna", SYNODIC_MONTH, STANDARD_PHASES, reference_date=ReferenceDate(2000, 0, 6)),
    ),
    seasons=(
        Season("Spring", day_start=78, day_end=170),
        Season("Summer", day_start=171, day_end=264),
        Season("Autumn", day_start=265, day_end=353),
        Season("Winter", day_start=354, day_end=77),
    ),
    eras=(Era("Common Era", "CE", start_year=1),),
    cycles=(
        # offset 8 puts 2020 on the Rat
        Cycle("Zodiac", entries(
            "Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
            "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig",
        ), length=1, offset=8, based_on="year"),
    ),
    cycle_format="Year of the {{1}}",
    daylight=Daylight(enabled=True, shortest_day=9.0, longest_day=15.0, winter_solstice=354, summer_solstice=171),
    meta={"description": "Proleptic Gregorian calendar", "system": "Earth"},
)


# ============================================================
# HARPTOS (Forgotten Realms)
# ============================================================

HARPTOS = CalendarDefinition(
    name="harptos",
    months=months([
        ("Hammer", "Ham", 30), ("Midwinter", "Mid", 1), ("Alturiak", "Alt", 30),
        ("Ches", "Che", 30), ("Tarsakh", "Tar", 30), ("Greengrass", "Grn", 1),
        ("Mirtul", "Mir", 30), ("Kythorn", "Kyt", 30), ("Flamerule", "Fla", 30),
        # Shieldmeet follows Midsummer in leap years
        ("Midsummer", "Msm", 1, 2), ("Eleasis", "Ele", 30), ("Eleint", "Eli", 30),
        ("Highharvestide", "Hhv", 1), ("Marpenoth", "Mar", 30), ("Uktar", "Ukt", 30),
        ("Feast of the Moon", "Fmn", 1), ("Nightal", "Nig", 30),
    ]),
    leap_year=LeapYearConfig(rule="simple", interval=4, start=0),
    moons=(
        Moon("Selûne", 30.4375, STANDARD_PHASES, reference_date=ReferenceDate(1372, 0, 1), cycle_day_adjust=15),
    ),
    seasons=(
        Season("Winter", day_start=335, day_end=59),
        Season("Spring", day_start=60, day_end=151),
        Season("Summer", day_start=152, day_end=243),
        Season("Autumn", day_start=244, day_end=334),
    ),
    eras=(
        Era("Dale Reckoning", "DR", start_year=1),
        Era("Era of Upheaval", "EU", start_year=1385, end_year=1479,
            template="{{yearInEra}} {{abbreviation}} ({{year}} DR)"),
    ),
    festivals=(
        Festival("Midwinter", 2, 1),
        Festival("Greengrass", 6, 1),
        Festival("Midsummer", 10, 1),
        Festival("Shieldmeet", 10, 2),
        Festival("Highharvestide", 13, 1),
        Festival("Feast of the Moon", 16, 1),
    ),
    daylight=Daylight(enabled=True, shortest_day=8.0, longest_day=16.0, winter_solstice=355, summer_solstice=172),
    meta={"description": "Calendar of Harptos", "system": "Forgotten Realms"},
)


# ============================================================
# TWIN MOONS (two moons, no year zero, custom leap pattern)
# ============================================================

VEY_PHASES: Tuple[MoonPhase, ...] = (
    MoonPhase("Dark", 0.0, 1 / 6, rising_name="Deepening Dark", fading_name="Thinning Dark"),
    MoonPhase("Horn", 1 / 6, 2 / 6),
    MoonPhase("Half", 2 / 6, 3 / 6),
    MoonPhase("Bright", 3 / 6, 4 / 6, rising_name="Kindling", fading_name="Guttering"),
    MoonPhase("Wane", 4 / 6, 5 / 6),
    MoonPhase("Ember", 5 / 6, 1.0),
)

TWIN_MOONS = CalendarDefinition(
    name="twin_moons",
    months=months([
        ("Frostmere", "Fro", 36), ("Thawmonth", "Tha", 36), ("Seedfall", "See", 36),
        ("Greenwake", "Gre", 36), ("Highsun", "Hig", 36), ("Emberdeep", "Emb", 36),
        ("Harvestide", "Har", 36), ("Leafturn", "Lea", 36), ("Mistveil", "Mis", 36),
        ("Longnight", "Lon", 36), ("The Turning", "Tur", 5, 6),
    ]),
    leap_year=LeapYearConfig(rule="custom", pattern="4,!100,400", start=0),
    year_zero_exists=False,
    moons=(
        Moon("Aster", 24, STANDARD_PHASES, reference_date=ReferenceDate(1, 0, 1)),
        Moon("Vey", 20, VEY_PHASES, reference_date=ReferenceDate(1, 0, 1), cycle_day_adjust=-3),
    ),
    seasons=(
        Season("Thaw", month_start=2, month_end=4, day_end=18),
        Season("Bloom", month_start=4, month_end=6, day_start=19, day_end=18),
        Season("Ember", month_start=6, month_end=8, day_start=19),
        Season("Frost", month_start=9, month_end=1),
    ),
    eras=(
        Era("Age of Ash", "AA", start_year=-500, end_year=-1, format="prefix"),
        Era("Second Dawn", "SD", start_year=1),
        Era("Reign of Ilse", "RI", start_year=812, template="{{yearInEra}} {{abbreviation}} ({{year}} SD)"),
    ),
    cycles=(
        Cycle("Element", entries("Fire", "Water", "Earth", "Air"), length=1, based_on="year"),
        Cycle("Beast", entries(
            "Stag", "Heron", "Wolf", "Otter", "Hawk", "Boar", "Moth", "Viper", "Bear", "Owl", "Hare",
        ), length=36, based_on="yearDay"),
    ),
    cycle_format="{{1}} year{{n}}Season of the {{2}}",
    daylight=Daylight(enabled=True, shortest_day=7.0, longest_day=17.0, winter_solstice=360, summer_solstice=180),
    meta={"description": "Two-moon homebrew calendar", "system": "Homebrew"},
)


ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": builtin("gregorian", GREGORIAN),
    "harptos": builtin("harptos", HARPTOS),
    "twin_moons": builtin("twin_moons", TWIN_MOONS),
}
