# tests/test_loader.py

import json

import pytest

from fancal import definition_from_dict, load_definition
from fancal.core.errors import DefinitionError
from fancal.core.types import LeapYearConfig, PointInTime
from fancal.engines.factory import engine_for

SAMPLE = {
    "name": "Tiny",
    "months": {"values": [
        {"name": "Firstmonth", "abbreviation": "Fir", "days": 20},
        {"name": "Lastmonth", "days": 10, "leapDays": 11},
    ]},
    "leapYearConfig": {"rule": "custom", "pattern": "3", "start": 0},
    "days": {"hoursPerDay": 20, "minutesPerHour": 50},
    "moons": [{
        "name": "Pale",
        "cycleLength": 10,
        "referenceDate": {"year": 0, "month": 0, "day": 1},
        "phases": [{"name": "Dark"}, {"name": "Lit", "risingName": "Waxing"}],
    }],
    "seasons": [
        {"name": "Cold", "monthStart": 2, "monthEnd": 1},
    ],
    "eras": [{"name": "Tiny Era", "abbreviation": "TE", "startYear": 1}],
    "cycles": [{"name": "Parity", "entries": [{"name": "Even"}, {"name": "Odd"}], "length": 1, "basedOn": "year"}],
    "cycleFormat": "{{1}} year",
    "daylight": {"enabled": True, "shortestDay": 6, "longestDay": 14, "winterSolstice": 0, "summerSolstice": 15},
    "festivals": [{"name": "Turnday", "month": 2, "day": 11}],
    "metadata": {"system": "test"},
}


def test_definition_from_dict():
    cal = definition_from_dict(SAMPLE)
    assert cal.name == "Tiny"
    assert [m.name for m in cal.months] == ["Firstmonth", "Lastmonth"]
    assert cal.months[1].ordinal == 2
    assert cal.leap_year == LeapYearConfig(rule="custom", pattern="3", start=0)
    assert cal.hours_per_day == 20
    assert cal.moons[0].phases[1].rising_name == "Waxing"
    assert cal.seasons[0].is_month_range
    assert cal.meta == {"system": "test"}

    eng = engine_for(cal)
    assert eng.days_in_year(3) == 31
    assert eng.days_in_year(4) == 30
    info = eng.day_info(PointInTime(3, 1, 10))
    assert info.cycles.text == "Odd year"
    assert eng.festival(PointInTime(3, 1, 10)).name == "Turnday"
    assert info.daylight.solar_midday == pytest.approx(10)


def test_legacy_leap_block():
    cal = definition_from_dict({
        "months": [{"name": "M", "days": 30}],
        "years": {"yearZero": 5, "leapYear": {"leapInterval": 4, "leapStart": 1}},
    })
    assert cal.leap_year == LeapYearConfig(rule="simple", interval=4, start=1)
    assert cal.year_zero == 5
    assert cal.name == "custom"


def test_missing_leap_config_never_leaps():
    cal = definition_from_dict({"name": "x", "months": [{"name": "M", "days": 30}]})
    assert cal.leap_year.rule == "none"


@pytest.mark.parametrize("data", [
    [],
    {"months": [{"days": 30}]},
    {"months": [{"name": "M"}]},
    {"months": [{"name": "M", "days": 0}]},
    {"months": [{"name": "M", "days": "many"}]},
    {"months": "nope"},
    {"months": [{"name": "M", "days": 30}], "cycles": [{"name": "C", "basedOn": "fortnight"}]},
    {"months": [{"name": "M", "days": 30}], "eras": [{"name": "E"}]},
    {"months": [{"name": "M", "days": 30}], "eras": [{"name": "E", "startYear": "abc"}]},
    {"months": [{"name": "M", "days": 30}], "festivals": [{"name": "F", "month": "first", "day": 1}]},
    {"months": [{"name": "M", "days": 30}], "festivals": [{"name": "F", "month": 0, "day": 1}]},
    {"months": [{"name": "M", "days": 30}], "moons": [{"name": "L", "cycleLength": "long"}]},
    {"months": [{"name": "M", "days": 30}], "moons": [{"name": "L", "cycleLength": 0}]},
    {"months": [{"name": "M", "days": 30}], "leapYearConfig": "gregorian"},
    {"months": [{"name": "M", "days": 30}], "cycles": [{"name": "C", "length": 0}]},
    {"months": [{"name": "M", "days": 30}], "days": {"hoursPerDay": 0}},
])
def test_bad_definitions(data):
    with pytest.raises(DefinitionError):
        definition_from_dict(data)


def test_load_definition(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    assert load_definition(path).name == "Tiny"

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(DefinitionError):
        load_definition(broken)


def test_numeric_strings_are_coerced():
    cal = definition_from_dict({
        "name": "coerced",
        "months": [{"name": "M", "days": "30"}],
        "moons": [{"name": "L", "cycleLength": "30", "phases": [{"name": "Dark"}, {"name": "Lit"}]}],
        "eras": [{"name": "E", "abbreviation": "E", "startYear": "1"}],
    })
    assert cal.months[0].days == 30
    assert cal.moons[0].cycle_length == 30.0

    eng = engine_for(cal)
    assert eng.moon_phase(0, PointInTime(1)).name == "Dark"
    assert eng.format_year(5) == "5 E"


def test_null_sections_are_empty():
    cal = definition_from_dict({
        "name": "sparse",
        "months": {"values": [{"name": "M", "days": 10}]},
        "moons": None,
        "seasons": None,
        "eras": None,
        "metadata": None,
    })
    assert cal.moons == () and cal.seasons == () and cal.eras == ()
    assert cal.meta == {}
