# tests/test_cycles.py

import pytest

from fancal.core.types import CalendarDefinition, Cycle, Month, PointInTime
from fancal.engines.cycles import LINE_BREAK, cycle_index, cycle_values, render_cycle_format
from fancal.engines.specs import GREGORIAN, TWIN_MOONS, entries

TWELVE = entries(*[f"E{i}" for i in range(12)])


@pytest.mark.parametrize("month", range(12))
def test_monthly_cycle_tracks_month(month):
    assert cycle_index(Cycle("Months", TWELVE, length=1, based_on="month"), month) == month


def test_negative_epochs_stay_in_range():
    c = Cycle("Years", entries("A", "B", "C"), length=1, based_on="year")
    assert [cycle_index(c, y) for y in (-3, -2, -1, 0, 1, 2)] == [0, 1, 2, 0, 1, 2]
    slow = Cycle("Slow", entries("A", "B"), length=10, based_on="day")
    assert all(cycle_index(slow, d) in (0, 1) for d in range(-55, 55))


def test_degenerate_length_and_empty_entries():
    assert cycle_index(Cycle("Zero", entries("A", "B"), length=0, based_on="year"), 3) == 1
    assert cycle_index(Cycle("Empty", (), based_on="year"), 5) == 0


def test_zodiac():
    assert cycle_values(GREGORIAN, PointInTime(2020, 5, 1)).values[0].entry_name == "Rat"
    cv = cycle_values(GREGORIAN, PointInTime(2024, 0, 0))
    assert cv.values[0].entry_name == "Dragon"
    assert cv.text == "Year of the Dragon"


def test_two_cycles_share_one_format():
    # month 1, day 4 -> day 40 of year 1
    cv = cycle_values(TWIN_MOONS, PointInTime(1, 1, 4))
    assert cv.text == "Water year" + LINE_BREAK + "Season of the Heron"
    assert [v.cycle_name for v in cv.values] == ["Element", "Beast"]


def test_render_keeps_unknown_placeholders():
    assert render_cycle_format("{{1}}-{{3}}", {1: "A"}) == "A-{{3}}"
    assert render_cycle_format("", {1: "A"}) == ""


def test_cycle_without_entries_renders_empty():
    cal = CalendarDefinition(
        name="c",
        months=(Month("M", 30),),
        cycles=(Cycle("Blank", (), based_on="year"), Cycle("Pair", entries("X", "Y"), length=1, based_on="year")),
        cycle_format="[{{1}}] {{2}}",
    )
    cv = cycle_values(cal, PointInTime(3))
    assert cv.text == "[] Y"
    assert len(cv.values) == 1


def test_no_cycles():
    cal = CalendarDefinition(name="c", months=(Month("M", 30),))
    assert cycle_values(cal, PointInTime(3)).text == ""
