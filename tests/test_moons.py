# tests/test_moons.py

import math

import pytest

from fancal.core.types import Moon, MoonPhase, PointInTime
from fancal.engines.moons import (
    all_moon_phases,
    build_phase_day_distribution,
    moon_phase,
    phase_for_days,
    sub_phase,
)
from fancal.engines.specs import GREGORIAN, STANDARD_PHASES, TWIN_MOONS


def test_eight_phase_distribution_thirty_days():
    dist = build_phase_day_distribution(30, 8)
    assert dist == [3, 4, 4, 4, 3, 4, 4, 4]
    assert sum(dist) == 30


def test_eight_phase_distribution_remainder_goes_to_early_secondaries():
    # 28: primary 3 each, 22 left -> 3 each plus 4 extra days
    assert build_phase_day_distribution(28, 8) == [3, 4, 4, 4, 3, 4, 3, 3]


def test_even_distribution_for_other_phase_counts():
    dist = build_phase_day_distribution(20, 6)
    assert dist == [4, 4, 3, 3, 3, 3]
    assert sum(dist) == 20


def test_sub_phase_thirds():
    ph = MoonPhase("Full Moon")
    assert sub_phase(ph, 0, 4) == ("rising", "Rising Full Moon")
    assert sub_phase(ph, 1, 4) == ("rising", "Rising Full Moon")
    assert sub_phase(ph, 2, 4) == ("peak", "Full Moon")
    assert sub_phase(ph, 3, 4) == ("fading", "Fading Full Moon")
    assert sub_phase(ph, 0, 1) == ("peak", "Full Moon")


def test_sub_phase_explicit_names():
    ph = MoonPhase("Bright", rising_name="Kindling", fading_name="Guttering")
    assert sub_phase(ph, 0, 3)[1] == "Kindling"
    assert sub_phase(ph, 1, 3)[1] == "Bright"
    assert sub_phase(ph, 2, 3)[1] == "Guttering"


@pytest.fixture
def moon30():
    return Moon("Test", 30, STANDARD_PHASES)


def test_phase_walk(moon30):
    r = phase_for_days(moon30, 0)
    assert (r.name, r.phase_index, r.day_within_phase, r.phase_duration) == ("New Moon", 0, 0, 3)
    assert r.sub_phase == "rising"
    assert r.icon == "new"

    assert phase_for_days(moon30, 3).name == "Waxing Crescent"
    full = phase_for_days(moon30, 15)
    assert full.name == "Full Moon"
    assert full.position == pytest.approx(0.5)


def test_negative_days_wrap(moon30):
    r = phase_for_days(moon30, -1)
    assert r.day_in_cycle == 29
    assert r.phase_index == 7
    assert r.day_within_phase == 3
    assert r.sub_phase == "fading"
    assert r.position == pytest.approx(29 / 30)
    assert 0 <= phase_for_days(moon30, -12345).position < 1


def test_cycle_day_adjust():
    m = Moon("Adj", 30, STANDARD_PHASES, cycle_day_adjust=5)
    assert phase_for_days(m, 0).name == "Waxing Crescent"
    m = Moon("Adj", 30, STANDARD_PHASES, cycle_day_adjust=-1)
    assert phase_for_days(m, 0).day_in_cycle == 29


@pytest.mark.parametrize("length, days", [(0, 10), (-4, 10), (30, math.nan), (30, math.inf), (math.nan, 1)])
def test_degenerate_input_falls_back_to_first_phase(length, days):
    r = phase_for_days(Moon("Broken", length, STANDARD_PHASES), days)
    assert r.name == "New Moon"
    assert r.position == 0
    assert r.day_in_cycle == 0


def test_moon_without_phases():
    assert phase_for_days(Moon("Blank", 30), 3) is None


def test_moon_phase_from_calendar():
    # reference new moon is 2000-01-06 (day_of_month 5)
    r = moon_phase(GREGORIAN, 0, PointInTime(2000, 0, 5))
    assert r.moon == "Luna"
    assert r.name == "New Moon"
    assert r.day_in_cycle == 0
    # about half a synodic month later
    assert moon_phase(GREGORIAN, 0, PointInTime(2000, 0, 20)).name == "Full Moon"
    assert moon_phase(GREGORIAN, 5, PointInTime(2000, 0, 5)) is None


def test_all_moon_phases():
    out = all_moon_phases(TWIN_MOONS, PointInTime(3, 2, 10))
    assert [r.moon for r in out] == ["Aster", "Vey"]
    assert all(0 <= r.position < 1 for r in out)
    assert all_moon_phases(TWIN_MOONS, PointInTime(3, 2, 10)) == out
