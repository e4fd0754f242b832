# tests/test_daylight.py

import pytest

from fancal.core.types import CalendarDefinition, Daylight, Month, PointInTime
from fancal.engines.daylight import daylight_hours, daylight_times, progress_day, progress_night, solstice_progress


@pytest.fixture
def static_cal():
    return CalendarDefinition(name="static", months=(Month("M", 30),))


@pytest.fixture
def dynamic_cal():
    return CalendarDefinition(
        name="dynamic",
        months=(Month("Year", 365),),
        daylight=Daylight(enabled=True, shortest_day=8, longest_day=16, winter_solstice=355, summer_solstice=172),
    )


def test_static_daylight(static_cal):
    t = daylight_times(static_cal, PointInTime(1, 0, 4))
    assert (t.sunrise, t.sunset, t.solar_midday) == (6, 18, 12)
    assert t.solar_midnight == 24
    assert t.daylight_hours == 12


def test_solstice_extremes(dynamic_cal):
    assert daylight_hours(dynamic_cal, PointInTime(1, 0, 355)) == pytest.approx(8)
    assert daylight_hours(dynamic_cal, PointInTime(1, 0, 172)) == pytest.approx(16)


def test_monotonic_between_solstices(dynamic_cal):
    rising = [daylight_hours(dynamic_cal, PointInTime(1, 0, d)) for d in range(0, 173)]
    assert all(a <= b for a, b in zip(rising, rising[1:]))
    falling = [daylight_hours(dynamic_cal, PointInTime(1, 0, d)) for d in range(172, 356)]
    assert all(a >= b for a, b in zip(falling, falling[1:]))


def test_sunrise_sunset_symmetric(dynamic_cal):
    for d in (0, 90, 200, 300):
        t = daylight_times(dynamic_cal, PointInTime(1, 0, d))
        assert t.sunrise + t.sunset == pytest.approx(24)
        assert t.solar_midday == pytest.approx(12)


def test_equal_solstices_give_shortest_day():
    assert solstice_progress(100, 50, 50, 365) == 0
    cal = CalendarDefinition(
        name="flat",
        months=(Month("Year", 365),),
        daylight=Daylight(enabled=True, shortest_day=9, longest_day=15, winter_solstice=10, summer_solstice=10),
    )
    assert daylight_hours(cal, PointInTime(1, 0, 200)) == pytest.approx(9)


def test_progress(static_cal):
    assert progress_day(static_cal, PointInTime(1, 0, 0, 12)) == pytest.approx(0.5)
    assert progress_day(static_cal, PointInTime(1, 0, 0, 3)) == 0
    assert progress_night(static_cal, PointInTime(1, 0, 0, 0)) == pytest.approx(0.5)
    assert progress_night(static_cal, PointInTime(1, 0, 0, 18)) == 0
    assert progress_night(static_cal, PointInTime(1, 0, 0, 5)) == pytest.approx(11 / 12)
