# tests/test_months.py

import pytest

from fancal.core.types import CalendarDefinition, LeapYearConfig, Month, PointInTime
from fancal.core import time as ct
from fancal.engines.months import days_before_year, days_in_month, days_in_year
from fancal.engines.specs import GREGORIAN, TWIN_MOONS


def test_days_in_month_uses_leap_length():
    assert days_in_month(GREGORIAN, 1, 2024) == 29
    assert days_in_month(GREGORIAN, 1, 2023) == 28
    assert days_in_month(GREGORIAN, 1, 1900) == 28
    assert days_in_month(GREGORIAN, 0, 2024) == 31


@pytest.mark.parametrize("idx", [-1, 12, 99])
def test_unknown_month_has_no_days(idx):
    assert days_in_month(GREGORIAN, idx, 2024) == 0


def test_days_in_year():
    assert days_in_year(GREGORIAN, 2024) == 366
    assert days_in_year(GREGORIAN, 2023) == 365
    assert days_in_year(GREGORIAN, 2000) == 366
    assert days_in_year(TWIN_MOONS, 4) == 366
    assert days_in_year(TWIN_MOONS, 100) == 365


def test_month_without_days_is_rejected():
    with pytest.raises(ValueError):
        Month("Void", 0)


def test_days_before_year_matches_year_sums():
    assert days_before_year(GREGORIAN, 0) == 0
    assert days_before_year(GREGORIAN, 1) == 366  # proleptic year 0 is leap
    assert days_before_year(GREGORIAN, -1) == -365

    for cal in (GREGORIAN, TWIN_MOONS):
        for y in (-130, -7, 3, 57, 410):
            if y >= 0:
                direct = sum(days_in_year(cal, cal.year_zero + k) for k in range(0, y))
            else:
                direct = -sum(days_in_year(cal, cal.year_zero + k) for k in range(y, 0))
            assert days_before_year(cal, y) == direct


def test_year_zero_shifts_leap_years():
    cal = CalendarDefinition(
        name="offset",
        months=(Month("A", 10), Month("B", 10, leap_days=11)),
        leap_year=LeapYearConfig(rule="simple", interval=4),
        year_zero=2,
    )
    # internal year 2 is display year 4
    assert ct.display_year(cal, PointInTime(2)) == 4
    assert days_before_year(cal, 3) == 20 + 20 + 21


def test_day_of_year_and_absolute_days():
    p = PointInTime(2024, 2, 0)  # March 1st
    assert ct.day_of_year(GREGORIAN, p) == 60
    assert ct.day_of_year(GREGORIAN, PointInTime(2023, 2, 0)) == 59

    span = ct.point_days(GREGORIAN, PointInTime(2024, 0, 0)) - ct.point_days(GREGORIAN, PointInTime(2000, 0, 0))
    assert span == 8766


def test_days_to_components_inverts_point_days():
    for p in (PointInTime(2024, 1, 28), PointInTime(-3, 11, 30), PointInTime(0, 0, 0), PointInTime(1999, 11, 30)):
        assert ct.days_to_components(GREGORIAN, ct.point_days(GREGORIAN, p)) == p


def test_point_from_date_and_hours_of_day():
    cal = CalendarDefinition(name="x", months=(Month("A", 30),), year_zero=100)
    p = ct.point_from_date(cal, 150, 0, 1, 6, 30, 30)
    assert p == PointInTime(50, 0, 0, 6, 30, 30)
    assert ct.hours_of_day(cal, p) == pytest.approx(6 + 30.5 / 60)
