# tests/test_trivial_calendar.py

import random

import pytest

from polycal import CalendarError, YearDay, trivial_calendar
from polycal.engines.calendar import length_year
from polycal.engines.specs import EPOCH


@pytest.fixture
def ten():
    return trivial_calendar(year_length=10)


@pytest.fixture
def leap():
    return trivial_calendar(year_length=lambda y: 11 if y % 4 == 0 else 10)


def test_length_year_skips_zero():
    assert length_year(5) == 5
    assert length_year(-1) == 0
    assert length_year(-4) == -3
    with pytest.raises(CalendarError, match="Year 0 is undefined"):
        length_year(0)


def test_day_to_year_day(ten):
    assert ten.day_to_year_day(0) == YearDay(ten, 1, 1)
    assert ten.day_to_year_day(9) == YearDay(ten, 1, 10)
    assert ten.day_to_year_day(10) == YearDay(ten, 2, 1)
    assert ten.day_to_year_day(-1) == YearDay(ten, -1, 10)
    assert ten.day_to_year_day(-10) == YearDay(ten, -1, 1)
    assert ten.day_to_year_day(-11) == YearDay(ten, -2, 10)


def test_year_day_to_day(ten):
    assert ten.year_day_to_day(ten.year_day(1, 1)) == 0
    assert ten.year_day_to_day(ten.year_day(2, 1)) == 10
    assert ten.year_day_to_day(ten.year_day(-1, 10)) == -1
    assert ten.year_day_to_day(ten.year_day(-2, 10)) == -11


def test_length_function_sees_shifted_years(leap):
    assert leap.days_in_year(-1) == 11
    assert leap.days_in_year(-4) == 10
    assert leap.days_in_year(-5) == 11
    assert leap.days_in_year(4) == 11
    assert leap.days_in_year(1) == 10
    with pytest.raises(CalendarError, match="Year 0 is undefined"):
        leap.days_in_year(0)


def test_round_trip(leap):
    random.seed(7)
    for _ in range(500):
        day = random.randint(-5000, 5000)
        year_day = leap.day_to_year_day(day)
        assert year_day.year != 0
        assert 1 <= year_day.day_of_year <= leap.days_in_year(year_day.year)
        assert leap.year_day_to_day(year_day) == day
        assert year_day.day == day


def test_epoch_offset():
    cal = trivial_calendar(year_length=10, epoch_offset=100)
    assert cal.day_to_year_day(100) == YearDay(cal, 1, 1)
    assert cal.day_to_year_day(99) == YearDay(cal, -1, 10)
    assert cal.year_day_to_day(cal.year_day(1, 1)) == 100


def test_validate(ten, leap):
    ten.validate(ten.year_day(3, 10))
    with pytest.raises(CalendarError, match="Year is 0"):
        ten.validate(ten.year_day(0, 1))
    with pytest.raises(CalendarError, match="Day of year out of range for year 1"):
        ten.validate(ten.year_day(1, 11))
    with pytest.raises(CalendarError, match="Day of year out of range"):
        ten.validate(ten.year_day(-1, 0))
    with pytest.raises(CalendarError, match="Calendar mismatch"):
        ten.validate(leap.year_day(1, 1))
    with pytest.raises(CalendarError, match="Day of year out of range"):
        ten.year_day_to_day(ten.year_day(1, 11))


def test_validate_rejects_other_types(ten):
    with pytest.raises(TypeError):
        ten.validate((1, 1))


def test_year_day_era(ten):
    assert ten.year_day(1, 1).era.short_form == "AE"
    assert ten.year_day(-1, 1).era.short_form == "BE"


def test_no_months_no_weeks(ten):
    assert not ten.has_months()
    assert not ten.has_weeks()
    with pytest.raises(CalendarError, match="Calendar lacks a monthly cycle."):
        ten.date(1, 1, 1)
    with pytest.raises(CalendarError, match="Calendar lacks a monthly cycle."):
        ten.months()
    with pytest.raises(CalendarError, match="Calendar lacks a monthly cycle."):
        ten.day_to_date(0)
    with pytest.raises(CalendarError, match="Calendar lacks a weekly cycle."):
        ten.days_in_week()
    with pytest.raises(CalendarError, match="Calendar lacks a weekly cycle."):
        ten.day_to_weekday(0)


def test_year_length_accessor(ten, leap):
    assert ten.year_length(5) == 10
    # raw function: no shift applied
    assert leap.year_length(0) == 11


def test_default_format(ten):
    assert ten.format(ten.year_day(2, 5)) == "AE-2-5"
    assert ten.format(-1) == "BE-1-10"
    assert ten.parse("BE-1-10") == -1
    assert ten.parse("ae-2-5") == 14


def test_epoch_calendar_has_week():
    assert EPOCH.has_weeks()
    assert EPOCH.day_to_weekday(0).full_form == "Monday"
    assert EPOCH.day_to_day_of_week(0) == 2
    assert str(EPOCH.year_day(1, 1)) == "epoch:1/1"


def test_str_unnamed(ten):
    assert str(ten) == "TrivialCalendar[Era(AE,After Epoch),Era(BE,Before Epoch)]"


def test_bad_year_length():
    with pytest.raises(CalendarError):
        trivial_calendar(year_length="365")
    with pytest.raises(CalendarError):
        trivial_calendar(year_length=True)


def test_year_length_must_be_positive():
    with pytest.raises(CalendarError, match="at least 1"):
        trivial_calendar(year_length=0)
    with pytest.raises(CalendarError, match="at least 1"):
        trivial_calendar(year_length=-10)


def test_empty_year_from_length_function():
    gap = trivial_calendar(year_length=lambda y: 0 if y == 3 else 10)
    assert gap.day_to_year_day(15) == YearDay(gap, 2, 6)
    with pytest.raises(CalendarError, match="Year 3 has 0 days"):
        gap.day_to_year_day(25)

    no_past = trivial_calendar(year_length=lambda y: 10 if y > 0 else 0)
    with pytest.raises(CalendarError, match="Year -1 has 0 days"):
        no_past.day_to_year_day(-1)
