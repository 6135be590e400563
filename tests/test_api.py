# tests/test_api.py

import pytest

import polycal
from polycal import api
from polycal.bootstrap import build_registry


@pytest.fixture
def fresh_registry():
    api.set_registry(build_registry())
    yield
    api.set_registry(build_registry())


def test_list_calendars():
    assert polycal.list_calendars() == ["armorican-af", "armorican-me", "epoch", "gregorian"]
    assert polycal.DEFAULT_CALENDAR == "gregorian"


def test_get_calendar():
    cal = polycal.get_calendar("gregorian")
    assert cal.has_months() and cal.has_weeks()
    with pytest.raises(KeyError, match="Unknown calendar 'julian'"):
        polycal.get_calendar("julian")


def test_register_calendar(fresh_registry):
    ten = polycal.trivial_calendar(year_length=10, name="ten")
    polycal.register_calendar("ten", ten)
    assert polycal.get_calendar("ten") is ten
    assert "ten" in polycal.list_calendars()

    with pytest.raises(KeyError, match="already exists"):
        polycal.register_calendar("ten", polycal.trivial_calendar(year_length=12))

    twelve = polycal.trivial_calendar(year_length=12)
    polycal.register_calendar("ten", twelve, overwrite=True)
    assert polycal.get_calendar("ten") is twelve


def test_calendar_info():
    info = polycal.calendar_info("gregorian")
    assert info["era"] == "Anno Domini"
    assert info["prior_era"] == "Before Christ"
    assert info["months"][0] == "January"
    assert info["weekdays"][0] == "Sunday"
    assert info["week_offset"] == 1

    info = polycal.calendar_info("armorican-me")
    assert info["epoch_offset"] == -978 * 366

    info = polycal.calendar_info("epoch")
    assert info["has_months"] is False
    assert "months" not in info


def test_day_info():
    info = polycal.day_info(738935)
    assert info == polycal.DayInfo(
        calendar="gregorian",
        day=738935,
        year=2024,
        day_of_year=51,
        era="AD",
        month_of_year=2,
        day_of_month=20,
        month_name="February",
        day_of_week=3,
        weekday_name="Tuesday",
    )

    info = polycal.day_info(0, calendar="epoch")
    assert (info.year, info.day_of_year, info.era) == (1, 1, "AE")
    assert info.month_of_year is None
    assert info.weekday_name == "Monday"


def test_format_and_parse():
    assert polycal.format_day(0) == "AD-1-1-1"
    assert polycal.parse_date("AD-1-1-1") == 0
    assert polycal.format_day(738935, fmt="yyyy/DDD") == "2024/051"
    assert polycal.parse_date("2024/051", fmt=polycal.DateFormat("yyyy/DDD")) == 738935


def test_convert():
    assert polycal.convert("ME-1011-1-1", source="armorican-me", target="armorican-af") == "AF-33-1-1"
    assert polycal.convert("AD-2024-2-20", source="gregorian", target="epoch") == "AE-2025-176"
    assert polycal.convert(
        "20/02/2024",
        source="gregorian",
        target="gregorian",
        in_format="dd/mm/yyyy",
        out_format="WWWW MMMM d",
    ) == "Tuesday February 20"


def test_convert_errors():
    with pytest.raises(polycal.CalendarError, match="is not compatible"):
        polycal.convert("AE-1-1", source="epoch", target="epoch", out_format="yyyy-mm-dd")
    with pytest.raises(KeyError):
        polycal.convert("AD-1-1-1", source="gregorian", target="julian")


def test_lengths():
    assert polycal.days_in_year(2024) == 366
    assert polycal.days_in_year(1900) == 365
    assert polycal.days_in_month(2023, 2) == 28
    assert polycal.days_in_year(1, calendar="armorican-af") == 366
