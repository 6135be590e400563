# tests/test_date_format.py

import pytest

from polycal import ERA_YD, ERA_YMD, CalendarError, DateFormat, Form, trivial_calendar
from polycal.engines.specs import EPOCH, GREGORIAN
from polycal.formatter import DayOfYear, EraName, MonthNumber, Text, WeekdayName, YearNumber

NUMERIC = DateFormat("yyyy'-'mm'-'dd' 'E")
FANCY = DateFormat("WWWW', 'MMMM' 'd', 'y' 'E")
YEARDAY = DateFormat("yyyy/DDD")

AD = GREGORIAN.date(2024, 2, 20)
BC = GREGORIAN.date(-44, 3, 15)


def test_compile_fields():
    assert YEARDAY.fields == (YearNumber(4), Text("/"), DayOfYear(3))
    assert DateFormat("'Year:' yy").fields == (Text("Year:"), Text(" "), YearNumber(2))
    assert DateFormat("W-EE").fields == (WeekdayName(Form.TINY), Text("-"), EraName(Form.UNAMBIGUOUS))
    assert DateFormat("mmmmm").fields == (MonthNumber(5),)
    assert DateFormat("").fields == ()


def test_requirements():
    assert NUMERIC.needs_months and not NUMERIC.needs_weeks
    assert FANCY.needs_months and FANCY.needs_weeks
    assert not YEARDAY.needs_months and not YEARDAY.needs_weeks
    assert YEARDAY.is_compatible_with(EPOCH)
    assert not NUMERIC.is_compatible_with(EPOCH)
    assert DateFormat("D W").is_compatible_with(EPOCH)
    assert not DateFormat("D W").is_compatible_with(trivial_calendar())


def test_equality_by_pattern():
    assert DateFormat("yyyy/DDD") == YEARDAY
    assert hash(DateFormat("yyyy/DDD")) == hash(YEARDAY)
    assert str(YEARDAY) == "yyyy/DDD"


def test_compile_errors():
    with pytest.raises(CalendarError, match='Unknown conversion character: "q"'):
        DateFormat("yyyy q")
    with pytest.raises(CalendarError, match="missing close quote"):
        DateFormat("yyyy 'abc")


def test_format_numeric():
    assert GREGORIAN.format(AD, NUMERIC) == "2024-02-20 AD"
    assert GREGORIAN.format(BC, NUMERIC) == "0044-03-15 BC"


def test_format_names():
    assert GREGORIAN.format(AD, FANCY) == "Tuesday, February 20, 2024 AD"
    assert GREGORIAN.format(BC, FANCY) == "Friday, March 15, 44 BC"
    assert GREGORIAN.format(AD, "WWW MMM d") == "Tue Feb 20"
    assert GREGORIAN.format(AD, "WW MM d") == "Tu Feb 20"
    assert GREGORIAN.format(AD, "W M d") == "T F 20"
    assert GREGORIAN.format(AD, "EEEE y") == "Anno Domini 2024"


def test_format_day_of_year():
    assert GREGORIAN.format(AD, YEARDAY) == "2024/051"
    assert EPOCH.format(EPOCH.year_day(3, 7), YEARDAY) == "0003/007"


def test_width_is_a_minimum():
    assert GREGORIAN.format(AD, "yy") == "2024"
    assert GREGORIAN.format(GREGORIAN.date(5, 1, 9), "yyyy-mm-dd") == "0005-01-09"


def test_format_accepts_day_and_year_day():
    day = AD.day
    assert GREGORIAN.format(day, NUMERIC) == "2024-02-20 AD"
    assert GREGORIAN.format(AD.year_day, NUMERIC) == "2024-02-20 AD"
    assert NUMERIC.format(GREGORIAN, day) == "2024-02-20 AD"
    assert not hasattr(DateFormat, "format_day")
    assert not hasattr(DateFormat, "parse_date")


def test_format_validates_dates():
    with pytest.raises(CalendarError, match="Day is out of range"):
        GREGORIAN.format(GREGORIAN.date(2023, 2, 29), NUMERIC)
    with pytest.raises(TypeError):
        GREGORIAN.format("2024-02-20")


def test_default_formats():
    assert GREGORIAN.default_format() is ERA_YMD
    assert EPOCH.default_format() is ERA_YD
    assert GREGORIAN.format(AD) == "AD-2024-2-20"
    assert GREGORIAN.format(-1) == "BC-1-12-31"
    assert GREGORIAN.format(0) == "AD-1-1-1"


def test_incompatible_calendar():
    with pytest.raises(CalendarError, match="is not compatible with date format"):
        NUMERIC.format(EPOCH, 0)
    with pytest.raises(CalendarError, match="is not compatible with date format"):
        NUMERIC.parse(EPOCH, "2024-02-20 AD")


def test_parse_round_trips():
    for date in (AD, BC):
        for fmt in (NUMERIC, FANCY, YEARDAY.pattern + " E", ERA_YMD):
            text = GREGORIAN.format(date, fmt)
            assert GREGORIAN.parse(text, fmt) == date.day


def test_parse_values():
    assert GREGORIAN.parse("2024-02-20 AD", NUMERIC) == 738935
    assert GREGORIAN.parse("0044-03-15 BC", NUMERIC) == -15998
    assert GREGORIAN.parse("Friday, March 15, 44 BC", FANCY) == -15998
    assert YEARDAY.parse(GREGORIAN, "2024/051") == 738935
    assert EPOCH.parse("AE-1-1") == 0


def test_parse_ignores_case():
    assert GREGORIAN.parse("tuesday, FEBRUARY 20, 2024 ad", FANCY) == 738935
    assert GREGORIAN.parse("anno domini 2024/051", "EEEE yyyy/DDD") == 738935


def test_parse_single_width_is_greedy():
    assert GREGORIAN.parse("2024-2-20", "y-m-d") == 738935
    assert GREGORIAN.parse("0002024-02-020", "y-m-d") == 738935


def test_parse_weekday_is_not_checked():
    assert GREGORIAN.parse("Monday, February 20, 2024 AD", FANCY) == 738935


def test_parse_ignores_trailing_input():
    assert GREGORIAN.parse("2024-02-20 AD and then some", NUMERIC) == 738935


def test_parse_errors():
    with pytest.raises(CalendarError, match='Expected YearNumber, got: ""'):
        GREGORIAN.parse("", NUMERIC)
    with pytest.raises(CalendarError, match='Expected field "mm"'):
        GREGORIAN.parse("2024-2-20 AD", NUMERIC)
    with pytest.raises(CalendarError, match='Expected field "dd", got: "2"'):
        GREGORIAN.parse("2024-02-2", "yyyy-mm-dd")
    with pytest.raises(CalendarError, match="Expected era"):
        GREGORIAN.parse("2024-02-20 XX", NUMERIC)
    with pytest.raises(CalendarError, match="Expected month"):
        GREGORIAN.parse("Tuesday, Brumaire 20, 2024 AD", FANCY)
    with pytest.raises(CalendarError, match="Expected weekday"):
        GREGORIAN.parse("Octidi, February 20, 2024 AD", FANCY)
    with pytest.raises(CalendarError, match="Expected \"-\""):
        GREGORIAN.parse("2024/02-20 AD", NUMERIC)
    with pytest.raises(CalendarError, match="Day is out of range"):
        GREGORIAN.parse("2024-02-30 AD", NUMERIC)
    with pytest.raises(CalendarError, match="Year is 0"):
        GREGORIAN.parse("0000-01-01 AD", NUMERIC)


def test_parse_insufficient_information():
    with pytest.raises(CalendarError, match="Insufficient information"):
        GREGORIAN.parse("AD 2024", "E y")
    with pytest.raises(CalendarError, match="Insufficient information"):
        GREGORIAN.parse("02-20", "mm-dd")
    with pytest.raises(CalendarError, match="Insufficient information"):
        GREGORIAN.parse("2024-20", "yyyy-dd")
