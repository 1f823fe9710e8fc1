# tests/test_labels.py

import logging
from datetime import date
from unittest.mock import patch

import pytest

import polycal
from polycal import CalendarDate, CalendarId, GregorianDate, TimeRange
from polycal.core.errors import ConfigError, ConversionNonConvergentError, InvalidDateError
from polycal.engines.hebrew import HebrewConverter
from polycal.labels.format import cycle_label, display_year, format_calendar_date, native_string, year_label
from polycal.labels.labeler import gregorian_span, navigate


def label(d, rng, cal, **kw):
    return polycal.label_time_range(d, rng, cal, **kw)


# ============================================================
# Gregorian spans and navigation
# ============================================================

def test_gregorian_spans():
    d = GregorianDate(2000, 1, 15)
    assert gregorian_span(d, TimeRange.DECADE) == (GregorianDate(2000, 1, 1), GregorianDate(2009, 12, 31))
    assert gregorian_span(d, TimeRange.YEAR) == (GregorianDate(2000, 1, 1), GregorianDate(2000, 12, 31))
    assert gregorian_span(GregorianDate(2000, 2, 10), TimeRange.MONTH) == (GregorianDate(2000, 2, 1), GregorianDate(2000, 2, 29))
    assert gregorian_span(d, TimeRange.WEEK) == (GregorianDate(2000, 1, 9), GregorianDate(2000, 1, 15))
    assert gregorian_span(d, TimeRange.WEEK, week_starts_on=1) == (GregorianDate(2000, 1, 10), GregorianDate(2000, 1, 16))
    assert gregorian_span(d, TimeRange.DAY) == (d, d)


def test_bce_decades_use_floor():
    assert gregorian_span(GregorianDate(-5, 6, 1), TimeRange.DECADE)[0] == GregorianDate(-10, 1, 1)


@pytest.mark.parametrize(
    "start, rng, direction, expected",
    [
        ("2000-01-31", "month", "next", (2000, 2, 29)),
        ("2000-03-31", "month", "prev", (2000, 2, 29)),
        ("2000-12-15", "month", "next", (2001, 1, 15)),
        ("2000-02-29", "year", "next", (2001, 2, 28)),
        ("2000-01-01", "decade", "next", (2010, 1, 1)),
        ("2000-01-01", "week", "next", (2000, 1, 8)),
        ("2000-01-01", "day", "prev", (1999, 12, 31)),
    ],
)
def test_navigate(start, rng, direction, expected):
    g = polycal.navigate(start, rng, direction)
    assert (g.year, g.month, g.day) == expected


def test_navigate_rejects_bad_direction():
    with pytest.raises(InvalidDateError):
        polycal.navigate("2000-01-01", "day", "sideways")
    assert navigate(GregorianDate(2000, 1, 1), TimeRange.DAY) == GregorianDate(2000, 1, 2)


# ============================================================
# Era calendars
# ============================================================

@pytest.mark.parametrize(
    "rng, expected",
    [
        ("decade", "2000s"),
        ("year", "2000"),
        ("month", "January 2000"),
        ("week", "Week of Dec 26, 1999"),
        ("day", "Saturday, January 1, 2000"),
    ],
)
def test_gregorian_labels(rng, expected):
    assert label("2000-01-01", rng, "gregorian") == expected


def test_gregorian_decade_of_1970():
    assert label("1970-01-01", "decade", "gregorian") == "1970s"


def test_week_start_option():
    assert label("2000-01-01", "week", "gregorian", week_starts_on=1) == "Week of Dec 27, 1999"
    assert label(date(2000, 1, 1), "week", "gregorian", week_starts_on=6) == "Week of Jan 1, 2000"


@pytest.mark.parametrize("bad", [-1, 7, 9, True])
def test_week_start_must_name_a_weekday(bad):
    with pytest.raises(ConfigError):
        label("2000-01-01", "week", "gregorian", week_starts_on=bad)


def test_bce_labels():
    assert label("-0500-03-01", "year", "gregorian") == "501 BCE"
    assert label("-0500-03-01", "decade", "gregorian") == "500s BCE"
    assert display_year(0, "CE") == (1, "BCE")
    assert display_year(1, "CE") == (1, "CE")


@pytest.mark.parametrize(
    "rng, expected",
    [
        ("decade", "5760s AM"),
        ("year", "5760 AM"),
        ("month", "Tevet 5760 AM"),
        ("day", "Saturday, Tevet 23, 5760 AM"),
    ],
)
def test_hebrew_labels(rng, expected):
    assert label("2000-01-01", rng, "hebrew") == expected


def test_other_era_labels():
    assert label("2000-01-01", "month", "islamic") == "Ramadan 1420 AH"
    assert label("2000-01-01", "year", "julian") == "1999 CE"
    assert label("2000-01-01", "year", "thai-buddhist") == "2543 BE"
    assert label("2000-01-01", "month", "persian") == "Dey 1378 SH"
    assert label("2000-01-01", "month", "cherokee") == "Cold Moon 2000 CE"


def test_chinese_year_label_names_the_sexagenary_year():
    assert label("2024-02-10", "year", "chinese") == "2024 CE (甲辰 Dragon)"
    assert label("2000-01-01", "year", "chinese") == "1999 CE (己卯 Rabbit)"


# ============================================================
# Count calendars
# ============================================================

@pytest.mark.parametrize(
    "cal, rng, expected",
    [
        ("mayan-longcount", "day", "13.0.0.0.0"),
        ("mayan-longcount", "month", "13.0.0.0.0"),
        ("mayan-longcount", "year", "Tun 13.0.0"),
        ("mayan-longcount", "decade", "Katun 13.0"),
        ("mayan-longcount", "week", "Week of 12.19.19.17.15"),
        ("mayan-tzolkin", "day", "4 Ajaw"),
        ("mayan-tzolkin", "decade", "Tzolk'in round 7200"),
        ("mayan-haab", "day", "3 K'ank'in"),
    ],
)
def test_mayan_labels(cal, rng, expected):
    assert label("2012-12-21", rng, cal) == expected


def test_aztec_labels():
    # 13 August 1521 (Julian) is 23 August 1521 (Gregorian)
    assert label("1521-08-23", "day", "aztec-xiuhpohualli") == "2 Xocotlhuetzi"
    assert label("1521-08-23", "year", "aztec-xiuhpohualli") == "Xiuhpohualli 1"
    assert label("1521-08-23", "decade", "aztec-xiuhpohualli") == "Xiuhmolpilli 1"


def test_count_label_helpers():
    lc = CalendarDate(CalendarId.MAYAN_LONGCOUNT, 12, 19, 6, {"uinal": 15, "kin": 2})
    assert native_string(lc, polycal.get_converter("mayan-longcount")) == "12.19.6.15.2"
    assert cycle_label(lc) == "Katun 12.19"
    assert year_label(lc) == "Tun 12.19.6"
    haab = CalendarDate(CalendarId.MAYAN_HAAB, 5116, 14, 10)
    assert native_string(haab, polycal.get_converter("mayan-haab")) == "10 K'ank'in"
    assert year_label(haab) == "Haab' round 5116"


# ============================================================
# Formatting
# ============================================================

def test_format_tokens():
    heb = polycal.convert("2000-01-01", "hebrew")
    assert polycal.format_date(heb, "D MMMM Y ERA") == "23 Tevet 5760 AM"
    assert polycal.format_date(heb, "EEE DD/MM/YY") == "Sat 23/10/60"
    assert polycal.format_date(heb, "MMM") == "Tev"
    assert polycal.format_date(heb, "E") == "S"
    greg = polycal.convert("2000-01-01", "gregorian")
    assert polycal.format_date(greg) == "2000-01-01"
    assert polycal.format_date(greg, "EEEE") == "Saturday"


def test_format_bce_and_empty_era():
    conv = polycal.get_converter("gregorian")
    d = CalendarDate(CalendarId.GREGORIAN, -500, 3, 1)
    assert format_calendar_date(d, "YYYY ERA", conv) == "501 BCE"
    # an empty era leaves no trailing space
    assert format_calendar_date(CalendarDate(CalendarId.GREGORIAN, 1999, 12, 26), "MMM D, Y ERA", conv) == "Dec 26, 1999"


# ============================================================
# Fallback
# ============================================================

def test_out_of_window_falls_back_to_gregorian(caplog):
    with caplog.at_level(logging.WARNING, logger="polycal.labels.labeler"):
        lab = polycal.time_range_label("1800-01-01", "day", "bahai")
    assert lab.fallback
    assert lab.calendar is CalendarId.BAHAI
    assert lab.text == "Wednesday, January 1, 1800"
    assert any("fell back" in r.getMessage() for r in caplog.records)


def test_unknown_calendar_falls_back():
    lab = polycal.time_range_label("2000-01-01", "day", "klingon")
    assert lab.fallback
    assert lab.calendar is CalendarId.GREGORIAN
    assert lab.text == "Saturday, January 1, 2000"


def test_non_convergent_search_falls_back():
    with patch.object(HebrewConverter, "_from_jdn", side_effect=ConversionNonConvergentError("no luck", steps=64)):
        lab = polycal.time_range_label("2000-01-01", "month", "hebrew")
    assert lab.fallback
    assert lab.text == "January 2000"


def test_gregorian_edge_of_window_still_labels():
    lab = polycal.time_range_label("-9999-01-01", "week", "gregorian")
    assert lab.fallback
    assert lab.text.startswith("Week of Dec ")


def test_non_library_errors_propagate():
    with patch.object(HebrewConverter, "_from_jdn", side_effect=RuntimeError("bug")):
        with pytest.raises(RuntimeError):
            polycal.label_time_range("2000-01-01", "day", "hebrew")


def test_labels_carry_gregorian_bounds():
    lab = polycal.time_range_label("2000-01-15", "month", "hebrew")
    assert not lab.fallback
    assert (lab.start, lab.end) == (GregorianDate(2000, 1, 1), GregorianDate(2000, 1, 31))
    assert str(lab) == lab.text
