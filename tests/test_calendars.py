# tests/test_calendars.py

import pytest

import polycal
from polycal import CalendarDate, CalendarId
from polycal.core.errors import DateOutOfRangeError, InvalidDateError
from polycal.core.time import gregorian_to_jdn, julian_to_jdn
from polycal.engines import chinese, hebrew, persian
from polycal.engines.aztec import AZTEC_EPOCH, CORRELATION_JDN, xiuhmolpilli

J2000 = 2451545  # 2000-01-01, a Saturday


def ymd(d):
    return (d.year, d.month, d.day)


def to_jdn(cal, y, m, d, **extra):
    return polycal.to_jdn(CalendarDate(CalendarId.parse(cal), y, m, d, extra or None))


# ============================================================
# 2000-01-01 in every calendar
# ============================================================

@pytest.mark.parametrize(
    "cal, expected",
    [
        ("gregorian", (2000, 1, 1)),
        ("julian", (1999, 12, 19)),
        ("islamic", (1420, 9, 24)),
        ("hebrew", (5760, 10, 23)),
        ("persian", (1378, 10, 11)),
        ("chinese", (1999, 11, 25)),
        ("ethiopian", (1992, 4, 22)),
        ("coptic", (1716, 4, 22)),
        ("indian-saka", (1921, 10, 11)),
        ("bahai", (156, 16, 2)),
        ("thai-buddhist", (2543, 1, 1)),
        ("cherokee", (2000, 1, 1)),
        ("iroquois", (2000, 1, 1)),
    ],
)
def test_j2000_reference_dates(cal, expected):
    d = polycal.from_jdn(J2000, cal)
    assert ymd(d) == expected
    assert polycal.to_jdn(d) == J2000


def test_mayan_counts_at_j2000():
    lc = polycal.from_jdn(J2000, "mayan-longcount")
    assert (lc.year, lc.month, lc.day, lc.get("uinal"), lc.get("kin")) == (12, 19, 6, 15, 2)

    tz = polycal.from_jdn(J2000, "mayan-tzolkin")
    assert (tz.month, tz.day, tz.get("name")) == (2, 11, "Ik'")

    haab = polycal.from_jdn(J2000, "mayan-haab")
    assert (haab.month, haab.day) == (14, 10)


def test_mayan_end_of_baktun_13():
    j = gregorian_to_jdn(2012, 12, 21)
    lc = polycal.from_jdn(j, "mayan-longcount")
    assert (lc.year, lc.month, lc.day, lc.get("uinal"), lc.get("kin")) == (13, 0, 0, 0, 0)
    tz = polycal.from_jdn(j, "mayan-tzolkin")
    assert (tz.month, tz.day) == (20, 4)  # 4 Ajaw
    haab = polycal.from_jdn(j, "mayan-haab")
    assert (haab.month, haab.day) == (14, 3)  # 3 K'ank'in


def test_tzolkin_to_jdn_solves_both_cycles():
    tz = polycal.from_jdn(J2000, "mayan-tzolkin")
    assert polycal.to_jdn(tz) == J2000
    assert polycal.to_jdn(CalendarDate(CalendarId.MAYAN_TZOLKIN, tz.year, 2, 12)) == J2000 + 40


def test_aztec_caso_correlation():
    assert CORRELATION_JDN == julian_to_jdn(1521, 8, 13) == 2276828
    assert AZTEC_EPOCH == 2276647
    d = polycal.from_jdn(CORRELATION_JDN, "aztec-xiuhpohualli")
    assert ymd(d) == (1, 10, 2)
    assert xiuhmolpilli(1) == 1
    assert xiuhmolpilli(52) == 1
    assert xiuhmolpilli(53) == 2
    # the five Nemontemi days close the year
    last = polycal.from_jdn(AZTEC_EPOCH + 364, "aztec-xiuhpohualli")
    assert ymd(last) == (1, 19, 5)


# ============================================================
# Hebrew
# ============================================================

def test_hebrew_new_year_and_holidays():
    assert hebrew.new_year(5760) == 2451433  # 1999-09-11
    assert hebrew.days_in_year(5760) == 385
    assert to_jdn("hebrew", 5785, 7, 1) == gregorian_to_jdn(2024, 10, 3)  # Rosh Hashanah
    assert to_jdn("hebrew", 5784, 1, 15) == gregorian_to_jdn(2024, 4, 23)  # Passover


def test_hebrew_leap_years_and_month_lengths():
    assert hebrew.is_leap_year(5784)
    assert not hebrew.is_leap_year(5785)
    conv = polycal.get_converter("hebrew")
    assert conv.months_in_year(5784) == 13
    assert conv.months_in_year(5785) == 12
    # 385-day year: Cheshvan and Kislev both full
    assert conv.days_in_month(5760, 8) == 30
    assert conv.days_in_month(5760, 9) == 30
    assert conv.month_name(CalendarDate(CalendarId.HEBREW, 5784, 12, 1)) == "Adar I"
    assert conv.month_name(CalendarDate(CalendarId.HEBREW, 5785, 12, 1)) == "Adar"


def test_hebrew_year_lengths_are_legal():
    for y in range(5700, 5800):
        assert hebrew.days_in_year(y) in (353, 354, 355, 383, 384, 385)


def test_hebrew_molad_precedes_rosh_hashanah():
    for y in (5760, 5784, 5785):
        m = hebrew.molad(y, 7)
        assert 0 <= hebrew.new_year(y) - int(m) <= 2


def test_hebrew_adar_ii_only_in_leap_years():
    with pytest.raises(InvalidDateError):
        to_jdn("hebrew", 5785, 13, 1)
    assert to_jdn("hebrew", 5784, 13, 1) > to_jdn("hebrew", 5784, 12, 1)


# ============================================================
# Persian
# ============================================================

def test_persian_nowruz():
    assert persian.nowruz(1379) == gregorian_to_jdn(2000, 3, 20)
    assert persian.nowruz(1403) == gregorian_to_jdn(2024, 3, 20)
    assert to_jdn("persian", 1403, 1, 1) == gregorian_to_jdn(2024, 3, 20)


def test_persian_month_lengths():
    conv = polycal.get_converter("persian")
    assert [conv.days_in_month(1402, m) for m in (1, 6, 7, 11)] == [31, 31, 30, 30]
    year_length = persian.nowruz(1403) - persian.nowruz(1402)
    assert conv.days_in_month(1402, 12) == year_length - 336
    assert conv.is_leap_year(1402) == (year_length == 366)


def test_persian_window():
    with pytest.raises(DateOutOfRangeError):
        to_jdn("persian", 3000, 1, 1)
    with pytest.raises(DateOutOfRangeError):
        polycal.from_jdn(gregorian_to_jdn(3100, 1, 1), "persian")


# ============================================================
# Chinese
# ============================================================

def test_chinese_new_years():
    assert chinese.new_year(2000) == gregorian_to_jdn(2000, 2, 5)
    assert chinese.new_year(2023) == gregorian_to_jdn(2023, 1, 22)
    assert chinese.new_year(2024) == gregorian_to_jdn(2024, 2, 10)


def test_chinese_sexagenary_year():
    d = polycal.from_jdn(gregorian_to_jdn(2024, 2, 10), "chinese")
    assert ymd(d) == (2024, 1, 1)
    assert d.get("stem_branch") == "甲辰"
    assert d.get("animal") == "Dragon"
    assert d.get("cycle") == 78
    assert chinese.stem_branch(2000) == "庚辰"


def test_chinese_leap_months():
    assert to_jdn("chinese", 2023, 2, 1, leap_month=True) == gregorian_to_jdn(2023, 3, 22)
    assert to_jdn("chinese", 2020, 4, 1, leap_month=True) == gregorian_to_jdn(2020, 5, 23)
    d = polycal.from_jdn(gregorian_to_jdn(2023, 3, 22), "chinese")
    assert (d.month, d.day, d.get("leap_month")) == (2, 1, True)
    conv = polycal.get_converter("chinese")
    assert conv.month_name(d) == "闰二月"
    assert conv.is_leap_year(2023)
    assert not conv.is_leap_year(2024)
    assert conv.months_in_year(2023) == 13


def test_chinese_missing_leap_month_is_invalid():
    with pytest.raises(InvalidDateError):
        to_jdn("chinese", 2024, 3, 1, leap_month=True)


def test_chinese_month_lengths():
    conv = polycal.get_converter("chinese")
    for m in range(1, 13):
        assert conv.days_in_month(2024, m) in (29, 30)


def test_chinese_window():
    with pytest.raises(DateOutOfRangeError):
        to_jdn("chinese", 5000, 1, 1)


def test_extra_fields_are_read_only_and_hashable():
    d = polycal.from_jdn(gregorian_to_jdn(2024, 2, 10), "chinese")
    with pytest.raises(TypeError):
        d.extra["leap_month"] = True
    assert d.get("animal") == "Dragon"

    source = {"leap_month": False}
    same = CalendarDate(CalendarId.CHINESE, 2024, 1, 1, source)
    source["leap_month"] = True
    assert same.get("leap_month") is False
    assert same == CalendarDate(CalendarId.CHINESE, 2024, 1, 1, {"leap_month": False})
    assert hash(same) == hash(CalendarDate(CalendarId.CHINESE, 2024, 1, 1, {"leap_month": False}))
    assert len({d, same, polycal.from_jdn(gregorian_to_jdn(2024, 2, 10), "chinese")}) == 2


# ============================================================
# Arithmetic calendars
# ============================================================

def test_islamic_epoch_and_leap_years():
    conv = polycal.get_converter("islamic")
    assert to_jdn("islamic", 1, 1, 1) == julian_to_jdn(622, 7, 16)
    assert conv.is_leap_year(2)
    assert not conv.is_leap_year(1)
    assert sum(conv.is_leap_year(y) for y in range(1, 31)) == 11
    assert conv.days_in_month(2, 12) == 30


def test_coptic_and_ethiopian_epagomenal_month():
    coptic = polycal.get_converter("coptic")
    assert coptic.days_in_month(1715, 13) == 6  # year % 4 == 3
    assert coptic.days_in_month(1716, 13) == 5
    eth = polycal.from_jdn(gregorian_to_jdn(2023, 9, 12), "ethiopian")
    assert ymd(eth) == (2016, 1, 1)  # Enkutatash after a leap Pagume


def test_saka_chaitra_in_leap_years():
    conv = polycal.get_converter("indian-saka")
    assert conv.is_leap_year(1922)  # starts in 2000
    assert conv.days_in_month(1922, 1) == 31
    assert to_jdn("indian-saka", 1922, 1, 1) == gregorian_to_jdn(2000, 3, 21)
    assert to_jdn("indian-saka", 1921, 1, 1) == gregorian_to_jdn(1999, 3, 22)


def test_bahai_ayyam_i_ha():
    conv = polycal.get_converter("bahai")
    assert conv.days_in_month(156, 0) == 5  # Naw-Rúz 1999 .. Naw-Rúz 2000 spans 29 February
    assert conv.days_in_month(157, 0) == 4
    assert conv.month_name(CalendarDate(CalendarId.BAHAI, 156, 0, 1)) == "Ayyám-i-Há"
    first = to_jdn("bahai", 156, 0, 1)
    assert polycal.from_jdn(first - 1, "bahai").month == 18
    assert polycal.from_jdn(first + 5, "bahai").month == 19


def test_iroquois_thirteenth_moon():
    conv = polycal.get_converter("iroquois")
    assert conv.days_in_month(2000, 13) == 30
    assert conv.days_in_month(2001, 13) == 29
    d = polycal.from_jdn(gregorian_to_jdn(2000, 12, 31), "iroquois")
    assert ymd(d) == (2000, 13, 30)


def test_cherokee_and_thai_reuse_gregorian_structure():
    cherokee = polycal.get_converter("cherokee")
    assert cherokee.month_name(polycal.from_jdn(J2000, "cherokee")) == "Cold Moon"
    thai = polycal.get_converter("thai-buddhist")
    assert thai.is_leap_year(2543)
    assert thai.days_in_month(2543, 2) == 29


# ============================================================
# Validation and windows
# ============================================================

@pytest.mark.parametrize(
    "cal, y, m, d",
    [
        ("gregorian", 2023, 2, 29),
        ("gregorian", 2023, 13, 1),
        ("julian", 2023, 4, 31),
        ("islamic", 1420, 2, 30),
        ("coptic", 1716, 13, 6),
        ("bahai", 157, 0, 5),
        ("mayan-haab", 1, 19, 5),
        ("mayan-tzolkin", 1, 21, 1),
        ("mayan-longcount", 13, 20, 0),
        ("aztec-xiuhpohualli", 1, 19, 6),
    ],
)
def test_invalid_fields(cal, y, m, d):
    with pytest.raises(InvalidDateError):
        to_jdn(cal, y, m, d)


def test_missing_fields_are_invalid():
    with pytest.raises(InvalidDateError):
        polycal.to_jdn(CalendarDate(CalendarId.GREGORIAN, 2000))


def test_converter_rejects_foreign_dates():
    conv = polycal.get_converter("julian")
    with pytest.raises(InvalidDateError):
        conv.to_jdn(CalendarDate(CalendarId.GREGORIAN, 2000, 1, 1))


@pytest.mark.parametrize("cal", ["hebrew", "ethiopian", "coptic", "indian-saka", "bahai", "mayan-longcount"])
def test_era_calendars_start_at_their_epoch(cal):
    desc = polycal.get_converter(cal).descriptor
    assert desc.min_jdn == desc.epoch_jdn
    with pytest.raises(DateOutOfRangeError) as exc:
        polycal.from_jdn(desc.epoch_jdn - 1, cal)
    assert exc.value.jdn == desc.epoch_jdn - 1
    assert exc.value.calendar == cal


def test_engine_window():
    with pytest.raises(DateOutOfRangeError):
        polycal.from_jdn(gregorian_to_jdn(10000, 1, 1), "gregorian")
    assert ymd(polycal.from_jdn(gregorian_to_jdn(-9999, 1, 1), "gregorian")) == (-9999, 1, 1)


def test_year_minus_500_round_trips():
    j = gregorian_to_jdn(-500, 3, 1)
    for cal in ("gregorian", "julian", "islamic", "hebrew", "mayan-tzolkin", "mayan-haab", "aztec-xiuhpohualli"):
        assert polycal.to_jdn(polycal.from_jdn(j, cal)) == j
