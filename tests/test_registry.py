# tests/test_registry.py

import pytest

import polycal
from polycal import CalendarId, EngineConfig
from polycal.bootstrap import build_registry
from polycal.core.errors import UnknownCalendarError
from polycal.core.types import TimeRange
from polycal.engines.factory import make_converter
from polycal.engines.specs import DESCRIPTORS, ENGINE_MAX_JDN, ENGINE_MIN_JDN, MONTH_NAMES


def test_every_calendar_is_registered():
    reg = build_registry()
    assert reg.ids() == list(CalendarId)
    assert [d.id for d in reg.list()] == list(CalendarId)
    assert len(polycal.list_calendars()) == 17


def test_lookup_accepts_ids_and_strings():
    reg = build_registry()
    assert reg.get("hebrew") is reg.get(CalendarId.HEBREW)
    assert reg.get("  Hebrew ") is reg.get(CalendarId.HEBREW)
    assert "persian" in reg
    assert "klingon" not in reg


def test_unknown_calendar():
    reg = build_registry()
    with pytest.raises(UnknownCalendarError) as exc:
        reg.get("klingon")
    assert isinstance(exc.value, LookupError)
    assert exc.value.calendar == "klingon"
    assert "gregorian" in str(exc.value)


def test_time_range_parse():
    assert TimeRange.parse("Week") is TimeRange.WEEK
    with pytest.raises(polycal.InvalidDateError):
        TimeRange.parse("fortnight")


def test_descriptors_are_consistent():
    for cid, desc in DESCRIPTORS.items():
        assert desc.id is cid
        assert ENGINE_MIN_JDN <= desc.min_jdn < desc.max_jdn <= ENGINE_MAX_JDN
        names, short = MONTH_NAMES[cid]
        assert len(names) == len(short)


def test_month_name_tables():
    assert len(DESCRIPTORS[CalendarId.HEBREW].month_names) == 13
    assert DESCRIPTORS[CalendarId.HEBREW].month_names[-1] == "Adar II"
    assert len(DESCRIPTORS[CalendarId.BAHAI].month_names) == 19
    assert len(DESCRIPTORS[CalendarId.MAYAN_TZOLKIN].month_names) == 20
    assert len(DESCRIPTORS[CalendarId.MAYAN_HAAB].month_names) == 19
    assert len(DESCRIPTORS[CalendarId.AZTEC_XIUHPOHUALLI].month_names) == 19
    assert DESCRIPTORS[CalendarId.MAYAN_LONGCOUNT].month_names == ()


def test_calendar_info():
    info = polycal.calendar_info("islamic")
    assert info["id"] == "islamic"
    assert info["era_name"] == "AH"
    assert info["months"] == 12
    assert info["converter"] == "IslamicConverter"
    lo, hi = info["valid_jdn"]
    assert lo < 2451545 < hi


def test_factory_passes_search_cap():
    conv = make_converter("chinese", EngineConfig(max_search_steps=7))
    assert conv.max_steps == 7
    assert build_registry(EngineConfig(max_search_steps=9)).get("hebrew").max_steps == 9


def test_factory_rejects_unknown():
    with pytest.raises(UnknownCalendarError):
        make_converter("klingon")
