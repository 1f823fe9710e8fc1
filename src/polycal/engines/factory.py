"""
polycal.engines.factory
-----------------------
Turns static descriptors into live converter objects.
"""

from __future__ import annotations

from typing import assert_never

from ..config import DEFAULT_CONFIG, EngineConfig
from ..core.engine import CalendarConverter
from ..core.types import CalendarId
from .aztec import AztecConverter
from .bahai import BahaiConverter
from .cherokee import CherokeeConverter
from .chinese import ChineseConverter
from .coptic import CopticConverter
from .ethiopian import EthiopianConverter
from .gregorian import GregorianConverter
from .hebrew import HebrewConverter
from .iroquois import IroquoisConverter
from .islamic import IslamicConverter
from .julian import JulianConverter
from .mayan import HaabConverter, LongCountConverter, TzolkinConverter
from .persian import PersianConverter
from .saka import SakaConverter
from .specs import DESCRIPTORS
from .thai import ThaiBuddhistConverter


def _converter_class(cid: CalendarId) -> type:
    match cid:
        case CalendarId.GREGORIAN:
            return GregorianConverter
        case CalendarId.JULIAN:
            return JulianConverter
        case CalendarId.ISLAMIC:
            return IslamicConverter
        case CalendarId.HEBREW:
            return HebrewConverter
        case CalendarId.PERSIAN:
            return PersianConverter
        case CalendarId.CHINESE:
            return ChineseConverter
        case CalendarId.ETHIOPIAN:
            return EthiopianConverter
        case CalendarId.COPTIC:
            return CopticConverter
        case CalendarId.INDIAN_SAKA:
            return SakaConverter
        case CalendarId.BAHAI:
            return BahaiConverter
        case CalendarId.THAI_BUDDHIST:
            return ThaiBuddhistConverter
        case CalendarId.MAYAN_TZOLKIN:
            return TzolkinConverter
        case CalendarId.MAYAN_HAAB:
            return HaabConverter
        case CalendarId.MAYAN_LONGCOUNT:
            return LongCountConverter
        case CalendarId.CHEROKEE:
            return CherokeeConverter
        case CalendarId.IROQUOIS:
            return IroquoisConverter
        case CalendarId.AZTEC_XIUHPOHUALLI:
            return AztecConverter
        case _:
            assert_never(cid)


def make_converter(calendar_id: CalendarId | str, config: EngineConfig = DEFAULT_CONFIG) -> CalendarConverter:
    """The universal entry point: one fresh converter for `calendar_id`."""
    cid = CalendarId.parse(calendar_id)
    cls = _converter_class(cid)
    return cls(DESCRIPTORS[cid], max_steps=config.max_search_steps)
