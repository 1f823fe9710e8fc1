from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, Tuple
import re

from .errors import InvalidDateError, UnknownCalendarError
from .time import days_in_gregorian_month, gregorian_to_jdn, jdn_to_gregorian


class CalendarId(str, Enum):
    GREGORIAN = "gregorian"
    JULIAN = "julian"
    ISLAMIC = "islamic"
    HEBREW = "hebrew"
    PERSIAN = "persian"
    CHINESE = "chinese"
    ETHIOPIAN = "ethiopian"
    COPTIC = "coptic"
    INDIAN_SAKA = "indian-saka"
    BAHAI = "bahai"
    THAI_BUDDHIST = "thai-buddhist"
    MAYAN_TZOLKIN = "mayan-tzolkin"
    MAYAN_HAAB = "mayan-haab"
    MAYAN_LONGCOUNT = "mayan-longcount"
    CHEROKEE = "cherokee"
    IROQUOIS = "iroquois"
    AZTEC_XIUHPOHUALLI = "aztec-xiuhpohualli"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "CalendarId | str") -> "CalendarId":
        """Accept a member or its string value; anything else is unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownCalendarError(value, tuple(c.value for c in cls)) from None


class TimeRange(str, Enum):
    DECADE = "decade"
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "TimeRange | str") -> "TimeRange":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidDateError(f"unknown time range {value!r}; expected one of {[r.value for r in cls]}") from None


_ISO_RE = re.compile(r"^\s*(-?\d{1,6})-(\d{1,2})-(\d{1,2})\s*$")


@dataclass(frozen=True, order=True)
class GregorianDate:
    """Proleptic Gregorian date with astronomical year numbering (0 = 1 BCE)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"month out of range: {self.month}", calendar="gregorian")
        if not 1 <= self.day <= days_in_gregorian_month(self.year, self.month):
            raise InvalidDateError(
                f"day out of range for {self.year}-{self.month:02d}: {self.day}", calendar="gregorian"
            )

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "GregorianDate":
        return cls(*jdn_to_gregorian(jdn))

    @classmethod
    def parse(cls, s: str) -> "GregorianDate":
        """Parse YYYY-MM-DD; a leading minus marks astronomical negative years."""
        m = _ISO_RE.match(s)
        if not m:
            raise InvalidDateError(f"expected YYYY-MM-DD, got {s!r}", calendar="gregorian")
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    @property
    def jdn(self) -> int:
        return gregorian_to_jdn(self.year, self.month, self.day)

    def to_date(self) -> date:
        """stdlib date; only years 1..9999 are representable."""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class CalendarDate:
    calendar: CalendarId
    year: int
    month: Optional[int] = None
    day: Optional[int] = None
    extra: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        # read-only copy
        if self.extra is not None:
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __hash__(self) -> int:
        extra = tuple(sorted(self.extra.items())) if self.extra is not None else None
        return hash((self.calendar, self.year, self.month, self.day, extra))

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a calendar-specific field from `extra`."""
        if self.extra is None:
            return default
        return self.extra.get(key, default)


CalendarKind = Literal["solar", "lunar", "lunisolar", "count"]


@dataclass(frozen=True)
class CalendarDescriptor:
    """Static metadata for one calendar; built once, never mutated."""
    id: CalendarId
    name: str
    native_name: str
    kind: CalendarKind
    epoch_jdn: int
    era_name: str
    month_names: Tuple[str, ...]
    month_names_short: Tuple[str, ...]
    days_in_year: str
    min_jdn: int
    max_jdn: int
    description: str = ""

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "native_name": self.native_name,
            "kind": self.kind,
            "epoch_jdn": self.epoch_jdn,
            "era_name": self.era_name,
            "months": len(self.month_names),
            "days_in_year": self.days_in_year,
            "valid_jdn": (self.min_jdn, self.max_jdn),
            "description": self.description,
        }


@dataclass(frozen=True)
class TimeRangeLabel:
    text: str
    calendar: CalendarId
    range: TimeRange
    start: GregorianDate
    end: GregorianDate
    fallback: bool = False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TimeRangeBounds:
    """Gregorian bounds of a time range and their equivalents in a target calendar."""
    start: CalendarDate
    end: CalendarDate
    start_date: GregorianDate
    end_date: GregorianDate
