from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Protocol, Tuple

from .errors import UnknownCalendarError
from .types import CalendarDate, CalendarDescriptor, CalendarId


class CalendarConverter(Protocol):
    descriptor: CalendarDescriptor

    def to_jdn(self, d: CalendarDate) -> int: ...
    def from_jdn(self, jdn: int) -> CalendarDate: ...
    def is_leap_year(self, year: int) -> bool: ...
    def months_in_year(self, year: int) -> int: ...
    def days_in_month(self, year: int, month: int, **extra: Any) -> int: ...
    def month_range(self, year: int) -> Tuple[int, int]: ...
    def day_range(self, year: int, month: int, **extra: Any) -> Tuple[int, int]: ...
    def month_name(self, d: CalendarDate, *, short: bool = False) -> str: ...
    def info(self) -> Dict[str, Any]: ...


@dataclass(frozen=True)
class ConverterRegistry:
    """Read-only map CalendarId -> converter, built once by bootstrap."""
    _converters: Mapping[CalendarId, CalendarConverter]

    def get(self, calendar: CalendarId | str) -> CalendarConverter:
        cid = CalendarId.parse(calendar)
        if cid not in self._converters:
            raise UnknownCalendarError(calendar, tuple(c.value for c in self._converters))
        return self._converters[cid]

    def list(self) -> List[CalendarDescriptor]:
        return [self._converters[c].descriptor for c in CalendarId if c in self._converters]

    def ids(self) -> List[CalendarId]:
        return [c for c in CalendarId if c in self._converters]

    def __contains__(self, calendar: object) -> bool:
        try:
            return CalendarId.parse(calendar) in self._converters  # type: ignore[arg-type]
        except UnknownCalendarError:
            return False
