from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .core.engine import CalendarConverter, ConverterRegistry
from .core.errors import CalendarError, InvalidDateError
from .core.types import (
    CalendarDate,
    CalendarDescriptor,
    CalendarId,
    GregorianDate,
    TimeRange,
    TimeRangeBounds,
    TimeRangeLabel,
)
from .labels.format import format_calendar_date
from .labels.labeler import DateLike, Direction, TimeRangeLabeler, as_gregorian
from .labels.labeler import navigate as _navigate
from .reference import events

_registry: Optional[ConverterRegistry] = None


def set_registry(reg: ConverterRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> ConverterRegistry:
    if _registry is None:
        raise RuntimeError("Converter registry not initialized")
    return _registry


def _labeler(week_starts_on: int) -> TimeRangeLabeler:
    return TimeRangeLabeler(_reg(), week_starts_on=week_starts_on)


# ============================================================
# The two host-facing operations
# ============================================================

def convert(date: DateLike, to_calendar: CalendarId | str) -> Union[CalendarDate, CalendarError]:
    """
    Gregorian date -> date in `to_calendar`.

    Never raises for calendar errors: unknown calendars, dates outside the
    window, non-convergent searches and unparseable input come back as the
    error instance, so callers can branch on the type.
    """
    try:
        g = as_gregorian(date)
        return _reg().get(to_calendar).from_jdn(g.jdn)
    except CalendarError as e:
        return e


def label_time_range(
    date: DateLike,
    time_range: TimeRange | str,
    calendar: CalendarId | str,
    *,
    week_starts_on: int = 0,
) -> str:
    """
    Display label of the span containing `date`; degrades to Gregorian instead of failing.

    Only bad arguments raise: an unparseable date or range name
    (`InvalidDateError`) or a `week_starts_on` outside 0..6 (`ConfigError`).
    """
    return _labeler(week_starts_on).label_for(date, time_range, calendar).text


# ============================================================
# Registry
# ============================================================

def list_calendars() -> List[CalendarDescriptor]:
    return _reg().list()


def calendar_info(calendar: CalendarId | str) -> Dict[str, Any]:
    return _reg().get(calendar).info()


def get_converter(calendar: CalendarId | str) -> CalendarConverter:
    return _reg().get(calendar)


# ============================================================
# Conversions
# ============================================================

def to_jdn(d: CalendarDate) -> int:
    return _reg().get(d.calendar).to_jdn(d)


def from_jdn(jdn: int, calendar: CalendarId | str) -> CalendarDate:
    return _reg().get(calendar).from_jdn(jdn)


def to_gregorian(d: CalendarDate) -> GregorianDate:
    return GregorianDate.from_jdn(to_jdn(d))


def convert_date(d: CalendarDate, to_calendar: CalendarId | str) -> CalendarDate:
    """Calendar-to-calendar conversion through the JDN; raises on failure."""
    return from_jdn(to_jdn(d), to_calendar)


def format_date(d: CalendarDate, pattern: str = "YYYY-MM-DD") -> str:
    return format_calendar_date(d, pattern, _reg().get(d.calendar))


# ============================================================
# Time ranges
# ============================================================

def time_range_label(
    date: DateLike,
    time_range: TimeRange | str,
    calendar: CalendarId | str,
    *,
    week_starts_on: int = 0,
) -> TimeRangeLabel:
    return _labeler(week_starts_on).label_for(date, time_range, calendar)


def time_range_bounds(
    date: DateLike,
    time_range: TimeRange | str,
    calendar: CalendarId | str,
    *,
    week_starts_on: int = 0,
) -> TimeRangeBounds:
    return _labeler(week_starts_on).bounds_for(date, time_range, calendar)


def canonical_date(
    date: DateLike,
    time_range: TimeRange | str,
    calendar: CalendarId | str,
    *,
    week_starts_on: int = 0,
) -> CalendarDate:
    return _labeler(week_starts_on).canonical_date(date, time_range, calendar)


def navigate(date: DateLike, time_range: TimeRange | str, direction: Direction = "next") -> GregorianDate:
    if direction not in ("next", "prev"):
        raise InvalidDateError(f"direction must be 'next' or 'prev', got {direction!r}")
    return _navigate(as_gregorian(date), TimeRange.parse(time_range), direction)


# ============================================================
# Astronomy
# ============================================================

def seasons(year: int, offset_hours: float = 0.0) -> events.Seasons:
    """Local days of the equinoxes and solstices of a Gregorian year."""
    return events.seasons(year, offset_hours)
