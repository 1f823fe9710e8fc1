"""
polycal.labels.format
---------------------
Token-based date formatting for any calendar.

Tokens (longest match wins):

    YYYY  year, zero-padded to 4 digits (unpadded for BCE years)
    YY    last two digits of the year
    Y     year
    MMMM  month name          MMM  short month name
    MM    month, 2 digits     M    month number
    DD    day, 2 digits       D    day number
    EEEE  weekday name        EEE  short weekday    E  weekday initial
    ERA   era name ("BCE" for years <= 0)

Everything else is copied through. The weekday is the Gregorian 7-day week,
which every calendar here shares.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..core.engine import CalendarConverter
from ..core.time import day_of_week
from ..core.types import CalendarDate, CalendarId
from ..engines.aztec import xiuhmolpilli
from ..engines.mayan import long_count_string

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DAY_NAMES_SHORT = tuple(name[:3] for name in DAY_NAMES)

BCE = "BCE"

_TOKEN_RE = re.compile(r"YYYY|EEEE|MMMM|MMM|EEE|ERA|YY|DD|MM|Y|M|D|E")

COUNT_CALENDARS = frozenset(
    {
        CalendarId.MAYAN_LONGCOUNT,
        CalendarId.MAYAN_TZOLKIN,
        CalendarId.MAYAN_HAAB,
        CalendarId.AZTEC_XIUHPOHUALLI,
    }
)


def display_year(year: int, era_name: str) -> Tuple[int, str]:
    """Historical year and era: astronomical year 0 is 1 BCE, -1 is 2 BCE."""
    if year <= 0:
        return abs(year) + 1, BCE
    return year, era_name


def join_era(text: str, era: str) -> str:
    return f"{text} {era}" if era else text


def format_calendar_date(
    d: CalendarDate,
    pattern: str,
    converter: CalendarConverter,
    *,
    jdn: Optional[int] = None,
) -> str:
    """Render `d` with `pattern`; `jdn` skips the conversion needed for weekdays."""
    year, era = display_year(d.year, converter.descriptor.era_name)
    weekday: Optional[int] = None

    def _weekday() -> int:
        nonlocal weekday
        if weekday is None:
            weekday = day_of_week(converter.to_jdn(d) if jdn is None else jdn)
        return weekday

    def _sub(m: re.Match) -> str:
        tok = m.group(0)
        if tok == "YYYY":
            return str(year) if era == BCE else f"{year:04d}"
        if tok == "YY":
            return f"{year % 100:02d}"
        if tok == "Y":
            return str(year)
        if tok == "MMMM":
            return converter.month_name(d)
        if tok == "MMM":
            return converter.month_name(d, short=True)
        if tok == "MM":
            return f"{d.month or 0:02d}"
        if tok == "M":
            return str(d.month or 0)
        if tok == "DD":
            return f"{d.day or 0:02d}"
        if tok == "D":
            return str(d.day or 0)
        if tok == "EEEE":
            return DAY_NAMES[_weekday()]
        if tok == "EEE":
            return DAY_NAMES_SHORT[_weekday()]
        if tok == "E":
            return DAY_NAMES_SHORT[_weekday()][0]
        return era  # ERA

    # "Week of Jan 5, 2024 " with an empty era collapses to the trimmed text.
    return " ".join(_TOKEN_RE.sub(_sub, pattern).split())


def native_string(d: CalendarDate, converter: CalendarConverter) -> str:
    """Positional notation of a count-based date: 13.0.0.0.0, 4 Ajaw, 3 K'ank'in."""
    if d.calendar == CalendarId.MAYAN_LONGCOUNT:
        return long_count_string(d)
    return f"{d.day} {converter.month_name(d)}"


def cycle_label(d: CalendarDate) -> str:
    """Label of the long cycle containing a count-based date."""
    if d.calendar == CalendarId.MAYAN_LONGCOUNT:
        return f"Katun {d.year}.{d.month}"
    if d.calendar == CalendarId.MAYAN_TZOLKIN:
        return f"Tzolk'in round {d.year}"
    if d.calendar == CalendarId.MAYAN_HAAB:
        return f"Haab' round {d.year}"
    return f"Xiuhmolpilli {xiuhmolpilli(d.year)}"


def year_label(d: CalendarDate) -> str:
    """Label of the year-sized unit containing a count-based date."""
    if d.calendar == CalendarId.MAYAN_LONGCOUNT:
        return f"Tun {d.year}.{d.month}.{d.day}"
    if d.calendar == CalendarId.AZTEC_XIUHPOHUALLI:
        return f"Xiuhpohualli {d.year}"
    return cycle_label(d)
