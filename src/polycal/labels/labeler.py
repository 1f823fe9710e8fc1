"""
polycal.labels.labeler
----------------------
Human-readable labels for a span of time (decade, year, month, week, day)
seen through any calendar.

Spans are always Gregorian: the decade 1990..1999, the Gregorian month, the
Gregorian week starting on `week_starts_on`. The label describes the span's
anchor date in the target calendar's own idiom. If the target calendar cannot
convert the date (out of its window, a search that does not converge, ...)
the label degrades to the Gregorian one and is flagged `fallback=True`.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Literal, Tuple, Union

from ..config import check_week_start
from ..core.engine import CalendarConverter, ConverterRegistry
from ..core.errors import CalendarError
from ..core.time import day_of_week, days_in_gregorian_month
from ..core.types import CalendarDate, CalendarId, GregorianDate, TimeRange, TimeRangeBounds, TimeRangeLabel
from .format import COUNT_CALENDARS, cycle_label, display_year, format_calendar_date, join_era, native_string, year_label

logger = logging.getLogger(__name__)

DateLike = Union[GregorianDate, date, str]
Direction = Literal["next", "prev"]

MONTH_PATTERN = "MMMM Y ERA"
WEEK_PATTERN = "MMM D, Y ERA"
DAY_PATTERN = "EEEE, MMMM D, Y ERA"


def as_gregorian(value: DateLike) -> GregorianDate:
    if isinstance(value, GregorianDate):
        return value
    if isinstance(value, date):
        return GregorianDate.from_date(value)
    return GregorianDate.parse(value)


# ============================================================
# Gregorian spans
# ============================================================

def gregorian_span(d: GregorianDate, time_range: TimeRange, week_starts_on: int = 0) -> Tuple[GregorianDate, GregorianDate]:
    """First and last day of the Gregorian span of `time_range` containing `d`."""
    if time_range == TimeRange.DECADE:
        start = (d.year // 10) * 10
        return GregorianDate(start, 1, 1), GregorianDate(start + 9, 12, 31)
    if time_range == TimeRange.YEAR:
        return GregorianDate(d.year, 1, 1), GregorianDate(d.year, 12, 31)
    if time_range == TimeRange.MONTH:
        return GregorianDate(d.year, d.month, 1), GregorianDate(d.year, d.month, days_in_gregorian_month(d.year, d.month))
    if time_range == TimeRange.WEEK:
        jdn = d.jdn
        first = jdn - (day_of_week(jdn) - week_starts_on) % 7
        return GregorianDate.from_jdn(first), GregorianDate.from_jdn(first + 6)
    return d, d


def navigate(d: GregorianDate, time_range: TimeRange, direction: Direction = "next") -> GregorianDate:
    """Step one span forward or back; month and year steps clamp the day to the month end."""
    step = 1 if direction == "next" else -1
    if time_range in (TimeRange.DAY, TimeRange.WEEK):
        days = 7 if time_range == TimeRange.WEEK else 1
        return GregorianDate.from_jdn(d.jdn + step * days)
    if time_range == TimeRange.MONTH:
        index = d.year * 12 + (d.month - 1) + step
        year, month = index // 12, index % 12 + 1
    else:
        year = d.year + step * (10 if time_range == TimeRange.DECADE else 1)
        month = d.month
    return GregorianDate(year, month, min(d.day, days_in_gregorian_month(year, month)))


# ============================================================
# Labeler
# ============================================================

class TimeRangeLabeler:
    def __init__(self, registry: ConverterRegistry, *, week_starts_on: int = 0) -> None:
        self.registry = registry
        self.week_starts_on = check_week_start(week_starts_on)

    def anchor(self, d: GregorianDate, time_range: TimeRange) -> GregorianDate:
        """The date a span's label is computed from: the week start for weeks, else `d`."""
        if time_range == TimeRange.WEEK:
            return gregorian_span(d, time_range, self.week_starts_on)[0]
        return d

    def canonical_date(self, value: DateLike, time_range: TimeRange | str, calendar: CalendarId | str) -> CalendarDate:
        """The first day of the span, expressed in `calendar`."""
        d = as_gregorian(value)
        start, _ = gregorian_span(d, TimeRange.parse(time_range), self.week_starts_on)
        return self.registry.get(calendar).from_jdn(start.jdn)

    def bounds_for(self, value: DateLike, time_range: TimeRange | str, calendar: CalendarId | str) -> TimeRangeBounds:
        d = as_gregorian(value)
        conv = self.registry.get(calendar)
        start, end = gregorian_span(d, TimeRange.parse(time_range), self.week_starts_on)
        return TimeRangeBounds(conv.from_jdn(start.jdn), conv.from_jdn(end.jdn), start, end)

    def label_for(self, value: DateLike, time_range: TimeRange | str, calendar: CalendarId | str) -> TimeRangeLabel:
        d = as_gregorian(value)
        rng = TimeRange.parse(time_range)
        start, end = gregorian_span(d, rng, self.week_starts_on)
        cid = CalendarId.GREGORIAN
        try:
            cid = CalendarId.parse(calendar)
            conv = self.registry.get(cid)
            text = self._text(conv, self.anchor(d, rng), rng)
        except CalendarError as e:
            logger.warning("%s label for %s in %s fell back to Gregorian: %s", rng.value, d, calendar, e)
            text = self._text(self.registry.get(CalendarId.GREGORIAN), self.anchor(d, rng), rng, checked=False)
            return TimeRangeLabel(text, cid, rng, start, end, fallback=True)
        return TimeRangeLabel(text, cid, rng, start, end)

    def _text(self, conv: CalendarConverter, d: GregorianDate, rng: TimeRange, *, checked: bool = True) -> str:
        jdn = d.jdn
        if checked:
            cd = conv.from_jdn(jdn)
        else:
            # the fallback path must not hit the validity window again
            cd = CalendarDate(CalendarId.GREGORIAN, d.year, d.month, d.day)
        era_name = conv.descriptor.era_name

        if cd.calendar in COUNT_CALENDARS:
            if rng == TimeRange.DECADE:
                return cycle_label(cd)
            if rng == TimeRange.YEAR:
                return year_label(cd)
            text = native_string(cd, conv)
            return f"Week of {text}" if rng == TimeRange.WEEK else text

        if rng == TimeRange.DECADE:
            year, era = display_year(cd.year, era_name)
            return join_era(f"{(year // 10) * 10}s", era)
        if rng == TimeRange.YEAR:
            year, era = display_year(cd.year, era_name)
            text = join_era(str(year), era)
            if cd.calendar == CalendarId.CHINESE:
                text += f" ({cd.get('stem_branch')} {cd.get('animal')})"
            return text
        if rng == TimeRange.MONTH:
            return format_calendar_date(cd, MONTH_PATTERN, conv, jdn=jdn)
        if rng == TimeRange.WEEK:
            return "Week of " + format_calendar_date(cd, WEEK_PATTERN, conv, jdn=jdn)
        return format_calendar_date(cd, DAY_PATTERN, conv, jdn=jdn)
