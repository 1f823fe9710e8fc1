"""
polycal.engines.base
--------------------
Shared plumbing for converters: field validation, validity-window checks and
name lookup. Subclasses implement `_to_jdn` / `_from_jdn` and the calendar's
own month structure.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from ..core.errors import DateOutOfRangeError, InvalidDateError
from ..core.time import jdn_to_gregorian
from ..core.types import CalendarDate, CalendarDescriptor

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 64


class BaseConverter:
    """Template for a `CalendarConverter`.

    `to_jdn` validates fields, converts, then checks the validity window;
    `from_jdn` checks the window first so searches never start outside it.
    """

    def __init__(self, descriptor: CalendarDescriptor, *, max_steps: int = DEFAULT_MAX_STEPS) -> None:
        self.descriptor = descriptor
        self.max_steps = max_steps

    @property
    def id(self) -> str:
        return self.descriptor.id.value

    def info(self) -> Dict[str, Any]:
        out = self.descriptor.info()
        out["converter"] = type(self).__name__
        return out

    # ---------------------------------------------------------------
    # Contract
    # ---------------------------------------------------------------

    def to_jdn(self, d: CalendarDate) -> int:
        if d.calendar != self.descriptor.id:
            raise InvalidDateError(
                f"{self.id} converter cannot read a {d.calendar.value} date", calendar=self.id
            )
        self._validate(d)
        jdn = self._to_jdn(d)
        self._check_range(jdn)
        return jdn

    def from_jdn(self, jdn: int) -> CalendarDate:
        self._check_range(jdn)
        return self._from_jdn(jdn)

    def _to_jdn(self, d: CalendarDate) -> int:
        raise NotImplementedError

    def _from_jdn(self, jdn: int) -> CalendarDate:
        raise NotImplementedError

    # ---------------------------------------------------------------
    # Structure (defaults suit fixed 12-month calendars)
    # ---------------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return False

    def months_in_year(self, year: int) -> int:
        return len(self.descriptor.month_names)

    def days_in_month(self, year: int, month: int, **extra: Any) -> int:
        raise NotImplementedError

    def month_range(self, year: int) -> Tuple[int, int]:
        """Smallest and largest valid month number of a year."""
        return 1, self.months_in_year(year)

    def day_range(self, year: int, month: int, **extra: Any) -> Tuple[int, int]:
        return 1, self.days_in_month(year, month, **extra)

    def month_name(self, d: CalendarDate, *, short: bool = False) -> str:
        names = self.descriptor.month_names_short if short else self.descriptor.month_names
        if d.month is not None and 1 <= d.month <= len(names):
            return names[d.month - 1]
        return "" if d.month is None else str(d.month)

    # ---------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------

    def _make(self, year: int, month: Optional[int], day: Optional[int], extra: Optional[Dict[str, Any]] = None) -> CalendarDate:
        return CalendarDate(self.descriptor.id, year, month, day, extra)

    def _fields(self, d: CalendarDate) -> Tuple[int, int, int]:
        if d.month is None or d.day is None:
            raise InvalidDateError(f"{self.id} dates need month and day", calendar=self.id)
        return d.year, d.month, d.day

    def _validate(self, d: CalendarDate) -> None:
        year, month, day = self._fields(d)
        lo, hi = self.month_range(year)
        if not lo <= month <= hi:
            raise InvalidDateError(f"{self.id}: month {month} not in {lo}..{hi} for year {year}", calendar=self.id)
        lo, hi = self.day_range(year, month, **(d.extra or {}))
        if not lo <= day <= hi:
            raise InvalidDateError(
                f"{self.id}: day {day} not in {lo}..{hi} for {year}-{month}", calendar=self.id
            )

    def _check_range(self, jdn: int) -> None:
        desc = self.descriptor
        if not desc.min_jdn <= jdn <= desc.max_jdn:
            raise DateOutOfRangeError(
                f"JDN {jdn} outside the {desc.name} validity window [{desc.min_jdn}, {desc.max_jdn}]",
                calendar=self.id,
                jdn=jdn,
            )

    def _check_year(self, year: int, gregorian_offset: int) -> None:
        """Reject years far outside the window before any astronomical search runs.

        `gregorian_offset` maps a calendar year to the Gregorian year it starts in.
        """
        lo = jdn_to_gregorian(self.descriptor.min_jdn)[0] - 1
        hi = jdn_to_gregorian(self.descriptor.max_jdn)[0] + 1
        if not lo <= year + gregorian_offset <= hi:
            raise DateOutOfRangeError(
                f"{self.id} year {year} outside the {self.descriptor.name} validity window",
                calendar=self.id,
                year=year,
            )
