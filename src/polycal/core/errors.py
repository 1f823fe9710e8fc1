from __future__ import annotations

from typing import Optional


class PolycalError(Exception):
    """Base error."""


class CalendarError(PolycalError):
    """Base for errors raised while resolving or converting a calendar date."""

    def __init__(
        self,
        message: str,
        *,
        calendar: Optional[str] = None,
        jdn: Optional[int] = None,
        year: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.calendar = calendar
        self.jdn = jdn
        self.year = year


class UnknownCalendarError(CalendarError, LookupError):
    """Raised for a calendar identifier outside the supported set."""

    def __init__(self, calendar: object, available: tuple[str, ...] = ()) -> None:
        msg = f"Unknown calendar {calendar!r}"
        if available:
            msg += f". Available: {list(available)}"
        super().__init__(msg, calendar=str(calendar))


class DateOutOfRangeError(CalendarError, ValueError):
    """Raised when a date falls outside a calendar's validity window."""


class ConversionNonConvergentError(CalendarError, ArithmeticError):
    """Raised when a bounded search exceeds its iteration cap."""

    def __init__(self, message: str, *, calendar: Optional[str] = None, jdn: Optional[int] = None, steps: int = 0) -> None:
        super().__init__(message, calendar=calendar, jdn=jdn)
        self.steps = steps


class InvalidDateError(CalendarError, ValueError):
    """Raised for malformed date fields (month 14, day 0, missing leap flag...)."""


class ConfigError(PolycalError, ValueError):
    """Raised for invalid configuration values."""
