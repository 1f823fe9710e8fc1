"""polycal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    convert,
    label_time_range,
    list_calendars,
    calendar_info,
    get_converter,
    to_jdn,
    from_jdn,
    to_gregorian,
    convert_date,
    format_date,
    time_range_label,
    time_range_bounds,
    canonical_date,
    navigate,
    seasons,
)
from .config import EngineConfig, load_config
from .core.errors import (
    CalendarError,
    ConfigError,
    ConversionNonConvergentError,
    DateOutOfRangeError,
    InvalidDateError,
    PolycalError,
    UnknownCalendarError,
)
from .core.types import CalendarDate, CalendarId, GregorianDate, TimeRange, TimeRangeLabel

__all__ = [
    "convert",
    "label_time_range",
    "list_calendars",
    "calendar_info",
    "get_converter",
    "to_jdn",
    "from_jdn",
    "to_gregorian",
    "convert_date",
    "format_date",
    "time_range_label",
    "time_range_bounds",
    "canonical_date",
    "navigate",
    "seasons",
    "EngineConfig",
    "load_config",
    "CalendarError",
    "ConfigError",
    "ConversionNonConvergentError",
    "DateOutOfRangeError",
    "InvalidDateError",
    "PolycalError",
    "UnknownCalendarError",
    "CalendarDate",
    "CalendarId",
    "GregorianDate",
    "TimeRange",
    "TimeRangeLabel",
]
