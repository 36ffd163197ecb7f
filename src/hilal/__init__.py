"""hilal public API.

Approximate Gregorian <-> lunar (Hijri-like) date conversion and upcoming
observances. Keep this surface small: users should mostly interact with
functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    FIXED_YEAR_RANGE,
    adjust_date,
    clamp_day,
    convert,
    current_date,
    day_info,
    engine_info,
    explain,
    list_attributes,
    list_engines,
    make_engine,
    max_day_for_month,
    month_name,
    observance_name,
    register_engine,
    selectable_days,
    selectable_years,
    to_gregorian,
    to_lunar,
    upcoming_events,
    validate_date,
    weekday_name,
    weekday_of,
)
from .core.errors import HilalError, InvalidDayError, InvalidMonthError
from .core.time import days_in_gregorian_month
from .core.types import CalendarDate, CalendarSystem, Language, ProjectedEvent, Weekday
from .events.observances import OBSERVANCES
from .events.projector import DEFAULT_EVENT_COUNT

__all__ = [
    "FIXED_YEAR_RANGE",
    "DEFAULT_EVENT_COUNT",
    "OBSERVANCES",
    "adjust_date",
    "clamp_day",
    "convert",
    "current_date",
    "day_info",
    "days_in_gregorian_month",
    "engine_info",
    "explain",
    "list_attributes",
    "list_engines",
    "make_engine",
    "max_day_for_month",
    "month_name",
    "observance_name",
    "register_engine",
    "selectable_days",
    "selectable_years",
    "to_gregorian",
    "to_lunar",
    "upcoming_events",
    "validate_date",
    "weekday_name",
    "weekday_of",
    "CalendarDate",
    "CalendarSystem",
    "Language",
    "ProjectedEvent",
    "Weekday",
    "HilalError",
    "InvalidDayError",
    "InvalidMonthError",
]
