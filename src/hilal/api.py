from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import InvalidDayError, InvalidMonthError
from .core.names import month_name as _month_name, weekday_name as _weekday_name
from .core.types import (
    CalendarDate,
    CalendarSystem,
    DayInfo,
    EngineSpec,
    Language,
    ObservanceDefinition,
    ProjectedEvent,
    Weekday,
)
from .core.time import weekday_from_jdn
from .attributes.registry import compute_attributes, list_attributes
from .engines.factory import make_engine as _make_engine
from .events.observances import observances_on
from .events.projector import DEFAULT_EVENT_COUNT, project_events

DateLike = Union[CalendarDate, date]

# Alternative to the dynamic range of selectable_years()
FIXED_YEAR_RANGE = range(1900, 2101)

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _as_calendar_date(d: DateLike) -> CalendarDate:
    if isinstance(d, CalendarDate):
        return d
    return CalendarDate.from_date(d)

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Calendar arithmetic
# ============================================================

def max_day_for_month(month: int, year: int, system: CalendarSystem | str, *, engine: str = "approx") -> int:
    return _reg().get(engine).max_day(month, year, CalendarSystem(system))

def to_lunar(d: DateLike, *, engine: str = "approx") -> CalendarDate:
    return _reg().get(engine).to_lunar(_as_calendar_date(d))

def to_gregorian(d: CalendarDate, *, engine: str = "approx") -> CalendarDate:
    return _reg().get(engine).to_gregorian(d)

def convert(d: DateLike, *, engine: str = "approx") -> CalendarDate:
    """Convert to the other calendar system."""
    d = _as_calendar_date(d)
    if d.system is CalendarSystem.GREGORIAN:
        return to_lunar(d, engine=engine)
    return to_gregorian(d, engine=engine)

def weekday_of(d: DateLike, *, engine: str = "approx") -> Weekday:
    return weekday_from_jdn(_reg().get(engine).to_jdn(_as_calendar_date(d)))

def explain(d: DateLike, *, engine: str = "approx") -> Dict[str, Any]:
    return _reg().get(engine).explain(_as_calendar_date(d))

def current_date(
    system: CalendarSystem | str = CalendarSystem.GREGORIAN,
    *,
    on: Optional[date] = None,
    engine: str = "approx",
) -> CalendarDate:
    today = CalendarDate.from_date(on if on is not None else date.today())
    if CalendarSystem(system) is CalendarSystem.LUNAR:
        return to_lunar(today, engine=engine)
    return today

# ============================================================
# Names
# ============================================================

def month_name(month: int, system: CalendarSystem | str, language: Language | str = Language.EN) -> str:
    return _month_name(month, system, language)

def weekday_name(weekday: Weekday | int, language: Language | str = Language.EN) -> str:
    return _weekday_name(weekday, language)

def observance_name(definition: ObservanceDefinition, language: Language | str = Language.EN) -> str:
    return definition.name(language)

# ============================================================
# Clamp rule and selection ranges
# ============================================================

def clamp_day(d: CalendarDate, *, engine: str = "approx") -> CalendarDate:
    """Pull d.day into 1..max_day for its month, year and system."""
    hi = max_day_for_month(d.month, d.year, d.system, engine=engine)
    day = max(1, min(d.day, hi))
    if day == d.day:
        return d
    return replace(d, day=day)

def adjust_date(
    d: CalendarDate,
    *,
    day: Optional[int] = None,
    month: Optional[int] = None,
    year: Optional[int] = None,
    engine: str = "approx",
) -> CalendarDate:
    """Replace fields of d and reapply the clamp rule."""
    changes = {k: v for k, v in (("day", day), ("month", month), ("year", year)) if v is not None}
    return clamp_day(replace(d, **changes), engine=engine)

def validate_date(d: CalendarDate, *, engine: str = "approx") -> CalendarDate:
    """Strict check for dates that did not come from a bounded selection."""
    if not 1 <= d.month <= 12:
        raise InvalidMonthError(f"month {d.month} outside 1..12")
    hi = max_day_for_month(d.month, d.year, d.system, engine=engine)
    if not 1 <= d.day <= hi:
        raise InvalidDayError(f"day {d.day} outside 1..{hi} for {d.system.value} {d.year}-{d.month:02d}")
    return d

def selectable_days(month: int, year: int, system: CalendarSystem | str, *, engine: str = "approx") -> range:
    return range(1, max_day_for_month(month, year, system, engine=engine) + 1)

def selectable_years(
    system: CalendarSystem | str = CalendarSystem.GREGORIAN,
    *,
    today: Optional[date] = None,
    past: int = 200,
    future: int = 100,
    engine: str = "approx",
) -> range:
    center = current_date(system, on=today, engine=engine).year
    return range(center - past, center + future + 1)

# ============================================================
# Events and day records
# ============================================================

def upcoming_events(
    current: DateLike,
    count: int = DEFAULT_EVENT_COUNT,
    *,
    engine: str = "approx",
) -> List[ProjectedEvent]:
    return project_events(_reg().get(engine), _as_calendar_date(current), count)

def day_info(
    d: DateLike,
    *,
    engine: str = "approx",
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    eng = _reg().get(engine)
    d = _as_calendar_date(d)
    g, t = eng.to_gregorian(d), eng.to_lunar(d)
    info = DayInfo(
        gregorian=g,
        lunar=t,
        weekday=weekday_from_jdn(eng.to_jdn(d)),
        engine=eng.id,
        festival_tags=tuple(o.key for o in observances_on(t.month, t.day)),
        debug=eng.explain(d) if debug else None,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info
