"""
hilal.events.projector
----------------------
Projects the fixed observance table onto concrete lunar years.

Pass one walks the table for the current lunar year, keeping entries on or
after the current (month, day). If that yields fewer than `count` events,
pass two walks the whole table again for the following year. Output order
is selection order, which is chronological because the table is sorted.
"""

from __future__ import annotations
from typing import List, Sequence

from ..core.engine import CalendarEngine
from ..core.types import CalendarDate, CalendarSystem, ObservanceDefinition, ProjectedEvent
from .observances import OBSERVANCES

DEFAULT_EVENT_COUNT = 5


def _project(eng: CalendarEngine, o: ObservanceDefinition, year: int) -> ProjectedEvent:
    lunar = CalendarDate(o.day, o.month, year, CalendarSystem.LUNAR)
    return ProjectedEvent(definition=o, lunar_date=lunar, gregorian_date=eng.to_gregorian(lunar))


def project_events(
    eng: CalendarEngine,
    current: CalendarDate,
    count: int = DEFAULT_EVENT_COUNT,
    table: Sequence[ObservanceDefinition] = OBSERVANCES,
) -> List[ProjectedEvent]:
    if current.system is not CalendarSystem.LUNAR:
        current = eng.to_lunar(current)

    out: List[ProjectedEvent] = []
    if count <= 0:
        return out

    for o in table:
        if (o.month, o.day) >= (current.month, current.day):
            out.append(_project(eng, o, current.year))
            if len(out) >= count:
                return out

    for o in table:
        out.append(_project(eng, o, current.year + 1))
        if len(out) >= count:
            break
    return out
