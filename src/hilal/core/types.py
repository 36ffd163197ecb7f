from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import Any, Dict, Literal, Mapping, Optional, Tuple


class CalendarSystem(str, Enum):
    GREGORIAN = "gregorian"
    LUNAR = "lunar"

    @property
    def other(self) -> "CalendarSystem":
        if self is CalendarSystem.GREGORIAN:
            return CalendarSystem.LUNAR
        return CalendarSystem.GREGORIAN


class Language(str, Enum):
    EN = "en"
    AR = "ar"


class Weekday(IntEnum):
    # Same numbering as datetime.date.weekday()
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class EngineId:
    family: Literal["approx", "custom"]
    name: str
    version: str


@dataclass(frozen=True)
class CalendarDate:
    day: int
    month: int
    year: int
    system: CalendarSystem = CalendarSystem.GREGORIAN

    def __post_init__(self) -> None:
        # Accept "gregorian" / "lunar" strings
        object.__setattr__(self, "system", CalendarSystem(self.system))

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.day, d.month, d.year, CalendarSystem.GREGORIAN)

    @classmethod
    def lunar(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(day, month, year, CalendarSystem.LUNAR)

    @classmethod
    def gregorian(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(day, month, year, CalendarSystem.GREGORIAN)

    def to_date(self) -> date:
        if self.system is not CalendarSystem.GREGORIAN:
            raise TypeError("only Gregorian dates map onto datetime.date")
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} ({self.system.value})"


@dataclass(frozen=True)
class ObservanceDefinition:
    key: str
    names: Mapping[Language, str] = field(hash=False)
    month: int
    day: int

    def name(self, language: Language | str = Language.EN) -> str:
        return self.names[Language(language)]


@dataclass(frozen=True)
class ProjectedEvent:
    definition: ObservanceDefinition
    lunar_date: CalendarDate
    gregorian_date: CalendarDate

    def name(self, language: Language | str = Language.EN) -> str:
        return self.definition.name(language)


@dataclass(frozen=True)
class DayInfo:
    gregorian: CalendarDate
    lunar: CalendarDate
    weekday: Weekday
    engine: EngineId
    festival_tags: Tuple[str, ...] = ()
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for engine specifications."""
    kind: Literal["approx"]
    id: EngineId
    payload: Any  # ApproxLunarParams
