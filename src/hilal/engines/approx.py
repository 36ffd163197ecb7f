"""
hilal.engines.approx
--------------------
Arithmetic engine for the approximated lunar calendar: a fixed alternating
30/29-day month pattern and a mean year of 354.367 days counted from a
Gregorian epoch.

This is a simplification. Real lunar months follow moon sighting and vary
from year to year; the fixed month lengths here are a known approximation.

All instants are whole Julian Day Numbers (local midnight), and the mean
year length is held as an exact Fraction, so floor and mod carry no
floating-point error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from fractions import Fraction
from typing import Any, Dict, Tuple

from ..core.types import CalendarDate, CalendarSystem, EngineId
from ..core.time import days_in_gregorian_month, from_jdn, to_jdn as ymd_to_jdn


@dataclass(frozen=True)
class ApproxLunarParams:
    epoch: date                 # Gregorian day zero of the lunar count
    mean_year: Fraction         # Mean lunar year in days
    odd_month_days: int = 30    # Months 1, 3, ..., 11
    even_month_days: int = 29   # Months 2, 4, ..., 12

    def __post_init__(self) -> None:
        if self.mean_year <= 0:
            raise ValueError("mean_year must be positive")
        if self.odd_month_days <= 0 or self.even_month_days <= 0:
            raise ValueError("month lengths must be positive")
        if 6 * (self.odd_month_days + self.even_month_days) > self.mean_year + 1:
            raise ValueError("twelve months must fit inside the mean year")


class ApproxLunarEngine:
    """Bidirectional Gregorian <-> approximate lunar conversion."""

    def __init__(self, id: EngineId, params: ApproxLunarParams):
        self.id = id
        self.params = params
        self.epoch_jdn = ymd_to_jdn(params.epoch.year, params.epoch.month, params.epoch.day)

        # Cumulative day counts before each month, index 0 = before month 1
        acc = [0]
        for m in range(1, 13):
            acc.append(acc[-1] + self.month_length(m))
        self._days_before: Tuple[int, ...] = tuple(acc)

    def info(self) -> Dict[str, Any]:
        p = self.params
        return {
            "id": self.id,
            "epoch": p.epoch.isoformat(),
            "epoch_jdn": self.epoch_jdn,
            "mean_year": p.mean_year,
            "month_lengths": tuple(self.month_length(m) for m in range(1, 13)),
        }

    # ---------------------------------------------------------
    # Month lengths
    # ---------------------------------------------------------

    def month_length(self, month: int) -> int:
        """Lunar month length; independent of the year."""
        if month % 2 == 1:
            return self.params.odd_month_days
        return self.params.even_month_days

    def days_before_month(self, month: int) -> int:
        return self._days_before[month - 1]

    def max_day(self, month: int, year: int, system: CalendarSystem) -> int:
        if CalendarSystem(system) is CalendarSystem.GREGORIAN:
            return days_in_gregorian_month(month, year)
        return self.month_length(month)

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def _split(self, elapsed: int) -> Dict[str, Any]:
        q, r = divmod(Fraction(elapsed), self.params.mean_year)
        year = int(q) + 1

        month, day, fallback = 12, self.month_length(12), True
        for m in range(1, 13):
            before = self._days_before[m - 1]
            if before + self.month_length(m) > r:
                month = m
                day = math.floor(r - before) + 1
                fallback = False
                break

        day = max(1, min(day, self.month_length(month)))
        return {
            "elapsed_days": elapsed,
            "year_quotient": int(q),
            "day_of_year": r,
            "year": year,
            "month": month,
            "day": day,
            "year_end_fallback": fallback,
        }

    def to_lunar(self, d: CalendarDate) -> CalendarDate:
        if d.system is CalendarSystem.LUNAR:
            return d
        s = self._split(ymd_to_jdn(d.year, d.month, d.day) - self.epoch_jdn)
        return CalendarDate(s["day"], s["month"], s["year"], CalendarSystem.LUNAR)

    def to_jdn(self, d: CalendarDate) -> int:
        """Julian Day Number of a date in either system."""
        if d.system is CalendarSystem.GREGORIAN:
            return ymd_to_jdn(d.year, d.month, d.day)
        elapsed = (d.year - 1) * self.params.mean_year + self.days_before_month(d.month) + d.day
        return self.epoch_jdn + math.floor(elapsed)

    def to_gregorian(self, d: CalendarDate) -> CalendarDate:
        if d.system is CalendarSystem.GREGORIAN:
            return d
        y, m, day = from_jdn(self.to_jdn(d))
        return CalendarDate(day, m, y, CalendarSystem.GREGORIAN)

    def explain(self, d: CalendarDate) -> Dict[str, Any]:
        g = self.to_gregorian(d)
        out = self._split(self.to_jdn(g) - self.epoch_jdn)
        out["gregorian"] = g
        out["jdn"] = self.to_jdn(g)
        return out
