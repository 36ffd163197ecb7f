"""Diagnostics package.

- round_trip, events_table: always available
- drift_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["round_trip", "drift_scatter", "events_table"]
