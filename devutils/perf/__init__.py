"""Scoped performance timing."""

from devutils.perf.tracker import (
    PerformanceTracker,
    Reporter,
    console_reporter,
    format_bytes,
    format_time,
    measure_time,
)

__all__ = [
    "PerformanceTracker",
    "Reporter",
    "console_reporter",
    "format_bytes",
    "format_time",
    "measure_time",
]
