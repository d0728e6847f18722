# devutils/__init__.py
"""Developer utilities: leveled console logging, scoped timing and small helpers."""

from __future__ import annotations

from devutils.config import ConsoleColor, LogConfiguration, LogLevel, get_settings, load_config
from devutils.console import ConsoleLogger, get_console
from devutils.perf import PerformanceTracker, console_reporter, measure_time

__version__ = "0.1.0"

__all__ = [
    "ConsoleColor",
    "ConsoleLogger",
    "LogConfiguration",
    "LogLevel",
    "PerformanceTracker",
    "console_reporter",
    "get_console",
    "get_settings",
    "load_config",
    "measure_time",
]
