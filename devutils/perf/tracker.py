# devutils/perf/tracker.py
"""Scoped wall-clock timer with optional memory delta reporting."""

from __future__ import annotations

import functools
import gc
import os
import sys
import time
import tracemalloc
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from devutils.utils.logger import get_logger

if TYPE_CHECKING:
    from devutils.console.logger import ConsoleLogger

# Reporters take (name, elapsed, category, file_name, line); trackers with
# include_memory_usage also pass memory_delta= as a keyword.
Reporter = Callable[..., None]
F = TypeVar("F", bound=Callable[..., Any])


def format_time(elapsed: timedelta) -> str:
    seconds = elapsed.total_seconds()
    if seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    if seconds < 60:
        return f"{seconds:.2f} s"
    if seconds < 3600:
        return f"{seconds / 60:.2f} min"
    return f"{seconds / 3600:.2f} h"


def format_bytes(num_bytes: int) -> str:
    sign = "-" if num_bytes < 0 else "+"
    num_bytes = abs(num_bytes)
    if num_bytes < 1024:
        return f"{sign}{num_bytes} B"
    if num_bytes < 1024**2:
        return f"{sign}{num_bytes / 1024:.2f} KB"
    if num_bytes < 1024**3:
        return f"{sign}{num_bytes / 1024**2:.2f} MB"
    return f"{sign}{num_bytes / 1024**3:.2f} GB"


def format_report(
    name: str,
    elapsed: timedelta,
    category: str | None,
    file_name: str,
    line: int,
    memory_delta: int | None = None,
) -> str:
    category_info = f" [{category}]" if category else ""
    memory_info = f", Memory: {format_bytes(memory_delta)}" if memory_delta is not None else ""
    return (
        f"Performance{category_info}: {name} in {format_time(elapsed)}{memory_info} "
        f"[File: {file_name}, Line: {line}]"
    )


def _traced_memory() -> int:
    return tracemalloc.get_traced_memory()[0]


class PerformanceTracker:
    """Time a block of code and report the elapsed time when it ends.

    Usable as a context manager::

        with PerformanceTracker("load", category="io"):
            ...

    The name defaults to the calling function, and the caller's file name and
    line are captured at construction. When ``reporter`` is given it is the
    only output path; otherwise the report goes to the devutils loguru logger.
    Use :func:`console_reporter` to route reports to a ConsoleLogger.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        should_log: bool = True,
        include_memory_usage: bool = False,
        category: str | None = None,
        reporter: Reporter | None = None,
    ):
        caller = sys._getframe(1)
        self.name = name or caller.f_code.co_name
        self.file_name = os.path.basename(caller.f_code.co_filename)
        self.line = caller.f_lineno
        self.category = category
        self.should_log = should_log
        self.include_memory_usage = include_memory_usage
        self._reporter = reporter
        self._log = get_logger(__name__)
        self._started_tracing = False
        self._start_memory = 0
        self._stopped_at: float | None = None
        self._reported = False

        if include_memory_usage:
            if not tracemalloc.is_tracing():
                tracemalloc.start()
                self._started_tracing = True
            gc.collect()
            self._start_memory = _traced_memory()

        self._start = time.perf_counter()

    # ────────────── timing ──────────────

    def reset(self) -> None:
        """Restart the clock (and the memory baseline when tracked)."""
        if self.include_memory_usage:
            gc.collect()
            self._start_memory = _traced_memory()
        self._stopped_at = None
        self._reported = False
        self._start = time.perf_counter()

    def elapsed(self) -> timedelta:
        end = self._stopped_at if self._stopped_at is not None else time.perf_counter()
        return timedelta(seconds=end - self._start)

    def memory_delta(self) -> int | None:
        if not self.include_memory_usage or not tracemalloc.is_tracing():
            return None
        return _traced_memory() - self._start_memory

    # ────────────── reporting ──────────────

    def _report(self, name: str) -> None:
        elapsed = self.elapsed()
        memory = self.memory_delta()
        if self._reporter is not None:
            extra = {"memory_delta": memory} if self.include_memory_usage else {}
            self._reporter(name, elapsed, self.category, self.file_name, self.line, **extra)
            return
        message = format_report(name, elapsed, self.category, self.file_name, self.line, memory)
        self._log.info(message)

    def log_checkpoint(self, checkpoint: str | None = None) -> None:
        if not self.should_log:
            return
        suffix = f" - Checkpoint: {checkpoint}" if checkpoint else ""
        self._report(self.name + suffix)

    def stop(self) -> timedelta:
        """Stop the clock and report once; later calls return the same value."""
        if self._stopped_at is None:
            self._stopped_at = time.perf_counter()
        if self.should_log and not self._reported:
            self._reported = True
            self._report(self.name)
        if self._started_tracing:
            tracemalloc.stop()
            self._started_tracing = False
        return self.elapsed()

    def __enter__(self) -> PerformanceTracker:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()


def console_reporter(console: ConsoleLogger) -> Reporter:
    """Build a reporter that writes the standard message through ``console.log_info``."""

    def _reporter(
        name: str,
        elapsed: timedelta,
        category: str | None,
        file_name: str,
        line: int,
        memory_delta: int | None = None,
    ) -> None:
        console.log_info(format_report(name, elapsed, category, file_name, line, memory_delta))

    return _reporter


def measure_time(
    func: F | None = None,
    *,
    category: str | None = None,
    include_memory_usage: bool = False,
    reporter: Reporter | None = None,
) -> Any:
    """Decorator timing every call of ``func``; works with and without arguments."""

    def decorate(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with PerformanceTracker(
                fn.__qualname__,
                category=category,
                include_memory_usage=include_memory_usage,
                reporter=reporter,
            ) as tracker:
                tracker.file_name = os.path.basename(fn.__code__.co_filename)
                tracker.line = fn.__code__.co_firstlineno
                return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorate(func)
    return decorate


__all__ = [
    "PerformanceTracker",
    "Reporter",
    "console_reporter",
    "format_bytes",
    "format_time",
    "measure_time",
]
