# devutils/console/logger.py
"""Leveled console logger with colored output and an optional file mirror."""

from __future__ import annotations

import asyncio
import os
import shutil
import sys
import threading
from pathlib import Path
from typing import Any, Iterable, Sequence, TextIO

from devutils.config import (
    CONSOLE_FALLBACK_WIDTH,
    LEVEL_COLORS,
    ConsoleColor,
    LogConfiguration,
    LogLevel,
    get_settings,
)
from devutils.console.formatting import (
    clamp_progress,
    compose_line,
    exception_text,
    progress_text,
    section_lines,
    table_lines,
)
from devutils.utils.logger import get_logger


class ConsoleLogger:
    """Render leveled lines to a console stream and mirror them to a file.

    Every write to the console stream and to the file sink happens under
    one lock, so lines from concurrent callers never interleave. Plain
    setters (``set_minimum_level``, ``enable_timestamps``) only replace
    scalar fields and are not synchronized.
    """

    def __init__(self, config: LogConfiguration | None = None):
        self.config = config if config is not None else LogConfiguration()
        self._lock = threading.Lock()
        self._file: TextIO | None = None
        self._log = get_logger(__name__)
        if self.config.log_file is not None:
            self.enable_file_logging(self.config.log_file, append=self.config.append)

    # ────────────── configuration ──────────────

    def set_minimum_level(self, level: LogLevel | str | int) -> None:
        self.config.minimum_level = LogLevel.parse(level)

    def enable_timestamps(self, enabled: bool, fmt: str | None = None) -> None:
        self.config.timestamp_enabled = enabled
        if fmt is not None:
            self.config.timestamp_format = fmt

    def set_default_color(self, color: ConsoleColor | str) -> None:
        self.config.default_color = ConsoleColor.parse(color)
        with self._lock:
            stream = self._stream()
            if self._colors_enabled(stream):
                stream.write(self.config.default_color.ansi)
                stream.flush()

    @property
    def file_logging_enabled(self) -> bool:
        return self._file is not None

    def enable_file_logging(self, path: str | os.PathLike[str], append: bool = True) -> bool:
        """Mirror every subsequent line into ``path``.

        Returns False (after logging an error line) when the file cannot be
        opened; the previous sink, if any, is closed either way.
        """
        self.disable_file_logging()
        try:
            handle = open(path, "a" if append else "w", encoding="utf-8")
        except (OSError, ValueError, TypeError) as exc:
            self.log_error(f"Failed to enable file logging: {exc}")
            return False

        with self._lock:
            self._file = handle
        self._log.debug(f"file sink opened at {Path(path)} (append={append})")
        return True

    def disable_file_logging(self) -> None:
        with self._lock:
            handle, self._file = self._file, None
        if handle is None:
            return
        handle.flush()
        handle.close()
        self._log.debug("file sink closed")

    def shutdown(self) -> None:
        self.disable_file_logging()

    def __enter__(self) -> ConsoleLogger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()

    # ────────────── output plumbing (lock held) ──────────────

    def _stream(self) -> TextIO:
        return self.config.stream if self.config.stream is not None else sys.stdout

    def _colors_enabled(self, stream: TextIO) -> bool:
        if self.config.use_color is not None:
            return self.config.use_color
        isatty = getattr(stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except ValueError:
            # closed stream
            return False

    def terminal_width(self) -> int:
        if self.config.console_width is not None:
            return self.config.console_width
        return shutil.get_terminal_size((CONSOLE_FALLBACK_WIDTH, 24)).columns

    def _write_console(self, lines: Sequence[str], color: ConsoleColor) -> None:
        stream = self._stream()
        text = "".join(f"{line}\n" for line in lines)
        if self._colors_enabled(stream):
            text = f"{color.ansi}{text}{self.config.default_color.ansi}"
        stream.write(text)
        stream.flush()

    def _mirror(self, lines: Sequence[str]) -> None:
        if self._file is None:
            return
        for line in lines:
            self._file.write(f"{line}\n")
        self._file.flush()

    def _log_core(
        self,
        message: str,
        color: ConsoleColor,
        level: LogLevel,
        category: str | None = None,
    ) -> None:
        if level < self.config.minimum_level:
            return

        fmt = self.config.timestamp_format if self.config.timestamp_enabled else None
        line = compose_line(message, level, category, timestamp_format=fmt)

        with self._lock:
            self._write_console([line], color)
            self._mirror([line])

    # ────────────── leveled logging ──────────────

    def log_debug(self, message: str, category: str | None = None) -> None:
        self._log_core(message, LEVEL_COLORS[LogLevel.DEBUG], LogLevel.DEBUG, category)

    def log_info(self, message: str, category: str | None = None) -> None:
        self._log_core(message, LEVEL_COLORS[LogLevel.INFO], LogLevel.INFO, category)

    def log_success(self, message: str, category: str | None = None) -> None:
        self._log_core(message, LEVEL_COLORS[LogLevel.SUCCESS], LogLevel.SUCCESS, category)

    def log_warning(self, message: str, category: str | None = None) -> None:
        self._log_core(message, LEVEL_COLORS[LogLevel.WARNING], LogLevel.WARNING, category)

    def log_error(self, message: str, category: str | None = None) -> None:
        self._log_core(message, LEVEL_COLORS[LogLevel.ERROR], LogLevel.ERROR, category)

    def log_critical(self, message: str, category: str | None = None) -> None:
        self._log_core(message, LEVEL_COLORS[LogLevel.CRITICAL], LogLevel.CRITICAL, category)

    def log_with_color(
        self,
        message: str,
        color: ConsoleColor | str,
        level: LogLevel = LogLevel.INFO,
        category: str | None = None,
    ) -> None:
        self._log_core(message, ConsoleColor.parse(color), LogLevel.parse(level), category)

    async def log_async(
        self,
        message: str,
        color: ConsoleColor | str,
        level: LogLevel = LogLevel.INFO,
        category: str | None = None,
    ) -> None:
        """Run the renderer on a worker thread; ordering still follows the lock."""
        await asyncio.to_thread(
            self._log_core, message, ConsoleColor.parse(color), LogLevel.parse(level), category
        )

    # ────────────── exceptions ──────────────

    def log_exception(
        self,
        exc: BaseException,
        category: str | None = None,
        include_stack_trace: bool = True,
    ) -> None:
        message = exception_text(exc, include_stack_trace)
        self._log_core(message, LEVEL_COLORS[LogLevel.ERROR], LogLevel.ERROR, category)

    def log_exception_message(self, exc: BaseException, category: str | None = None) -> None:
        self.log_exception(exc, category, include_stack_trace=False)

    # ────────────── special formatting ──────────────

    def log_section_header(self, title: str, color: ConsoleColor = ConsoleColor.WHITE) -> None:
        lines = section_lines(title, self.terminal_width())
        with self._lock:
            self._write_console(lines, color)
            self._mirror(lines)

    def log_table(
        self,
        headers: Sequence[str] | None,
        rows: Iterable[Sequence[str | None]] | None,
        color: ConsoleColor = ConsoleColor.WHITE,
    ) -> None:
        """Render a bordered table; rows with the wrong number of cells are skipped."""
        if headers is None or rows is None:
            return

        header_block, body_block = table_lines(headers, rows)
        with self._lock:
            self._write_console(header_block, color)
            self._write_console(body_block, self.config.default_color)
            self._mirror(header_block + body_block)

    def log_progress(
        self,
        current: int,
        total: int,
        message: str | None = None,
        color: ConsoleColor = ConsoleColor.DARK_GREEN,
    ) -> None:
        """Redraw a single-line progress bar in place.

        The file sink only receives the bar once ``current`` reaches ``total``.
        """
        current, total = clamp_progress(current, total)
        width = self.terminal_width()
        text = progress_text(current, total, message, width)
        padding = " " * max(0, width - len(text) - 1)
        done = current == total

        with self._lock:
            stream = self._stream()
            body = f"{text}{padding}"
            if self._colors_enabled(stream):
                body = f"{color.ansi}{body}{self.config.default_color.ansi}"
            stream.write(f"\r{body}")
            if done:
                stream.write("\n")
            stream.flush()
            if done:
                self._mirror([text])

    # ────────────── loguru bridge ──────────────

    def loguru_sink(self, message: Any) -> None:
        """Sink for ``loguru.logger.add`` that renders records through this logger."""
        record = message.record
        level = _level_from_loguru(record["level"].no)
        category = record["extra"].get("module") or record.get("name")
        text = str(record["message"])
        exception = record.get("exception")
        if exception is not None and exception.value is not None:
            text = f"{text}\n{exception_text(exception.value)}"
        self._log_core(text, LEVEL_COLORS[level], level, category)


def _level_from_loguru(no: int) -> LogLevel:
    # loguru: TRACE 5, DEBUG 10, INFO 20, SUCCESS 25, WARNING 30, ERROR 40, CRITICAL 50
    if no < 20:
        return LogLevel.DEBUG
    if no < 25:
        return LogLevel.INFO
    if no < 30:
        return LogLevel.SUCCESS
    if no < 40:
        return LogLevel.WARNING
    if no < 50:
        return LogLevel.ERROR
    return LogLevel.CRITICAL


_DEFAULT: ConsoleLogger | None = None
_DEFAULT_LOCK = threading.Lock()


def get_console() -> ConsoleLogger:
    """Return the process-wide logger built from ``get_settings()`` on first use."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            _DEFAULT = ConsoleLogger(get_settings())
        return _DEFAULT


__all__ = ["ConsoleLogger", "get_console"]
