# devutils/console/formatting.py
"""Pure text renderers behind ConsoleLogger.

Nothing here touches a stream; every function returns the exact text that
the logger writes to the console and mirrors into the file sink.
"""

from __future__ import annotations

import traceback
from datetime import datetime
from typing import Iterable, Sequence

from devutils.config import (
    PROGRESS_FILL_CHAR,
    PROGRESS_MAX_WIDTH,
    PROGRESS_WIDTH_MARGIN,
    SECTION_MAX_WIDTH,
    LogLevel,
)


def compose_line(
    message: str,
    level: LogLevel,
    category: str | None = None,
    *,
    timestamp_format: str | None = None,
    now: datetime | None = None,
) -> str:
    """Build ``[timestamp] [LEVEL] [category] message``.

    The timestamp block is present only when ``timestamp_format`` is given,
    the category block only when ``category`` is non-empty.
    """
    parts: list[str] = []
    if timestamp_format is not None:
        stamp = (now or datetime.now()).strftime(timestamp_format)
        parts.append(f"[{stamp}] ")
    parts.append(f"[{level.name.upper()}] ")
    if category:
        parts.append(f"[{category}] ")
    parts.append(str(message))
    return "".join(parts)


def section_width(terminal_width: int) -> int:
    return max(4, min(terminal_width - 1, SECTION_MAX_WIDTH))


def section_lines(title: str, terminal_width: int) -> list[str]:
    width = section_width(terminal_width)
    separator = "-" * width
    return [separator, f"| {title.ljust(width - 4)} |", separator]


def table_widths(headers: Sequence[str], rows: Sequence[Sequence[str | None]]) -> list[int]:
    """Column widths from headers and every row whose arity matches."""
    widths = [len(h) for h in headers]
    for row in rows:
        if len(row) != len(headers):
            continue
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell or ""))
    return widths


def _table_row(cells: Sequence[str | None], widths: Sequence[int]) -> str:
    body = " | ".join((cell or "").ljust(w) for cell, w in zip(cells, widths))
    return f"| {body} |"


def table_lines(
    headers: Sequence[str], rows: Iterable[Sequence[str | None]]
) -> tuple[list[str], list[str]]:
    """Return ``(header_block, body_block)`` for a bordered table.

    The header block is separator/header/separator; the body block holds the
    data rows followed by the closing separator. Rows whose arity differs
    from the header count are dropped.
    """
    row_list = [list(r) for r in rows]
    widths = table_widths(headers, row_list)
    separator = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    header_block = [separator, _table_row(headers, widths), separator]
    body_block = [_table_row(r, widths) for r in row_list if len(r) == len(headers)]
    body_block.append(separator)
    return header_block, body_block


def clamp_progress(current: int, total: int) -> tuple[int, int]:
    if total <= 0:
        total = 1
    current = min(max(current, 0), total)
    return current, total


def progress_bar_width(terminal_width: int) -> int:
    return max(1, min(terminal_width - PROGRESS_WIDTH_MARGIN, PROGRESS_MAX_WIDTH))


def progress_text(
    current: int, total: int, message: str | None, terminal_width: int
) -> str:
    current, total = clamp_progress(current, total)
    ratio = current / float(total)
    percent = int(ratio * 100)
    bar_width = progress_bar_width(terminal_width)
    filled = int(ratio * bar_width)
    bar = PROGRESS_FILL_CHAR * filled + " " * (bar_width - filled)
    text = f"[{bar}] {percent}%"
    if message:
        text += f" - {message}"
    return text


def exception_text(exc: BaseException, include_stack_trace: bool = True) -> str:
    if include_stack_trace:
        lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
        return "".join(lines).rstrip("\n")

    text = f"{type(exc).__name__}: {exc}"
    inner = exc.__cause__
    if inner is None and not exc.__suppress_context__:
        inner = exc.__context__
    if inner is not None:
        text += f" (Inner: {inner})"
    return text


__all__ = [
    "clamp_progress",
    "compose_line",
    "exception_text",
    "progress_bar_width",
    "progress_text",
    "section_lines",
    "section_width",
    "table_lines",
    "table_widths",
]
