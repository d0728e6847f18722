"""Tests for the leveled console logger."""

from __future__ import annotations

import asyncio
import io
import re
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest
from loguru import logger as loguru_logger

from devutils.config import ConsoleColor, LogConfiguration, LogLevel
from devutils.console import ConsoleLogger, get_console


def _lines(stream: io.StringIO) -> list[str]:
    return stream.getvalue().splitlines()


def test_levels_below_minimum_are_suppressed(
    console: ConsoleLogger, stream: io.StringIO, log_path: Path
) -> None:
    """Messages under the threshold reach neither sink."""
    assert console.enable_file_logging(log_path)
    console.set_minimum_level(LogLevel.WARNING)

    console.log_debug("d")
    console.log_info("i")
    console.log_success("s")
    console.log_warning("w")

    assert _lines(stream) == ["[WARNING] w"]
    console.shutdown()
    assert log_path.read_text(encoding="utf-8").splitlines() == ["[WARNING] w"]


@pytest.mark.parametrize(
    "method, level",
    [
        ("log_debug", "DEBUG"),
        ("log_info", "INFO"),
        ("log_success", "SUCCESS"),
        ("log_warning", "WARNING"),
        ("log_error", "ERROR"),
        ("log_critical", "CRITICAL"),
    ],
)
def test_one_line_per_call_in_each_sink(
    console: ConsoleLogger, stream: io.StringIO, log_path: Path, method: str, level: str
) -> None:
    """Each call writes exactly one identical line to console and file."""
    console.enable_file_logging(log_path)
    getattr(console, method)("hello", category="core")
    console.shutdown()

    expected = [f"[{level}] [core] hello"]
    assert _lines(stream) == expected
    assert log_path.read_text(encoding="utf-8").splitlines() == expected


def test_level_colors_and_default_restore(stream: io.StringIO, log_path: Path) -> None:
    """Console gets the level color then the default color; the file stays plain."""
    console = ConsoleLogger(LogConfiguration(stream=stream, use_color=True))
    console.enable_file_logging(log_path)

    console.log_info("hi")
    console.log_critical("boom")
    console.shutdown()

    text = stream.getvalue()
    assert text == (
        f"{ConsoleColor.CYAN.ansi}[INFO] hi\n{ConsoleColor.GRAY.ansi}"
        f"{ConsoleColor.DARK_RED.ansi}[CRITICAL] boom\n{ConsoleColor.GRAY.ansi}"
    )
    assert "\x1b" not in log_path.read_text(encoding="utf-8")


def test_log_with_color_uses_caller_color(stream: io.StringIO) -> None:
    """log_with_color applies the given color and level."""
    console = ConsoleLogger(LogConfiguration(stream=stream, use_color=True))
    console.log_with_color("custom", ConsoleColor.MAGENTA, LogLevel.WARNING, "ui")

    assert stream.getvalue().startswith(f"{ConsoleColor.MAGENTA.ansi}[WARNING] [ui] custom\n")


def test_set_default_color_applies_immediately(stream: io.StringIO) -> None:
    """The new default color is written to the stream and used after each line."""
    console = ConsoleLogger(LogConfiguration(stream=stream, use_color=True))
    console.set_default_color("white")
    console.log_info("x")

    assert console.config.default_color is ConsoleColor.WHITE
    assert stream.getvalue() == (
        f"{ConsoleColor.WHITE.ansi}{ConsoleColor.CYAN.ansi}[INFO] x\n{ConsoleColor.WHITE.ansi}"
    )


def test_timestamps_toggle(console: ConsoleLogger, stream: io.StringIO) -> None:
    """Timestamps follow the configured format and disappear when disabled."""
    console.enable_timestamps(True, "%Y/%m/%d %H:%M")
    console.log_info("stamped")
    console.enable_timestamps(False)
    console.log_info("plain")

    stamped, plain = _lines(stream)
    match = re.match(r"^\[(?P<ts>[^\]]+)\] \[INFO\] stamped$", stamped)
    assert match is not None
    datetime.strptime(match.group("ts"), "%Y/%m/%d %H:%M")
    assert plain == "[INFO] plain"


def test_enable_file_logging_failure_reports_and_returns_false(
    console: ConsoleLogger, stream: io.StringIO, tmp_path: Path
) -> None:
    """An unwritable path yields False, an error line and no file sink."""
    bad_path = tmp_path / "missing" / "nested" / "app.log"

    assert console.enable_file_logging(bad_path) is False
    assert not console.file_logging_enabled
    assert _lines(stream)[0].startswith("[ERROR] Failed to enable file logging:")

    console.log_info("console only")
    assert _lines(stream)[-1] == "[INFO] console only"
    assert not bad_path.exists()


def test_enable_file_logging_rejects_invalid_name(
    console: ConsoleLogger, stream: io.StringIO, log_path: Path
) -> None:
    """A path the OS refuses outright still yields False instead of raising."""
    assert console.enable_file_logging(log_path)

    assert console.enable_file_logging("bad\x00name.log") is False
    assert not console.file_logging_enabled
    assert _lines(stream)[0].startswith("[ERROR] Failed to enable file logging:")


def test_file_append_and_truncate(console: ConsoleLogger, log_path: Path) -> None:
    """append=True keeps previous content, append=False replaces it."""
    log_path.write_text("old\n", encoding="utf-8")

    console.enable_file_logging(log_path, append=True)
    console.log_info("first")
    console.disable_file_logging()
    assert log_path.read_text(encoding="utf-8") == "old\n[INFO] first\n"

    console.enable_file_logging(log_path, append=False)
    console.log_info("second")
    console.shutdown()
    assert log_path.read_text(encoding="utf-8") == "[INFO] second\n"


def test_disable_and_shutdown_are_idempotent(console: ConsoleLogger, log_path: Path) -> None:
    """Closing an already closed sink is a no-op."""
    console.disable_file_logging()
    console.enable_file_logging(log_path)
    assert console.file_logging_enabled

    console.shutdown()
    console.shutdown()
    console.disable_file_logging()
    assert not console.file_logging_enabled


def test_context_manager_closes_sink(plain_config: LogConfiguration, log_path: Path) -> None:
    """Leaving the with-block shuts the logger down."""
    plain_config.log_file = log_path
    with ConsoleLogger(plain_config) as console:
        assert console.file_logging_enabled
        console.log_info("inside")
    assert not console.file_logging_enabled
    assert log_path.read_text(encoding="utf-8") == "[INFO] inside\n"


def test_log_table_sizes_columns_and_skips_bad_rows(
    console: ConsoleLogger, stream: io.StringIO, log_path: Path
) -> None:
    """Column widths follow the widest cell; wrong-arity rows are dropped."""
    console.enable_file_logging(log_path)
    console.log_table(["A", "B"], [["1", "22"], ["333", "4"], ["x"]])
    console.shutdown()

    expected = [
        "+-----+----+",
        "| A   | B  |",
        "+-----+----+",
        "| 1   | 22 |",
        "| 333 | 4  |",
        "+-----+----+",
    ]
    assert _lines(stream) == expected
    assert log_path.read_text(encoding="utf-8").splitlines() == expected


def test_log_table_none_cells_and_missing_input(
    console: ConsoleLogger, stream: io.StringIO
) -> None:
    """None cells render empty; None headers or rows render nothing."""
    console.log_table(None, [["a"]])
    console.log_table(["h"], None)
    assert stream.getvalue() == ""

    console.log_table(["h"], [[None]])
    assert _lines(stream)[3] == "|   |"


def test_log_progress_half_and_complete(
    plain_config: LogConfiguration, stream: io.StringIO, log_path: Path
) -> None:
    """Half progress fills half the bar; only completion reaches the file."""
    plain_config.console_width = 70
    console = ConsoleLogger(plain_config)
    console.enable_file_logging(log_path)

    console.log_progress(50, 100, "halfway")
    first = stream.getvalue()
    assert first.startswith("\r[" + "█" * 25 + " " * 25 + "] 50% - halfway")
    assert not first.endswith("\n")
    assert log_path.read_text(encoding="utf-8") == ""

    console.log_progress(100, 100, "done")
    console.shutdown()
    assert stream.getvalue().endswith("\n")
    assert log_path.read_text(encoding="utf-8") == "[" + "█" * 50 + "] 100% - done\n"


def test_log_progress_clamps_inputs(console: ConsoleLogger, stream: io.StringIO) -> None:
    """current is clamped into [0, total] and total to at least 1."""
    console.log_progress(-5, 10)
    assert "] 0%" in stream.getvalue()

    console.log_progress(7, 0)
    assert stream.getvalue().rstrip().endswith("] 100%")


def test_log_section_header_width(console: ConsoleLogger, stream: io.StringIO) -> None:
    """Header is three lines, capped at 80 columns."""
    console.log_section_header("Results")

    top, middle, bottom = _lines(stream)
    assert top == bottom == "-" * 80
    assert middle == "| " + "Results".ljust(76) + " |"


def test_log_section_header_narrow_terminal(
    plain_config: LogConfiguration, stream: io.StringIO
) -> None:
    """A narrow terminal shrinks the banner to width - 1."""
    plain_config.console_width = 30
    ConsoleLogger(plain_config).log_section_header("T")

    assert _lines(stream)[0] == "-" * 29


def test_log_exception_with_trace(console: ConsoleLogger, stream: io.StringIO) -> None:
    """Full rendering contains the traceback at ERROR level."""
    try:
        raise ValueError("boom")
    except ValueError as exc:
        console.log_exception(exc, category="job")

    text = stream.getvalue()
    assert text.startswith("[ERROR] [job] Traceback (most recent call last):")
    assert "ValueError: boom" in text


def test_log_exception_message_includes_inner(
    console: ConsoleLogger, stream: io.StringIO
) -> None:
    """The short form shows type, message and the inner exception."""
    try:
        try:
            raise ValueError("inner")
        except ValueError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as exc:
        console.log_exception_message(exc)

    assert _lines(stream) == ["[ERROR] RuntimeError: outer (Inner: inner)"]


def test_log_exception_message_respects_suppressed_context(
    console: ConsoleLogger, stream: io.StringIO
) -> None:
    """`raise ... from None` hides the exception being handled."""
    try:
        try:
            raise KeyError("missing")
        except KeyError:
            raise LookupError("not found") from None
    except LookupError as exc:
        console.log_exception_message(exc)

    assert _lines(stream) == ["[ERROR] LookupError: not found"]


def test_log_async_writes_line(console: ConsoleLogger, stream: io.StringIO) -> None:
    """The awaitable wrapper renders through the same path."""
    asyncio.run(console.log_async("later", ConsoleColor.BLUE, LogLevel.SUCCESS))

    assert _lines(stream) == ["[SUCCESS] later"]


def test_concurrent_lines_never_interleave(
    plain_config: LogConfiguration, stream: io.StringIO, log_path: Path
) -> None:
    """Lines from many threads stay whole in both sinks."""
    console = ConsoleLogger(plain_config)
    console.enable_file_logging(log_path)

    def worker(n: int) -> None:
        for i in range(200):
            console.log_info(f"worker-{n}-message-{i}-" + "x" * 40, category=f"t{n}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    console.shutdown()

    pattern = re.compile(r"^\[INFO\] \[t(\d)\] worker-\1-message-\d+-x{40}$")
    console_lines = _lines(stream)
    file_lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(console_lines) == len(file_lines) == 1600
    assert all(pattern.match(line) for line in console_lines)
    assert console_lines == file_lines


def test_loguru_sink_bridge(console: ConsoleLogger, stream: io.StringIO) -> None:
    """Loguru records are rendered with mapped level and module category."""
    handler_id = loguru_logger.add(console.loguru_sink, level="DEBUG")
    try:
        loguru_logger.bind(module="db").warning("slow query")
        loguru_logger.bind(module="db").success("reconnected")
    finally:
        loguru_logger.remove(handler_id)

    assert _lines(stream) == ["[WARNING] [db] slow query", "[SUCCESS] [db] reconnected"]


def test_colors_auto_detect_off_for_plain_stream(
    stream: io.StringIO, strip_ansi: Callable[[str], str]
) -> None:
    """StringIO is not a TTY, so auto mode writes no escape codes."""
    console = ConsoleLogger(LogConfiguration(stream=stream))
    console.log_info("auto")

    assert stream.getvalue() == strip_ansi(stream.getvalue()) == "[INFO] auto\n"


def test_get_console_is_shared() -> None:
    """The process default is created once."""
    assert get_console() is get_console()
