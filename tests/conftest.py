"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Callable, Iterator

import pytest

from devutils.config import LogConfiguration, LogLevel
from devutils.console import ConsoleLogger

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory console stream."""
    return io.StringIO()


@pytest.fixture
def plain_config(stream: io.StringIO) -> LogConfiguration:
    """Configuration writing uncolored text to the in-memory stream."""
    return LogConfiguration(
        minimum_level=LogLevel.DEBUG,
        stream=stream,
        use_color=False,
        console_width=100,
    )


@pytest.fixture
def console(plain_config: LogConfiguration) -> Iterator[ConsoleLogger]:
    """Isolated logger instance; file sink closed after the test."""
    logger = ConsoleLogger(plain_config)
    yield logger
    logger.shutdown()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing log file."""
    return tmp_path / "app.log"


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove ANSI color sequences from captured console text."""
    return lambda text: ANSI_RE.sub("", text)
