# devutils/config.py
"""Centralized configuration for the devutils toolkit.

All constants, enums and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Final, Mapping, TextIO

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_str(key: str, default: str | None) -> str | None:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_bool(key: str, default: bool | None) -> bool | None:
    """Resolve boolean from environment variable with fallback."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_path(key: str, default: Path | None) -> Path | None:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


# ============================================================================
# CONSOLE CONSTANTS
# ============================================================================

CONSOLE_FALLBACK_WIDTH: Final[int] = 80
SECTION_MAX_WIDTH: Final[int] = 80
PROGRESS_MAX_WIDTH: Final[int] = 50
PROGRESS_WIDTH_MARGIN: Final[int] = 20
PROGRESS_FILL_CHAR: Final[str] = "█"
TIMESTAMP_FORMAT_DEFAULT: Final[str] = "%Y-%m-%d %H:%M:%S"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(IntEnum):
    """Ordered severity levels; lower values are suppressed first."""

    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @classmethod
    def parse(cls, value: LogLevel | str | int) -> LogLevel:
        """Accept an enum member, its name (any case) or its integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        return cls(value)


class ConsoleColor(str, Enum):
    """Classic 16-color console palette mapped to ANSI foreground codes."""

    BLACK = "30"
    DARK_RED = "31"
    DARK_GREEN = "32"
    DARK_YELLOW = "33"
    DARK_BLUE = "34"
    DARK_MAGENTA = "35"
    DARK_CYAN = "36"
    GRAY = "37"
    DARK_GRAY = "90"
    RED = "91"
    GREEN = "92"
    YELLOW = "93"
    BLUE = "94"
    MAGENTA = "95"
    CYAN = "96"
    WHITE = "97"

    @property
    def ansi(self) -> str:
        return f"\033[{self.value}m"

    @classmethod
    def parse(cls, value: ConsoleColor | str) -> ConsoleColor:
        """Accept a member, a value code or a name in any case and separator style."""
        if isinstance(value, cls):
            return value
        key = "".join(ch for ch in value.upper() if ch.isalnum())
        for name, member in cls.__members__.items():
            if name.replace("_", "") == key:
                return member
        return cls(value.strip())


LEVEL_COLORS: Final[dict[LogLevel, ConsoleColor]] = {
    LogLevel.DEBUG: ConsoleColor.GRAY,
    LogLevel.INFO: ConsoleColor.CYAN,
    LogLevel.SUCCESS: ConsoleColor.GREEN,
    LogLevel.WARNING: ConsoleColor.YELLOW,
    LogLevel.ERROR: ConsoleColor.RED,
    LogLevel.CRITICAL: ConsoleColor.DARK_RED,
}

# ============================================================================
# DATACLASSES
# ============================================================================


@dataclass(slots=True)
class LogConfiguration:
    """Mutable settings read by every ConsoleLogger call.

    Attributes:
        minimum_level: Messages below this level are dropped from every sink
        timestamp_enabled: Prefix each line with the local time
        timestamp_format: strftime pattern for the prefix
        default_color: Color restored after each colored write
        stream: Console stream; None means sys.stdout at write time
        use_color: None detects a TTY, True/False forces escape codes on/off
        console_width: Fixed width; None reads the terminal size
        log_file: File sink opened when the logger is constructed
        append: Append to log_file instead of truncating it
    """

    minimum_level: LogLevel = LogLevel.INFO
    timestamp_enabled: bool = False
    timestamp_format: str = TIMESTAMP_FORMAT_DEFAULT
    default_color: ConsoleColor = ConsoleColor.GRAY
    stream: TextIO | None = None
    use_color: bool | None = None
    console_width: int | None = None
    log_file: Path | None = None
    append: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LogConfiguration:
        """Build a configuration from plain values (YAML, env, CLI)."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        values = dict(data)
        if "minimum_level" in values:
            values["minimum_level"] = LogLevel.parse(values["minimum_level"])
        if "default_color" in values:
            values["default_color"] = ConsoleColor.parse(values["default_color"])
        if values.get("log_file") is not None:
            values["log_file"] = Path(values["log_file"]).expanduser()
        return cls(**values)


def get_settings() -> LogConfiguration:
    """Factory function to create LogConfiguration with environment overrides.

    Environment variables:
        DEVUTILS_LOG_LEVEL: Minimum level name (DEBUG..CRITICAL)
        DEVUTILS_LOG_TIMESTAMPS: Enable timestamp prefix (1/true/yes/on)
        DEVUTILS_LOG_TIMESTAMP_FORMAT: strftime pattern
        DEVUTILS_LOG_FILE: Path of a log file to mirror lines into
        DEVUTILS_LOG_COLOR: Force ANSI colors on or off
    """
    level = _env_str("DEVUTILS_LOG_LEVEL", LogLevel.INFO.name)
    return LogConfiguration(
        minimum_level=LogLevel.parse(level or LogLevel.INFO.name),
        timestamp_enabled=bool(_env_bool("DEVUTILS_LOG_TIMESTAMPS", False)),
        timestamp_format=_env_str("DEVUTILS_LOG_TIMESTAMP_FORMAT", TIMESTAMP_FORMAT_DEFAULT)
        or TIMESTAMP_FORMAT_DEFAULT,
        use_color=_env_bool("DEVUTILS_LOG_COLOR", None),
        log_file=_env_path("DEVUTILS_LOG_FILE", None),
    )


def load_config(path: Path) -> LogConfiguration:
    """Read a LogConfiguration from a YAML mapping on disk."""
    from devutils.utils.io import load_yaml

    data = load_yaml(path) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return LogConfiguration.from_mapping(data)


__all__ = [
    "BASE_DIR",
    "ConsoleColor",
    "LEVEL_COLORS",
    "LogConfiguration",
    "LogLevel",
    "get_settings",
    "load_config",
]
