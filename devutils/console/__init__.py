"""Leveled, colored console logging with an optional file mirror."""

from devutils.console.logger import ConsoleLogger, get_console

__all__ = ["ConsoleLogger", "get_console"]
