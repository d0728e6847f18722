# devutils/utils/logger.py
"""Loguru access point for the package's own diagnostics."""

from __future__ import annotations

import inspect
import os
import sys
from typing import TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

_LEVEL = os.environ.get("DEVUTILS_DIAG_LEVEL", "WARNING")
_HANDLER_ID: int | None = None
_STOCK_HANDLER_ID = 0
_stock_replaced = False


def _diag_sink(stream: TextIO):
    def _sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        # one record per line
        stream.write(f"{r['time']:%H:%M:%S} | {r['level'].name: <7} | {module} | {r['message']}\n")

    return _sink


def configure(level: str | None = None, stream: TextIO | None = None) -> None:
    """Route devutils diagnostics to ``stream`` (stderr by default) at ``level``.

    Only the handler installed here is replaced; handlers added by the host
    application stay untouched. Loguru's stock stderr handler, when still
    present, is swapped for one that skips devutils records so they are not
    printed twice.
    """
    global _HANDLER_ID, _stock_replaced
    if not _stock_replaced:
        _stock_replaced = True
        try:
            _root_logger.remove(_STOCK_HANDLER_ID)
        except ValueError:
            pass  # host already removed it
        else:
            _root_logger.add(
                sys.stderr,
                filter=lambda record: not record["extra"].get("devutils", False),
            )
    if _HANDLER_ID is not None:
        try:
            _root_logger.remove(_HANDLER_ID)
        except ValueError:
            pass
    _HANDLER_ID = _root_logger.add(
        _diag_sink(stream or sys.stderr),
        level=(level or _LEVEL),
        filter=lambda record: record["extra"].get("devutils", False),
        catch=True,
    )


def get_logger(name: str | None = None) -> LoguruLogger:
    """Return the loguru logger bound to the calling module's name."""
    module_name = name
    if module_name is None:
        frame = inspect.currentframe()
        caller_frame = frame.f_back if frame is not None else None
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__
    return _root_logger.bind(module=module_name or "unknown", devutils=True)


__all__ = ["configure", "get_logger"]
