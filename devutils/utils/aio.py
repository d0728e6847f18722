# devutils/utils/aio.py
"""Awaitable helpers."""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def with_timeout(awaitable: Awaitable[T], timeout_ms: int) -> T:
    """Await ``awaitable`` for at most ``timeout_ms``; ``<= 0`` waits forever.

    Exceptions raised by the awaitable propagate unchanged.
    """
    if timeout_ms <= 0:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout_ms / 1000)
    except asyncio.TimeoutError:
        raise TimeoutError(f"Operation timed out after {timeout_ms}ms") from None


__all__ = ["with_timeout"]
