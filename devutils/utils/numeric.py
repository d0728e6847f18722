# devutils/utils/numeric.py
"""Numeric helpers."""

from __future__ import annotations

from typing import Any, TypeVar

import numpy as np

T = TypeVar("T")

SIZE_SUFFIXES = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Limit ``value`` to ``[minimum, maximum]``; ``minimum`` wins if the bounds cross.

    NumPy arrays are clamped element-wise with the same rule.
    """
    if isinstance(value, np.ndarray):
        return np.where(value < minimum, minimum, np.where(value > maximum, maximum, value))  # type: ignore[return-value]
    if value < minimum:  # type: ignore[operator]
        return minimum
    if value > maximum:  # type: ignore[operator]
        return maximum
    return value


def is_between(value: Any, minimum: Any, maximum: Any) -> Any:
    """Inclusive range check; element-wise for NumPy arrays."""
    if isinstance(value, np.ndarray):
        return (value >= minimum) & (value <= maximum)
    return minimum <= value <= maximum


def to_file_size_string(num_bytes: int) -> str:
    """Human-readable size such as ``"4.2 MB"``; non-positive sizes give ``"0 B"``."""
    if num_bytes <= 0:
        return "0 B"
    number = float(num_bytes)
    counter = 0
    # round() is half-to-even, so 512 B stays in bytes while 513 B becomes 0.5 KB
    while round(number / 1024) >= 1 and counter < len(SIZE_SUFFIXES) - 1:
        number /= 1024
        counter += 1
    return f"{number:,.1f} {SIZE_SUFFIXES[counter]}"


__all__ = ["clamp", "is_between", "to_file_size_string"]
