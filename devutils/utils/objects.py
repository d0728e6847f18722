# devutils/utils/objects.py
"""Object helpers: JSON rendering, safe casts and deep copies."""

from __future__ import annotations

import copy
import dataclasses
import json
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, TypeVar

import numpy as np

T = TypeVar("T")


def json_default(value: Any) -> Any:
    """``default=`` hook for json.dumps covering common non-JSON types."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return str(value)


def to_json(obj: Any, indented: bool = True) -> str:
    if obj is None:
        return "null"
    return json.dumps(obj, indent=2 if indented else None, default=json_default, ensure_ascii=False)


def as_type(obj: Any, cls: type[T], default: T | None = None) -> T | None:
    """Return ``obj`` if it is an instance of ``cls``, else ``default``."""
    return obj if isinstance(obj, cls) else default


def deep_clone(obj: T) -> T:
    return copy.deepcopy(obj)


__all__ = ["as_type", "deep_clone", "json_default", "to_json"]
