# devutils/utils/files.py
"""File name and size helpers."""

from __future__ import annotations

import os
import re
from pathlib import Path

from devutils.utils.numeric import to_file_size_string

# union of Windows and POSIX forbidden characters plus control codes
_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]+')


def to_safe_file_name(text: str | None) -> str:
    if text is None or not text.strip():
        return ""
    parts = [p for p in _INVALID_CHARS.split(text) if p]
    return "_".join(parts).replace(" ", "_")


def file_size_string(path: str | os.PathLike[str] | None) -> str:
    if path is None:
        return "0 B"
    p = Path(path)
    if not p.is_file():
        return "0 B"
    return to_file_size_string(p.stat().st_size)


__all__ = ["file_size_string", "to_safe_file_name"]
