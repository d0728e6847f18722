# devutils/utils/dates.py
"""Date and time helpers."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def to_relative_time_string(moment: datetime, now: datetime | None = None) -> str:
    """Describe ``moment`` relative to ``now``, e.g. ``"3 hours ago"``."""
    now = now or datetime.now(moment.tzinfo)
    delta = now - moment
    minutes = delta.total_seconds() / 60
    if minutes < 1:
        return "just now"
    if minutes < 60:
        return _plural(int(minutes), "minute")
    hours = minutes / 60
    if hours < 24:
        return _plural(int(hours), "hour")
    days = hours / 24
    if days < 30:
        return _plural(int(days), "day")
    if days < 365:
        return _plural(int(days / 30), "month")
    return _plural(int(days / 365), "year")


def is_today(moment: datetime, now: datetime | None = None) -> bool:
    now = now or datetime.now(moment.tzinfo)
    return moment.date() == now.date()


def start_of_week(moment: datetime, first_day: int = calendar.SUNDAY) -> datetime:
    """Midnight of the first day of ``moment``'s week.

    ``first_day`` uses ``datetime.weekday()`` numbering (``calendar.MONDAY`` is 0).
    """
    diff = (moment.weekday() - first_day) % 7
    start = moment - timedelta(days=diff)
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


__all__ = ["is_today", "start_of_week", "to_relative_time_string"]
