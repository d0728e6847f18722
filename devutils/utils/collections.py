# devutils/utils/collections.py
"""Iterable helpers."""

from __future__ import annotations

import random
from typing import Any, Callable, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def to_concatenated_string(
    items: Iterable[Any] | None,
    separator: str = ", ",
    prefix: str = "[",
    suffix: str = "]",
    null_repr: str = "null",
) -> str:
    """Join ``items`` as text, e.g. ``[1, null, 3]``."""
    if items is None:
        return f"{prefix}{suffix}"
    body = separator.join(null_repr if item is None else str(item) for item in items)
    return f"{prefix}{body}{suffix}"


def for_each(items: Iterable[T] | None, action: Callable[[T], Any] | None) -> None:
    if items is None or action is None:
        return
    for item in items:
        action(item)


def for_each_with_index(
    items: Iterable[T] | None, action: Callable[[T, int], Any] | None
) -> None:
    if items is None or action is None:
        return
    for index, item in enumerate(items):
        action(item, index)


def random_item(items: Iterable[T], rng: random.Random | None = None) -> T:
    if items is None:
        raise TypeError("items must not be None")
    pool = items if isinstance(items, list) else list(items)
    if not pool:
        raise ValueError("Cannot select a random item from an empty collection.")
    return (rng or random).choice(pool)


def is_null_or_empty(items: Iterable[Any] | None) -> bool:
    if items is None:
        return True
    for _ in items:
        return False
    return True


def distinct_by(
    items: Iterable[T] | None, key: Callable[[T], Hashable] | None
) -> Iterator[T]:
    """Yield the first item for every distinct ``key(item)``, keeping order."""
    if items is None or key is None:
        return
    seen: set[Hashable] = set()
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item


__all__ = [
    "distinct_by",
    "for_each",
    "for_each_with_index",
    "is_null_or_empty",
    "random_item",
    "to_concatenated_string",
]
