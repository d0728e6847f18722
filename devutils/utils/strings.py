# devutils/utils/strings.py
"""String helpers."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import TypeVar

N = TypeVar("N", int, float, Decimal)

_HTML_TAG = re.compile(r"<.*?>")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def truncate(text: str | None, max_length: int, add_ellipsis: bool = True) -> str | None:
    """Cut ``text`` to at most ``max_length`` characters, ellipsis included."""
    if not text or len(text) <= max_length:
        return text
    ellipsis = "..." if add_ellipsis else ""
    keep = max_length - len(ellipsis)
    if keep <= 0:
        return ellipsis[:max_length]
    return text[:keep] + ellipsis


def is_null_or_whitespace(text: str | None) -> bool:
    return text is None or not text.strip()


def to_title_case(text: str | None) -> str | None:
    if is_null_or_whitespace(text):
        return text
    return " ".join(word.capitalize() for word in text.lower().split(" "))


def strip_html(html: str | None) -> str | None:
    if is_null_or_whitespace(html):
        return html
    return _HTML_TAG.sub("", html)


def reverse(text: str | None) -> str | None:
    if not text:
        return text
    return text[::-1]


def to_camel_case(text: str | None) -> str | None:
    if is_null_or_whitespace(text):
        return text
    words = _NON_ALNUM.sub(" ", text).split()
    if not words:
        return ""
    return words[0].lower() + "".join(w[0].upper() + w[1:].lower() for w in words[1:])


def try_parse_number(
    text: str | None,
    number_type: type[N] = int,
    *,
    allow_decimal: bool = False,
    allow_negative: bool = False,
) -> N | None:
    """Parse ``text`` as ``number_type`` if it is made of digits only.

    A single leading ``-`` is accepted with ``allow_negative`` and a single
    ``.`` with ``allow_decimal``. Returns None for anything else, including
    decimal input requested as ``int``.
    """
    if not text:
        return None

    body = text
    if allow_negative and body.startswith("-"):
        body = body[1:]
    if not body:
        return None

    integral, dot, fraction = body.partition(".")
    if dot and not allow_decimal:
        return None
    digits = integral + fraction
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None

    if number_type is int and dot:
        return None
    try:
        return number_type(text)
    except (ValueError, InvalidOperation):
        return None


__all__ = [
    "is_null_or_whitespace",
    "reverse",
    "strip_html",
    "to_camel_case",
    "to_title_case",
    "truncate",
    "try_parse_number",
]
