"""Encoding – heading and value formatters."""
from __future__ import annotations

from typing import Any, Callable

__all__ = ["Formatter", "first_upper_no_underscores", "to_text"]

Formatter = Callable[[Any], Any]


def first_upper_no_underscores(heading: str) -> str:
    """``first_name`` -> ``First name``; the rest of the label is left alone."""
    heading = heading.replace("_", " ")
    return heading[:1].upper() + heading[1:]


def to_text(value: Any) -> str:
    """Field value as written to the CSV.

    ``None`` becomes an empty cell; bytes are read as UTF-8, undecodable
    sequences replaced with U+FFFD.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)
