"""Encoding – best-effort transliteration into a narrower charset.

Each character the target codec can represent is kept as is. Otherwise the
NFKD decomposition without combining marks is tried (``č`` -> ``c``), then a
small table of typographic substitutions, and finally ``?``.
"""
from __future__ import annotations

import codecs
import unicodedata

__all__ = ["REPLACEMENT", "is_encodable", "is_utf8", "transliterate"]

REPLACEMENT = "?"

_FALLBACKS: dict[str, str] = {
    "‘": "'", "’": "'", "‚": "'", "‛": "'",
    "“": '"', "”": '"', "„": '"', "‟": '"',
    "«": "<<", "»": ">>", "‹": "<", "›": ">",
    "‐": "-", "‑": "-", "‒": "-", "–": "-", "—": "-", "−": "-",
    "…": "...", "•": "*", " ": " ", "€": "EUR", "™": "TM",
    "ß": "ss", "ẞ": "SS",
    "æ": "ae", "Æ": "AE", "œ": "oe", "Œ": "OE",
    "ø": "o", "Ø": "O", "ł": "l", "Ł": "L",
    "đ": "d", "Đ": "D", "ð": "d", "Ð": "D",
    "þ": "th", "Þ": "TH", "ı": "i",
}


def is_utf8(charset: str) -> bool:
    return charset.lower() == "utf-8"


def is_encodable(text: str, charset: str) -> bool:
    try:
        text.encode(charset)
    except UnicodeEncodeError:
        return False
    return True


def _fold(ch: str, charset: str) -> str:
    stripped = "".join(
        c for c in unicodedata.normalize("NFKD", ch) if not unicodedata.combining(c)
    )
    if stripped and is_encodable(stripped, charset):
        return stripped
    fallback = _FALLBACKS.get(ch)
    if fallback is not None and is_encodable(fallback, charset):
        return fallback
    return REPLACEMENT


def transliterate(text: str, charset: str) -> str:
    """Return *text* restricted to characters *charset* can encode.

    Raises :class:`LookupError` for an unknown codec name.
    """
    codecs.lookup(charset)
    if is_encodable(text, charset):
        return text
    return "".join(ch if is_encodable(ch, charset) else _fold(ch, charset) for ch in text)
