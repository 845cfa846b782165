"""Encoding – CsvRecordWriter, one record per line."""
from __future__ import annotations

from typing import Iterable

__all__ = ["CsvRecordWriter"]


class CsvRecordWriter:
    """Formats field lists as CSV records.

    A field is enclosed when it contains the delimiter, the enclosure, ``\\r``
    or ``\\n``. Inside an enclosed field the enclosure is doubled unless the
    escape character directly precedes it.
    """

    line_terminator = "\n"

    def __init__(self, delimiter: str, enclosure: str, escape_char: str) -> None:
        self._delimiter = delimiter
        self._enclosure = enclosure
        self._escape_char = escape_char
        self._reserved = (delimiter, enclosure, "\r", "\n")

    def format_field(self, field: str) -> str:
        if not any(ch in field for ch in self._reserved):
            return field

        enclosure = self._enclosure
        if self._escape_char == enclosure:
            return enclosure + field.replace(enclosure, enclosure * 2) + enclosure

        out = [enclosure]
        escaped = False
        for ch in field:
            if ch == self._escape_char:
                escaped = True
            elif ch == enclosure and not escaped:
                out.append(enclosure)
            else:
                escaped = False
            out.append(ch)
        out.append(enclosure)
        return "".join(out)

    def format_record(self, fields: Iterable[str]) -> str:
        return self._delimiter.join(self.format_field(f) for f in fields) + self.line_terminator
