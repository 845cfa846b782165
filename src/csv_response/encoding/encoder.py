"""Encoding – CsvEncoder."""
from __future__ import annotations

import dataclasses
import io
import warnings
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Callable

from csv_response.encoding.formatters import Formatter, first_upper_no_underscores, to_text
from csv_response.encoding.transliteration import is_encodable, is_utf8, transliterate
from csv_response.encoding.writer import CsvRecordWriter
from csv_response.http import CsvDownload
from csv_response.kernel.errors import EncodingFailureError, InvalidArgumentError, InvalidInputError
from csv_response.observability.logging import get_logger

if TYPE_CHECKING:
    from csv_response.config.settings import EncoderSettings

__all__ = ["COMMA", "SEMICOLON", "TAB", "CsvEncoder"]

COMMA = ","
SEMICOLON = ";"
TAB = "\t"

_log = get_logger(__name__)


def _check_single_char(name: str, value: str) -> str:
    if not isinstance(value, str) or len(value) != 1 or value in ("\n", "\r"):
        _log.debug("csv.config.rejected", argument=name, value=value)
        raise InvalidArgumentError(
            f"{name.replace('_', ' ')} cannot be an empty or reserved character "
            "and must be a single character",
            argument=name,
        )
    return value


def _check_formatter(name: str, formatter: Callable[..., Any] | None) -> Callable[..., Any] | None:
    if formatter is not None and not callable(formatter):
        raise InvalidArgumentError(f"{name.replace('_', ' ')} must be callable", argument=name)
    return formatter


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable)


def _as_record(row: Any) -> dict[Any, Any] | None:
    """Ordered field mapping for *row*, ``None`` when it is not record-shaped."""
    if isinstance(row, Mapping):
        return dict(row)
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return {f.name: getattr(row, f.name) for f in dataclasses.fields(row)}
    if isinstance(row, tuple) and hasattr(row, "_asdict"):
        return dict(row._asdict())
    if _is_scalar(row):
        return None
    return dict(enumerate(row))


class CsvEncoder:
    """Encodes a fully materialised dataset of records as CSV bytes.

    Input text is Unicode; set :meth:`set_output_charset` to recode the
    output, in which case every label and value is transliterated (see
    :func:`~csv_response.encoding.transliteration.transliterate`).

    Enclosed fields double the enclosure (RFC 4180), except an enclosure
    directly preceded by the escape character, which is written once. Such
    values (``C:\\"dir"`` with the default ``\\``) therefore do not round-trip
    through a standard CSV reader; pick an escape character that never
    precedes the enclosure in your data, or set it equal to the enclosure.

    Setters validate eagerly and return the encoder so calls chain::

        body = (
            CsvEncoder(rows, "people.csv")
            .set_delimiter(";")
            .set_data_formatter(str.upper)
            .encode()
        )
    """

    def __init__(self, data: Any, filename: str = "output.csv", add_heading: bool = True) -> None:
        if isinstance(data, Mapping):
            data = data.values()
        if _is_scalar(data):
            raise InvalidInputError(
                "data must be an iterable of records "
                f"(mapping, named tuple, dataclass or sequence), {type(data).__name__!r} given",
                actual_type=type(data).__name__,
            )
        # iterator rows are drained once here so encode() stays repeatable
        self._rows: list[Any] = [list(row) if isinstance(row, Iterator) else row for row in data]
        self._filename = filename
        self._add_heading = add_heading
        self._delimiter = COMMA
        self._enclosure = '"'
        self._escape_char = "\\"
        self._output_charset = "utf-8"
        self._content_type = "text/csv"
        self._heading_formatter: Callable[[str], str] | None = first_upper_no_underscores
        self._data_formatter: Formatter | None = None

    @classmethod
    def from_settings(cls, data: Any, settings: EncoderSettings) -> CsvEncoder:
        """Build an encoder configured from an :class:`EncoderSettings` instance."""
        return (
            cls(data, settings.filename, settings.add_heading)
            .set_delimiter(settings.delimiter)
            .set_enclosure(settings.enclosure)
            .set_escape_char(settings.escape_char)
            .set_output_charset(settings.output_charset)
            .set_content_type(settings.content_type)
        )

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------

    def set_glue(self, glue: str) -> CsvEncoder:
        """Deprecated alias of :meth:`set_delimiter`."""
        warnings.warn(
            "set_glue() is deprecated, use set_delimiter()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.set_delimiter(glue)

    def set_delimiter(self, delimiter: str) -> CsvEncoder:
        self._delimiter = _check_single_char("delimiter", delimiter)
        return self

    def set_enclosure(self, enclosure: str) -> CsvEncoder:
        self._enclosure = _check_single_char("enclosure", enclosure)
        return self

    def set_escape_char(self, escape_char: str) -> CsvEncoder:
        self._escape_char = _check_single_char("escape_char", escape_char)
        return self

    def set_output_charset(self, charset: str) -> CsvEncoder:
        self._output_charset = charset
        return self

    def set_content_type(self, content_type: str) -> CsvEncoder:
        self._content_type = content_type
        return self

    def set_heading_formatter(self, formatter: Callable[[str], str] | None) -> CsvEncoder:
        """Replace the heading formatter; ``None`` keeps labels untouched."""
        self._heading_formatter = _check_formatter("heading_formatter", formatter)
        return self

    def set_data_formatter(self, formatter: Formatter | None) -> CsvEncoder:
        self._data_formatter = _check_formatter("data_formatter", formatter)
        return self

    # ------------------------------------------------------------------
    # read-only views
    # ------------------------------------------------------------------

    @property
    def rows(self) -> tuple[Any, ...]:
        return tuple(self._rows)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def add_heading(self) -> bool:
        return self._add_heading

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def enclosure(self) -> str:
        return self._enclosure

    @property
    def escape_char(self) -> str:
        return self._escape_char

    @property
    def output_charset(self) -> str:
        return self._output_charset

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def heading_formatter(self) -> Callable[[str], str] | None:
        return self._heading_formatter

    @property
    def data_formatter(self) -> Formatter | None:
        return self._data_formatter

    # ------------------------------------------------------------------
    # encoding
    # ------------------------------------------------------------------

    def encode(self) -> bytes:
        """Return the whole dataset as CSV bytes in the output charset."""
        if not self._rows:
            return b""

        charset = self._output_charset
        recode = not is_utf8(charset)
        if recode:
            self._check_codec(charset)
            self._check_structure(charset)
        _log.debug("csv.encode.start", rows=len(self._rows), charset=charset, recode=recode)

        writer = CsvRecordWriter(self._delimiter, self._enclosure, self._escape_char)
        buf = io.StringIO()
        for n, row in enumerate(self._rows):
            record = _as_record(row)
            if record is None:
                raise InvalidInputError(
                    f"row {n} must be a mapping or an iterable of fields, "
                    f"{type(row).__name__!r} given",
                    row=n,
                    actual_type=type(row).__name__,
                )
            if n == 0 and self._add_heading:
                buf.write(writer.format_record(self._labels(record, recode)))
            buf.write(writer.format_record(self._values(record, recode)))

        text = buf.getvalue()
        buf.close()
        try:
            body = text.encode(charset)
        except UnicodeEncodeError as exc:
            raise EncodingFailureError(
                f"encoded CSV is not representable in {charset!r}",
                detail={"charset": charset},
                cause=exc,
            ) from exc

        _log.debug("csv.encode.done", rows=len(self._rows), bytes=len(body), charset=charset)
        return body

    def to_download(self) -> CsvDownload:
        """Encode and bundle the body with the headers an HTTP layer needs."""
        return CsvDownload(
            body=self.encode(),
            filename=self._filename,
            content_type=self._content_type,
            charset=self._output_charset,
        )

    def _check_structure(self, charset: str) -> None:
        for name, ch in (
            ("delimiter", self._delimiter),
            ("enclosure", self._enclosure),
            ("escape_char", self._escape_char),
        ):
            if not is_encodable(ch, charset):
                raise InvalidArgumentError(
                    f"{name.replace('_', ' ')} {ch!r} cannot be encoded in {charset!r}",
                    argument=name,
                )

    @staticmethod
    def _check_codec(charset: str) -> None:
        try:
            transliterate("", charset)
        except LookupError as exc:
            raise InvalidArgumentError(
                f"unknown output charset {charset!r}", argument="output_charset", cause=exc
            ) from exc

    def _labels(self, record: dict[Any, Any], recode: bool) -> list[str]:
        labels = [to_text(key) for key in record]
        if self._heading_formatter is not None:
            labels = [to_text(self._heading_formatter(label)) for label in labels]
        if recode:
            labels = [transliterate(label, self._output_charset) for label in labels]
        return labels

    def _values(self, record: dict[Any, Any], recode: bool) -> list[str]:
        values = list(record.values())
        if self._data_formatter is not None:
            values = [self._data_formatter(value) for value in values]
        texts = [to_text(value) for value in values]
        if recode:
            texts = [transliterate(text, self._output_charset) for text in texts]
        return texts
