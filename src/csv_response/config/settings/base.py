"""Config settings – Settings base class and EncoderSettings."""
from __future__ import annotations

import codecs
import dataclasses

from csv_response.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class EncoderSettings(Settings):
    """Encoder defaults, read from ``CSV_*`` environment variables."""

    _prefix: dataclasses.ClassVar[str] = "CSV"

    delimiter: str = ","
    enclosure: str = '"'
    escape_char: str = "\\"
    output_charset: str = "utf-8"
    content_type: str = "text/csv"
    filename: str = "output.csv"
    add_heading: bool = True

    def _validate(self) -> None:
        for name in ("delimiter", "enclosure", "escape_char"):
            value = getattr(self, name)
            if len(value) != 1 or value in ("\n", "\r"):
                raise InvalidSettingValueError(name, value, "must be a single non line-break character")
        try:
            codecs.lookup(self.output_charset)
        except LookupError:
            raise InvalidSettingValueError("output_charset", self.output_charset, "unknown codec") from None


__all__ = ["EncoderSettings", "Settings"]
