"""Encoding errors — configuration, input shape and assembly failures."""

from __future__ import annotations

from typing import Any

from csv_response.kernel.errors.base import BaseError


class InvalidArgumentError(BaseError, ValueError):
    """A configuration value was rejected (raised by the setters)."""

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument
        if argument is not None:
            self.detail.setdefault("argument", argument)


class InvalidInputError(BaseError, TypeError):
    """The dataset, or one of its rows, is not record-shaped.

    ``row`` is the zero-based position of the offending row, ``None`` when
    the dataset itself was rejected.
    """

    default_code = "invalid_input"

    def __init__(
        self,
        message: str,
        *,
        row: int | None = None,
        actual_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.row = row
        self.actual_type = actual_type
        if row is not None:
            self.detail.setdefault("row", row)
        if actual_type is not None:
            self.detail.setdefault("type", actual_type)


class EncodingFailureError(BaseError):
    """The encoded buffer could not be produced. Not recoverable."""

    default_code = "encoding_failure"


__all__ = ["EncodingFailureError", "InvalidArgumentError", "InvalidInputError"]
