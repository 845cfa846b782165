"""Kernel – framework-agnostic building blocks."""

from csv_response.kernel.errors import (
    BaseError,
    EncodingFailureError,
    InvalidArgumentError,
    InvalidInputError,
)

__all__ = [
    "BaseError",
    "EncodingFailureError",
    "InvalidArgumentError",
    "InvalidInputError",
]
