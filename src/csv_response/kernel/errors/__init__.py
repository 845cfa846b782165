"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── InvalidArgumentError   (encoding.py)  bad encoder configuration
    ├── InvalidInputError      (encoding.py)  malformed dataset or row
    ├── EncodingFailureError   (encoding.py)  output could not be assembled
    └── ConfigError            (csv_response.config.validation)
"""

from csv_response.kernel.errors.base import BaseError
from csv_response.kernel.errors.encoding import (
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
