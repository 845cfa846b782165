"""Root error class for the csv_response error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is the class-level ``default_code`` slug; ``detail`` carries the
    structured context (offending argument, row index, setting) that
    :meth:`to_dict` exposes to logs and the HTTP error body.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
