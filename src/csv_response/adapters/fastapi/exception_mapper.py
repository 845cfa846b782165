"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from csv_response.observability.logging import get_logger

_log = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'csv-response[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIExceptionMapper:
    """Register csv_response error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "invalid_input", "message": "...", "detail": {"row": 1, "type": "int"}}

    Mappings
    --------
    ``InvalidArgumentError``  → 400
    ``InvalidInputError``     → 422
    ``ConfigError``           → 500
    ``EncodingFailureError``  → 500
    """

    def __init__(self) -> None:
        _require_fastapi()
        from csv_response.config.validation import ConfigError
        from csv_response.kernel.errors import (
            EncodingFailureError,
            InvalidArgumentError,
            InvalidInputError,
        )

        self._map: list[tuple[type[Exception], int]] = [
            (InvalidArgumentError, 400),
            (InvalidInputError, 422),
            (ConfigError, 500),
            (EncodingFailureError, 500),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    from csv_response.kernel.errors.base import BaseError

                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    _log.warning("csv.request.failed", status=code, code=body["code"])
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
