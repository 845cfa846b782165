"""FastAPI adapter – CSV download response."""
from __future__ import annotations

from typing import Any

from csv_response.encoding import CsvEncoder
from csv_response.observability.logging import get_logger

_log = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'csv-response[fastapi]' to use the FastAPI adapter"
        ) from exc


def FastAPICsvResponse(
    encoder: CsvEncoder,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> Any:
    """Encode *encoder*'s dataset and wrap it in a Starlette ``Response``.

    The response carries ``Content-Type`` (content type plus charset),
    ``Content-Disposition: attachment; filename="..."`` and a
    ``Content-Length`` equal to the body's byte length. Extra *headers*
    are merged on top.
    """
    _require_fastapi()
    from fastapi import Response  # type: ignore[import-untyped]

    download = encoder.to_download()
    merged = download.headers()
    if headers:
        merged.update(headers)
    _log.info(
        "csv.response",
        filename=download.filename,
        bytes=len(download.body),
        media_type=download.media_type,
    )
    return Response(
        content=download.body,
        status_code=status_code,
        headers=merged,
        media_type=download.media_type,
    )


__all__ = ["FastAPICsvResponse"]
