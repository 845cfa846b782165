"""HTTP – framework-neutral description of a CSV download."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CsvDownload"]


@dataclass(frozen=True)
class CsvDownload:
    """Encoded CSV body plus the metadata a response needs."""

    body: bytes
    filename: str = "output.csv"
    content_type: str = "text/csv"
    charset: str = "utf-8"

    @property
    def media_type(self) -> str:
        return f"{self.content_type}; charset={self.charset}"

    @property
    def content_disposition(self) -> str:
        if not self.filename:
            return "attachment"
        return f'attachment; filename="{self.filename}"'

    def headers(self) -> dict[str, str]:
        """``Content-Type``, ``Content-Disposition`` and ``Content-Length``."""
        return {
            "Content-Type": self.media_type,
            "Content-Disposition": self.content_disposition,
            "Content-Length": str(len(self.body)),
        }
