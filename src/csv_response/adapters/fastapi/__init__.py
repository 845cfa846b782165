"""FastAPI adapter – CSV download response and exception mapper."""
from csv_response.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from csv_response.adapters.fastapi.responses import FastAPICsvResponse

__all__ = [
    "FastAPICsvResponse",
    "FastAPIExceptionMapper",
]
