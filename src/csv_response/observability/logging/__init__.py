"""Observability – structured logging helpers."""
from csv_response.observability.logging.factory import JsonLoggerFactory
from csv_response.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
