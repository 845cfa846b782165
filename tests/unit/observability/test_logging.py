"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from csv_response.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_emits_event(self) -> None:
        with capture_logs() as logs:
            get_logger("csv.test").info("hello", rows=3)
        assert logs == [{"event": "hello", "rows": 3, "log_level": "info"}]

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("csv.test", filename="people.csv").warning("slow")
        assert logs[0]["filename"] == "people.csv"
        assert logs[0]["log_level"] == "warning"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_renders_json_lines(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.DEBUG, stream=stream)
        structlog.get_logger("csv.factory").info("csv.encode.done", rows=2, bytes=27)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "csv.encode.done"
        assert record["rows"] == 2
        assert record["bytes"] == 27
        assert record["level"] == "info"
        assert record["logger"] == "csv.factory"
        assert "timestamp" in record

    def test_level_filters(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.WARNING, stream=stream)
        structlog.get_logger("csv.factory").debug("quiet")
        assert stream.getvalue() == ""

    def test_replaces_root_handlers(self) -> None:
        JsonLoggerFactory.configure(stream=io.StringIO())
        assert len(logging.getLogger().handlers) == 1
