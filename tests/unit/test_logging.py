"""Unit tests for JSON line logging"""
import json
import logging
import sys

from core.logging import JsonFormatter
from service.dto import VideoFilter


class TestJsonFormatter:
    """Structured fields end up in the JSON line"""

    def test_video_listing_fields(self, static_service):
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        service_logger = logging.getLogger("service.videos_service")
        service_logger.addHandler(handler)
        previous_level = service_logger.level
        service_logger.setLevel(logging.INFO)
        try:
            static_service.list_videos(VideoFilter(category="React"), trace_id="trace_123")
        finally:
            service_logger.removeHandler(handler)
            service_logger.setLevel(previous_level)

        line = json.loads(JsonFormatter().format(records[-1]))

        assert line["msg"] == "Videos listed"
        assert line["level"] == "INFO"
        assert line["trace_id"] == "trace_123"
        assert line["source"] == "static"
        assert line["category"] == "React"
        assert line["count"] == 1
        assert isinstance(line["latency_ms"], int)

    def test_unknown_extra_fields_are_dropped(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello", None, None)
        record.password = "secret"

        line = json.loads(JsonFormatter().format(record))

        assert line["msg"] == "hello"
        assert "password" not in line

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        line = json.loads(JsonFormatter().format(record))

        assert "RuntimeError: boom" in line["exception"]
