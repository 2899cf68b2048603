"""
Tests for setup_logging().

setup_logging() configures structlog and the stdlib root logger once per
process; if it breaks, every other log line in the pipeline breaks with it.
"""

import json
import logging
from io import StringIO

import structlog

from market_stats.infrastructure.observability import setup_logging


def capture(level: int = logging.INFO) -> tuple[StringIO, logging.Handler]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.root.addHandler(handler)
    return stream, handler


def json_lines(stream: StringIO) -> list[dict]:
    parsed = []
    for line in stream.getvalue().splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            parsed.append(json.loads(line))
        except json.JSONDecodeError:
            continue
    return parsed


class TestSetupLogging:
    def test_json_mode(self, clean_logging):
        setup_logging(level="INFO", json_logs=True, include_timestamp=True)
        assert structlog.is_configured()

        logging.root.setLevel(logging.INFO)
        stream, handler = capture()
        try:
            structlog.get_logger("test_json").info("json_test_event", value=123)

            entries = json_lines(stream)
            assert entries, "No valid JSON found"
            entry = entries[-1]
            assert entry["event"] == "json_test_event"
            assert entry["value"] == 123
            assert entry["app"] == "market-stats"
            assert entry["severity"] == "INFO"
            assert "timestamp" in entry
        finally:
            logging.root.removeHandler(handler)

    def test_text_mode(self, clean_logging):
        setup_logging(level="INFO", json_logs=False)
        logging.root.setLevel(logging.INFO)
        stream, handler = capture()
        try:
            structlog.get_logger("test_text").info("text_test_event", value=456)

            output = stream.getvalue()
            assert "text_test_event" in output
            assert json_lines(stream) == []
        finally:
            logging.root.removeHandler(handler)

    def test_levels(self, clean_logging):
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.root.handlers = []
            logging.root.setLevel(logging.WARNING)
            structlog.reset_defaults()

            setup_logging(level=level, json_logs=True)

            assert logging.root.level == getattr(logging, level)

    def test_without_timestamp(self, clean_logging):
        setup_logging(level="INFO", json_logs=True, include_timestamp=False)
        logging.root.setLevel(logging.INFO)
        stream, handler = capture()
        try:
            logger = structlog.get_logger("test_no_ts")
            logger.debug("debug_should_not_appear")
            logger.info("no_timestamp_test", test_value=True)

            entries = json_lines(stream)
            assert [e["event"] for e in entries] == ["no_timestamp_test"]
            assert "timestamp" not in entries[0]
        finally:
            logging.root.removeHandler(handler)

    def test_invalid_level_falls_back_to_info(self, clean_logging):
        setup_logging(level="INVALID_LEVEL", json_logs=True)

        assert structlog.is_configured()
        assert logging.root.level == logging.INFO

    def test_error_severity(self, clean_logging):
        setup_logging(level="INFO", json_logs=True)
        logging.root.setLevel(logging.INFO)
        stream, handler = capture()
        try:
            structlog.get_logger("test_error").error("upstream_rejected", status=429)

            entry = json_lines(stream)[-1]
            assert entry["severity"] == "ERROR"
            assert entry["status"] == 429
        finally:
            logging.root.removeHandler(handler)
