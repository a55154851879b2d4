"""Tests for structured logging setup."""

from __future__ import annotations

import json
import logging

import structlog

from breakwatch.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_json_format(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logger = get_logger("test_json")
        logger.info("candles_unavailable", market_id="0xabc")

        captured = capsys.readouterr()
        line = json.loads(captured.err.strip())
        assert line["event"] == "candles_unavailable"
        assert line["market_id"] == "0xabc"
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_console_format(self, capsys):
        setup_logging(level="INFO", log_format="console")
        logger = get_logger("test_console")
        logger.info("hello console", source="example")

        captured = capsys.readouterr()
        assert "hello console" in captured.err
        assert "example" in captured.err

    def test_log_level_filtering(self, capsys):
        setup_logging(level="WARNING", log_format="json")
        logger = get_logger("test_level")
        logger.info("should be hidden")
        logger.warning("should appear")

        captured = capsys.readouterr()
        assert "should be hidden" not in captured.err
        assert "should appear" in captured.err

    def test_get_logger_with_context(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logger = get_logger("test_ctx", market_id="m1", source="live")
        logger.info("context test")

        captured = capsys.readouterr()
        line = json.loads(captured.err.strip())
        assert line["market_id"] == "m1"
        assert line["source"] == "live"

    def test_contextvars_binding(self, capsys):
        setup_logging(level="INFO", log_format="json")
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(run_id="abc123")

        logger = get_logger("test_ctxvars")
        logger.info("with context var")

        captured = capsys.readouterr()
        line = json.loads(captured.err.strip())
        assert line["run_id"] == "abc123"

        structlog.contextvars.clear_contextvars()

    def test_defaults_to_console(self, capsys):
        setup_logging()
        get_logger("test_default").info("readable line", market_id="m1")

        captured = capsys.readouterr()
        assert "readable line" in captured.err
        assert not captured.err.lstrip().startswith("{")

    def test_http_client_loggers_are_quieted(self, capsys):
        setup_logging(level="DEBUG", log_format="json")
        logging.getLogger("httpx").info("HTTP Request: GET /data")
        logging.getLogger("httpx").warning("HTTP retry")

        captured = capsys.readouterr()
        assert "HTTP Request" not in captured.err
        assert "HTTP retry" in captured.err
