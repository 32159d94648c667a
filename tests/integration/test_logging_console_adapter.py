"""Integration tests for the structlog ConsoleAdapter."""

import json

import pytest
import structlog

from src.infrastructure.logging import ConsoleAdapter


@pytest.mark.integration
class TestConsoleAdapter:
    def test_json_output_carries_event_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.info("login_succeeded", user_id="u-1")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "login_succeeded"
        assert payload["user_id"] == "u-1"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_error_adds_exception_details(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("audit_record_failed", error=RuntimeError("db down"))

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["error_type"] == "RuntimeError"
        assert payload["error_message"] == "db down"

    def test_level_filters_lower_messages(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_bind_adds_context(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(request_id="r-1")

        logger.info("bound")

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["request_id"] == "r-1"

    def test_contextvars_are_merged(self, capsys):
        logger = ConsoleAdapter(use_json=True)
        structlog.contextvars.bind_contextvars(trace_id="t-1")
        try:
            logger.info("traced")
        finally:
            structlog.contextvars.clear_contextvars()

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["trace_id"] == "t-1"

    def test_console_renderer_is_human_readable(self, capsys):
        logger = ConsoleAdapter(use_json=False)

        logger.info("plain_event", key="value")

        out = capsys.readouterr().out
        assert "plain_event" in out
        assert "key=value" in out
