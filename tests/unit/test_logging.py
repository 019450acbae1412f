"""Tests for logging utilities."""

import json
from typing import Any

import pytest

from utils.logging import StructuredLogger, get_correlation_id, get_logger


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    def test_logger_initialization(self) -> None:
        logger = StructuredLogger("test", "test-id-123")

        assert logger.correlation_id == "test-id-123"

    def test_logger_generates_correlation_id(self) -> None:
        logger = StructuredLogger("test")

        assert logger.correlation_id

    def test_info_logs_json(self, capsys: Any) -> None:
        logger = StructuredLogger("test", "test-id")

        logger.info("Test message", key="value", skipped=None)

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "Test message"
        assert log_entry["correlationId"] == "test-id"
        assert log_entry["key"] == "value"
        assert "skipped" not in log_entry
        assert "timestamp" in log_entry

    def test_error_logs_json(self, capsys: Any) -> None:
        logger = StructuredLogger("test", "test-id")

        logger.error("Error message", error="details")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["level"] == "ERROR"
        assert log_entry["error"] == "details"
        assert log_entry["logger"] == "test"

    def test_debug_suppressed_at_info_level(self, capsys: Any, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        logger = StructuredLogger("test-info-level", "test-id")

        logger.debug("hidden")

        assert capsys.readouterr().out == ""

    def test_debug_emitted_at_debug_level(self, capsys: Any, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        logger = StructuredLogger("test-debug-level", "test-id")

        logger.debug("shown")

        assert json.loads(capsys.readouterr().out.strip())["level"] == "DEBUG"

    def test_non_json_values_are_stringified(self, capsys: Any) -> None:
        from decimal import Decimal

        StructuredLogger("test", "test-id").info("price", price=Decimal("1.50"))

        assert json.loads(capsys.readouterr().out.strip())["price"] == "1.50"


def test_get_logger_returns_structured_logger() -> None:
    assert isinstance(get_logger("handlers.product_operations"), StructuredLogger)


class TestGetCorrelationId:
    """Tests for get_correlation_id."""

    def test_from_appsync_request_context(self) -> None:
        assert get_correlation_id({"requestContext": {"requestId": "req-1"}}) == "req-1"

    def test_from_header(self) -> None:
        event = {"request": {"headers": {"x-correlation-id": "hdr-1"}}}

        assert get_correlation_id(event) == "hdr-1"

    def test_from_appsync_request_id_header(self) -> None:
        event = {"request": {"headers": {"x-amzn-requestid": "amzn-req-1"}}}

        assert get_correlation_id(event) == "amzn-req-1"

    def test_client_header_wins_over_appsync_request_id(self) -> None:
        event = {"request": {"headers": {"x-amzn-requestid": "amzn-req-1", "x-correlation-id": "hdr-1"}}}

        assert get_correlation_id(event) == "hdr-1"

    def test_null_request_is_ignored(self) -> None:
        event = {"requestContext": None, "request": {"headers": None}}

        assert get_correlation_id(event)

    def test_generates_when_absent(self) -> None:
        assert get_correlation_id({}) != get_correlation_id({})


def test_bind_event_sets_correlation_id(capsys: Any) -> None:
    logger = StructuredLogger("test", "initial")

    assert logger.bind_event({"request": {"headers": {"x-amzn-requestid": "amzn-req-2"}}}) == "amzn-req-2"
    logger.info("bound")

    assert json.loads(capsys.readouterr().out.strip())["correlationId"] == "amzn-req-2"
