"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from apns_payload.notification import DefaultNotificationBuilder
from apns_payload.payload import APS, Payload
from apns_payload.observability import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestSensitiveFieldsFilter:
    def test_device_token_is_sensitive_by_default(self) -> None:
        assert "device_token" in DEFAULT_SENSITIVE_FIELDS

    def test_redacts_known_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"device_token": "abc", "builder": "web"})
        assert result == {"device_token": SensitiveFieldsFilter.REDACTED, "builder": "web"}

    def test_redact_deep(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"ctx": {"Token": "abc"}})
        assert result["ctx"]["Token"] == SensitiveFieldsFilter.REDACTED

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"topic"}))
        assert f.redact({"topic": "x", "device_token": "y"}) == {
            "topic": SensitiveFieldsFilter.REDACTED,
            "device_token": "y",
        }

    def test_processor_call(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "e", "device_token": "t"})
        assert event["device_token"] == SensitiveFieldsFilter.REDACTED


class TestJsonLoggerFactory:
    def test_build_event_is_json(self, reset_logging, capsys) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        DefaultNotificationBuilder("Hi").set_badge(1).build("secret-token")
        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        events = [json.loads(line) for line in lines]
        built = [e for e in events if e["event"] == "notification.built"]
        assert len(built) == 1
        assert built[0]["builder"] == "default"
        assert built[0]["aps_keys"] == ["alert", "badge"]
        assert "device_token" not in built[0]
        assert "secret-token" not in "\n".join(lines)

    def test_level_applied(self, reset_logging) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        logger = get_logger("apns.test", component="builder")
        assert logger is not None
        assert hasattr(logger, "info")


class TestUnconfiguredLogging:
    def test_build_writes_nothing(self, reset_logging, capsys) -> None:
        structlog.reset_defaults()
        DefaultNotificationBuilder("Hi").build("secret-token")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_serialization_failure_writes_nothing(self, reset_logging, capsys) -> None:
        structlog.reset_defaults()
        result = Payload(device_token="secret-token", aps=APS(), data={"when": object()}).to_json_string()
        assert result.is_err()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_reach_stdlib_logging(self, reset_logging, caplog) -> None:
        structlog.reset_defaults()
        caplog.set_level(logging.DEBUG, logger="apns_payload")
        DefaultNotificationBuilder("Hi").set_badge(2).build("secret-token")
        records = [r for r in caplog.records if r.getMessage() == "notification.built"]
        assert len(records) == 1
        assert records[0].name == "apns_payload.notification.builder"
        assert records[0].builder == "default"
        assert records[0].aps_keys == ["alert", "badge"]
        assert not hasattr(records[0], "device_token")
        assert "secret-token" not in caplog.text
