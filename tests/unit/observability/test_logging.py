"""Unit tests for structured logging setup and redaction."""
from __future__ import annotations

import importlib
import json
import logging

import pytest
import structlog

from event_producer.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


class TestSensitiveFieldsFilter:
    def test_redacts_top_level(self):
        f = SensitiveFieldsFilter()
        assert f.redact({"password": "x", "host": "mq"}) == {"password": "[REDACTED]", "host": "mq"}

    def test_case_insensitive(self):
        assert SensitiveFieldsFilter().redact({"Password": "x"}) == {"Password": "[REDACTED]"}

    def test_redacts_nested(self):
        data = {"broker": {"password": "guest", "port": 5672}, "event": "connecting"}
        assert SensitiveFieldsFilter().redact_deep(data) == {
            "broker": {"password": "[REDACTED]", "port": 5672},
            "event": "connecting",
        }

    def test_custom_fields(self):
        f = SensitiveFieldsFilter(frozenset({"email"}))
        assert f.redact({"email": "a@b", "password": "p"}) == {"email": "[REDACTED]", "password": "p"}

    def test_default_fields_cover_password(self):
        assert "password" in DEFAULT_SENSITIVE_FIELDS


class TestJsonLoggerFactory:
    def setup_method(self):
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def teardown_method(self):
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)
        structlog.reset_defaults()

    def test_configure_does_not_raise(self):
        JsonLoggerFactory.configure(level=logging.WARNING)

    def test_stdlib_records_render_as_json(self):
        JsonLoggerFactory.configure(level=logging.INFO)
        handler = logging.getLogger().handlers[-1]
        record = logging.LogRecord(
            "event_producer.adapters.rabbitmq.publisher", logging.INFO, __file__, 1,
            "rabbitmq.published topic=%s id=%s", ("user.login", "1-abc"), None,
        )
        line = json.loads(handler.format(record))
        assert line["event"] == "rabbitmq.published topic=user.login id=1-abc"
        assert line["level"] == "info"
        assert line["logger"] == "event_producer.adapters.rabbitmq.publisher"
        assert "timestamp" in line

    def test_quietens_broker_client_loggers(self):
        JsonLoggerFactory.configure(level=logging.DEBUG)
        assert logging.getLogger("aiormq").level == logging.WARNING
        assert logging.getLogger("aio_pika").level == logging.WARNING

    def test_get_logger_binds_initial_values(self):
        JsonLoggerFactory.configure(level=logging.WARNING)
        logger = get_logger("event_producer.test", component="publisher")
        assert structlog.get_context(logger) == {"component": "publisher"}


@pytest.mark.parametrize(
    "module",
    [
        "event_producer.adapters.rabbitmq",
        "event_producer.config",
        "event_producer.kernel.errors",
        "event_producer.kernel.messaging",
        "event_producer.kernel.time",
        "event_producer.observability.health",
        "event_producer.observability.logging",
        "event_producer.observability.metrics",
        "event_producer.resilience.retry",
        "event_producer.topics",
    ],
)
def test_public_exports_resolve(module):
    mod = importlib.import_module(module)
    for name in mod.__all__:
        assert hasattr(mod, name), f"{module}.{name}"
