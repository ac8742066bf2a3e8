"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from event_producer.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter


class JsonLoggerFactory:
    """Route stdlib ``logging`` records through structlog and render JSON lines."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = DEFAULT_SENSITIVE_FIELDS,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if sensitive_fields:
            _filter = SensitiveFieldsFilter(sensitive_fields)

            def _redact(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
                return _filter.redact_deep(event_dict)

            shared_processors.insert(0, _redact)

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        # aio-pika / aiormq are chatty at INFO about channel internals
        logging.getLogger("aiormq").setLevel(max(level, logging.WARNING))
        logging.getLogger("aio_pika").setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JsonLoggerFactory", "get_logger"]
