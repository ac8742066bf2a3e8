"""Observability – structured logging setup."""
from event_producer.observability.logging.factory import JsonLoggerFactory, get_logger
from event_producer.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
