"""Infrastructure errors – broker I/O failures."""

from __future__ import annotations

from typing import Any

from event_producer.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to connect to the broker, or the broker dropped the connection."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class ReconnectExhaustedError(ConnectionError):
    """The reconnection budget is spent; only an explicit ``initialize()`` recovers."""

    default_code = "reconnect_exhausted"

    def __init__(self, resource: str, attempts: int, **kwargs: Any) -> None:
        super().__init__(
            resource,
            f"Gave up reconnecting to '{resource}' after {attempts} attempts",
            detail={"attempts": attempts},
            **kwargs,
        )
        self.attempts = attempts


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """Failed to serialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class TopologyDeclarationError(InfrastructureError):
    """Declaring an exchange, queue or binding failed."""

    default_code = "topology_declaration_error"

    def __init__(self, entity: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not declare '{entity}'", **kwargs)
        self.entity = entity


__all__ = [
    "ConnectionError",
    "InfrastructureError",
    "ReconnectExhaustedError",
    "SerializationError",
    "TimeoutError",
    "TopologyDeclarationError",
]
