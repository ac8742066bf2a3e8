"""Kernel messaging – envelope, delivery options and publish outcomes."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from event_producer.kernel.errors import InfrastructureError, SerializationError

type JsonValue = None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]
type MessageId = str


@dataclasses.dataclass(frozen=True)
class DeliveryOptions:
    """Per-message broker delivery settings.

    ``persistent`` messages survive a broker restart. ``expiration_ms`` is a
    per-message TTL; ``None`` means no expiry.
    """

    persistent: bool = True
    expiration_ms: int | None = None
    headers: dict[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        # the broker closes the channel on a negative TTL
        if self.expiration_ms is not None and self.expiration_ms < 0:
            raise ValueError(f"expiration must not be negative, got {self.expiration_ms}")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "DeliveryOptions":
        """Build from the loose ``{persistent, expiration, headers}`` shape callers send.

        Raises ``TypeError`` for a non-mapping *raw* or ``headers`` and
        ``ValueError`` for an expiration that is not a non-negative integer.
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise TypeError(f"delivery options must be a mapping, got {type(raw).__name__}")
        headers = raw.get("headers") or {}
        if not isinstance(headers, Mapping):
            raise TypeError(f"headers must be a mapping, got {type(headers).__name__}")
        persistent = raw.get("persistent")
        expiration = raw.get("expiration", raw.get("expiration_ms"))
        return cls(
            persistent=True if persistent is None else bool(persistent),
            expiration_ms=None if expiration is None else int(expiration),
            headers={str(k): str(v) for k, v in headers.items()},
        )


@dataclasses.dataclass(frozen=True)
class MessageEnvelope:
    """What actually goes on the wire. Built per publish call, never stored."""

    topic: str
    data: JsonValue
    timestamp: str
    message_id: MessageId

    def to_dict(self) -> dict[str, JsonValue]:
        return {
            "topic": self.topic,
            "data": self.data,
            "timestamp": self.timestamp,
            "messageId": self.message_id,
        }

    def to_bytes(self) -> bytes:
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Payload for '{self.topic}' is not JSON serialisable",
                payload_type=type(self.data).__name__,
                cause=exc,
            ) from exc


@dataclasses.dataclass(frozen=True)
class PublishRequest:
    """One item of a batch."""

    topic: str
    payload: JsonValue = None
    options: DeliveryOptions | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PublishRequest":
        if not isinstance(raw, Mapping):
            raise TypeError(f"publish request must be a mapping, got {type(raw).__name__}")
        payload = raw["data"] if "data" in raw else raw.get("payload")
        options = raw.get("options")
        if not isinstance(options, DeliveryOptions):
            options = DeliveryOptions.from_mapping(options) if options else None
        return cls(topic=raw["topic"], payload=payload, options=options)


@dataclasses.dataclass(frozen=True)
class PublishResult:
    """Non-throwing outcome of a single publish."""

    ok: bool
    topic: str
    message_id: MessageId | None = None
    error: InfrastructureError | None = None

    @property
    def detail(self) -> str | None:
        return self.error.message if self.error is not None else None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, topic: str, message_id: MessageId) -> "PublishResult":
        return cls(ok=True, topic=topic, message_id=message_id)

    @classmethod
    def failure(
        cls,
        topic: str,
        error: InfrastructureError,
        message_id: MessageId | None = None,
    ) -> "PublishResult":
        return cls(ok=False, topic=topic, message_id=message_id, error=error)


@dataclasses.dataclass
class BatchResult:
    """Partitioned outcome of ``send_batch``.

    Both lists hold the caller's own request objects, in submission order.
    """

    success: list[PublishRequest | Mapping[str, Any]] = dataclasses.field(default_factory=list)
    failed: list[PublishRequest | Mapping[str, Any]] = dataclasses.field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.success) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


__all__ = [
    "BatchResult",
    "DeliveryOptions",
    "JsonValue",
    "MessageEnvelope",
    "MessageId",
    "PublishRequest",
    "PublishResult",
]
