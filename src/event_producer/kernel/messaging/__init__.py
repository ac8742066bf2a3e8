"""Kernel messaging – envelope and publish outcome primitives."""
from event_producer.kernel.messaging.message import (
    BatchResult,
    DeliveryOptions,
    JsonValue,
    MessageEnvelope,
    MessageId,
    PublishRequest,
    PublishResult,
)

__all__ = [
    "BatchResult",
    "DeliveryOptions",
    "JsonValue",
    "MessageEnvelope",
    "MessageId",
    "PublishRequest",
    "PublishResult",
]
