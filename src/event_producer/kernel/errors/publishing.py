"""Publish-path errors.

None of these ever escape ``MessagePublisher.publish``; they are built,
logged and carried on a :class:`~event_producer.kernel.messaging.PublishResult`.
"""

from __future__ import annotations

from typing import Any

from event_producer.kernel.errors.infrastructure import InfrastructureError


class PublishError(InfrastructureError):
    """A message could not be handed to the broker."""

    default_code = "publish_error"

    def __init__(self, topic: str, message: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.topic = topic


class InvalidTopicError(PublishError):
    """Topic is not in the registry; rejected before any network call."""

    default_code = "invalid_topic"

    def __init__(self, topic: str, **kwargs: Any) -> None:
        super().__init__(topic, f"Topic '{topic}' is not registered", **kwargs)


class NotConnectedError(PublishError):
    """Publish attempted while the connection is not ``CONNECTED``."""

    default_code = "not_connected"

    def __init__(self, topic: str, state: str, **kwargs: Any) -> None:
        super().__init__(
            topic,
            f"Cannot publish '{topic}' while connection is {state}",
            detail={"state": state},
            **kwargs,
        )
        self.state = state


class PublishRejectedError(PublishError):
    """The broker client did not accept the message."""

    default_code = "publish_rejected"

    def __init__(self, topic: str, reason: str | None = None, **kwargs: Any) -> None:
        super().__init__(topic, reason or f"Broker rejected message for '{topic}'", **kwargs)


__all__ = [
    "InvalidTopicError",
    "NotConnectedError",
    "PublishError",
    "PublishRejectedError",
]
