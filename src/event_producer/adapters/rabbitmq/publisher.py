"""RabbitMQ adapter – MessagePublisher, the only write path to the broker."""
from __future__ import annotations

import asyncio
import logging
import secrets
import string
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import aio_pika
from pamqp.commands import Basic

from event_producer.adapters.rabbitmq.connection import ConnectionManager
from event_producer.kernel.errors import (
    InfrastructureError,
    InvalidTopicError,
    NotConnectedError,
    PublishRejectedError,
    SerializationError,
    TimeoutError,
)
from event_producer.kernel.messaging import (
    DeliveryOptions,
    JsonValue,
    MessageEnvelope,
    MessageId,
    PublishResult,
)
from event_producer.kernel.time import Clock, SystemClock, to_iso8601
from event_producer.observability.metrics import PublisherStats
from event_producer.topics import TopicRegistry, default_registry

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 8


def _to_base36(value: int) -> str:
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits)) or "0"


def generate_message_id(clock: Clock | None = None) -> MessageId:
    """``<epoch-millis>-<8 random base36 chars>``, unique in practice within a process."""
    millis = int((clock or SystemClock()).timestamp() * 1000)
    suffix = _to_base36(secrets.randbelow(36 ** _SUFFIX_LENGTH)).rjust(_SUFFIX_LENGTH, "0")
    return f"{millis}-{suffix}"


class MessagePublisher:
    """Validate, wrap, serialise and dispatch one event.

    ``publish`` never raises: every failure becomes ``False`` plus a log line,
    so a lost notification cannot abort the business operation that sent it.
    ``try_publish`` returns the same outcome with its diagnostic attached.
    """

    def __init__(
        self,
        connection: ConnectionManager,
        registry: TopicRegistry | None = None,
        clock: Clock | None = None,
        publish_timeout: float | None = None,
    ) -> None:
        self._connection = connection
        self._registry = registry or default_registry
        self._clock = clock or SystemClock()
        self._timeout = (
            publish_timeout if publish_timeout is not None else connection.settings.publish_timeout
        )
        self._last_moment: datetime | None = None
        self.stats = PublisherStats()

    def generate_message_id(self) -> MessageId:
        return generate_message_id(self._clock)

    def build_envelope(self, topic: str, payload: JsonValue) -> MessageEnvelope:
        moment = self._clock.now()
        if self._last_moment is not None and moment < self._last_moment:
            moment = self._last_moment
        self._last_moment = moment
        return MessageEnvelope(
            topic=topic,
            data=payload,
            timestamp=to_iso8601(moment),
            message_id=self.generate_message_id(),
        )

    async def publish(
        self,
        topic: str,
        payload: JsonValue,
        options: DeliveryOptions | Mapping[str, Any] | None = None,
    ) -> bool:
        result = await self.try_publish(topic, payload, options)
        return result.ok

    async def try_publish(
        self,
        topic: str,
        payload: JsonValue,
        options: DeliveryOptions | Mapping[str, Any] | None = None,
    ) -> PublishResult:
        if not self._registry.is_valid_topic(topic):
            self.stats.invalid_topic += 1
            return self._failure(topic, InvalidTopicError(topic))

        state = self._connection.get_state()
        exchange = self._connection.exchange
        if not state.is_connected or exchange is None:
            self.stats.not_connected += 1
            return self._failure(topic, NotConnectedError(topic, state.value))

        envelope = self.build_envelope(topic, payload)
        try:
            body = envelope.to_bytes()
            delivery = (
                options if isinstance(options, DeliveryOptions)
                else DeliveryOptions.from_mapping(options)
            )
        except SerializationError as exc:
            return self._failure(topic, exc, envelope.message_id)
        except (TypeError, ValueError) as exc:
            return self._failure(
                topic,
                PublishRejectedError(topic, f"Invalid delivery options: {exc}", cause=exc),
                envelope.message_id,
            )

        message = aio_pika.Message(
            body=body,
            content_type="application/json",
            delivery_mode=(
                aio_pika.DeliveryMode.PERSISTENT if delivery.persistent
                else aio_pika.DeliveryMode.NOT_PERSISTENT
            ),
            expiration=None if delivery.expiration_ms is None else delivery.expiration_ms / 1000,
            headers=dict(delivery.headers),
            message_id=envelope.message_id,
        )

        # mandatory=False: topics with no bound queue are dropped by the broker, not returned
        try:
            async with self._connection.write_lock:
                confirmation = await exchange.publish(
                    message, routing_key=topic, mandatory=False, timeout=self._timeout
                )
        except asyncio.TimeoutError as exc:
            return self._failure(
                topic,
                TimeoutError(f"Publishing '{topic}' exceeded {self._timeout}s", cause=exc),
                envelope.message_id,
            )
        except Exception as exc:  # noqa: BLE001
            return self._failure(
                topic, PublishRejectedError(topic, repr(exc), cause=exc), envelope.message_id
            )

        if isinstance(confirmation, Basic.Nack):
            return self._failure(topic, PublishRejectedError(topic), envelope.message_id)

        self.stats.published += 1
        logger.info("rabbitmq.published topic=%s id=%s", topic, envelope.message_id)
        return PublishResult.success(topic, envelope.message_id)

    def _failure(
        self,
        topic: str,
        error: InfrastructureError,
        message_id: MessageId | None = None,
    ) -> PublishResult:
        self.stats.failed += 1
        logger.error(
            "rabbitmq.publish_failed topic=%s id=%s code=%s reason=%s",
            topic, message_id, error.code, error.message,
        )
        return PublishResult.failure(topic, error, message_id)


__all__ = ["MessagePublisher", "generate_message_id"]
