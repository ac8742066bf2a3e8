"""RabbitMQ adapter – TopologyInitializer."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any

from aio_pika import ExchangeType

from event_producer.kernel.errors import TopologyDeclarationError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class QueueBinding:
    queue_name: str
    routing_pattern: str


DEFAULT_EXCHANGE = "topic_exchange"

DEFAULT_BINDINGS: tuple[QueueBinding, ...] = (
    QueueBinding("user_events", "user.*"),
    QueueBinding("order_events", "order.*"),
    QueueBinding("notification_events", "notification.*"),
    QueueBinding("error_logs", "system.error.logged"),
)


class TopologyInitializer:
    """Declare the durable topic exchange and its queue bindings.

    Declarations are idempotent on the broker side, so running this after
    every successful connect is safe. Failures are logged and returned, never
    raised: the publishing connection stays usable either way. Work happens on
    a short-lived channel of its own because a failed declaration closes the
    channel it was issued on.
    """

    def __init__(
        self,
        exchange_name: str = DEFAULT_EXCHANGE,
        bindings: tuple[QueueBinding, ...] = DEFAULT_BINDINGS,
    ) -> None:
        self._exchange_name = exchange_name
        self._bindings = bindings

    @property
    def exchange_name(self) -> str:
        return self._exchange_name

    @property
    def bindings(self) -> tuple[QueueBinding, ...]:
        return self._bindings

    async def declare(self, connection: Any) -> list[TopologyDeclarationError]:
        """Declare everything; return the declarations that failed (empty on success)."""
        try:
            channel = await connection.channel()
        except Exception as exc:  # noqa: BLE001
            return [self._failed("channel", exc)]

        errors: list[TopologyDeclarationError] = []
        try:
            try:
                exchange = await channel.declare_exchange(
                    self._exchange_name, ExchangeType.TOPIC, durable=True
                )
            except Exception as exc:  # noqa: BLE001
                errors.append(self._failed(f"exchange:{self._exchange_name}", exc))
                return errors

            for binding in self._bindings:
                try:
                    queue = await channel.declare_queue(binding.queue_name, durable=True)
                    await queue.bind(exchange, routing_key=binding.routing_pattern)
                except Exception as exc:  # noqa: BLE001
                    errors.append(self._failed(f"queue:{binding.queue_name}", exc))
        finally:
            await self._close_channel(channel)

        if errors:
            logger.warning(
                "rabbitmq.topology_partial exchange=%s failed=%d of=%d",
                self._exchange_name, len(errors), len(self._bindings),
            )
        else:
            logger.info(
                "rabbitmq.topology_declared exchange=%s queues=%d",
                self._exchange_name, len(self._bindings),
            )
        return errors

    def _failed(self, entity: str, exc: Exception) -> TopologyDeclarationError:
        error = TopologyDeclarationError(entity, f"Could not declare '{entity}': {exc}", cause=exc)
        logger.error("rabbitmq.topology_failed entity=%s error=%r", entity, exc)
        return error

    @staticmethod
    async def _close_channel(channel: Any) -> None:
        if channel.is_closed:
            return
        try:
            await channel.close()
        except Exception as exc:  # noqa: BLE001
            logger.debug("rabbitmq.topology_channel_close_failed error=%r", exc)


__all__ = ["DEFAULT_BINDINGS", "DEFAULT_EXCHANGE", "QueueBinding", "TopologyInitializer"]
