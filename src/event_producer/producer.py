"""EventProducer – the one object business code holds to emit domain events.

Build it once at process start and hand it to whoever needs to publish::

    producer = EventProducer(EnvSettingsLoader().load(BrokerSettings))
    await producer.initialize()
    await producer.publish(OrderTopic.CREATED, {"orderId": 42})
    ...
    await producer.shutdown()
"""
from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from event_producer.adapters.rabbitmq import (
    BatchDispatcher,
    ConnectionManager,
    ConnectionState,
    MessagePublisher,
    TopologyInitializer,
)
from event_producer.config.settings import BrokerSettings
from event_producer.kernel.messaging import (
    BatchResult,
    DeliveryOptions,
    JsonValue,
    PublishRequest,
    PublishResult,
)
from event_producer.kernel.time import Clock
from event_producer.observability.health import BrokerHealthCheck
from event_producer.observability.metrics import PublisherStats
from event_producer.resilience.retry import BackoffStrategy
from event_producer.topics import TopicRegistry

logger = logging.getLogger(__name__)


class EventProducer:
    """Wires connection manager, topology, publisher and batch dispatcher."""

    def __init__(
        self,
        settings: BrokerSettings | None = None,
        *,
        registry: TopicRegistry | None = None,
        clock: Clock | None = None,
        backoff: BackoffStrategy | None = None,
        topology: TopologyInitializer | None = None,
    ) -> None:
        self.settings = settings or BrokerSettings()
        self.topology = topology or TopologyInitializer(exchange_name=self.settings.exchange)
        self.connection = ConnectionManager(self.settings, topology=self.topology, backoff=backoff)
        self.publisher = MessagePublisher(self.connection, registry=registry, clock=clock)
        self.dispatcher = BatchDispatcher(self.publisher)
        self.health_check = BrokerHealthCheck(self.connection)
        self._shutdown_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ConnectionState:
        return self.connection.get_state()

    @property
    def stats(self) -> PublisherStats:
        return self.publisher.stats

    async def initialize(self) -> bool:
        return await self.connection.initialize()

    async def publish(
        self,
        topic: str,
        payload: JsonValue,
        options: DeliveryOptions | Mapping[str, Any] | None = None,
    ) -> bool:
        return await self.publisher.publish(topic, payload, options)

    async def try_publish(
        self,
        topic: str,
        payload: JsonValue,
        options: DeliveryOptions | Mapping[str, Any] | None = None,
    ) -> PublishResult:
        return await self.publisher.try_publish(topic, payload, options)

    async def send_batch(
        self, requests: Iterable[PublishRequest | Mapping[str, Any]]
    ) -> BatchResult:
        return await self.dispatcher.send_batch(requests)

    async def shutdown(self) -> None:
        await self.connection.shutdown()

    async def __aenter__(self) -> "EventProducer":
        await self.initialize()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.shutdown()

    def install_signal_handlers(
        self,
        on_shutdown: Callable[[], None] | None = None,
        signals: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM),
    ) -> None:
        """Schedule ``shutdown()`` when the process is interrupted.

        *on_shutdown* runs after the connection is closed, typically to release
        whatever the main coroutine is waiting on.
        """
        loop = asyncio.get_running_loop()

        def _handle(signum: signal.Signals) -> None:
            if self._shutdown_task is not None:
                return
            logger.info("producer.signal_received signal=%s", signum.name)
            self._shutdown_task = loop.create_task(self._shutdown_then(on_shutdown))

        for signum in signals:
            loop.add_signal_handler(signum, _handle, signum)

    async def _shutdown_then(self, callback: Callable[[], None] | None) -> None:
        await self.shutdown()
        if callback is not None:
            callback()


__all__ = ["EventProducer"]
