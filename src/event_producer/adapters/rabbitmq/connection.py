"""RabbitMQ adapter – ConnectionManager and its state machine.

One manager owns one broker connection and one publishing channel per
process. Recovery is an explicit state machine::

    DISCONNECTED ──initialize()──▶ CONNECTING ──accepted──▶ CONNECTED
                                     │    ▲                    │
                               failure│    │retry timer  close/error
                                     ▼    │                    │
                                   RECONNECTING ◀──────────────┘
                                     │
                          budget spent▼
                                   FAILED ──initialize()──▶ CONNECTING

At most one retry timer is outstanding at any time. ``shutdown()`` moves any
state to DISCONNECTED.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import aio_pika

from event_producer.config.settings import BrokerSettings
from event_producer.kernel.errors import (
    BaseError,
    ConnectionError,
    InfrastructureError,
    ReconnectExhaustedError,
)
from event_producer.resilience.retry import BackoffStrategy, backoff_from_settings

if TYPE_CHECKING:
    from event_producer.adapters.rabbitmq.topology import TopologyInitializer

logger = logging.getLogger(__name__)


class ConnectionState(StrEnum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    RECONNECTING = "reconnecting"
    FAILED = "failed"

    @property
    def is_connected(self) -> bool:
        return self is ConnectionState.CONNECTED


_S = ConnectionState
TRANSITIONS: Mapping[ConnectionState, frozenset[ConnectionState]] = MappingProxyType({
    _S.DISCONNECTED: frozenset({_S.CONNECTING}),
    _S.CONNECTING: frozenset({_S.CONNECTED, _S.RECONNECTING, _S.DISCONNECTED}),
    _S.CONNECTED: frozenset({_S.RECONNECTING, _S.DISCONNECTED}),
    _S.RECONNECTING: frozenset({_S.CONNECTING, _S.FAILED, _S.DISCONNECTED}),
    _S.FAILED: frozenset({_S.CONNECTING, _S.DISCONNECTED}),
})


class IllegalStateTransitionError(InfrastructureError):
    """A state change not present in ``TRANSITIONS`` was requested."""

    default_code = "illegal_state_transition"

    def __init__(self, current: ConnectionState, target: ConnectionState) -> None:
        super().__init__(f"Cannot move connection from {current} to {target}")
        self.current = current
        self.target = target


class ConnectionManager:
    """Owns the broker connection, the publishing channel and their recovery."""

    def __init__(
        self,
        settings: BrokerSettings | None = None,
        topology: "TopologyInitializer | None" = None,
        backoff: BackoffStrategy | None = None,
    ) -> None:
        self._settings = settings or BrokerSettings()
        self._topology = topology
        self._backoff = backoff or backoff_from_settings(self._settings)
        self._max_attempts = self._settings.max_reconnect_attempts
        self._resource = f"{self._settings.host}:{self._settings.port}"

        self._state = ConnectionState.DISCONNECTED
        self._attempts = 0
        self._last_error: BaseError | None = None
        self._connection: Any = None
        self._channel: Any = None
        self._exchange: Any = None
        self._retry_task: asyncio.Task[None] | None = None
        self._connect_lock = asyncio.Lock()
        # single writer on the shared channel
        self.write_lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> ConnectionState:
        return self._state

    def get_state(self) -> ConnectionState:
        return self._state

    @property
    def settings(self) -> BrokerSettings:
        return self._settings

    @property
    def attempts(self) -> int:
        """Reconnection attempts scheduled since the last successful connect."""
        return self._attempts

    @property
    def last_error(self) -> BaseError | None:
        return self._last_error

    @property
    def retry_pending(self) -> bool:
        return self._retry_task is not None and not self._retry_task.done()

    @property
    def exchange(self) -> Any:
        """Publishing exchange handle; ``None`` unless ``CONNECTED``."""
        return self._exchange if self._state.is_connected else None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> bool:
        """Connect, install failure handlers and declare topology.

        Returns whether this attempt succeeded. A failed attempt hands over to
        :meth:`handle_reconnect`. Calling it from ``FAILED`` or
        ``DISCONNECTED`` starts a fresh retry budget.
        """
        if self._state.is_connected:
            return True
        if self._state in (ConnectionState.FAILED, ConnectionState.DISCONNECTED):
            self._attempts = 0
        self._cancel_retry()
        return await self._connect()

    def handle_reconnect(self, error: BaseException | None = None) -> None:
        """Schedule one retry, or settle in ``FAILED`` once the budget is spent."""
        if self._state in (ConnectionState.CONNECTED, ConnectionState.CONNECTING):
            self._transition(ConnectionState.RECONNECTING)
        if self._state is not ConnectionState.RECONNECTING:
            return
        if self.retry_pending:
            logger.debug("rabbitmq.reconnect_already_scheduled attempt=%d", self._attempts)
            return
        if self._attempts >= self._max_attempts:
            exhausted = ReconnectExhaustedError(self._resource, self._attempts, cause=error)
            self._last_error = exhausted
            logger.error(
                "rabbitmq.reconnect_exhausted resource=%s attempts=%d",
                self._resource, self._attempts,
            )
            self._transition(ConnectionState.FAILED)
            return

        self._attempts += 1
        delay = self._backoff.compute(self._attempts)
        logger.info(
            "rabbitmq.reconnect_scheduled attempt=%d max=%d delay=%.2fs",
            self._attempts, self._max_attempts, delay,
        )
        self._retry_task = asyncio.get_running_loop().create_task(
            self._retry_after(delay), name=f"rabbitmq-reconnect-{self._attempts}"
        )

    async def shutdown(self) -> None:
        """Close channel then connection. Never raises."""
        self._cancel_retry()
        self._transition(ConnectionState.DISCONNECTED)
        await self._release()
        logger.info("rabbitmq.shutdown resource=%s", self._resource)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, target: ConnectionState) -> None:
        current = self._state
        if current is target:
            return
        if target not in TRANSITIONS[current]:
            raise IllegalStateTransitionError(current, target)
        logger.debug("rabbitmq.state from=%s to=%s", current, target)
        self._state = target

    async def _connect(self) -> bool:
        async with self._connect_lock:
            if self._state.is_connected:
                return True
            await self._release()
            self._transition(ConnectionState.CONNECTING)
            logger.info("rabbitmq.connecting url=%s attempt=%d", self._settings.safe_url, self._attempts)

            connection: Any = None
            try:
                connection = await aio_pika.connect(
                    self._settings.url, heartbeat=self._settings.heartbeat
                )
                channel = await connection.channel()
                exchange = await channel.get_exchange(self._settings.exchange, ensure=False)
            except Exception as exc:  # noqa: BLE001
                error = ConnectionError(
                    self._resource, f"Could not connect to '{self._resource}': {exc}", cause=exc
                )
                self._last_error = error
                logger.error("rabbitmq.connect_failed resource=%s error=%r", self._resource, exc)
                await _close_quietly(connection, "connection")
                self.handle_reconnect(error)
                return False

            if self._state is not ConnectionState.CONNECTING:
                # shutdown() ran while the broker was answering
                await _close_quietly(connection, "connection")
                return False

            self._connection = connection
            self._channel = channel
            self._exchange = exchange
            connection.close_callbacks.add(self._on_connection_closed)
            channel.close_callbacks.add(self._on_channel_closed)
            self._attempts = 0
            self._last_error = None
            self._transition(ConnectionState.CONNECTED)
            logger.info("rabbitmq.connected url=%s", self._settings.safe_url)

        if self._topology is not None:
            await self._topology.declare(connection)
        return True

    async def _retry_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self._retry_task = None
        await self._connect()

    def _on_connection_closed(self, sender: Any, exc: BaseException | None = None) -> None:
        self._on_broker_close(sender, exc, "connection")

    def _on_channel_closed(self, sender: Any, exc: BaseException | None = None) -> None:
        self._on_broker_close(sender, exc, "channel")

    def _on_broker_close(self, sender: Any, exc: BaseException | None, kind: str) -> None:
        if sender is not self._connection and sender is not self._channel:
            return
        if not self._state.is_connected:
            return
        if exc is None:
            logger.info("rabbitmq.%s_closed resource=%s", kind, self._resource)
        else:
            logger.error("rabbitmq.%s_error resource=%s error=%r", kind, self._resource, exc)
        error = ConnectionError(self._resource, f"Broker {kind} closed", cause=exc)
        self._last_error = error
        self._exchange = None
        self.handle_reconnect(error)

    def _cancel_retry(self) -> None:
        task = self._retry_task
        self._retry_task = None
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()

    async def _release(self) -> None:
        channel, connection = self._channel, self._connection
        self._channel = self._connection = self._exchange = None
        await _close_quietly(channel, "channel")
        await _close_quietly(connection, "connection")


async def _close_quietly(resource: Any, kind: str) -> None:
    if resource is None or resource.is_closed:
        return
    try:
        await resource.close()
    except Exception as exc:  # noqa: BLE001
        logger.error("rabbitmq.%s_close_failed error=%r", kind, exc)


__all__ = ["ConnectionManager", "ConnectionState", "IllegalStateTransitionError", "TRANSITIONS"]
