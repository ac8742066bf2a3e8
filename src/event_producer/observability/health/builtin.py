from __future__ import annotations

from typing import TYPE_CHECKING

from event_producer.observability.health.check import HealthCheck, HealthStatus

if TYPE_CHECKING:
    from event_producer.adapters.rabbitmq.connection import ConnectionManager

__all__ = ["BrokerHealthCheck"]


class BrokerHealthCheck(HealthCheck):
    """Healthy only while the producer connection is ``CONNECTED``.

    Reads state only; never touches the network, so it is safe to poll.
    """

    def __init__(self, manager: "ConnectionManager", name_: str = "rabbitmq") -> None:
        self._manager = manager
        self._name = name_

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        state = self._manager.get_state()
        return HealthStatus(healthy=state.is_connected, detail=state.value)
