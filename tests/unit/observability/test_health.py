"""Unit tests for BrokerHealthCheck."""
from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from event_producer.adapters.rabbitmq import ConnectionState
from event_producer.observability.health import BrokerHealthCheck, HealthCheck, HealthStatus


def _manager(state: ConnectionState) -> MagicMock:
    manager = MagicMock()
    manager.get_state.return_value = state
    return manager


class TestBrokerHealthCheck:
    def test_is_a_health_check(self):
        assert isinstance(BrokerHealthCheck(_manager(ConnectionState.CONNECTED)), HealthCheck)

    def test_default_name(self):
        assert BrokerHealthCheck(_manager(ConnectionState.CONNECTED)).name == "rabbitmq"

    def test_healthy_when_connected(self):
        status = asyncio.run(BrokerHealthCheck(_manager(ConnectionState.CONNECTED)).check())
        assert status.healthy is True
        assert status.detail == "CONNECTED"

    @pytest.mark.parametrize(
        "state",
        [
            ConnectionState.DISCONNECTED,
            ConnectionState.CONNECTING,
            ConnectionState.RECONNECTING,
            ConnectionState.FAILED,
        ],
    )
    def test_unhealthy_otherwise(self, state):
        status = asyncio.run(BrokerHealthCheck(_manager(state)).check())
        assert status.healthy is False
        assert status.detail == state.value

    def test_timed_check_records_latency(self):
        status = asyncio.run(BrokerHealthCheck(_manager(ConnectionState.CONNECTED)).timed_check())
        assert status.latency_ms >= 0.0


class TestHealthStatus:
    def test_to_dict(self):
        status = HealthStatus(
            healthy=False, detail="RECONNECTING", latency_ms=1.23456,
            checked_at=datetime(2024, 3, 1, tzinfo=UTC),
        )
        assert status.to_dict() == {
            "status": "down",
            "detail": "RECONNECTING",
            "latency_ms": 1.235,
            "checked_at": "2024-03-01T00:00:00.000Z",
        }

    def test_checked_at_defaults_to_now_in_utc(self):
        status = HealthStatus(healthy=True)
        assert status.checked_at.tzinfo is not None
        assert status.to_dict()["status"] == "up"
