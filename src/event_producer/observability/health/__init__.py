"""Observability – Health Checks."""
from event_producer.observability.health.builtin import BrokerHealthCheck
from event_producer.observability.health.check import HealthCheck, HealthStatus

__all__ = ["BrokerHealthCheck", "HealthCheck", "HealthStatus"]
