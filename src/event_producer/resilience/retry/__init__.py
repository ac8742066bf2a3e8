"""Resilience – backoff strategies applied between reconnection attempts."""
from event_producer.resilience.retry.backoff import (
    BackoffStrategy,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
    backoff_from_settings,
)

__all__ = [
    "BackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "backoff_from_settings",
]
