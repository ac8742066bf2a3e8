"""Resilience – backoff strategies for reconnection scheduling."""
from __future__ import annotations

import abc

from event_producer.config.settings import BrokerSettings


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) before the *attempt*-th retry (1-based)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ConstantBackoff(BackoffStrategy):
    """Fixed delay between attempts."""

    def __init__(self, delay: float = 5.0) -> None:
        self._delay = delay

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._delay


class LinearBackoff(BackoffStrategy):
    """Delay grows linearly: ``base_delay * attempt``."""

    def __init__(self, base_delay: float = 5.0, max_delay: float = 60.0) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        return min(self._base * max(attempt, 1), self._max)


class ExponentialBackoff(BackoffStrategy):
    """Delay doubles per attempt: ``base_delay * 2^(attempt - 1)``."""

    def __init__(self, base_delay: float = 5.0, max_delay: float = 60.0) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        return min(self._base * (2 ** max(attempt - 1, 0)), self._max)


def backoff_from_settings(settings: BrokerSettings) -> BackoffStrategy:
    """Pick the strategy named by ``settings.reconnect_backoff``."""
    delay = settings.reconnect_delay_ms / 1000
    ceiling = settings.max_reconnect_delay_ms / 1000
    if settings.reconnect_backoff == "linear":
        return LinearBackoff(base_delay=delay, max_delay=ceiling)
    if settings.reconnect_backoff == "exponential":
        return ExponentialBackoff(base_delay=delay, max_delay=ceiling)
    return ConstantBackoff(delay=delay)


__all__ = [
    "BackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "backoff_from_settings",
]
