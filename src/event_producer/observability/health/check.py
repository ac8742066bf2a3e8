from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from event_producer.kernel.time import to_iso8601, utc_now

__all__ = ["HealthCheck", "HealthStatus"]


@dataclass
class HealthStatus:
    """Outcome of one probe; ``detail`` carries the connection state name."""

    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0
    checked_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "up" if self.healthy else "down",
            "detail": self.detail,
            "latency_ms": round(self.latency_ms, 3),
            "checked_at": to_iso8601(self.checked_at),
        }


class HealthCheck(ABC):
    """Read-only liveness probe over one producer dependency."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def check(self) -> HealthStatus: ...

    async def timed_check(self) -> HealthStatus:
        started = time.perf_counter()
        status = await self.check()
        status.latency_ms = (time.perf_counter() - started) * 1000
        return status
