"""Observability – in-process publish counters."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class PublisherStats:
    """Running totals kept by one publisher.

    ``failed`` counts every unsuccessful publish, whatever the reason;
    ``invalid_topic`` and ``not_connected`` break two of those reasons out.
    """

    published: int = 0
    failed: int = 0
    invalid_topic: int = 0
    not_connected: int = 0

    @property
    def attempted(self) -> int:
        return self.published + self.failed

    @property
    def success_rate(self) -> float:
        """Percentage of attempts that the broker accepted (0.0 when idle)."""
        if self.attempted == 0:
            return 0.0
        return round(self.published / self.attempted * 100, 2)

    def reset(self) -> None:
        self.published = self.failed = self.invalid_topic = self.not_connected = 0

    def to_dict(self) -> dict[str, float | int]:
        return {**dataclasses.asdict(self), "success_rate": self.success_rate}


__all__ = ["PublisherStats"]
