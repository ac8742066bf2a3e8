"""Config settings – BrokerSettings for the RabbitMQ producer."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
from urllib.parse import quote

from event_producer.config.settings.base import Settings
from event_producer.config.validation import InvalidSettingValueError

BACKOFF_POLICIES = frozenset({"constant", "linear", "exponential"})


@dataclasses.dataclass
class BrokerSettings(Settings):
    """Connection and recovery settings, read from ``RABBITMQ_*`` variables.

    Every field is independently overridable; the defaults point at a stock
    local broker. ``reconnect_backoff="constant"`` keeps the fixed delay
    between reconnection attempts; the growing policies are capped at
    ``max_reconnect_delay_ms``.
    """

    _prefix: ClassVar[str] = "RABBITMQ"

    host: str = "localhost"
    port: int = 5672
    username: str = "guest"
    password: str = "guest"
    vhost: str = "/"
    exchange: str = "topic_exchange"
    heartbeat: int = 60
    max_reconnect_attempts: int = 5
    reconnect_delay_ms: int = 5000
    reconnect_backoff: str = "constant"
    max_reconnect_delay_ms: int = 60000
    publish_timeout_ms: int | None = None

    def _validate(self) -> None:
        if not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.max_reconnect_attempts < 0:
            raise InvalidSettingValueError(
                "max_reconnect_attempts", self.max_reconnect_attempts, "must not be negative"
            )
        for name in ("reconnect_delay_ms", "max_reconnect_delay_ms", "heartbeat"):
            if getattr(self, name) < 0:
                raise InvalidSettingValueError(name, getattr(self, name), "must not be negative")
        if self.reconnect_backoff not in BACKOFF_POLICIES:
            raise InvalidSettingValueError(
                "reconnect_backoff",
                self.reconnect_backoff,
                f"expected one of {', '.join(sorted(BACKOFF_POLICIES))}",
            )
        if self.publish_timeout_ms is not None and self.publish_timeout_ms <= 0:
            raise InvalidSettingValueError(
                "publish_timeout_ms", self.publish_timeout_ms, "must be positive when set"
            )

    def _build_url(self, password: str) -> str:
        # the default vhost "/" is an empty path on an AMQP URI
        path = "" if self.vhost == "/" else quote(self.vhost, safe="")
        user = quote(self.username, safe="")
        return f"amqp://{user}:{password}@{self.host}:{self.port}/{path}"

    @property
    def url(self) -> str:
        return self._build_url(quote(self.password, safe=""))

    @property
    def safe_url(self) -> str:
        """``url`` with the password masked, for log lines."""
        return self._build_url("****")

    @property
    def publish_timeout(self) -> float | None:
        """Per-publish timeout in seconds, ``None`` when unbounded."""
        if self.publish_timeout_ms is None:
            return None
        return self.publish_timeout_ms / 1000


__all__ = ["BACKOFF_POLICIES", "BrokerSettings"]
