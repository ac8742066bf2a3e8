"""RabbitMQ adapter – BatchDispatcher."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from event_producer.adapters.rabbitmq.publisher import MessagePublisher
from event_producer.kernel.messaging import BatchResult, PublishRequest

logger = logging.getLogger(__name__)


class BatchDispatcher:
    """Publish many requests one after another, without all-or-nothing semantics.

    Requests go out strictly in the given order over the single shared channel.
    A failure is recorded and the next request is still attempted; nothing
    already published is rolled back.
    """

    def __init__(self, publisher: MessagePublisher) -> None:
        self._publisher = publisher

    async def send_batch(
        self, requests: Iterable[PublishRequest | Mapping[str, Any]]
    ) -> BatchResult:
        result = BatchResult()
        for position, item in enumerate(requests):
            try:
                request = item if isinstance(item, PublishRequest) else PublishRequest.from_mapping(item)
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                logger.error("rabbitmq.batch_malformed_request position=%d error=%r", position, exc)
                result.failed.append(item)
                continue

            ok = await self._publisher.publish(request.topic, request.payload, request.options)
            (result.success if ok else result.failed).append(item)

        logger.info(
            "rabbitmq.batch_sent total=%d success=%d failed=%d",
            result.total, len(result.success), len(result.failed),
        )
        return result


__all__ = ["BatchDispatcher"]
