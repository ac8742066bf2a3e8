"""``python -m event_producer`` – connect, announce, idle until interrupted."""
from __future__ import annotations

import asyncio
import logging
import os
import socket

from event_producer.config import BrokerSettings, DotenvSettingsLoader
from event_producer.observability.logging import JsonLoggerFactory, get_logger
from event_producer.producer import EventProducer
from event_producer.topics import SystemTopic


async def run(settings: BrokerSettings) -> None:
    # bound after configure() so the stdlib factory is in place
    logger = get_logger("event_producer", host=settings.host, exchange=settings.exchange)
    producer = EventProducer(settings)
    stopped = asyncio.Event()
    producer.install_signal_handlers(on_shutdown=stopped.set)

    if await producer.initialize():
        await producer.publish(
            SystemTopic.HEALTH_CHECK,
            {"status": "up", "host": socket.gethostname(), "pid": os.getpid()},
        )
    else:
        logger.warning("producer.started_disconnected", state=str(producer.state))

    await stopped.wait()
    logger.info("producer.stopped", **producer.stats.to_dict())


def main() -> None:
    JsonLoggerFactory.configure(level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))
    settings = DotenvSettingsLoader().load(BrokerSettings)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
