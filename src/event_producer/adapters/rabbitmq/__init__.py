"""RabbitMQ adapter – connection lifecycle, topology, publishing and batching."""
from event_producer.adapters.rabbitmq.batch import BatchDispatcher
from event_producer.adapters.rabbitmq.connection import (
    TRANSITIONS,
    ConnectionManager,
    ConnectionState,
    IllegalStateTransitionError,
)
from event_producer.adapters.rabbitmq.publisher import MessagePublisher, generate_message_id
from event_producer.adapters.rabbitmq.topology import (
    DEFAULT_BINDINGS,
    DEFAULT_EXCHANGE,
    QueueBinding,
    TopologyInitializer,
)

__all__ = [
    "BatchDispatcher",
    "ConnectionManager",
    "ConnectionState",
    "DEFAULT_BINDINGS",
    "DEFAULT_EXCHANGE",
    "IllegalStateTransitionError",
    "MessagePublisher",
    "QueueBinding",
    "TRANSITIONS",
    "TopologyInitializer",
    "generate_message_id",
]
