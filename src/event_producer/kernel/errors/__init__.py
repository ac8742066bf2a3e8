"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError        (application.py)
    │   └── ConfigError         (config.validation)
    └── InfrastructureError     (infrastructure.py)
        ├── ConnectionError
        │   └── ReconnectExhaustedError
        ├── TimeoutError
        ├── SerializationError
        ├── TopologyDeclarationError
        └── PublishError        (publishing.py)
            ├── InvalidTopicError
            ├── NotConnectedError
            └── PublishRejectedError
"""

from event_producer.kernel.errors.application import ApplicationError
from event_producer.kernel.errors.base import BaseError
from event_producer.kernel.errors.infrastructure import (
    ConnectionError,
    InfrastructureError,
    ReconnectExhaustedError,
    SerializationError,
    TimeoutError,
    TopologyDeclarationError,
)
from event_producer.kernel.errors.publishing import (
    InvalidTopicError,
    NotConnectedError,
    PublishError,
    PublishRejectedError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "InfrastructureError",
    "InvalidTopicError",
    "NotConnectedError",
    "PublishError",
    "PublishRejectedError",
    "ReconnectExhaustedError",
    "SerializationError",
    "TimeoutError",
    "TopologyDeclarationError",
]
