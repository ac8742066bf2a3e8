"""
event_producer – asynchronous domain-event publisher for a RabbitMQ topic exchange.

Import path convention::

    from event_producer.producer import EventProducer
    from event_producer.topics import OrderTopic, is_valid_topic
    from event_producer.config import BrokerSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
