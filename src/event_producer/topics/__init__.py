"""Topics – catalog of publishable event topics and the registry over it."""
from event_producer.topics.catalog import (
    DISPLAY_NAMES,
    MESSAGE_TOPICS,
    MarketingTopic,
    NotificationTopic,
    OrderTopic,
    PaymentTopic,
    ProductTopic,
    ReviewTopic,
    SearchTopic,
    ShopTopic,
    StatisticsTopic,
    SystemTopic,
    UserTopic,
)
from event_producer.topics.registry import (
    TopicRegistry,
    default_registry,
    get_topic_display_name,
    is_valid_topic,
)

__all__ = [
    "DISPLAY_NAMES",
    "MESSAGE_TOPICS",
    "MarketingTopic",
    "NotificationTopic",
    "OrderTopic",
    "PaymentTopic",
    "ProductTopic",
    "ReviewTopic",
    "SearchTopic",
    "ShopTopic",
    "StatisticsTopic",
    "SystemTopic",
    "TopicRegistry",
    "UserTopic",
    "default_registry",
    "get_topic_display_name",
    "is_valid_topic",
]
