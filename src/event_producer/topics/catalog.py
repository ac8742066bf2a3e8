"""Topics – the fixed catalog of publishable event topics, grouped by domain."""
from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class UserTopic(StrEnum):
    REGISTERED = "user.registered"
    LOGIN = "user.login"
    LOGOUT = "user.logout"
    PROFILE_UPDATED = "user.profile.updated"
    PASSWORD_CHANGED = "user.password.changed"
    VERIFICATION_REQUESTED = "user.verification.requested"
    VERIFICATION_COMPLETED = "user.verification.completed"


class OrderTopic(StrEnum):
    CREATED = "order.created"
    PAID = "order.paid"
    SHIPPED = "order.shipped"
    DELIVERED = "order.delivered"
    CANCELLED = "order.cancelled"
    REFUNDED = "order.refunded"
    REVIEWED = "order.reviewed"
    STATUS_CHANGED = "order.status.changed"


class ProductTopic(StrEnum):
    CREATED = "product.created"
    UPDATED = "product.updated"
    DELETED = "product.deleted"
    STATUS_CHANGED = "product.status.changed"
    STOCK_CHANGED = "product.stock.changed"
    PRICE_CHANGED = "product.price.changed"


class ShopTopic(StrEnum):
    CREATED = "shop.created"
    UPDATED = "shop.updated"
    STATUS_CHANGED = "shop.status.changed"
    RATING_CHANGED = "shop.rating.changed"


class PaymentTopic(StrEnum):
    CREATED = "payment.created"
    SUCCESS = "payment.success"
    FAILED = "payment.failed"
    REFUNDED = "payment.refunded"
    PROCESSING = "payment.processing"


class MarketingTopic(StrEnum):
    CAMPAIGN_CREATED = "marketing.campaign.created"
    CAMPAIGN_UPDATED = "marketing.campaign.updated"
    CAMPAIGN_STARTED = "marketing.campaign.started"
    CAMPAIGN_ENDED = "marketing.campaign.ended"
    COUPON_ISSUED = "marketing.coupon.issued"
    COUPON_USED = "marketing.coupon.used"
    DISCOUNT_APPLIED = "marketing.discount.applied"


class SystemTopic(StrEnum):
    HEALTH_CHECK = "system.health.check"
    ERROR_LOGGED = "system.error.logged"
    METRICS_COLLECTED = "system.metrics.collected"
    CACHE_INVALIDATED = "system.cache.invalidated"
    BACKUP_COMPLETED = "system.backup.completed"


class NotificationTopic(StrEnum):
    SEND_EMAIL = "notification.send.email"
    SEND_SMS = "notification.send.sms"
    SEND_PUSH = "notification.send.push"
    SEND_SYSTEM_MESSAGE = "notification.send.system.message"


class SearchTopic(StrEnum):
    PRODUCT_INDEXED = "search.product.indexed"
    PRODUCT_REINDEXED = "search.product.reindexed"
    PRODUCT_REMOVED = "search.product.removed"
    INDEX_REFRESHED = "search.index.refreshed"


class StatisticsTopic(StrEnum):
    VIEW_RECORDED = "statistics.view.recorded"
    CLICK_RECORDED = "statistics.click.recorded"
    PURCHASE_RECORDED = "statistics.purchase.recorded"
    REPORT_GENERATED = "statistics.report.generated"


class ReviewTopic(StrEnum):
    PRODUCT_SUBMITTED = "review.product.submitted"
    PRODUCT_APPROVED = "review.product.approved"
    PRODUCT_REJECTED = "review.product.rejected"
    SHOP_SUBMITTED = "review.shop.submitted"
    SHOP_APPROVED = "review.shop.approved"
    SHOP_REJECTED = "review.shop.rejected"


MESSAGE_TOPICS: Mapping[str, type[StrEnum]] = MappingProxyType({
    "user": UserTopic,
    "order": OrderTopic,
    "product": ProductTopic,
    "shop": ShopTopic,
    "payment": PaymentTopic,
    "marketing": MarketingTopic,
    "system": SystemTopic,
    "notification": NotificationTopic,
    "search": SearchTopic,
    "statistics": StatisticsTopic,
    "review": ReviewTopic,
})

# Human-readable labels; topics without one display as themselves.
DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    UserTopic.REGISTERED: "User registered",
    UserTopic.LOGIN: "User login",
    UserTopic.LOGOUT: "User logout",
    UserTopic.PROFILE_UPDATED: "User profile updated",
    UserTopic.PASSWORD_CHANGED: "Password changed",
    OrderTopic.CREATED: "Order created",
    OrderTopic.PAID: "Order paid",
    OrderTopic.SHIPPED: "Order shipped",
    OrderTopic.DELIVERED: "Order delivered",
    OrderTopic.CANCELLED: "Order cancelled",
    ProductTopic.CREATED: "Product created",
    ProductTopic.UPDATED: "Product updated",
    ProductTopic.DELETED: "Product deleted",
})


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
    "UserTopic",
]
