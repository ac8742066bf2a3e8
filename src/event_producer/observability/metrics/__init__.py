"""Observability – publisher statistics."""
from event_producer.observability.metrics.stats import PublisherStats

__all__ = ["PublisherStats"]
