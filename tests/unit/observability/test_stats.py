"""Unit tests for PublisherStats."""
from __future__ import annotations

from event_producer.observability.metrics import PublisherStats


class TestPublisherStats:
    def test_starts_empty(self):
        stats = PublisherStats()
        assert stats.attempted == 0
        assert stats.success_rate == 0.0

    def test_success_rate_is_a_rounded_percentage(self):
        stats = PublisherStats(published=2, failed=1)
        assert stats.attempted == 3
        assert stats.success_rate == 66.67

    def test_to_dict(self):
        stats = PublisherStats(published=3, failed=1, invalid_topic=1)
        assert stats.to_dict() == {
            "published": 3,
            "failed": 1,
            "invalid_topic": 1,
            "not_connected": 0,
            "success_rate": 75.0,
        }

    def test_reset(self):
        stats = PublisherStats(published=3, failed=2, invalid_topic=1, not_connected=1)
        stats.reset()
        assert stats == PublisherStats()
