"""Topics – TopicRegistry, the sole authority on which topics may be published."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import StrEnum

from event_producer.topics.catalog import DISPLAY_NAMES, MESSAGE_TOPICS


class TopicRegistry:
    """Flattened, read-only view over a domain → event → topic catalog.

    Membership is a set lookup. There is no way to add or remove topics after
    construction.
    """

    __slots__ = ("_by_domain", "_domain_of", "_display_names")

    def __init__(
        self,
        catalog: Mapping[str, type[StrEnum]] = MESSAGE_TOPICS,
        display_names: Mapping[str, str] = DISPLAY_NAMES,
    ) -> None:
        by_domain: dict[str, frozenset[str]] = {}
        domain_of: dict[str, str] = {}
        for domain, events in catalog.items():
            values = frozenset(member.value for member in events)
            for topic in values:
                if topic in domain_of:
                    raise ValueError(f"Topic '{topic}' listed under both '{domain_of[topic]}' and '{domain}'")
                domain_of[topic] = domain
            by_domain[domain] = values
        self._by_domain = by_domain
        self._domain_of = domain_of
        self._display_names = dict(display_names)

    def is_valid_topic(self, topic: str) -> bool:
        return isinstance(topic, str) and topic in self._domain_of

    def domain_of(self, topic: str) -> str | None:
        return self._domain_of.get(topic) if isinstance(topic, str) else None

    def domains(self) -> list[str]:
        return list(self._by_domain)

    def topics(self, domain: str | None = None) -> frozenset[str]:
        if domain is None:
            return frozenset(self._domain_of)
        return self._by_domain.get(domain, frozenset())

    def display_name(self, topic: str) -> str:
        return self._display_names.get(topic, topic)

    def __contains__(self, topic: object) -> bool:
        return isinstance(topic, str) and topic in self._domain_of

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._domain_of))

    def __len__(self) -> int:
        return len(self._domain_of)

    def __repr__(self) -> str:
        return f"TopicRegistry(domains={len(self._by_domain)}, topics={len(self)})"


default_registry = TopicRegistry()


def is_valid_topic(topic: str) -> bool:
    """Membership test against the built-in catalog."""
    return default_registry.is_valid_topic(topic)


def get_topic_display_name(topic: str) -> str:
    return default_registry.display_name(topic)


__all__ = ["TopicRegistry", "default_registry", "get_topic_display_name", "is_valid_topic"]
