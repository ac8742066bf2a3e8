"""Kernel time – Clock port + implementations."""
from event_producer.kernel.time.clock import Clock, FrozenClock, SystemClock, to_iso8601, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "to_iso8601", "utc_now"]
