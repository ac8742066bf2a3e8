"""Resilience – reconnection delay policies."""
