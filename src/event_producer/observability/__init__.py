"""Observability – logging setup, publisher statistics and broker health."""
