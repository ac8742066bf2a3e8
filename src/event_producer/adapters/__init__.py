"""Adapters – broker integrations."""
