"""Kernel – errors, message primitives and clock shared by every layer."""
