"""Adapters for third-party infrastructure."""
