"""Shared type aliases and small value types."""
