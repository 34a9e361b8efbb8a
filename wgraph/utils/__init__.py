"""Utility helpers shared across wgraph modules."""
