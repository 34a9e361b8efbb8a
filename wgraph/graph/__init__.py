"""Graph primitives and helpers.

This package provides the weighted multigraph type `Graph` and helper modules
for NetworkX conversion (`convert`) and serialization (`io`).
"""
