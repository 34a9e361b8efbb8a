"""Base types for graph storage and search."""

from __future__ import annotations

from typing import Hashable, NamedTuple

#: Any hashable value identifies a vertex; vertices are compared by value.
Vertex = Hashable

#: Signed integer edge weight. The shortest-path search assumes weight >= 0.
Weight = int


class Edge(NamedTuple):
    """A directed, weighted connection to ``neighbor``.

    The source vertex is implied by where the edge is stored.
    """

    neighbor: Vertex
    weight: Weight
