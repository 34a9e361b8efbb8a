"""Directed, weighted multigraph keyed by arbitrary hashable vertices.

`Graph` owns a plain mapping of vertex to the list of its outgoing edges.
Parallel edges between the same ordered pair are kept as separate entries and
insertion order is preserved per vertex. Queries never raise for unknown
vertices; they return empty results instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional

from wgraph.types.base import Edge, Vertex, Weight
from wgraph.utils.seq import distinct

if TYPE_CHECKING:
    from wgraph.algorithms.shortest_path import PathResult
    from wgraph.config import SearchConfig


class Graph:
    """A directed multigraph with integer edge weights.

    This class enforces:
      - Adding an edge implicitly adds both endpoints.
      - Adding an existing vertex is a no-op that returns False.
      - Parallel edges are never merged.
      - There is no removal API; the graph only grows.

    Attributes:
        _adjacency: Map vertex to its outgoing edges in insertion order.
    """

    def __init__(self, vertices: Optional[Iterable[Vertex]] = None) -> None:
        """Initialize a Graph.

        Args:
            vertices: Optional vertices to add up front, each with no edges.
        """
        self._adjacency: Dict[Vertex, List[Edge]] = {}
        self._edge_count: int = 0
        self._negative_edge_count: int = 0
        if vertices is not None:
            for vertex in vertices:
                self.add_vertex(vertex)

    #
    # Vertex management
    #
    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex with an empty edge list.

        Args:
            vertex: The vertex to add.

        Returns:
            bool: True if the vertex was inserted, False if it already existed.
        """
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = []
        return True

    def has_vertex(self, vertex: Vertex) -> bool:
        """Return True if ``vertex`` has been added to the graph."""
        return vertex in self._adjacency

    @property
    def vertices(self) -> List[Vertex]:
        """All known vertices. Callers must not rely on the ordering."""
        return list(self._adjacency)

    #
    # Edge management
    #
    def add_edge(self, u: Vertex, v: Vertex, weight: Weight) -> None:
        """Add a directed edge ``u -> v`` with the given weight.

        Both endpoints are added if missing. The weight is stored as given;
        no sign check is made here.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Integer edge weight.
        """
        self.add_vertex(u)
        self.add_vertex(v)
        self._adjacency[u].append(Edge(v, weight))
        self._edge_count += 1
        if weight < 0:
            self._negative_edge_count += 1

    def edges_from(self, vertex: Vertex) -> List[Edge]:
        """Return the outgoing edges of ``vertex`` in insertion order.

        Args:
            vertex: The source vertex.

        Returns:
            List[Edge]: A new list of edges, or an empty list if the vertex is unknown.
        """
        return list(self._adjacency.get(vertex, ()))

    def edges_between(self, u: Vertex, v: Vertex) -> List[Edge]:
        """Return every parallel edge from ``u`` to ``v`` in insertion order.

        Args:
            u: The source vertex.
            v: The target vertex.

        Returns:
            List[Edge]: Matching edges, or an empty list if none exist.
        """
        return [edge for edge in self._adjacency.get(u, ()) if edge.neighbor == v]

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """Return the distinct one-hop successors of ``vertex``.

        Order follows the first occurrence of each neighbor in ``edges_from``.
        """
        return distinct(edge.neighbor for edge in self._adjacency.get(vertex, ()))

    @property
    def edge_count(self) -> int:
        """Total number of edges, parallel edges counted separately."""
        return self._edge_count

    @property
    def has_negative_weights(self) -> bool:
        """True if any edge was added with a weight below zero."""
        return self._negative_edge_count > 0

    #
    # Search
    #
    def shortest_path(
        self,
        origin: Vertex,
        destination: Vertex,
        config: Optional[SearchConfig] = None,
    ) -> PathResult:
        """Find the minimum-weight path from ``origin`` to ``destination``.

        See ``wgraph.algorithms.shortest_path.shortest_path``.
        """
        # Import here to avoid circular import
        from wgraph.algorithms.shortest_path import shortest_path

        return shortest_path(self, origin, destination, config=config)

    #
    # Container protocol and rendering
    #
    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._adjacency
        except TypeError:
            # Unhashable values can never be vertices
            return False

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._adjacency))

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self._edge_count})"

    def __str__(self) -> str:
        lines: List[str] = []
        for vertex, edges in self._adjacency.items():
            lines.append(f"{vertex}:")
            for edge in edges:
                lines.append(f"{vertex} -{edge.weight}-> {edge.neighbor}")
        return "\n".join(lines)
