"""Immutable, append-only route through a graph.

A ``Path`` records a fixed origin, the ordered edges walked from it, and the
accumulated weight. Extending a path returns a new ``Path`` that owns its own
edge tuple; the parent is left untouched, so many partial routes can share a
common prefix value without aliasing any mutable storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

from wgraph.types.base import Edge, Vertex, Weight


@dataclass(frozen=True)
class Path:
    """A non-empty sequence of edges from ``origin`` with its total weight.

    Prefer the ``from_edge`` and ``extend`` constructors, which keep ``total``
    consistent with ``edges``.

    Attributes:
        origin: The vertex the path starts at.
        edges: The traversed edges in order. Never empty.
        total: Sum of the edge weights.
    """

    origin: Vertex
    edges: Tuple[Edge, ...]
    total: Weight

    def __post_init__(self) -> None:
        # Own a private tuple even when handed a caller's list
        object.__setattr__(self, "edges", tuple(self.edges))
        if not self.edges:
            raise ValueError(f"Path from {self.origin!r} must hold at least one edge.")
        expected = sum(edge.weight for edge in self.edges)
        if self.total != expected:
            raise ValueError(
                f"Path total {self.total} does not match edge weight sum {expected}."
            )

    @classmethod
    def from_edge(cls, origin: Vertex, edge: Edge) -> Path:
        """Return a single-edge path starting at ``origin``."""
        return cls(origin=origin, edges=(edge,), total=edge.weight)

    def extend(self, edge: Edge) -> Path:
        """Return a new path that continues this one along ``edge``.

        Args:
            edge: An edge leaving ``self.destination``.

        Returns:
            Path: Same origin, ``edge`` appended, weight accumulated.
        """
        return Path(
            origin=self.origin,
            edges=self.edges + (edge,),
            total=self.total + edge.weight,
        )

    @property
    def destination(self) -> Vertex:
        """The vertex reached by the last edge."""
        return self.edges[-1].neighbor

    @property
    def vertices(self) -> List[Vertex]:
        """Origin followed by every vertex reached, in walk order."""
        return [self.origin] + [edge.neighbor for edge in self.edges]

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.total < other.total

    def __str__(self) -> str:
        hops = "".join(f" -{edge.weight}-> {edge.neighbor}" for edge in self.edges)
        return f"{self.origin}{hops}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation of the path."""
        return {
            "origin": self.origin,
            "destination": self.destination,
            "total": self.total,
            "edges": [
                {"neighbor": edge.neighbor, "weight": edge.weight}
                for edge in self.edges
            ],
        }
