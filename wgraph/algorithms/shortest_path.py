"""Single-pair shortest path over a ``Graph``.

Implements a Dijkstra-like greedy expansion whose frontier holds whole
``Path`` values rather than per-vertex distances. The lightest path is popped
from a min-priority queue, checked against the destination, and extended along
every edge to a vertex that has not been settled yet. Because paths instead of
distances are queued, one vertex may sit in the frontier several times through
different partial routes. Once popped it is marked visited, and no path is
ever extended into a visited vertex, so every queued path is simple.

Notes:
    Correct only for non-negative edge weights. With negative weights the
    search still terminates, but the returned path need not be minimal.
    Equal-weight paths pop in the order they were pushed (FIFO), which makes
    the result deterministic for a given graph construction order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Set

from wgraph.algorithms.priority_queue import PriorityQueue
from wgraph.config import SEARCH_CONFIG, SearchConfig
from wgraph.graph.weighted_digraph import Graph
from wgraph.logging import get_logger
from wgraph.paths.path import Path
from wgraph.types.base import Vertex, Weight

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Outcome of a shortest-path query: a found path or nothing.

    Unknown endpoints, identical endpoints, and unreachable destinations all
    produce the same not-found result.

    Attributes:
        path: The minimum-weight path, or None when no path was found.
    """

    path: Optional[Path] = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def total(self) -> Optional[Weight]:
        """Total weight of the found path, or None."""
        return None if self.path is None else self.path.total

    def unwrap(self) -> Path:
        """Return the found path.

        Raises:
            LookupError: If no path was found.
        """
        if self.path is None:
            raise LookupError("No path was found.")
        return self.path

    def __bool__(self) -> bool:
        return self.path is not None


#: Shared result for every query that finds no path.
NOT_FOUND = PathResult()


def _path_is_lighter(a: Path, b: Path) -> bool:
    return a.total < b.total


def shortest_path(
    graph: Graph,
    origin: Vertex,
    destination: Vertex,
    config: Optional[SearchConfig] = None,
) -> PathResult:
    """Compute the minimum-weight path from ``origin`` to ``destination``.

    A path always holds at least one edge, so ``origin == destination`` yields
    ``NOT_FOUND`` rather than an empty path.

    Args:
        graph: Graph to search. Must not be mutated during the call.
        origin: Start vertex.
        destination: Target vertex.
        config: Search options; defaults to ``SEARCH_CONFIG``.

    Returns:
        PathResult: The lightest path found, or ``NOT_FOUND``.
    """
    cfg = config or SEARCH_CONFIG

    if not graph.has_vertex(origin):
        logger.debug(f"Origin {origin!r} is not in the graph")
        return NOT_FOUND
    if not graph.has_vertex(destination):
        logger.debug(f"Destination {destination!r} is not in the graph")
        return NOT_FOUND
    if origin == destination:
        logger.debug(f"Origin and destination are both {origin!r}")
        return NOT_FOUND

    if cfg.warn_on_negative_weights and graph.has_negative_weights:
        logger.warning(
            "Graph contains negative edge weights; shortest-path results are not reliable"
        )

    visited: Set[Vertex] = {origin}
    frontier: PriorityQueue[Path] = PriorityQueue(_path_is_lighter)

    for edge in graph.edges_from(origin):
        frontier.push(Path.from_edge(origin, edge))

    expanded = 0
    while (current := frontier.pop()) is not None:
        expanded += 1

        if cfg.trace_expansions:
            logger.debug(f"Expanding {current} (total={current.total})")

        if current.destination == destination:
            logger.debug(
                f"Found path {origin!r} -> {destination!r} with total "
                f"{current.total} after {expanded} expansions"
            )
            return PathResult(current)

        visited.add(current.destination)

        for edge in graph.edges_from(current.destination):
            if edge.neighbor not in visited:
                frontier.push(current.extend(edge))

    logger.debug(
        f"No path {origin!r} -> {destination!r}; frontier exhausted after "
        f"{expanded} expansions"
    )
    return NOT_FOUND
