"""wgraph: directed weighted multigraph with shortest-path search.

Primary API:
    Graph - adjacency container keyed by any hashable vertex
    Path - immutable edge sequence with accumulated weight
    shortest_path() - Dijkstra-style single-pair query returning a PathResult
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from wgraph import Graph

    g = Graph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)

    result = g.shortest_path("A", "C")
    if result:
        print(result.path, result.total)
"""

from __future__ import annotations

from wgraph import cli, logging
from wgraph._version import __version__
from wgraph.algorithms.priority_queue import PriorityQueue
from wgraph.algorithms.shortest_path import NOT_FOUND, PathResult, shortest_path
from wgraph.config import SEARCH_CONFIG, SearchConfig
from wgraph.graph.convert import from_networkx, to_networkx
from wgraph.graph.io import graph_from_dict, graph_to_dict, load_graph_yaml
from wgraph.graph.weighted_digraph import Graph
from wgraph.paths.path import Path
from wgraph.types.base import Edge

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    "Path",
    # Search
    "shortest_path",
    "PathResult",
    "NOT_FOUND",
    "PriorityQueue",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Serialization and NetworkX interop
    "graph_to_dict",
    "graph_from_dict",
    "load_graph_yaml",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
