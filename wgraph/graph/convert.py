"""Graph conversion utilities between wgraph ``Graph`` and NetworkX graphs.

Parallel edges survive the round trip through ``networkx.MultiDiGraph``.
Converting from a simple ``DiGraph`` yields at most one edge per ordered pair;
undirected graphs are expanded into a pair of opposing directed edges.
"""

from __future__ import annotations

from typing import Any, Union

import networkx as nx

from wgraph.graph.weighted_digraph import Graph

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(graph: Graph, weight: str = "weight") -> nx.MultiDiGraph:
    """Convert a Graph to a NetworkX MultiDiGraph.

    Args:
        graph: The graph to convert.
        weight: Edge attribute name that receives the edge weight.

    Returns:
        A MultiDiGraph with one node per vertex and one edge per stored edge.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(graph.vertices)
    for u in graph.vertices:
        for edge in graph.edges_from(u):
            nx_graph.add_edge(u, edge.neighbor, **{weight: edge.weight})
    return nx_graph


def _coerce_weight(value: Any, u: Any, v: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise TypeError(
            f"Edge {u!r} -> {v!r} has non-integer weight {value!r}."
        )
    return value


def from_networkx(
    nx_graph: NxGraph,
    weight: str = "weight",
    default_weight: int = 1,
) -> Graph:
    """Build a Graph from any NetworkX graph.

    Args:
        nx_graph: Source graph. Directed and undirected, simple and multi
            graphs are accepted.
        weight: Edge attribute holding the weight.
        default_weight: Weight for edges that lack the attribute.

    Returns:
        A new Graph with every node as a vertex.

    Raises:
        TypeError: If a weight is not an integer (integral floats are accepted).
    """
    graph = Graph(nx_graph.nodes)
    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        w = _coerce_weight(data.get(weight, default_weight), u, v)
        graph.add_edge(u, v, w)
        if not directed and u != v:
            graph.add_edge(v, u, w)
    return graph
