"""Plain-dict and YAML serialization for ``Graph``.

The dict form is::

    {
        "vertices": [vertex, ...],
        "edges": [
            {"source": u, "target": v, "weight": w},
            ...
        ]
    }

``vertices`` is optional on input (edges add their own endpoints) and is
needed only for isolated vertices. ``weight`` defaults to 1.
"""

from __future__ import annotations

from typing import Any, Dict, List

import yaml

from wgraph.graph.weighted_digraph import Graph


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Convert a Graph to a dict suitable for JSON or YAML dumping.

    Args:
        graph: The graph to convert.

    Returns:
        Dict with ``vertices`` and ``edges`` keys.
    """
    edges: List[Dict[str, Any]] = []
    for u in graph.vertices:
        for edge in graph.edges_from(u):
            edges.append({"source": u, "target": edge.neighbor, "weight": edge.weight})
    return {"vertices": graph.vertices, "edges": edges}


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Build a Graph from its dict representation.

    Args:
        data: Mapping with optional ``vertices`` and ``edges`` lists.

    Returns:
        A new Graph.

    Raises:
        ValueError: If the mapping or any entry has the wrong shape.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph data must be a mapping.")

    unknown = set(data) - {"vertices", "edges"}
    if unknown:
        raise ValueError(f"Unrecognized graph keys: {sorted(map(str, unknown))}")

    vertices = data.get("vertices")
    edges = data.get("edges")
    if vertices is None:
        vertices = []
    if edges is None:
        edges = []
    if not isinstance(vertices, list):
        raise ValueError("'vertices' must be a list")
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    graph = Graph()
    for vertex in vertices:
        if isinstance(vertex, (dict, list)):
            raise ValueError(f"Vertex {vertex!r} is not a scalar value")
        graph.add_vertex(vertex)

    for idx, entry in enumerate(edges):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Edge #{idx} must be a mapping with 'source' and 'target'"
            )
        if "source" not in entry or "target" not in entry:
            raise ValueError(f"Edge #{idx} must include 'source' and 'target'")
        extra = set(entry) - {"source", "target", "weight"}
        if extra:
            raise ValueError(
                f"Unrecognized key(s) {sorted(map(str, extra))} in edge #{idx}"
            )
        weight = entry.get("weight", 1)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Edge #{idx} weight must be an integer, got {weight!r}")
        graph.add_edge(entry["source"], entry["target"], weight)

    return graph


def load_graph_yaml(yaml_str: str) -> Graph:
    """Parse a YAML document into a Graph.

    An empty document yields an empty graph.

    Raises:
        ValueError: If the top level is not a mapping or the shape is invalid.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return graph_from_dict(data)


def dump_graph_yaml(graph: Graph) -> str:
    """Serialize a Graph to a YAML string."""
    return yaml.safe_dump(graph_to_dict(graph), sort_keys=False)
