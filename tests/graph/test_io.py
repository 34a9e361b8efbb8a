import pytest
import yaml

from wgraph.graph.io import (
    dump_graph_yaml,
    graph_from_dict,
    graph_to_dict,
    load_graph_yaml,
)
from wgraph.types.base import Edge


def test_graph_to_dict(diamond):
    data = graph_to_dict(diamond)
    assert set(data["vertices"]) == {"A", "B", "C", "D"}
    assert {"source": "A", "target": "C", "weight": 4} in data["edges"]
    assert len(data["edges"]) == 4


def test_graph_from_dict_isolated_and_parallel():
    g = graph_from_dict(
        {
            "vertices": ["A", "Z"],
            "edges": [
                {"source": "A", "target": "B", "weight": 2},
                {"source": "A", "target": "B", "weight": 5},
                {"source": "B", "target": "C"},
            ],
        }
    )
    assert set(g.vertices) == {"A", "B", "C", "Z"}
    assert g.edges_between("A", "B") == [Edge("B", 2), Edge("B", 5)]
    assert g.edges_from("B") == [Edge("C", 1)]
    assert g.edges_from("Z") == []


def test_dict_round_trip(line_parallel):
    g = graph_from_dict(graph_to_dict(line_parallel))
    for v in line_parallel.vertices:
        assert g.edges_from(v) == line_parallel.edges_from(v)


@pytest.mark.parametrize(
    "data,message",
    [
        ([], "must be a mapping"),
        ({"nodes": []}, "Unrecognized graph keys"),
        ({"vertices": "A"}, "'vertices' must be a list"),
        ({"edges": {}}, "'edges' must be a list"),
        ({"edges": 0}, "'edges' must be a list"),
        ({"vertices": ""}, "'vertices' must be a list"),
        ({"vertices": [["A"]]}, "not a scalar"),
        ({"edges": ["A->B"]}, "must be a mapping"),
        ({"edges": [{"source": "A"}]}, "must include 'source' and 'target'"),
        ({"edges": [{"source": "A", "target": "B", "cost": 1}]}, "Unrecognized key"),
        ({"edges": [{"source": "A", "target": "B", "weight": 1.5}]}, "integer"),
    ],
)
def test_graph_from_dict_errors(data, message):
    with pytest.raises(ValueError, match=message):
        graph_from_dict(data)


def test_load_graph_yaml():
    yaml_str = """
vertices: [A, B, C, D, Z]
edges:
  - {source: A, target: B, weight: 1}
  - {source: A, target: C, weight: 4}
  - {source: B, target: C, weight: 1}
  - {source: C, target: D, weight: 1}
"""
    g = load_graph_yaml(yaml_str)
    assert len(g) == 5
    assert g.shortest_path("A", "D").total == 3
    assert not g.shortest_path("A", "Z")


def test_load_graph_yaml_empty():
    g = load_graph_yaml("")
    assert len(g) == 0


def test_load_graph_yaml_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="top-level"):
        load_graph_yaml("- A\n- B\n")


def test_dump_graph_yaml(diamond):
    text = dump_graph_yaml(diamond)
    data = yaml.safe_load(text)
    assert data == graph_to_dict(diamond)
    g = load_graph_yaml(text)
    assert g.shortest_path("A", "D").total == 3


def test_graph_from_dict_null_sections_are_empty():
    g = graph_from_dict({"vertices": None, "edges": None})
    assert len(g) == 0
    assert g.edge_count == 0
