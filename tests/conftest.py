"""Shared graph fixtures.

Edge weights are shown in brackets; every edge is directed unless drawn with
arrowheads on both ends.
"""

from __future__ import annotations

import pytest

from wgraph.graph.weighted_digraph import Graph


@pytest.fixture
def diamond():
    # Metric:
    #      [1]       [1]
    #   A──────►B──────►C──────►D
    #   │               ▲  [1]
    #   │      [4]      │
    #   └───────────────┘
    g = Graph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 4)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def line_parallel():
    # Metric:
    #      [1]      [3,1,2]
    #  A◄───────►B◄────────►C
    g = Graph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "A", 1)
    g.add_edge("B", "C", 3)
    g.add_edge("C", "B", 3)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "B", 1)
    g.add_edge("B", "C", 2)
    g.add_edge("C", "B", 2)
    return g


@pytest.fixture
def with_isolated(diamond):
    # Diamond plus vertex Z with no edges at all.
    diamond.add_vertex("Z")
    return diamond


@pytest.fixture
def mesh():
    """Rombus graph with a cross link and a costly direct shortcut.

    Lightest A to F route is A-C-B-E-F with total 5.
    """
    g = Graph()
    g.add_edge("A", "B", 3)
    g.add_edge("A", "C", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "B", 1)
    g.add_edge("B", "E", 1)
    g.add_edge("C", "E", 5)
    g.add_edge("E", "F", 2)
    g.add_edge("A", "F", 9)
    return g
