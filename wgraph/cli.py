"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wgraph.graph.io import load_graph_yaml
from wgraph.graph.weighted_digraph import Graph
from wgraph.logging import configure_logging, get_logger
from wgraph.types.base import Vertex

logger = get_logger(__name__)


def _load_graph(path: Path) -> Graph:
    """Read and parse a graph YAML file, exiting with status 1 on failure."""
    try:
        yaml_str = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read graph file {path}: {type(e).__name__}: {e}")
        sys.exit(1)

    try:
        graph = load_graph_yaml(yaml_str)
    except Exception as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.debug(f"Loaded graph from {path}: {graph!r}")
    return graph


def _resolve_vertex(graph: Graph, name: str) -> Vertex:
    """Map a command-line name to a vertex of ``graph``.

    YAML may load names such as ``1`` as integers, so a vertex whose string
    form equals ``name`` is accepted when there is no exact match.
    """
    if name in graph:
        return name
    for vertex in graph.vertices:
        if str(vertex) == name:
            return vertex
    return name


def _show_graph(path: Path) -> None:
    graph = _load_graph(path)
    print(graph)


def _find_path(path: Path, source: str, target: str, as_json: bool) -> None:
    graph = _load_graph(path)
    origin = _resolve_vertex(graph, source)
    destination = _resolve_vertex(graph, target)

    result = graph.shortest_path(origin, destination)
    if not result:
        logger.error(f"No path found from {source} to {target}")
        sys.exit(1)

    found = result.unwrap()
    if as_json:
        print(json.dumps(found.to_dict(), indent=2, default=str))
    else:
        print(found)
        print(f"total: {found.total}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Inspect weighted graphs and query shortest paths.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{show,path}",
        help="Available commands",
    )

    show_parser = subparsers.add_parser("show", help="Print a graph's edges")
    show_parser.add_argument("graph", type=Path, help="Path to graph YAML")

    path_parser = subparsers.add_parser(
        "path", help="Find the shortest path between two vertices"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    path_parser.add_argument("source", help="Origin vertex")
    path_parser.add_argument("target", help="Destination vertex")
    path_parser.add_argument(
        "--json", action="store_true", help="Print the path as JSON"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if configure_logging(verbose=args.verbose, quiet=args.quiet) == logging.DEBUG:
        logger.debug("Debug logging enabled")

    if args.command == "show":
        _show_graph(args.graph)
    elif args.command == "path":
        _find_path(args.graph, args.source, args.target, args.json)


if __name__ == "__main__":
    main()
