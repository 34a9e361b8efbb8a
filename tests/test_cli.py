import json
import logging
from pathlib import Path

import pytest

from wgraph import cli

GRAPH_YAML = """
vertices: [A, B, C, D, Z]
edges:
  - {source: A, target: B, weight: 1}
  - {source: A, target: C, weight: 4}
  - {source: B, target: C, weight: 1}
  - {source: C, target: D, weight: 1}
"""


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graph.yaml"
    path.write_text(GRAPH_YAML)
    return path


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: wgraph" in capsys.readouterr().out


def test_cli_show(graph_file: Path, capsys) -> None:
    cli.main(["show", str(graph_file)])
    out = capsys.readouterr().out.splitlines()
    assert "A -1-> B" in out
    assert "A -4-> C" in out
    assert "Z:" in out


def test_cli_path_text(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "A", "D"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["A -1-> B -1-> C -1-> D", "total: 3"]


def test_cli_path_json(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "A", "D", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["origin"] == "A"
    assert data["destination"] == "D"
    assert data["total"] == 3
    assert [e["neighbor"] for e in data["edges"]] == ["B", "C", "D"]


def test_cli_path_integer_vertex_names(tmp_path: Path, capsys) -> None:
    path = tmp_path / "numbers.yaml"
    path.write_text("edges:\n  - {source: 1, target: 2, weight: 5}\n")
    cli.main(["path", str(path), "1", "2", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["origin"] == 1
    assert data["total"] == 5


@pytest.mark.parametrize("source,target", [("A", "Z"), ("A", "A"), ("A", "missing")])
def test_cli_path_not_found(graph_file: Path, caplog, source, target) -> None:
    with caplog.at_level(logging.ERROR, logger="wgraph"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", str(graph_file), source, target])
    assert exc_info.value.code == 1
    assert "No path found" in caplog.text


def test_cli_missing_file(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="wgraph"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["show", str(tmp_path / "nope.yaml")])
    assert exc_info.value.code == 1
    assert "Graph file not found" in caplog.text


def test_cli_invalid_graph(tmp_path: Path, caplog) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("edges:\n  - {source: A}\n")
    with caplog.at_level(logging.ERROR, logger="wgraph"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", str(path), "A", "B"])
    assert exc_info.value.code == 1
    assert "Failed to load graph" in caplog.text


def test_cli_verbose_sets_debug(graph_file: Path) -> None:
    cli.main(["--verbose", "show", str(graph_file)])
    assert logging.getLogger("wgraph").level == logging.DEBUG
    cli.main(["--quiet", "show", str(graph_file)])
    assert logging.getLogger("wgraph").level == logging.WARNING
    cli.main(["show", str(graph_file)])
    assert logging.getLogger("wgraph").level == logging.INFO


def test_cli_unreadable_path(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="wgraph"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["show", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "Cannot read graph file" in caplog.text


def test_module_entrypoint_import_does_not_run(monkeypatch) -> None:
    import importlib

    monkeypatch.setattr("sys.argv", ["wgraph"])
    module = importlib.import_module("wgraph.__main__")
    assert module.main is cli.main
