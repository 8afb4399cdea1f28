import json
import logging
from pathlib import Path

import pytest

from eulerpath import cli


def write_graph(tmp_path: Path, text: str, name: str = "graph.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_find_prints_trail(tmp_path: Path, capsys) -> None:
    path = write_graph(tmp_path, "edges: [[0, 1], [0, 1], [1, 0], [1, 0]]\n")

    cli.main(["find", str(path)])

    assert capsys.readouterr().out.strip() == "0 1 0 1 0"


def test_find_no_path_exits_with_one(tmp_path: Path, capsys) -> None:
    path = write_graph(tmp_path, "adjacency: [[1, 1], []]\n")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["find", str(path)])

    assert exc_info.value.code == cli.EXIT_NO_PATH
    assert capsys.readouterr().out == "no eulerian path\n"


def test_find_empty_graph_prints_empty_line(tmp_path: Path, capsys) -> None:
    path = write_graph(tmp_path, "nodes: 3\nedges: []\n")

    cli.main(["find", str(path)])

    assert capsys.readouterr().out == "\n"


def test_find_json_output(tmp_path: Path, capsys) -> None:
    path = write_graph(
        tmp_path, json.dumps({"adjacency": {"0": [0, 1]}}), name="graph.json"
    )

    cli.main(["find", str(path), "--json", "--verify"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["kind"] == "open"
    assert payload["trail"] == [0, 0, 1]
    assert payload["start"] == 0
    assert payload["end"] == 1


def test_check_reports_disconnected_graph(tmp_path: Path, capsys) -> None:
    path = write_graph(tmp_path, "adjacency: [[1], [0], [3], [2]]\n")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["check", str(path)])

    assert exc_info.value.code == cli.EXIT_NO_PATH
    out = capsys.readouterr().out
    assert "Kind:  none" in out
    assert "Reason: nodes [2, 3] carry edges but are not connected to node 0" in out


def test_check_reports_endpoints(tmp_path: Path, capsys) -> None:
    path = write_graph(tmp_path, "edges: [[2, 0], [0, 1], [1, 0]]\n")

    cli.main(["check", str(path)])

    out = capsys.readouterr().out
    assert "Nodes: 3" in out
    assert "Edges: 3" in out
    assert "Kind:  open" in out
    assert "Start: 2" in out
    assert "End:   0" in out


def test_check_json_omits_trail(tmp_path: Path, capsys) -> None:
    path = write_graph(tmp_path, "adjacency: [[0]]\n")

    cli.main(["check", str(path), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert "trail" not in payload
    assert payload["kind"] == "circuit"
    assert payload["has_path"] is True


def test_malformed_graph_exits_with_two(tmp_path: Path, caplog) -> None:
    path = write_graph(tmp_path, "adjacency: [[5]]\n")

    with caplog.at_level(logging.ERROR, logger="eulerpath"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["find", str(path)])

    assert exc_info.value.code == cli.EXIT_INVALID
    assert any("MalformedGraphError" in r.message for r in caplog.records)


def test_missing_file_exits_with_two(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["find", str(tmp_path / "absent.yaml")])

    assert exc_info.value.code == cli.EXIT_INVALID


def test_directory_path_exits_with_two(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="eulerpath"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["find", str(tmp_path)])

    assert exc_info.value.code == cli.EXIT_INVALID
    assert any("Cannot read graph file" in r.message for r in caplog.records)


def test_non_utf8_file_exits_with_two(tmp_path: Path, caplog) -> None:
    path = tmp_path / "graph.yaml"
    path.write_bytes(b"\xff\xfe")

    with caplog.at_level(logging.ERROR, logger="eulerpath"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["find", str(path)])

    assert exc_info.value.code == cli.EXIT_INVALID
    assert any("not valid UTF-8" in r.message for r in caplog.records)


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 0
    assert "usage: eulerpath" in capsys.readouterr().out


def test_verbose_and_quiet_switch_levels(tmp_path: Path, caplog) -> None:
    path = write_graph(tmp_path, "adjacency: [[1, 1], []]\n")

    with caplog.at_level(logging.DEBUG, logger="eulerpath"):
        with pytest.raises(SystemExit):
            cli.main(["--verbose", "find", str(path)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="eulerpath"):
        with pytest.raises(SystemExit):
            cli.main(["--quiet", "find", str(path)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)
