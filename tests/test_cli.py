"""Tests for depimpact CLI entrypoints."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

import depimpact.main as main


def _write_graph(tmp_path: Path, graph: dict | None = None) -> Path:
    path = tmp_path / "graph.json"
    if graph is None:
        graph = {
            "A": [{"id": "B", "type": "compile"}],
            "B": [{"id": "C", "type": "runtime"}],
            "C": [],
            "D": [{"id": "A", "type": "runtime"}],
        }
    path.write_text(json.dumps(graph), encoding="utf-8")
    return path


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["depimpact", *argv])
    return main.main()


def test_impact_command_prints_sorted_units(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)

    exit_code = _run(monkeypatch, "impact", str(graph_path), "A")

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == ["A", "B", "C"]


def test_closure_command_prints_kinds(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)

    exit_code = _run(monkeypatch, "closure", str(graph_path), "D")

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "A": "runtime",
        "B": "runtime",
        "C": "runtime",
        "D": "compile",
    }


def test_depth_command_writes_output_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)
    output = tmp_path / "out" / "depths.json"

    exit_code = _run(monkeypatch, "depth", str(graph_path), "A", "-o", str(output))

    assert exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8")) == {"A": 0, "B": 1, "C": 2}


def test_path_command_reports_missing_path(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)

    assert _run(monkeypatch, "path", str(graph_path), "D", "C") == 0
    assert json.loads(capsys.readouterr().out) == ["D", "A", "B", "C"]

    assert _run(monkeypatch, "path", str(graph_path), "D", "C", "--compile-only") == 1
    assert json.loads(capsys.readouterr().out) is None


def test_recompile_map_command_with_roots_and_config(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)

    exit_code = _run(
        monkeypatch,
        "-c",
        '{"output": {"indent": 0}}',
        "recompile-map",
        str(graph_path),
        "--root",
        "A",
        "--root",
        "B",
        "-w",
        "2",
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert len(out.strip().splitlines()) == 1
    assert json.loads(out) == {"A": ["A"], "B": ["A", "B"], "C": ["A"]}


def test_recompile_map_command_with_kinds(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path, {"A": [{"id": "B", "type": "export"}]})

    exit_code = _run(monkeypatch, "recompile-map", str(graph_path), "--kinds")

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "A": {"A": "compile"},
        "B": {"A": "export", "B": "compile"},
    }


def test_unrecognized_edge_type_fails_command(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path, {"A": [{"id": "B", "type": "bogus"}]})

    assert _run(monkeypatch, "impact", str(graph_path), "A") == 1


def test_missing_graph_file_fails_command(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    assert _run(monkeypatch, "depth", str(tmp_path / "absent.json"), "A") == 1


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing subcommands make the CLI print help and fail."""

    exit_code = _run(monkeypatch)

    assert exit_code == 1
    assert "Depimpact" in capsys.readouterr().out


def test_inline_toml_config_with_table_header(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)

    exit_code = _run(monkeypatch, "-c", "[output]\nindent = 0\n", "depth", str(graph_path), "A")

    out = capsys.readouterr().out
    assert exit_code == 0
    assert len(out.strip().splitlines()) == 1
    assert json.loads(out) == {"A": 0, "B": 1, "C": 2}


def test_unwritable_log_file_fails_cleanly(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    graph_path = _write_graph(tmp_path)
    monkeypatch.setattr(sys, "argv", [
        "depimpact",
        "--log-file",
        str(tmp_path),
        "depth",
        str(graph_path),
        "A",
    ])

    assert main.main() == 1
