import io
import json

import pytest

from dataflow_dot.cli import main

GRAPH = {
    "data": [{"name": "A", "source": "app"}, {"name": "B", "source": "app"}],
    "functions": [{"name": "F", "owner": "svc1", "inputs": ["A"], "outputs": ["B"]}],
}


def test_renders_to_stdout(tmp_path, capsys):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(GRAPH), encoding="utf-8")

    assert main(["-i", str(path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("digraph G {\n")
    assert "A -> F\n" in out
    assert out.endswith("}\n}\n")


def test_long_option(tmp_path, capsys):
    path = tmp_path / "graph.yaml"
    path.write_text("data: []\nfunctions: []\n", encoding="utf-8")

    assert main(["--input", str(path)]) == 0
    assert "cluster_legend" in capsys.readouterr().out


def test_missing_input_exits_non_zero(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "missing.json")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not find input file" in captured.err


def test_malformed_input_writes_nothing(tmp_path, capsys):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps({"data": []}), encoding="utf-8")

    assert main(["-i", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "parse failure" in captured.err


class ClosedPipe:
    def write(self, text):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        pass

    def fileno(self):
        raise OSError("no descriptor")


def test_write_failure_exits_non_zero(tmp_path, capsys, monkeypatch):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(GRAPH), encoding="utf-8")
    monkeypatch.setattr("sys.stdout", ClosedPipe())

    assert main(["-i", str(path)]) == 1
    assert "could not write output" in capsys.readouterr().err


def test_input_option_is_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 2


def test_unencodable_output_exits_non_zero(tmp_path, capsys, monkeypatch):
    graph = dict(GRAPH, functions=[dict(GRAPH["functions"][0], owner="café")])
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(graph), encoding="utf-8")
    monkeypatch.setattr("sys.stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))

    assert main(["-i", str(path)]) == 1
    assert "could not write output" in capsys.readouterr().err


def test_unknown_log_level_exits_non_zero(tmp_path, capsys, monkeypatch):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(GRAPH), encoding="utf-8")
    monkeypatch.setattr("dataflow_dot.cli.LOG_LEVEL", "loud")

    assert main(["-i", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DATAFLOW_LOG_LEVEL" in captured.err


def test_verbose_flag_is_accepted(tmp_path, capsys):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(GRAPH), encoding="utf-8")

    assert main(["-i", str(path), "-v"]) == 0
    assert capsys.readouterr().out.startswith("digraph G {\n")
