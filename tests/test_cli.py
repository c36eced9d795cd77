import io
import json

import pytest

from seqdijkstra.cli import EXAMPLE_GRAPH, gen_main, main
from seqdijkstra.generator import generate_text


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_all_distances_from_stdin(monkeypatch, capsys):
    _feed(monkeypatch, EXAMPLE_GRAPH)
    assert main([]) == 0
    out = capsys.readouterr()
    assert out.out == "0:0\n1:1\n2:3\n3:4\n"
    assert out.err == ""


def test_single_destination(monkeypatch, capsys):
    _feed(monkeypatch, EXAMPLE_GRAPH)
    assert main(["3"]) == 0
    assert capsys.readouterr().out == "distance from 0 to 3 is 4\n"


def test_unreachable_destination_and_star(monkeypatch, capsys):
    text = "3\n* 2 *\n* * *\n* * *\n"
    _feed(monkeypatch, text)
    assert main(["2"]) == 0
    assert capsys.readouterr().out == "no path to vertex 2\n"
    _feed(monkeypatch, text)
    assert main([]) == 0
    assert capsys.readouterr().out == "0:0\n1:2\n2:*\n"


def test_destination_equal_to_nv_fails_without_output(monkeypatch, capsys):
    _feed(monkeypatch, EXAMPLE_GRAPH)
    assert main(["4"]) == 4
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err.startswith("error: illegal destination vertex 4")


def test_negative_destination_is_invalid(monkeypatch, capsys):
    _feed(monkeypatch, EXAMPLE_GRAPH)
    assert main(["--", "-1"]) == 4
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "text, code",
    [
        ("", 1),
        ("2\n* x\n* *\n", 2),
        ("1 * 3", 5),
        ("2 * 1", 6),
    ],
)
def test_parse_failures_map_to_exit_codes(monkeypatch, capsys, text, code):
    _feed(monkeypatch, text)
    assert main([]) == code
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err.startswith("error: line ")


def test_input_file(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text(EXAMPLE_GRAPH, encoding="utf-8")
    assert main(["2", "--input", str(path)]) == 0
    assert capsys.readouterr().out == "distance from 0 to 2 is 3\n"


def test_missing_input_file(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "nope.txt")]) == 1
    assert "cannot read graph file" in capsys.readouterr().err


def test_print_graph_goes_to_stderr(monkeypatch, capsys):
    _feed(monkeypatch, EXAMPLE_GRAPH)
    assert main(["--print-graph"]) == 0
    out = capsys.readouterr()
    assert out.out == "0:0\n1:1\n2:3\n3:4\n"
    assert out.err.startswith("graph weights:\n*  1  4  *  \n")


def test_metrics_and_json_log(monkeypatch, capsys, tmp_path):
    metrics_path = tmp_path / "m.json"
    _feed(monkeypatch, EXAMPLE_GRAPH)
    rc = main(["--log-json", "--log-level", "info", "--metrics-out", str(metrics_path)])
    assert rc == 0
    err_lines = capsys.readouterr().err.splitlines()
    events = [json.loads(line)["event"] for line in err_lines]
    assert events == ["graph_loaded", "solve_done"]
    metrics = json.loads(metrics_path.read_text(encoding="utf-8"))
    assert metrics["nv"] == 4
    assert metrics["edges"] == 5
    assert metrics["counters"]["steps"] == 4


def test_example_flag(capsys):
    assert main(["--example"]) == 0
    assert capsys.readouterr().out == EXAMPLE_GRAPH


def test_non_numeric_destination_is_usage_error(monkeypatch, capsys):
    _feed(monkeypatch, EXAMPLE_GRAPH)
    with pytest.raises(SystemExit) as excinfo:
        main(["abc"])
    assert excinfo.value.code == 1


def test_generator_output(capsys):
    assert gen_main(["5", "20", "3"]) == 0
    assert capsys.readouterr().out == generate_text(5, 20, 3)


def test_generator_defaults(capsys):
    assert gen_main(["4"]) == 0
    assert capsys.readouterr().out == generate_text(4, 10, 1)


def test_generator_to_file_feeds_engine(tmp_path, capsys):
    path = tmp_path / "g.txt"
    assert gen_main(["6", "--output", str(path)]) == 0
    assert main(["--input", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0] == "0:0"
    assert all(not line.endswith("*") for line in lines)


def test_generator_requires_vertex_count(capsys):
    with pytest.raises(SystemExit) as excinfo:
        gen_main([])
    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_generator_rejects_bad_values(capsys):
    assert gen_main(["0"]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_oversized_weight_is_malformed(monkeypatch, capsys):
    _feed(monkeypatch, "2 * 99999999999999999999 1 *")
    assert main([]) == 2
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err.startswith("error: line 1: ")


def test_count_with_trailing_garbage_is_malformed_weight(monkeypatch, capsys):
    _feed(monkeypatch, "3abc")
    assert main([]) == 2
    assert capsys.readouterr().out == ""


def test_allocation_failure_exits_1(monkeypatch, capsys):
    import numpy as np

    def _no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(np, "full", _no_memory)
    _feed(monkeypatch, EXAMPLE_GRAPH)
    assert main([]) == 1
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err.startswith("error: cannot allocate a 4x4 weight matrix")
