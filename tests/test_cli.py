import io
import logging
import sys

import pytest

from dynamic_mst import DynamicGraph, GraphLimits
from dynamic_mst.__main__ import main, parse_args, run_menu
from dynamic_mst.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    package_level = logging.getLogger("dynamic_mst").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("dynamic_mst").setLevel(package_level)


def run(commands: str, graph: DynamicGraph = None) -> str:
    stdout = io.StringIO()
    assert run_menu(graph or DynamicGraph(), io.StringIO(commands), stdout) == 0
    return stdout.getvalue()


def test_add_and_display():
    output = run("1\n0 1 1\n1\n1 2 2\n1\n2 3 3\n1\n0 3 10\n3\n4\n")

    assert "Edge 0 -- 1 (weight: 1) added." in output
    assert "Minimum Spanning Tree (Weight: 6):\n0 -- 1 (weight: 1)\n1 -- 2 (weight: 2)\n2 -- 3 (weight: 3)\n" in output
    assert output.endswith("Exiting program. Goodbye!\n")


def test_remove_reports_missing_edge():
    output = run("1\n0 1 5\n2\n1 0\n2\n0 1\n2\n0 1\n4\n")

    assert output.count("Edge 1 -- 0 does not exist.") == 1
    assert output.count("Edge 0 -- 1 removed.") == 1
    assert output.count("Edge 0 -- 1 does not exist.") == 1


def test_disconnected_and_invalid_input():
    output = run("1\n0 1 4\n1\n2 2 1\n3\n9\n1\nfoo\n4\n")

    assert "Graph is disconnected. MST cannot be formed." in output
    assert "Invalid choice! Please try again." in output
    assert "Invalid edge! Expected three integers." in output


def test_capacity_errors_are_reported():
    graph = DynamicGraph(GraphLimits(max_edges=1, max_nodes=3))
    output = run("1\n0 5 1\n1\n0 1 1\n1\n1 2 1\n4\n", graph)

    assert "Edge 0 -- 5 was not added: max_nodes exceeded" in output
    assert "Edge 1 -- 2 was not added: max_edges exceeded" in output
    assert len(graph.edges) == 1


def test_end_of_input_exits():
    assert run("").endswith("Exiting program. Goodbye!\n")
    assert run("1\n").endswith("Exiting program. Goodbye!\n")


def test_parse_args_reads_env_defaults(monkeypatch):
    monkeypatch.setenv("DYNAMIC_MST_MAX_NODES", "7")
    args = parse_args(["--max-edges", "3"])

    assert args.max_edges == 3
    assert args.max_nodes == 7
    assert args.log_level == "WARNING"


def test_main_runs_menu_on_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0 1 2\n3\n4\n"))

    assert main(["--log-level", "ERROR"]) == 0
    assert "Minimum Spanning Tree (Weight: 2):" in capsys.readouterr().out


def test_setup_logging_replaces_handlers():
    setup_logging("debug")
    setup_logging(logging.INFO)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr
    assert logging.getLogger("dynamic_mst").level == logging.INFO


def test_malformed_env_limit_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("DYNAMIC_MST_MAX_NODES", "abc")

    with pytest.raises(SystemExit) as error:
        main([])

    assert error.value.code == 2
    assert "invalid limits in environment" in capsys.readouterr().err


def test_non_positive_limit_option_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as error:
        parse_args(["--max-nodes", "0"])

    assert error.value.code == 2
    assert "invalid limits" in capsys.readouterr().err


def test_log_records_stay_off_menu_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 1\n4\n"))

    assert main(["--log-level", "INFO"]) == 0

    captured = capsys.readouterr()
    assert "Edge 0 -- 1 does not exist." in captured.out
    assert "[INFO]" not in captured.out
    assert "Edge 0 -- 1 does not exist" in captured.err
