import io
import sys

import pytest

from daakit.cli import main, parse_int_rows


def _run(monkeypatch, capsys, argv, stdin_text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin_text))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_trace_of_identity_counts_diagonal(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["trace"], "1\n1 0 0\n0 1 0\n0 0 1\n")
    assert status == 0
    assert out.split() == ["3"]


def test_trace_ignores_off_diagonal(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["trace"], "1\n5 9 9\n9 7 9\n9 9 -2\n")
    assert status == 0
    assert out.split() == ["10"]


def test_trace_zero_cases_prints_nothing(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["trace"], "0\n")
    assert status == 0
    assert out == ""


def test_parse_int_rows_splits_lines():
    assert parse_int_rows(["1 2 3", "  -4   5 ", ""]) == [[1, 2, 3], [-4, 5], []]


def test_parse_int_rows_stops_at_non_integer():
    assert parse_int_rows(["4 x 5", "abc 1"]) == [[4], []]


def test_main_rows_echoes_with_trailing_space(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["rows"], "2\n1 2\n3\n")
    assert status == 0
    assert out == "1 2 \n3 \n"


def test_main_rows_only_reads_counted_lines(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["rows"], "1\n7 8\n9 10\n")
    assert status == 0
    assert out == "7 8 \n"


def test_main_rows_missing_lines_print_empty(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["rows"], "2\n6\n")
    assert status == 0
    assert out.splitlines() == ["6 ", ""]


def test_main_rows_without_count_fails(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["rows"], "")
    assert status == 1
    assert out == ""
    assert "daakit:" in err


def test_main_trace_prints_each_trace(monkeypatch, capsys):
    stdin_text = "2\n1 0 0\n0 1 0\n0 0 1\n2 3 4\n5 6 7\n8 9 10\n"
    status, out, _ = _run(monkeypatch, capsys, ["trace"], stdin_text)
    assert status == 0
    assert out.split() == ["3", "18"]


def test_main_trace_incomplete_matrix_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["trace"], "1\n1 2 3 4\n")
    assert status == 1
    assert "incomplete" in err


def test_main_trace_negative_count_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["trace"], "-1\n")
    assert status == 1
    assert "negative" in err


def test_main_requires_command():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2