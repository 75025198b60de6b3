# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import io

import pytest

from sumbench.bench import BenchmarkResult
from sumbench.diff import diff_results, write_diff
from sumbench.report import (
    build_report,
    read_results_csv,
    render_html_table,
    render_table,
    write_results_csv,
)


def _result(strategy, best, rows=100, **extra):
    return BenchmarkResult(strategy=strategy, scope="columns", rows=rows, columns=4, kind="float", best_s=best, **extra)


def test_results_csv_round_trip(tmp_path):
    results = [
        BenchmarkResult("loop", "columns", 100, 4, "float", skipped=True),
        _result("vectorized", 0.001, median_s=0.002, speedup=40.0, checksum=12.5),
    ]
    path = tmp_path / "out" / "results.csv"
    write_results_csv(results, path)
    assert read_results_csv(path) == results


def test_read_results_csv_requires_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("strategy,scope\nloop,columns\n")
    with pytest.raises(ValueError, match="missing columns: best_s, columns, kind, rows"):
        read_results_csv(path)


def test_render_table_marks_skipped():
    text = render_table([_result("loop", None, skipped=True), _result("vectorized", 0.25, speedup=8.0)])
    lines = text.splitlines()
    assert lines[0].split()[:2] == ["Strategy", "Scope"]
    assert "skipped" in lines[2]
    assert "0.25" in lines[3] and "yes" in lines[3]
    assert render_table([]) == "No results."


def test_render_html_table_escapes_and_handles_empty():
    assert "No rows" in render_html_table(["a"], [])
    assert "<p>No columns reported.</p>" == render_html_table([], [])
    html_text = render_html_table(["name"], [{"name": "<b>"}])
    assert "&lt;b&gt;" in html_text


def test_build_report(tmp_path):
    write_results_csv([_result("loop", 1.0), _result("vectorized", 0.01)], tmp_path / "float_run.csv")
    (tmp_path / "notes.txt").write_text("ignored")
    page = build_report(tmp_path, rows=1)
    assert page.startswith("<!DOCTYPE html>")
    assert "float run (showing 1 of 2)" in page
    assert "notes" not in page


def test_build_report_empty_directory(tmp_path):
    assert "No reports generated." in build_report(tmp_path)


def test_diff_results_orders_by_regression():
    base = [_result("loop", 1.0), _result("vectorized", 0.1)]
    compare = [_result("loop", 2.0), _result("vectorized", 0.1), _result("apply", 0.5)]
    deltas = diff_results(base, compare)
    assert [d["strategy"] for d in deltas] == ["loop", "apply", "vectorized"]
    assert deltas[0]["best_s_delta"] == pytest.approx(1.0)
    assert deltas[0]["ratio"] == pytest.approx(2.0)
    assert deltas[1]["ratio"] is None
    assert len(diff_results(base, compare, limit=1)) == 1


def test_diff_ignores_skipped_entries():
    base = [_result("loop", None, skipped=True)]
    assert diff_results(base, base) == []


def test_write_diff_format():
    stream = io.StringIO()
    write_diff(diff_results([_result("loop", 1.0)], [_result("loop", 0.5)]), stream)
    lines = stream.getvalue().splitlines()
    assert lines[0].startswith("strategy,scope,rows")
    assert lines[1] == "loop,columns,100,4,float,1.000000,0.500000,-0.500000,0.500"
