# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import pytest

from sumbench.bench import run_benchmark, sweep
from sumbench.config import Settings
from sumbench.dataset import make_frame
from sumbench.errors import UnknownStrategyError
from sumbench.strategies import STRATEGIES, vectorized_sum
from sumbench.timing import measure

FAST = Settings(repeat=1, number=1)


def test_run_benchmark_measures_every_strategy():
    results = run_benchmark(make_frame(50, 4, seed=1), settings=FAST, kind="float")
    assert [r.strategy for r in results] == list(STRATEGIES)
    for r in results:
        assert not r.skipped
        assert r.agrees
        assert r.best_s > 0
        assert r.median_s >= r.best_s
        assert (r.rows, r.columns, r.kind, r.scope) == (50, 4, "float", "columns")
    loop = results[0]
    assert loop.speedup == pytest.approx(1.0)
    checksums = [r.checksum for r in results]
    assert checksums == pytest.approx([checksums[0]] * 4)


def test_loop_skipped_above_cell_limit():
    settings = Settings(repeat=1, loop_cell_limit=10)
    results = run_benchmark(make_frame(50, 4), settings=settings)
    loop = results[0]
    assert loop.skipped
    assert loop.best_s is None and loop.speedup is None
    measured = [r for r in results if not r.skipped]
    assert len(measured) == 3
    # Without loop the slowest measured strategy is the baseline.
    assert min(r.speedup for r in measured) == pytest.approx(1.0)


def test_disagreeing_strategy_is_flagged(monkeypatch):
    def broken(frame, scope="columns", skipna=False):
        return vectorized_sum(frame, scope, skipna) + 1.0

    monkeypatch.setitem(STRATEGIES, "apply", broken)
    results = {r.strategy: r for r in run_benchmark(make_frame(20, 3), settings=FAST)}
    assert not results["apply"].agrees
    assert results["loop"].agrees
    assert results["vectorized"].agrees


def test_subset_of_strategies_and_scope():
    results = run_benchmark(make_frame(30, 2), ["builtin", "vectorized"], scope="total", settings=FAST)
    assert [r.strategy for r in results] == ["builtin", "vectorized"]
    assert all(r.scope == "total" for r in results)


def test_unknown_strategy_raises():
    with pytest.raises(UnknownStrategyError):
        run_benchmark(make_frame(5, 2), ["loop", "nope"], settings=FAST)


def test_sweep_covers_each_size():
    results = sweep([10, 20], columns=3, kind="mixed", settings=FAST)
    assert [r.rows for r in results] == [10] * 4 + [20] * 4
    assert {r.kind for r in results} == {"mixed"}


def test_measure_validates_arguments():
    timing = measure(lambda: None, repeat=3, number=2)
    assert len(timing.samples) == 3
    assert timing.best <= timing.median
    with pytest.raises(ValueError):
        measure(lambda: None, repeat=0)
    with pytest.raises(ValueError):
        measure(lambda: None, number=0)
