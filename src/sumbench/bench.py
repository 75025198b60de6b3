# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Time every strategy on the same frame and check that they agree."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from sumbench.compare import check_agreement
from sumbench.config import Settings
from sumbench.dataset import make_frame
from sumbench.strategies import INTERPRETED, STRATEGIES, get_strategy
from sumbench.timing import measure

logger = logging.getLogger(__name__)

FIELDS: List[str] = [
    "strategy",
    "scope",
    "rows",
    "columns",
    "kind",
    "best_s",
    "median_s",
    "speedup",
    "agrees",
    "skipped",
    "checksum",
]


@dataclass
class BenchmarkResult:
    strategy: str
    scope: str
    rows: int
    columns: int
    kind: str
    best_s: Optional[float] = None
    median_s: Optional[float] = None
    speedup: Optional[float] = None
    agrees: bool = True
    skipped: bool = False
    checksum: Optional[float] = None

    def as_row(self) -> Dict[str, object]:
        return asdict(self)


def _baseline(results: Sequence[BenchmarkResult]) -> Optional[float]:
    measured = {r.strategy: r.best_s for r in results if r.best_s is not None}
    if not measured:
        return None
    if "loop" in measured:
        return measured["loop"]
    return max(measured.values())


def run_benchmark(
    frame: pd.DataFrame,
    strategies: Optional[Iterable[str]] = None,
    scope: str = "columns",
    settings: Optional[Settings] = None,
    kind: str = "custom",
    skipna: bool = False,
) -> List[BenchmarkResult]:
    settings = settings or Settings()
    names = list(strategies) if strategies is not None else list(STRATEGIES)
    funcs = {name: get_strategy(name) for name in names}
    nrows, ncols = frame.shape
    cells = nrows * ncols

    results: List[BenchmarkResult] = []
    outputs: Dict[str, object] = {}
    for name, fn in funcs.items():
        entry = BenchmarkResult(strategy=name, scope=scope, rows=nrows, columns=ncols, kind=kind)
        if name in INTERPRETED and cells > settings.loop_cell_limit:
            logger.info("skipping %s: %d cells exceeds limit %d", name, cells, settings.loop_cell_limit)
            entry.skipped = True
            results.append(entry)
            continue

        output = fn(frame, scope, skipna)
        timing = measure(lambda: fn(frame, scope, skipna), repeat=settings.repeat, number=settings.number)
        outputs[name] = output
        entry.best_s = timing.best
        entry.median_s = timing.median
        entry.checksum = float(np.sum(output))
        logger.debug("%s %s %dx%d best=%.6fs", name, scope, nrows, ncols, timing.best)
        results.append(entry)

    mismatched = set(check_agreement(outputs, rtol=settings.rtol, atol=settings.atol))
    if mismatched:
        logger.warning(
            "strategies disagree with %s on %dx%d %s: %s",
            next(iter(outputs)), nrows, ncols, scope, ", ".join(sorted(mismatched)),
        )

    baseline = _baseline(results)
    for entry in results:
        if entry.skipped:
            continue
        entry.agrees = entry.strategy not in mismatched
        if baseline is not None and entry.best_s:
            entry.speedup = baseline / entry.best_s
    return results


def sweep(
    sizes: Iterable[int],
    columns: int,
    kind: str = "float",
    scope: str = "columns",
    settings: Optional[Settings] = None,
    strategies: Optional[Iterable[str]] = None,
    skipna: bool = False,
) -> List[BenchmarkResult]:
    settings = settings or Settings()
    names = list(strategies) if strategies is not None else None
    results: List[BenchmarkResult] = []
    for rows in sizes:
        frame = make_frame(rows, columns, kind=kind, seed=settings.seed)
        results.extend(run_benchmark(frame, names, scope=scope, settings=settings, kind=kind, skipna=skipna))
    return results
