# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Compare two benchmark result files and report timing deltas."""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from sumbench.bench import BenchmarkResult
from sumbench.report import read_results_csv

Key = Tuple[str, str, int, int, str]
DIFF_FIELDS = ["strategy", "scope", "rows", "columns", "kind", "base_s", "compare_s", "best_s_delta", "ratio"]


def index_results(results: List[BenchmarkResult]) -> Dict[Key, float]:
    return {
        (r.strategy, r.scope, r.rows, r.columns, r.kind): r.best_s
        for r in results
        if r.best_s is not None
    }


def diff_results(
    base: List[BenchmarkResult], compare: List[BenchmarkResult], limit: int = 0
) -> List[Dict[str, object]]:
    """Positive ``best_s_delta`` means ``compare`` got slower."""
    before = index_results(base)
    after = index_results(compare)

    deltas: List[Dict[str, object]] = []
    for key in set(before) | set(after):
        b = before.get(key, 0.0)
        c = after.get(key, 0.0)
        deltas.append({
            "strategy": key[0],
            "scope": key[1],
            "rows": key[2],
            "columns": key[3],
            "kind": key[4],
            "base_s": b,
            "compare_s": c,
            "best_s_delta": c - b,
            "ratio": c / b if b > 0 else None,
        })

    deltas.sort(key=lambda d: (d["best_s_delta"], d["strategy"]), reverse=True)
    if limit > 0:
        deltas = deltas[:limit]
    return deltas


def write_diff(deltas: List[Dict[str, object]], stream) -> None:
    writer = csv.writer(stream)
    writer.writerow(DIFF_FIELDS)
    for row in deltas:
        ratio = row["ratio"]
        writer.writerow([
            row["strategy"],
            row["scope"],
            row["rows"],
            row["columns"],
            row["kind"],
            f"{row['base_s']:.6f}",
            f"{row['compare_s']:.6f}",
            f"{row['best_s_delta']:.6f}",
            "" if ratio is None else f"{ratio:.3f}",
        ])


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base", required=True, type=Path)
    parser.add_argument("--compare", required=True, type=Path)
    parser.add_argument("--limit", type=int, default=20)
    args = parser.parse_args(argv)

    deltas = diff_results(read_results_csv(args.base), read_results_csv(args.compare), args.limit)
    write_diff(deltas, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
