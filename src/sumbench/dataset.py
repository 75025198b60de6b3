# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Synthetic and CSV-backed numeric tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd
from pandas.api.types import is_numeric_dtype

from sumbench.errors import DatasetError, NonNumericColumnError

logger = logging.getLogger(__name__)

KINDS = ("int", "float", "mixed")

# Keeps int64 row and total sums far from overflow for any frame we build.
INT_HIGH = 1_000


def make_frame(rows: int, columns: int, kind: str = "float", seed: int = 0) -> pd.DataFrame:
    if rows < 0:
        raise DatasetError(f"rows must be >= 0, got {rows}")
    if columns < 1:
        raise DatasetError(f"columns must be >= 1, got {columns}")
    if kind not in KINDS:
        raise DatasetError(f"unknown kind {kind!r}; expected one of {', '.join(KINDS)}")

    rng = np.random.default_rng(seed)
    data = {}
    for idx in range(columns):
        as_int = kind == "int" or (kind == "mixed" and idx % 2 == 0)
        if as_int:
            data[f"c{idx}"] = rng.integers(0, INT_HIGH, size=rows, dtype=np.int64)
        else:
            data[f"c{idx}"] = rng.random(rows)
    frame = pd.DataFrame(data)
    logger.debug("built %s frame %dx%d (seed=%d)", kind, rows, columns, seed)
    return frame


def load_csv(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"dataset not found: {path}")
    return pd.read_csv(path)


def numeric_columns(frame: pd.DataFrame) -> List[str]:
    return [str(name) for name, dtype in frame.dtypes.items() if is_numeric_dtype(dtype)]


def ensure_numeric(frame: pd.DataFrame) -> pd.DataFrame:
    bad = [str(name) for name, dtype in frame.dtypes.items() if not is_numeric_dtype(dtype)]
    if bad:
        raise NonNumericColumnError(bad)
    return frame


def memory_usage(frame: pd.DataFrame) -> int:
    return int(frame.memory_usage(deep=True, index=False).sum())


@dataclass
class PromotionReport:
    rows: int
    before_dtype: str
    after_dtype: str
    before_bytes: int
    after_bytes: int

    @property
    def growth(self) -> float:
        if self.before_bytes == 0:
            return 1.0
        return self.after_bytes / self.before_bytes


def promotion_report(rows: int = 1_000_000, seed: int = 0) -> PromotionReport:
    """Show what one float value does to an integer column.

    Assigning a fractional value into an ``int32`` column forces pandas to
    store the whole column as ``float64``, doubling its footprint.
    """
    if rows < 1:
        raise DatasetError(f"rows must be >= 1, got {rows}")
    rng = np.random.default_rng(seed)
    before = pd.Series(rng.integers(0, INT_HIGH, size=rows, dtype=np.int32), name="value")
    # Series.where upcasts instead of raising like setitem does on pandas 3.
    after = before.where(before.index != 0, 0.5)
    return PromotionReport(
        rows=rows,
        before_dtype=str(before.dtype),
        after_dtype=str(after.dtype),
        before_bytes=int(before.memory_usage(index=False, deep=True)),
        after_bytes=int(after.memory_usage(index=False, deep=True)),
    )
