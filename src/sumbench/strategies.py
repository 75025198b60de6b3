# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Four ways to sum a numeric DataFrame, from slowest to fastest.

``loop``
    Nested positional iteration, one interpreted addition per cell.
``apply``
    ``DataFrame.apply`` calling Python's built-in ``sum`` once per row or
    column; the inner loop still runs in the interpreter.
``builtin``
    The library reduction ``DataFrame.sum``.
``vectorized``
    Pull the contiguous ``numpy`` buffer out of the frame and reduce it in
    one call.

Every strategy accepts the same arguments and returns the same shapes, so
they can be swapped freely and cross-checked against each other.
"""

from __future__ import annotations

import functools
from typing import Callable, Dict, Tuple, Union

import numpy as np
import pandas as pd

from sumbench.dataset import ensure_numeric
from sumbench.errors import UnknownScopeError, UnknownStrategyError

SCOPES: Tuple[str, ...] = ("columns", "rows", "total")
AXES = {"columns": 0, "rows": 1}

Result = Union[np.ndarray, float]
Strategy = Callable[..., Result]


def _empty_result(frame: pd.DataFrame, scope: str) -> Result:
    if scope == "total":
        return 0.0
    nrows, ncols = frame.shape
    return np.zeros(ncols if scope == "columns" else nrows, dtype=np.float64)


def as_strategy(func: Callable[[pd.DataFrame, str, bool], Result]) -> Strategy:
    """Wrap a raw strategy with scope validation and empty-frame handling."""

    @functools.wraps(func)
    def wrapper(frame: pd.DataFrame, scope: str = "columns", skipna: bool = False) -> Result:
        if scope not in SCOPES:
            raise UnknownScopeError(f"unknown scope {scope!r}; expected one of {', '.join(SCOPES)}")
        ensure_numeric(frame)
        if frame.size == 0:
            return _empty_result(frame, scope)
        result = func(frame, scope, skipna)
        if scope == "total":
            return float(result)
        return np.asarray(result, dtype=np.float64)

    return wrapper


def _cell(frame: pd.DataFrame, i: int, j: int) -> float:
    value = frame.iat[i, j]
    if pd.isna(value):
        return np.nan
    return value


@as_strategy
def loop_sum(frame: pd.DataFrame, scope: str, skipna: bool) -> Result:
    nrows, ncols = frame.shape

    if scope == "total":
        total = 0.0
        for i in range(nrows):
            for j in range(ncols):
                value = _cell(frame, i, j)
                if skipna and value != value:
                    continue
                total += value
        return total

    if scope == "columns":
        out = np.zeros(ncols)
        for j in range(ncols):
            acc = 0.0
            for i in range(nrows):
                value = _cell(frame, i, j)
                if skipna and value != value:
                    continue
                acc += value
            out[j] = acc
        return out

    out = np.zeros(nrows)
    for i in range(nrows):
        acc = 0.0
        for j in range(ncols):
            value = _cell(frame, i, j)
            if skipna and value != value:
                continue
            acc += value
        out[i] = acc
    return out


def _python_sum(values: pd.Series, skipna: bool) -> float:
    if skipna:
        values = values.dropna()
    else:
        values = values.astype("float64")
    return sum(values, 0.0)


@as_strategy
def apply_sum(frame: pd.DataFrame, scope: str, skipna: bool) -> Result:
    axis = AXES.get(scope, 0)
    sums = frame.apply(_python_sum, axis=axis, result_type="reduce", skipna=skipna)
    if scope == "total":
        return sum(sums, 0.0)
    return sums.to_numpy()


@as_strategy
def builtin_sum(frame: pd.DataFrame, scope: str, skipna: bool) -> Result:
    sums = frame.sum(axis=AXES.get(scope, 0), skipna=skipna)
    # Nullable dtypes reduce to pd.NA, which float() rejects.
    values = sums.to_numpy(dtype=np.float64, na_value=np.nan)
    if scope == "total":
        return values.sum()
    return values


@as_strategy
def vectorized_sum(frame: pd.DataFrame, scope: str, skipna: bool) -> Result:
    values = frame.to_numpy(dtype=np.float64, na_value=np.nan)
    reduce = np.nansum if skipna else np.sum
    if scope == "total":
        return reduce(values)
    return reduce(values, axis=AXES[scope])


STRATEGIES: Dict[str, Strategy] = {
    "loop": loop_sum,
    "apply": apply_sum,
    "builtin": builtin_sum,
    "vectorized": vectorized_sum,
}

# Per-cell interpreted work; the benchmark refuses these above a cell limit.
INTERPRETED = frozenset({"loop"})


def get_strategy(name: str) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(
            f"unknown strategy {name!r}; expected one of {', '.join(STRATEGIES)}"
        ) from None


def summarize(frame: pd.DataFrame, strategy: str = "vectorized", scope: str = "columns", skipna: bool = False) -> Result:
    return get_strategy(strategy)(frame, scope, skipna)
