# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Cross-check strategy results and compare measured values against thresholds."""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping

import numpy as np

OPERATORS: Dict[str, Callable[[float, float], bool]] = {
    "lt": lambda a, b: a < b,
    "le": lambda a, b: a <= b,
    "gt": lambda a, b: a > b,
    "ge": lambda a, b: a >= b,
}


def compare_values(lhs: float, rhs: float, op: str = "le") -> bool:
    try:
        op_func = OPERATORS[op]
    except KeyError:
        raise ValueError(f"unknown operator {op!r}; expected one of {', '.join(OPERATORS)}") from None
    return op_func(float(lhs), float(rhs))


def results_agree(a, b, rtol: float = 1e-9, atol: float = 1e-6) -> bool:
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.shape != right.shape:
        return False
    return bool(np.allclose(left, right, rtol=rtol, atol=atol, equal_nan=True))


def check_agreement(results: Mapping[str, object], rtol: float = 1e-9, atol: float = 1e-6) -> List[str]:
    """Return the names whose result differs from the first entry in ``results``."""
    if not results:
        return []
    names = list(results)
    reference = results[names[0]]
    return [name for name in names[1:] if not results_agree(reference, results[name], rtol, atol)]
