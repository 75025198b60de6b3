# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Wall-clock measurement of a zero-argument callable."""

from __future__ import annotations

import statistics
import timeit
from dataclasses import dataclass
from typing import Callable, List


@dataclass
class Timing:
    samples: List[float]
    repeat: int
    number: int

    @property
    def best(self) -> float:
        return min(self.samples)

    @property
    def median(self) -> float:
        return statistics.median(self.samples)

    @property
    def mean(self) -> float:
        return statistics.fmean(self.samples)


def measure(fn: Callable[[], object], repeat: int = 5, number: int = 1) -> Timing:
    """Time ``fn`` and return per-call seconds for each of ``repeat`` rounds."""
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")
    if number < 1:
        raise ValueError(f"number must be >= 1, got {number}")
    totals = timeit.Timer(fn).repeat(repeat=repeat, number=number)
    return Timing(samples=[total / number for total in totals], repeat=repeat, number=number)
