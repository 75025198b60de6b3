# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Compare loop, apply, sum and vectorized summation over tabular data.

The four strategies live in :mod:`sumbench.strategies`; the benchmark
harness that times and cross-checks them lives in :mod:`sumbench.bench`.
"""

from sumbench.errors import SumbenchError
from sumbench.strategies import STRATEGIES, summarize

__version__ = "0.1.0"

__all__: list[str] = ["STRATEGIES", "SumbenchError", "summarize", "__version__"]
