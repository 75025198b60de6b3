# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import numpy as np
import pytest

from sumbench.compare import check_agreement, compare_values, results_agree


@pytest.mark.parametrize(
    "lhs,rhs,op,expected",
    [
        (1.0, 2.0, "lt", True),
        (2.0, 2.0, "lt", False),
        (2.0, 2.0, "le", True),
        (3.0, 2.0, "gt", True),
        (2.0, 2.0, "ge", True),
        ("1.5", "1.25", "ge", True),
    ],
)
def test_compare_values(lhs, rhs, op, expected):
    assert compare_values(lhs, rhs, op) is expected


def test_compare_values_unknown_operator():
    with pytest.raises(ValueError):
        compare_values(1, 2, "eq")


def test_results_agree():
    assert results_agree([1.0, 2.0], np.array([1.0, 2.0 + 1e-12]))
    assert results_agree([np.nan, 1.0], [np.nan, 1.0])
    assert not results_agree([1.0, 2.0], [1.0, 2.1])
    assert not results_agree([1.0, 2.0], [1.0, 2.0, 3.0])
    assert results_agree(5.0, 5.0)


def test_check_agreement_reports_outliers():
    results = {"loop": [1.0, 2.0], "apply": [1.0, 2.0], "builtin": [1.0, 3.0]}
    assert check_agreement(results) == ["builtin"]
    assert check_agreement({}) == []
