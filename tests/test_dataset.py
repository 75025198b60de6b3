# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import pandas as pd
import pytest

from sumbench.dataset import (
    ensure_numeric,
    load_csv,
    make_frame,
    memory_usage,
    numeric_columns,
    promotion_report,
)
from sumbench.errors import DatasetError, NonNumericColumnError


def test_make_frame_shape_and_names():
    frame = make_frame(12, 4)
    assert frame.shape == (12, 4)
    assert list(frame.columns) == ["c0", "c1", "c2", "c3"]


@pytest.mark.parametrize(
    "kind,expected",
    [
        ("int", ["int64", "int64", "int64"]),
        ("float", ["float64", "float64", "float64"]),
        ("mixed", ["int64", "float64", "int64"]),
    ],
)
def test_make_frame_kinds(kind, expected):
    frame = make_frame(5, 3, kind=kind)
    assert [str(dtype) for dtype in frame.dtypes] == expected


def test_make_frame_is_deterministic():
    pd.testing.assert_frame_equal(make_frame(50, 3, seed=4), make_frame(50, 3, seed=4))
    assert not make_frame(50, 3, seed=4).equals(make_frame(50, 3, seed=5))


@pytest.mark.parametrize(
    "rows,columns,kind",
    [(-1, 2, "float"), (10, 0, "float"), (10, 2, "complex")],
)
def test_make_frame_rejects_bad_arguments(rows, columns, kind):
    with pytest.raises(DatasetError):
        make_frame(rows, columns, kind=kind)


def test_load_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,name\n1,2.5,x\n3,4.5,y\n")
    frame = load_csv(path)
    assert frame.shape == (2, 3)
    assert numeric_columns(frame) == ["a", "b"]
    with pytest.raises(NonNumericColumnError):
        ensure_numeric(frame)
    ensure_numeric(frame[numeric_columns(frame)])


def test_load_csv_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "absent.csv")


def test_memory_usage_counts_values_only():
    assert memory_usage(make_frame(10, 2, kind="float")) == 160


def test_promotion_doubles_int32_column():
    report = promotion_report(rows=1000)
    assert report.before_dtype == "int32"
    assert report.after_dtype == "float64"
    assert report.before_bytes == 4000
    assert report.after_bytes == 8000
    assert report.growth == pytest.approx(2.0)


def test_promotion_requires_rows():
    with pytest.raises(DatasetError):
        promotion_report(rows=0)
