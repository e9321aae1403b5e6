"""
test_group_counter.py — Tests for the grouping engine behind tabulation.
"""

import numpy as np
import pandas as pd
import pytest

from janitor_toolkit.m00_utils.errors import InvalidInputKindError
from janitor_toolkit.m01_tabulation.group_counter import (
    KeyDomain,
    check_input_kind,
    count_column_name,
    count_groups,
)


def test_counts_single_column_with_missing_last():
    """Groups are sorted naturally and the missing group is last."""
    df = pd.DataFrame({"x": ["b", None, "a", "b"]})
    counts = count_groups(df, ["x"])
    assert counts["x"].tolist()[:2] == ["a", "b"]
    assert pd.isna(counts["x"].iloc[2])
    assert counts["n"].tolist() == [1, 2, 1]


def test_counts_follow_declared_level_order():
    """Categorical keys sort by declared level order, not alphabetically."""
    df = pd.DataFrame({"x": pd.Categorical(["lo", "hi", "lo"], categories=["lo", "med", "hi"])})
    counts = count_groups(df, ["x"], show_missing_levels=False)
    assert counts["x"].astype(str).tolist() == ["lo", "hi"]
    assert counts["n"].tolist() == [2, 1]


def test_expands_unobserved_levels_with_zero_counts():
    """Unobserved level combinations appear with a count of zero."""
    df = pd.DataFrame(
        {
            "x": pd.Categorical(["lo", "lo"], categories=["lo", "hi"]),
            "y": ["p", "q"],
        }
    )
    counts = count_groups(df, ["x", "y"], show_missing_levels=True)
    assert len(counts) == 4
    assert counts["n"].sum() == 2
    assert counts.loc[counts["x"] == "hi", "n"].tolist() == [0, 0]
    assert isinstance(counts["x"].dtype, pd.CategoricalDtype)


def test_plain_columns_are_not_expanded():
    """Without a categorical column only observed combinations are counted."""
    df = pd.DataFrame({"x": [1, 2], "y": ["p", "q"]})
    counts = count_groups(df, ["x", "y"], show_missing_levels=True)
    assert len(counts) == 2


def test_count_column_avoids_grouping_names():
    """The count column never shadows a grouping column."""
    assert count_column_name(["a"]) == "n"
    assert count_column_name(["n", "b"]) == "nn"
    counts = count_groups(pd.DataFrame({"n": [1, 1], "b": [2, 2]}), ["n", "b"])
    assert counts.columns.tolist() == ["n", "b", "nn"]
    assert counts["nn"].tolist() == [2]


def test_key_domain_round_trip():
    """Encoding then decoding the domain's own codes gives back the values."""
    s = pd.Series([3.0, np.nan, 1.0])
    domain = KeyDomain.from_series(s)
    assert len(domain) == 3
    assert domain.encode(s).tolist() == [1, 2, 0]
    decoded = domain.decode(np.array([0, 1, 2]))
    assert decoded.tolist()[:2] == [1.0, 3.0]
    assert np.isnan(decoded.iloc[2])
    assert domain.labels() == [1.0, 3.0, "NA_"]


@pytest.mark.parametrize(
    "series",
    [
        pd.Series([True, False]),
        pd.Series([1.5, 2.5]),
        pd.Series(["a", None]),
        pd.Series([None, None], dtype=object),
        pd.Series(pd.Categorical(["a"])),
    ],
)
def test_supported_kinds_pass(series):
    """Logical, numeric, character and categorical columns are accepted."""
    check_input_kind(series, "x")


@pytest.mark.parametrize(
    "series",
    [
        pd.Series(pd.date_range("2024-01-01", periods=2)),
        pd.Series([[1], [2]]),
        pd.Series([1 + 2j]),
    ],
)
def test_unsupported_kinds_raise(series):
    """Dates, nested objects and complex numbers are rejected."""
    with pytest.raises(InvalidInputKindError):
        check_input_kind(series, "x")
