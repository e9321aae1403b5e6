"""
test_dupes.py — Core logic tests for the duplicate-row finder.
"""

import logging

import numpy as np
import pandas as pd
import pytest

from janitor_toolkit import UnresolvedColumnError, get_dupes
from janitor_toolkit.m02_duplicates.get_dupes import summarize_dupes


@pytest.fixture
def orders_df():
    return pd.DataFrame(
        {
            "customer": [1, 1, 2, 3, 3, 3],
            "item": ["x", "x", "y", "z", "z", "w"],
            "qty": [5, 5, 1, 2, 3, 4],
        }
    )


def test_dupes_on_subset(orders_df):
    """Rows sharing the subset values are returned with their group size."""
    dupes = get_dupes(orders_df, "customer")
    assert dupes.columns.tolist() == ["customer", "dupe_count", "item", "qty"]
    assert dupes["customer"].tolist() == [3, 3, 3, 1, 1]
    assert dupes["dupe_count"].tolist() == [3, 3, 3, 2, 2]


def test_dupes_on_all_columns(orders_df):
    """Without a subset, rows must match on every column."""
    dupes = get_dupes(orders_df)
    assert dupes.index.tolist() == [0, 1]
    assert dupes.columns.tolist() == ["customer", "item", "qty", "dupe_count"]


def test_dupes_on_two_columns(orders_df):
    """Multiple key columns form the duplicate key together."""
    dupes = get_dupes(orders_df, "customer", "item")
    assert dupes.index.tolist() == [0, 1, 3, 4]
    assert (dupes["dupe_count"] == 2).all()


def test_missing_values_match_each_other():
    """Missing key values count as equal."""
    df = pd.DataFrame({"k": [np.nan, np.nan, 1.0]})
    dupes = get_dupes(df, "k")
    assert len(dupes) == 2
    assert dupes["dupe_count"].tolist() == [2, 2]


def test_no_dupes_returns_empty_with_message(caplog):
    """No duplicates gives an empty frame with the output columns and a notice."""
    df = pd.DataFrame({"k": [1, 2, 3], "v": ["a", "b", "c"]})
    with caplog.at_level(logging.INFO):
        dupes = get_dupes(df, "k")
    assert dupes.empty
    assert dupes.columns.tolist() == ["k", "dupe_count", "v"]
    assert "No duplicate combinations found of: k" in caplog.text


def test_unknown_column_raises(orders_df):
    """Unknown subset columns fail like tabyl selectors."""
    with pytest.raises(UnresolvedColumnError):
        get_dupes(orders_df, "nope")


def test_summary(orders_df):
    """The summary counts duplicated rows and groups."""
    assert summarize_dupes(get_dupes(orders_df, "customer")) == {
        "duplicate_count": 5,
        "group_count": 2,
    }
    unique_df = pd.DataFrame({"k": [1, 2]})
    assert summarize_dupes(get_dupes(unique_df, "k")) == {"duplicate_count": 0, "group_count": 0}


def test_subset_given_as_list(orders_df):
    """A single list of columns works like separate arguments."""
    pd.testing.assert_frame_equal(
        get_dupes(orders_df, ["customer", "item"]), get_dupes(orders_df, "customer", "item")
    )
