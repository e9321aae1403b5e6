"""
test_tabyl_two_way.py — Core logic tests for two-way frequency tables.
"""

import logging

import numpy as np
import pandas as pd

from janitor_toolkit import tabyl


def _cell_total(table: pd.DataFrame) -> int:
    return int(table.iloc[:, 1:].to_numpy().sum())


def test_basic_crosstab():
    """Rows come from the first variable, columns from the second."""
    df = pd.DataFrame({"a": ["x", "y", "x", "x"], "b": ["p", "q", "q", "p"]})
    result = tabyl(df, "a", "b")
    assert result.columns.tolist() == ["a", "p", "q"]
    assert result["a"].tolist() == ["x", "y"]
    assert result["p"].tolist() == [2, 0]
    assert result["q"].tolist() == [1, 1]


def test_missing_column_values_go_to_last_column():
    """Missing values of the column variable are counted under 'NA_', last."""
    df = pd.DataFrame({"a": ["x", "y", "x"], "b": ["q", None, "p"]})
    result = tabyl(df, "a", "b")
    assert result.columns.tolist() == ["a", "p", "q", "NA_"]
    assert result["NA_"].tolist() == [0, 1]


def test_real_na_value_keeps_its_own_column():
    """A real "NA_" value and the missing values are counted in separate columns."""
    df = pd.DataFrame({"a": ["x", "x", "y"], "b": ["NA_", None, "p"]})
    result = tabyl(df, "a", "b")
    assert result.columns.tolist() == ["a", "NA_", "p", "NA__"]
    assert result["NA_"].tolist() == [1, 0]
    assert result["NA__"].tolist() == [1, 0]
    assert result["p"].tolist() == [0, 1]


def test_missing_row_values_go_to_last_row():
    """Missing values of the row variable form the last row."""
    df = pd.DataFrame({"a": [None, "x", "y"], "b": ["p", "p", "q"]})
    result = tabyl(df, "a", "b")
    assert result["a"].tolist()[:2] == ["x", "y"]
    assert pd.isna(result["a"].iloc[2])
    assert result["p"].tolist() == [1, 0, 1]


def test_cells_sum_to_rows(cars_df):
    """All cells together count every input row."""
    result = tabyl(cars_df, "cyl", "am")
    assert _cell_total(result) == len(cars_df)


def test_show_na_false_counts_complete_rows(cars_df):
    """With show_na=False only rows missing neither variable are counted."""
    result = tabyl(cars_df, "cyl", "gear", show_na=False)
    complete = cars_df["cyl"].notna() & cars_df["gear"].notna()
    assert _cell_total(result) == complete.sum()
    assert "NA_" not in result.columns
    assert result["cyl"].notna().all()


def test_categorical_columns_in_level_order(cars_df):
    """Categorical columns are laid out in level order, with unobserved levels."""
    result = tabyl(cars_df, "am", "size")
    assert result.columns.tolist() == ["am", "small", "mid", "large", "huge"]
    assert result["huge"].sum() == 0


def test_categorical_rows_expand_missing_levels(cars_df):
    """Unobserved row levels appear as rows of zeros in level order."""
    result = tabyl(cars_df, "size", "am")
    assert result["size"].astype(str).tolist() == ["small", "mid", "large", "huge"]
    assert result.iloc[3, 1:].sum() == 0
    assert isinstance(result["size"].dtype, pd.CategoricalDtype)


def test_missing_levels_hidden(cars_df):
    """show_missing_levels=False drops unobserved levels."""
    result = tabyl(cars_df, "size", "am", show_missing_levels=False)
    assert result["size"].astype(str).tolist() == ["small", "mid", "large"]


def test_numeric_columns_sorted(cars_df):
    """Numeric column values become sorted column labels."""
    result = tabyl(cars_df, "am", "cyl")
    assert result.columns.tolist() == ["am", 4.0, 6.0, 8.0, "NA_"]


def test_empty_after_filtering_returns_zero_rows(caplog):
    """An all-missing input with show_na=False gives a zero-row table and a notice."""
    df = pd.DataFrame({"a": [np.nan, 1.0], "b": ["p", None]})
    with caplog.at_level(logging.INFO):
        result = tabyl(df, "a", "b", show_na=False)
    assert len(result) == 0
    assert result.columns.tolist() == ["a", "b"]
    assert "No records to count" in caplog.text
    assert result.attrs["tabyl_type"] == "two_way"


def test_result_tagged_with_variable_names(cars_df):
    """Two-way results record their row and column variable names."""
    result = tabyl(cars_df, "cyl", "gear")
    assert result.attrs["tabyl_type"] == "two_way"
    assert result.attrs["axes"] == 2
    assert result.attrs["var_names"] == {"row": "cyl", "col": "gear"}


def test_repeated_calls_are_identical(cars_df):
    """Tabulating the same input twice gives identical results."""
    pd.testing.assert_frame_equal(tabyl(cars_df, "size", "gear"), tabyl(cars_df, "size", "gear"))
