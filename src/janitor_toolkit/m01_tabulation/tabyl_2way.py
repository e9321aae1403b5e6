"""
📊 Module: tabyl_2way.py

Two-way frequency tables (crosstabs).

The first variable becomes the rows and the second variable's values
become the columns. Missing values of the second variable are counted in
a last column labelled MISSING_LABEL ("NA_"), with underscores appended
while that label is taken by a real value; missing values of the first
variable form the last row.
"""
import logging

import numpy as np
import pandas as pd

from janitor_toolkit.m01_tabulation.group_counter import KeyDomain, count_groups
from janitor_toolkit.m01_tabulation.tabyl_result import as_tabyl


def pivot_counts(counts: pd.DataFrame) -> pd.DataFrame:
    """
    Spreads long-form counts `(row value, column value, n)` into a wide
    table with one row per row value and one column per column value.

    Row and column order follow the values' domains: declared levels for
    categorical variables, sorted values otherwise, missing last.
    Combinations absent from `counts` are filled with 0.
    """
    row_var, col_var, count_col = counts.columns[:3]
    row_domain = KeyDomain.from_series(counts[row_var])
    col_domain = KeyDomain.from_series(counts[col_var])

    matrix = np.zeros((len(row_domain), len(col_domain)), dtype=np.int64)
    np.add.at(
        matrix,
        (row_domain.encode(counts[row_var]), col_domain.encode(counts[col_var])),
        counts[count_col].to_numpy(dtype=np.int64),
    )

    result = pd.DataFrame(matrix, columns=col_domain.labels())
    result.insert(0, row_var, row_domain.decode(np.arange(len(row_domain))), allow_duplicates=True)
    return result


def tabyl_two_way(dat: pd.DataFrame, show_na: bool = True, show_missing_levels: bool = True) -> pd.DataFrame:
    """
    Builds a two-way frequency table from the first two columns of `dat`.

    Args:
        dat (pd.DataFrame): The already-selected row and column variables.
        show_na (bool): If False, rows missing either variable are dropped first.
        show_missing_levels (bool): Include unobserved categorical levels as
            rows/columns of zeros.

    Returns:
        pd.DataFrame: The crosstab, tagged as a two-way tabyl. If no rows
        remain to be counted, a zero-row table with the two variable
        columns is returned and an info message is logged.
    """
    row_var, col_var = dat.columns[:2]
    dat = dat[[row_var, col_var]]

    if not show_na:
        dat = dat[dat[row_var].notna() & dat[col_var].notna()]

    if dat.empty:
        logging.info("No records to count so returning a zero-row tabyl")
        empty = dat.iloc[0:0].reset_index(drop=True)
        return as_tabyl(empty, axes=2, row_var_name=row_var, col_var_name=col_var)

    counts = count_groups(dat, [row_var, col_var], show_missing_levels=show_missing_levels)
    result = pivot_counts(counts)
    return as_tabyl(result, axes=2, row_var_name=row_var, col_var_name=col_var)
