"""
📋 Module: tabyl_1way.py

One-way frequency tables: counts and percentages of a single vector.

When missing values are shown, a `valid_percent` column gives each
value's share of the non-missing total; the missing row is always last.
"""
import numpy as np
import pandas as pd

from janitor_toolkit.m01_tabulation.group_counter import check_input_kind, count_groups
from janitor_toolkit.m01_tabulation.tabyl_result import as_tabyl, one_way_column_names


def tabyl_one_way(values, var_name="dat", show_na: bool = True, show_missing_levels: bool = True) -> pd.DataFrame:
    """
    Builds a one-way frequency table.

    Args:
        values: A Series or 1-D sequence of logical, numeric, character or
            categorical values.
        var_name: Name given to the value column of the result.
        show_na (bool): Keep the missing-value row and add `valid_percent`;
            if False the missing row is dropped and `percent` is computed
            over the remaining rows.
        show_missing_levels (bool): Include unobserved categorical levels
            with a count of zero, in level order.

    Returns:
        pd.DataFrame: Columns `var_name`, `n`, `percent` and, if missing
        values are shown, `valid_percent`. Tagged as a one-way tabyl.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(values)
    series = series.reset_index(drop=True)
    check_input_kind(series, var_name)

    # An empty input gives an empty table, not one zero row per level.
    expand = show_missing_levels and not series.empty
    result = count_groups(pd.DataFrame({"value": series}), ["value"], show_missing_levels=expand)

    missing = result["value"].isna()
    output_columns = ["n", "percent"]
    if show_na and missing.any():
        result["percent"] = result["n"] / result["n"].sum()
        result["valid_percent"] = result["n"] / result.loc[~missing, "n"].sum()
        result.loc[missing, "valid_percent"] = np.nan
        output_columns.append("valid_percent")
    else:
        result = result[~missing].reset_index(drop=True)
        result["percent"] = result["n"] / result["n"].sum()

    result.columns = one_way_column_names(var_name, output_columns)
    return as_tabyl(result, axes=1)
