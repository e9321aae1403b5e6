"""
🔖 Module: tabyl_result.py

Result tagging and reserved-name handling for tabulations.

Every tabulation is a plain pandas DataFrame tagged through
`DataFrame.attrs`, so that presentation code can find the table's arity
and the names of the variables it was built from without re-deriving
them from the column layout.
"""
import pandas as pd

TABYL_TYPES = {1: "one_way", 2: "two_way"}

# Output column -> replacement used when the tabulated variable takes that name.
RESERVED_NAMES = {
    "n": "n_n",
    "percent": "percent_percent",
}


def as_tabyl(df: pd.DataFrame, axes: int, row_var_name=None, col_var_name=None) -> pd.DataFrame:
    """
    Tags `df` as a tabulation result.

    Args:
        df (pd.DataFrame): A 1-way frequency table or a 2-way crosstab.
        axes (int): 1 or 2.
        row_var_name, col_var_name: For 2-way tables, the names of the row
            and column variables.

    Returns:
        pd.DataFrame: `df`, with `attrs` set.
    """
    if axes not in TABYL_TYPES:
        raise ValueError(f"A tabyl has 1 or 2 axes, got {axes}.")
    df.attrs["tabyl_type"] = TABYL_TYPES[axes]
    df.attrs["axes"] = axes
    if axes == 2:
        df.attrs["var_names"] = {"row": row_var_name, "col": col_var_name}
    return df


def is_tabyl(df) -> bool:
    """True if `df` was produced (and tagged) by tabyl."""
    return isinstance(df, pd.DataFrame) and df.attrs.get("tabyl_type") in TABYL_TYPES.values()


def one_way_column_names(var_name, output_columns: list) -> list:
    """
    Header for a 1-way table: `var_name` followed by the output columns,
    where an output column whose name equals `var_name` is swapped for its
    entry in RESERVED_NAMES.
    """
    return [var_name] + [
        RESERVED_NAMES[col] if col == var_name and col in RESERVED_NAMES else col
        for col in output_columns
    ]
