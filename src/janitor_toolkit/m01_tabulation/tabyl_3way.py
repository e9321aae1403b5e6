"""
🗂️ Module: tabyl_3way.py

Three-way frequency tables: one two-way table per value of a third variable.

The third variable is split on as text, so that unobserved categorical
levels never produce empty partitions, and its declared levels are only
used to order the partitions afterwards. The first variable's original
type is re-applied to every partition, since pivoting coerces it.
"""
import pandas as pd

from janitor_toolkit.m01_tabulation.categorical import (
    CategoricalType,
    as_categorical,
    capture_column_type,
    missing_label,
    restore_column_type,
    strip_categorical,
)
from janitor_toolkit.m01_tabulation.tabyl_2way import tabyl_two_way


def tabyl_three_way(dat: pd.DataFrame, show_na: bool = True, show_missing_levels: bool = True) -> dict:
    """
    Builds two-way tables of the first two columns of `dat`, split by the third.

    Args:
        dat (pd.DataFrame): The already-selected row, column and split variables.
        show_na (bool): Show missing values; rows missing the split variable
            become their own partition keyed "NA_" (with underscores appended
            while a real split value uses that key), ordered last.
            If False those rows are dropped.
        show_missing_levels (bool): If True, the row and column variables are
            treated as categorical so every partition has the same rows and
            columns; if False, only values seen in a partition appear in it.

    Returns:
        dict: Partition key (the split value as text) -> two-way tabyl,
        ordered by the split variable's declared levels if it is
        categorical, else by first appearance, with the missing partition last.
    """
    row_var, col_var, split_var = dat.columns[:3]
    dat = dat[[row_var, col_var, split_var]].copy()

    split_type = CategoricalType.of(dat[split_var])
    if split_type is not None:
        split_type = split_type.as_text()
    split_missing = dat[split_var].isna()
    keys = dat[split_var].astype(object).map(str, na_action="ignore")

    has_missing_partition = show_na and bool(split_missing.any())
    missing_key = None
    if has_missing_partition:
        taken = list(keys.dropna().unique())
        if split_type is not None:
            taken.extend(split_type.levels)
        missing_key = missing_label(taken)
        keys = keys.fillna(missing_key)
        if split_type is not None:
            split_type = split_type.with_missing_level(missing_key)

    row_type = capture_column_type(dat[row_var])

    if show_missing_levels:
        dat[row_var] = as_categorical(dat[row_var])
        dat[col_var] = as_categorical(dat[col_var])
    else:
        dat[row_var] = strip_categorical(dat[row_var])
        dat[col_var] = strip_categorical(dat[col_var])

    partitions = {}
    for key, part in dat.groupby(keys, sort=False):
        table = tabyl_two_way(part[[row_var, col_var]], show_na=show_na, show_missing_levels=show_missing_levels)
        table[row_var] = restore_column_type(table[row_var], row_type)
        partitions[key] = table

    if split_type is not None:
        order = [level for level in split_type.levels if level in partitions]
    else:
        order = [key for key in partitions if key != missing_key]
        if has_missing_partition:
            order.append(missing_key)

    return {key: partitions[key] for key in order}
