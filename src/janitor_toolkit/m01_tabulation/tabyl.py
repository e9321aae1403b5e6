"""
🔢 Module: tabyl.py

Public entry point for frequency tables.

`tabyl()` tabulates a vector, or one, two or three columns of a DataFrame:

    tabyl(df, "cyl")                  # one-way frequency table
    tabyl(df, "cyl", "gear")          # two-way crosstab
    tabyl(df, "cyl", "gear", "am")    # dict of crosstabs, split by "am"
    tabyl(df["cyl"])                  # one-way table of a Series

The number of column selectors fixes the table's `Arity`, and each arity
has exactly one tabulator.
"""
from collections.abc import Mapping
from enum import Enum

import numpy as np
import pandas as pd
from pandas.api.typing import DataFrameGroupBy

from janitor_toolkit.m00_utils.errors import InvalidInputKindError, MissingArgumentsError
from janitor_toolkit.m01_tabulation.selectors import select_columns
from janitor_toolkit.m01_tabulation.tabyl_1way import tabyl_one_way
from janitor_toolkit.m01_tabulation.tabyl_2way import tabyl_two_way
from janitor_toolkit.m01_tabulation.tabyl_3way import tabyl_three_way


class Arity(Enum):
    ONE_WAY = 1
    TWO_WAY = 2
    THREE_WAY = 3


def _one_way(dat, show_na, show_missing_levels):
    var_name = dat.columns[0]
    return tabyl_one_way(dat[var_name], var_name=var_name, show_na=show_na, show_missing_levels=show_missing_levels)


TABULATORS = {
    Arity.ONE_WAY: _one_way,
    Arity.TWO_WAY: tabyl_two_way,
    Arity.THREE_WAY: tabyl_three_way,
}


def resolve_arity(var1=None, var2=None, var3=None) -> Arity:
    """Maps the supplied column selectors onto a table arity."""
    supplied = tuple(var is not None for var in (var1, var2, var3))
    arities = {
        (True, False, False): Arity.ONE_WAY,
        (True, True, False): Arity.TWO_WAY,
        (True, True, True): Arity.THREE_WAY,
    }
    if not any(supplied):
        raise MissingArgumentsError(
            "if calling on a DataFrame, specify column name(s) to tabulate. "
            "Did you mean to call tabyl() on a vector?"
        )
    if supplied not in arities:
        raise MissingArgumentsError("please specify var1 OR var1 & var2 OR var1 & var2 & var3")
    return arities[supplied]


def _tabyl_vector(dat, var_name, show_na, show_missing_levels):
    if dat is None:
        raise InvalidInputKindError(f"object {var_name or 'dat'} not found")
    if isinstance(dat, (Mapping, set, frozenset)) or not pd.api.types.is_list_like(dat):
        raise InvalidInputKindError(
            "tabyl() is meant to be called on vectors and DataFrames; "
            "convert other inputs to one of these types"
        )
    if isinstance(dat, np.ndarray) and dat.ndim != 1:
        raise InvalidInputKindError("input must be a 1-dimensional vector, not a matrix")

    if var_name is None:
        var_name = dat.name if isinstance(dat, pd.Series) and dat.name is not None else "dat"
    return tabyl_one_way(dat, var_name=var_name, show_na=show_na, show_missing_levels=show_missing_levels)


def tabyl(dat, var1=None, var2=None, var3=None, *, show_na: bool = True, show_missing_levels: bool = True, var_name=None):
    """
    Generates a one-, two- or three-way frequency table.

    Args:
        dat: A DataFrame (or grouped DataFrame, which is ungrouped) holding
            the variables to count, or a Series / list / 1-D array to
            tabulate on its own.
        var1: Column selector of the first variable (the rows of a 2-way table).
        var2: Optional column selector of the second variable (the columns
            of a 2-way table).
        var3: Optional column selector of the third variable; a 3-way call
            returns one 2-way table per value of this variable.
        show_na (bool): Display counts of missing values. In a 1-way table
            missing values also trigger a `valid_percent` column.
        show_missing_levels (bool): Display unobserved levels of categorical
            variables as rows and/or columns of zeros.
        var_name: Name of the value column when tabulating a vector; defaults
            to the Series name, else "dat".

    Selectors are column names or `{alias: source}` mappings, see
    `janitor_toolkit.m01_tabulation.selectors`.

    Returns:
        pd.DataFrame for 1- and 2-way tables; dict of pd.DataFrame for 3-way.

    Raises:
        MissingArgumentsError: DataFrame input without selectors, or an
            incomplete selector combination.
        UnresolvedColumnError: A selector doesn't match a column.
        InvalidInputKindError: Unsupported input or column values.
    """
    if isinstance(dat, DataFrameGroupBy):
        dat = dat.obj

    if not isinstance(dat, pd.DataFrame):
        if any(var is not None for var in (var1, var2, var3)):
            raise InvalidInputKindError(
                "column selectors can only be used when calling tabyl() on a DataFrame"
            )
        return _tabyl_vector(dat, var_name, show_na, show_missing_levels)

    arity = resolve_arity(var1, var2, var3)
    selected = select_columns(dat, [var1, var2, var3][: arity.value])
    return TABULATORS[arity](selected, show_na=show_na, show_missing_levels=show_missing_levels)
