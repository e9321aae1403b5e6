"""
🔎 Module: get_dupes.py

Non-destructive duplicate finder.

Returns the rows whose values in a chosen set of columns (or all columns)
occur more than once, with a `dupe_count` column giving the size of each
duplicate group. Missing values match each other.
"""
import logging

import pandas as pd

from janitor_toolkit.m01_tabulation.selectors import select_columns


def get_dupes(df: pd.DataFrame, *subset) -> pd.DataFrame:
    """
    Finds duplicated rows of a DataFrame.

    Args:
        df (pd.DataFrame): The input DataFrame to check for duplicates.
        *subset: Column selectors defining a duplicate, or a single list of
            them. If omitted, all columns are used. Renaming selectors
            (`{alias: source}`) rename the key column in the output.

    Returns:
        pd.DataFrame: The duplicated rows, key columns first, then
        `dupe_count`, then the remaining columns; sorted by `dupe_count`
        (largest groups first) and then by the key columns. The original
        row index is kept.
    """
    if len(subset) == 1 and isinstance(subset[0], (list, tuple)):
        subset = tuple(subset[0])
    selectors = list(subset) if subset else list(df.columns)
    keys = select_columns(df, selectors)
    key_cols = list(keys.columns)
    others = df.drop(columns=[col for col in df.columns if col in key_cols])
    combined = pd.concat([keys, others], axis=1)

    duplicate_mask = combined.duplicated(subset=key_cols, keep=False)
    dupes = combined[duplicate_mask]
    if dupes.empty:
        logging.info(f"No duplicate combinations found of: {', '.join(map(str, key_cols))}")
        return combined.iloc[0:0].assign(dupe_count=pd.Series(dtype="int64"))[
            key_cols + ["dupe_count"] + list(others.columns)
        ]

    group_ids = dupes.groupby(key_cols, dropna=False, sort=False, observed=True).ngroup()
    dupe_count = group_ids.map(group_ids.value_counts()).astype("int64")
    dupes = dupes.assign(dupe_count=dupe_count)[key_cols + ["dupe_count"] + list(others.columns)]
    return dupes.sort_values(
        by=["dupe_count"] + key_cols,
        ascending=[False] + [True] * len(key_cols),
        kind="stable",
        na_position="last",
    )


def summarize_dupes(dupes: pd.DataFrame) -> dict:
    """
    Summarizes `get_dupes` output.

    Returns:
        dict:
            - 'duplicate_count': Rows that belong to a duplicate group.
            - 'group_count': Number of distinct duplicate groups.
    """
    if dupes.empty:
        return {"duplicate_count": 0, "group_count": 0}
    key_cols = list(dupes.columns[: dupes.columns.get_loc("dupe_count")])
    return {
        "duplicate_count": int(len(dupes)),
        "group_count": int(dupes.groupby(key_cols, dropna=False, observed=True).ngroups),
    }
