"""
🎯 Module: selectors.py

Resolves column selectors against a DataFrame before any tabulation runs.

A selector is either an existing column label, or a single-entry mapping
`{alias: source}` that renames `source` to `alias` in the selection.
`source` may be a column label or, as with `DataFrame.assign`, a callable
that receives the DataFrame and returns the column's values.
"""
from collections.abc import Mapping

import pandas as pd

from janitor_toolkit.m00_utils.errors import AmbiguousSelectionError, UnresolvedColumnError


def _resolve_one(df: pd.DataFrame, selector):
    if isinstance(selector, Mapping):
        if len(selector) != 1:
            raise ValueError(
                f"A renaming selector maps exactly one alias to a source, got {dict(selector)}."
            )
        alias, source = next(iter(selector.items()))
    else:
        alias, source = selector, selector

    if callable(source):
        values = source(df)
        if len(values) != len(df):
            raise ValueError(
                f"Selector '{alias}' produced {len(values)} values for a table of {len(df)} rows."
            )
        if isinstance(values, pd.Series):
            # Series results are taken positionally, like lists
            return alias, values.set_axis(df.index).rename(alias)
        return alias, pd.Series(values, index=df.index, name=alias)

    if source not in df.columns:
        raise UnresolvedColumnError(
            f"Column '{source}' doesn't exist. Available columns: {list(df.columns)}"
        )
    return alias, df[source].rename(alias)


def select_columns(df: pd.DataFrame, selectors) -> pd.DataFrame:
    """
    Builds a new DataFrame holding the selected columns, in selector order.

    Raises:
        UnresolvedColumnError: A selector names a column that doesn't exist.
        AmbiguousSelectionError: Two selectors produce the same column name.
    """
    resolved = {}
    for selector in selectors:
        alias, values = _resolve_one(df, selector)
        if alias in resolved:
            raise AmbiguousSelectionError(f"Column '{alias}' is selected more than once.")
        resolved[alias] = values
    return pd.DataFrame(resolved, index=df.index)

