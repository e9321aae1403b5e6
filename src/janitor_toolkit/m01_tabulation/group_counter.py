"""
🧮 Module: group_counter.py

The grouping engine behind every tabulation.

Each grouping column is mapped onto a `KeyDomain`: its ordered key values
(declared levels for categorical columns, sorted distinct values
otherwise) with missing values as one extra key at the end. Rows are
encoded as positions in those domains and counted with a single
`np.bincount` over the combined key. Groups come out in level order with
the missing group last, and the zero entries of the bincount are the
unobserved level combinations.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from janitor_toolkit.m00_utils.errors import InvalidInputKindError
from janitor_toolkit.m01_tabulation.categorical import CategoricalType, missing_label

# pandas.api.types.infer_dtype kinds accepted for object and string columns
SUPPORTED_INFERRED_KINDS = {
    "string",
    "empty",
    "boolean",
    "integer",
    "floating",
    "mixed-integer-float",
    "decimal",
}


def check_input_kind(series: pd.Series, name=None) -> None:
    """
    Raises InvalidInputKindError unless `series` holds logical, numeric,
    character or categorical values.
    """
    dtype = series.dtype
    label = name if name is not None else series.name
    if isinstance(dtype, pd.CategoricalDtype) or pd.api.types.is_bool_dtype(dtype):
        return
    if pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_complex_dtype(dtype):
        return
    if pd.api.types.is_object_dtype(dtype) or pd.api.types.is_string_dtype(dtype):
        inferred = pd.api.types.infer_dtype(series, skipna=True)
        if inferred in SUPPORTED_INFERRED_KINDS:
            return
        raise InvalidInputKindError(
            f"Column '{label}' holds values of kind '{inferred}'; "
            "input must be logical, numeric, character or categorical."
        )
    raise InvalidInputKindError(
        f"Column '{label}' has unsupported dtype '{dtype}'; "
        "input must be logical, numeric, character or categorical."
    )


@dataclass(frozen=True)
class KeyDomain:
    """The ordered key values one grouping column can take."""

    values: pd.Index
    has_na: bool
    categorical: Optional[CategoricalType] = None

    @classmethod
    def from_series(cls, series: pd.Series, expand_levels: bool = False) -> "KeyDomain":
        """
        Builds the domain of `series`.

        Categorical columns keep declared level order and, with
        `expand_levels`, include levels that never occur. Other columns use
        their sorted distinct values.
        """
        categorical = CategoricalType.of(series)
        has_na = bool(series.isna().any())
        if categorical is not None:
            categories = series.cat.categories
            if not expand_levels:
                codes = series.cat.codes.to_numpy()
                categories = categories[np.unique(codes[codes >= 0])]
            return cls(values=categories, has_na=has_na, categorical=categorical)
        values = pd.Index(series.dropna().unique()).sort_values()
        return cls(values=values, has_na=has_na)

    def __len__(self) -> int:
        return len(self.values) + int(self.has_na)

    def encode(self, series: pd.Series) -> np.ndarray:
        """Positions of `series` values in the domain; missing values map past the last value."""
        if isinstance(series.dtype, pd.CategoricalDtype):
            series = series.astype(object)
        codes = self.values.get_indexer(series)
        codes[codes < 0] = len(self.values)
        return codes

    def decode(self, codes: np.ndarray, name=None) -> pd.Series:
        """Inverse of `encode`, re-attaching the column's categorical typing."""
        values = pd.Series(self.values).reindex(codes).reset_index(drop=True)
        values.name = name
        if self.categorical is not None:
            values = self.categorical.apply(values)
        return values

    def labels(self) -> list:
        """Pivot column labels: every value, then an unused missing label if missing values occur."""
        labels = list(self.values)
        if self.has_na:
            labels.append(missing_label(labels))
        return labels


def count_column_name(columns: Sequence) -> str:
    """Name for the count column that does not clash with a grouping column ('n', 'nn', ...)."""
    name = "n"
    while name in columns:
        name += "n"
    return name


def count_groups(df: pd.DataFrame, columns: Sequence, show_missing_levels: bool = True) -> pd.DataFrame:
    """
    Counts rows per combination of values in `columns`.

    Args:
        df (pd.DataFrame): Input table.
        columns (Sequence): One or two grouping columns of `df`.
        show_missing_levels (bool): If any grouping column is categorical,
            also emit zero-count rows for every unobserved combination of
            declared levels.

    Returns:
        pd.DataFrame: Long-form counts, one row per group, ordered by
        level order (or natural order) with missing keys last. The count
        column is `count_column_name(columns)`.
    """
    columns = list(columns)
    for col in columns:
        check_input_kind(df[col], col)

    expand = show_missing_levels and any(CategoricalType.of(df[col]) is not None for col in columns)
    domains = [KeyDomain.from_series(df[col], expand_levels=expand) for col in columns]
    shape = tuple(len(domain) for domain in domains)
    size = int(np.prod(shape))

    if size:
        codes = [domain.encode(df[col]) for domain, col in zip(domains, columns)]
        counts = np.bincount(np.ravel_multi_index(codes, shape), minlength=size)
        keep = np.arange(size) if expand else np.flatnonzero(counts)
        positions = np.unravel_index(keep, shape)
    else:
        counts = np.zeros(0, dtype=np.int64)
        keep = np.zeros(0, dtype=np.intp)
        positions = [keep] * len(columns)

    result = pd.DataFrame(
        {col: domain.decode(pos) for col, domain, pos in zip(columns, domains, positions)}
    )
    result[count_column_name(columns)] = counts[keep].astype(np.int64)
    return result
