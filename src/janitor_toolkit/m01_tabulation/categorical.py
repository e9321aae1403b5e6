"""
🏷️ Module: categorical.py

Explicit categorical typing for tabulated columns.

Grouping, pivoting and splitting can all erase a column's categorical
dtype. The tabulators therefore capture a column's type up front as a
`CategoricalType` (or a plain dtype) and re-apply it to the columns they
build, instead of relying on pandas to carry the dtype through.
"""
from dataclasses import dataclass

import numpy as np
import pandas as pd

# Label for missing values wherever they must become a column name or key.
MISSING_LABEL = "NA_"


@dataclass(frozen=True)
class CategoricalType:
    """An ordered level set attached to a column's values."""

    levels: tuple
    ordered: bool = False
    explicit_na: bool = False

    @classmethod
    def of(cls, series: pd.Series):
        """Returns the level set of a categorical `series`, or None for plain columns."""
        if isinstance(series.dtype, pd.CategoricalDtype):
            return cls(levels=tuple(series.cat.categories), ordered=bool(series.cat.ordered))
        return None

    def apply(self, values) -> pd.Series:
        """Attaches these levels to `values`; values outside the level set become missing."""
        series = values if isinstance(values, pd.Series) else pd.Series(values)
        if isinstance(series.dtype, pd.CategoricalDtype):
            series = series.astype(object)
        categorical = pd.Categorical(series, categories=list(self.levels), ordered=self.ordered)
        return pd.Series(categorical, index=series.index, name=series.name)

    def as_text(self) -> "CategoricalType":
        """The same level set with every level rendered as text."""
        return CategoricalType(
            levels=tuple(str(level) for level in self.levels),
            ordered=self.ordered,
            explicit_na=self.explicit_na,
        )

    def with_missing_level(self, label: str = MISSING_LABEL) -> "CategoricalType":
        """Appends `label` as an explicit last level standing for missing values."""
        if self.explicit_na:
            return self
        return CategoricalType(
            levels=self.levels + (label,), ordered=self.ordered, explicit_na=True
        )


def missing_label(values) -> str:
    """
    Returns the label for missing values that no entry of `values` already uses.

    Starts from MISSING_LABEL and appends underscores until the label is free,
    so a real "NA_" value never shares a column name or partition key with
    the missing ones.
    """
    taken = {value for value in values if isinstance(value, str)}
    label = MISSING_LABEL
    while label in taken:
        label += "_"
    return label


def as_categorical(series: pd.Series) -> pd.Series:
    """Coerces `series` to categorical; plain columns take their sorted distinct values as levels."""
    if isinstance(series.dtype, pd.CategoricalDtype):
        return series
    return series.astype("category")


def strip_categorical(series: pd.Series) -> pd.Series:
    """Drops categorical typing and keeps the underlying values."""
    if not isinstance(series.dtype, pd.CategoricalDtype):
        return series
    return series.astype(object).infer_objects()


def capture_column_type(series: pd.Series):
    """Returns a CategoricalType for categorical columns, else the column's dtype."""
    return CategoricalType.of(series) or series.dtype


def restore_column_type(series: pd.Series, column_type) -> pd.Series:
    """
    Re-applies a type captured with `capture_column_type`.

    numpy bool and integer dtypes cannot hold missing values, so a column
    that gained a missing row keeps its inferred (float/object) dtype.
    """
    if isinstance(column_type, CategoricalType):
        return column_type.apply(series)
    values = strip_categorical(series)
    if values.dtype == column_type:
        return values
    if values.hasnans and isinstance(column_type, np.dtype) and column_type.kind in ("b", "i", "u"):
        return values
    return values.astype(column_type)
