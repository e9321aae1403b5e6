"""
janitor_toolkit

Data-cleaning utilities for pandas DataFrames:

- `tabyl`: one-, two- and three-way frequency tables.
- `get_dupes`: rows that are duplicated on a chosen set of columns.

Config-driven runners for both live in the numbered stage packages, and
`python -m janitor_toolkit.run_toolkit_pipeline --config ...` runs them
from a master YAML file.
"""
from janitor_toolkit.m00_utils.errors import (
    AmbiguousSelectionError,
    InvalidInputKindError,
    MissingArgumentsError,
    TabylError,
    UnresolvedColumnError,
)
from janitor_toolkit.m01_tabulation.tabyl import tabyl
from janitor_toolkit.m01_tabulation.tabyl_result import as_tabyl, is_tabyl
from janitor_toolkit.m02_duplicates.get_dupes import get_dupes

__all__ = [
    "AmbiguousSelectionError",
    "InvalidInputKindError",
    "MissingArgumentsError",
    "TabylError",
    "UnresolvedColumnError",
    "as_tabyl",
    "get_dupes",
    "is_tabyl",
    "tabyl",
]
