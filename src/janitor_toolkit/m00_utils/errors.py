"""
🚨 Module: errors.py

Exception types raised by the tabulation and duplicates modules.

Each error also subclasses the builtin a caller would naturally catch
(KeyError for unknown columns, TypeError for unsupported inputs,
ValueError for malformed calls).
"""


class TabylError(Exception):
    """Base class for all janitor_toolkit errors."""


class UnresolvedColumnError(TabylError, KeyError):
    """A column selector does not match any column of the input table."""

    def __str__(self):
        # KeyError repr()s its message; keep it readable.
        return str(self.args[0]) if self.args else ""


class InvalidInputKindError(TabylError, TypeError):
    """The input, or a tabulated column, is not a supported kind of data."""


class MissingArgumentsError(TabylError, ValueError):
    """The call does not name the columns needed for the requested table."""


class AmbiguousSelectionError(TabylError, ValueError):
    """Two column selectors resolve to the same output name."""
