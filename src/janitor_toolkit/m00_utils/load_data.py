"""
📦 Module: load_data.py

Utility functions for loading tabular data into pandas DataFrames.

All functions are non-transformative entry points for pipeline ingestion.

Functions:
- load_csv(path): Loads a CSV file into a pandas DataFrame.
- load_joblib(path): Loads a joblib checkpoint.
- load_input(path, run_id): Picks the loader from the file extension.
"""
import pandas as pd
from joblib import load


def load_csv(path: str) -> pd.DataFrame:
    """
    Loads a CSV file from a given path.

    Args:
        path (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded data as a pandas DataFrame.
    """
    return pd.read_csv(path)


def load_joblib(path: str):
    """Loads an object saved with `save_joblib`."""
    return load(path)


def load_input(path: str, run_id: str = None) -> pd.DataFrame:
    """
    Loads pipeline input, formatting `{run_id}` placeholders in the path.

    `.joblib` files are read as checkpoints; everything else as CSV.
    """
    if run_id and "{run_id}" in path:
        path = path.format(run_id=run_id)
    if str(path).endswith(".joblib"):
        return load_joblib(path)
    return load_csv(path)
