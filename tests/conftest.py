import logging

import numpy as np
import pandas as pd
import pytest


@pytest.fixture(autouse=True)
def enable_logging():
    """
    Keep log capture working even if a runner disabled logging earlier
    (logging_mode: off is process-wide).
    """
    logging.disable(logging.NOTSET)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def cars_df():
    """A small mtcars-like table with categorical, numeric, text and missing values."""
    return pd.DataFrame(
        {
            "cyl": [4, 6, 8, 4, 4, 8, 6, 8, np.nan, 4],
            "gear": [4, 4, 3, 5, 4, 3, 3, 3, 4, np.nan],
            "am": ["manual", "manual", "auto", "manual", "auto", "auto", "auto", "auto", "manual", None],
            "size": pd.Categorical(
                ["small", "mid", "large", "small", "small", "large", "mid", "large", "small", "mid"],
                categories=["small", "mid", "large", "huge"],
            ),
        }
    )
