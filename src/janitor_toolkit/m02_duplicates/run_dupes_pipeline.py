"""
🚀 Module: run_dupes_pipeline.py

Runner for the M02 Duplicates module.

Finds duplicate rows on the configured subset of columns and reports
them. The input DataFrame is never modified; the runner returns the
duplicated rows annotated with `dupe_count`.

Example:
    from janitor_toolkit.m02_duplicates.run_dupes_pipeline import run_duplicates_pipeline
    from janitor_toolkit.m00_utils.config_loader import load_config

    config = load_config("config/dups_config.yaml")
    dupes = run_duplicates_pipeline(config=config, df=my_dataframe, run_id="survey_2024")
"""
import logging

import pandas as pd

from janitor_toolkit.m00_utils.config_loader import get_module_block
from janitor_toolkit.m00_utils.config_models import DuplicatesConfig
from janitor_toolkit.m00_utils.export_utils import export_duplicates_report, save_joblib
from janitor_toolkit.m00_utils.load_data import load_input
from janitor_toolkit.m00_utils.logging_utils import configure_logging
from janitor_toolkit.m02_duplicates.get_dupes import get_dupes, summarize_dupes


def run_duplicates_pipeline(config: dict, df: pd.DataFrame = None, notebook: bool = False, run_id: str = None) -> pd.DataFrame:
    """
    Executes the duplicate-finding pipeline.

    Args:
        config (dict): The full toolkit config or just its 'duplicates' block.
        df (pd.DataFrame, optional): The data to check. If None, it is
            loaded from 'input_path'.
        notebook (bool): Notebook context; only affects 'auto' logging.
        run_id (str): Identifier of the run, used in input and output paths.

    Returns:
        pd.DataFrame: The duplicated rows from `get_dupes`.
    """
    dupes_cfg = DuplicatesConfig.model_validate(get_module_block(config, "duplicates"))

    configure_logging(notebook=notebook, logging_mode=dupes_cfg.logging)
    if not run_id:
        raise ValueError("A 'run_id' must be provided.")

    if df is None:
        if not dupes_cfg.input_path:
            raise KeyError("Missing 'input_path' in duplicates config.")
        df = load_input(dupes_cfg.input_path, run_id=run_id)

    subset = dupes_cfg.subset_columns or []
    dupes = get_dupes(df, *subset)
    summary = summarize_dupes(dupes)
    logging.info(
        f"Found {summary['duplicate_count']} duplicated rows in {summary['group_count']} groups "
        f"based on {subset or 'all columns'}."
    )

    settings = dupes_cfg.settings
    if settings.export.run:
        export_duplicates_report(dupes, config=settings.export.model_dump(), run_id=run_id)

    if settings.checkpoint.run:
        if not settings.checkpoint.checkpoint_path:
            raise ValueError("Checkpoint enabled but 'checkpoint_path' is missing.")
        save_joblib(dupes, path=settings.checkpoint.checkpoint_path.format(run_id=run_id))

    return dupes
