"""
🚀 Module: run_tabyl_pipeline.py

Runner for the M01 Tabulation module.

Loads the input (unless a DataFrame is passed in), tabulates the
configured variables, and optionally exports the result and saves a
joblib checkpoint of it.

Example:
    from janitor_toolkit.m01_tabulation.run_tabyl_pipeline import run_tabyl_pipeline
    from janitor_toolkit.m00_utils.config_loader import load_config

    config = load_config("config/tabyl_config.yaml")
    result = run_tabyl_pipeline(config=config, df=my_dataframe, run_id="survey_2024")
"""
import logging

import pandas as pd

from janitor_toolkit.m00_utils.config_loader import get_module_block
from janitor_toolkit.m00_utils.config_models import TabylConfig
from janitor_toolkit.m00_utils.export_utils import export_tabyl_result, save_joblib
from janitor_toolkit.m00_utils.load_data import load_input
from janitor_toolkit.m00_utils.logging_utils import configure_logging
from janitor_toolkit.m01_tabulation.tabyl import tabyl


def run_tabyl_pipeline(config: dict, df: pd.DataFrame = None, notebook: bool = False, run_id: str = None):
    """
    Executes the tabulation pipeline.

    Args:
        config (dict): The full toolkit config or just its 'tabyl' block.
        df (pd.DataFrame, optional): The data to tabulate. If None, it is
            loaded from 'input_path'.
        notebook (bool): Notebook context; only affects 'auto' logging.
        run_id (str): Identifier of the run, used in input and output paths.

    Returns:
        pd.DataFrame | dict: The tabulation (a dict of tables for 3 variables).
    """
    module_cfg = get_module_block(config, "tabyl")
    if not module_cfg:
        raise ValueError("Configuration for 'tabyl' module not found or is empty.")
    tabyl_cfg = TabylConfig.model_validate(module_cfg)

    configure_logging(notebook=notebook, logging_mode=tabyl_cfg.logging)
    if not run_id:
        raise ValueError("A 'run_id' must be provided.")

    if df is None:
        if not tabyl_cfg.input_path:
            raise KeyError("Missing 'input_path' in tabyl config and no DataFrame provided.")
        df = load_input(tabyl_cfg.input_path, run_id=run_id)

    logging.info(f"Tabulating {tabyl_cfg.variables} over {len(df)} rows")
    result = tabyl(
        df,
        *tabyl_cfg.variables,
        show_na=tabyl_cfg.show_na,
        show_missing_levels=tabyl_cfg.show_missing_levels,
    )
    if isinstance(result, dict):
        logging.info(f"Built {len(result)} two-way tables split by '{tabyl_cfg.variables[-1]}'")

    settings = tabyl_cfg.settings
    if settings.export.run:
        export_tabyl_result(result, config=settings.export.model_dump(), run_id=run_id)

    if settings.checkpoint.run:
        if not settings.checkpoint.checkpoint_path:
            raise ValueError("Checkpoint enabled but 'checkpoint_path' is missing.")
        save_joblib(result, path=settings.checkpoint.checkpoint_path.format(run_id=run_id))

    return result
