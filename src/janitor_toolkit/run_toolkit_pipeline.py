"""
🚀 run_toolkit_pipeline.py
✅ Module: Master Pipeline Orchestrator

Runs the enabled janitor_toolkit stages against one input dataset.

Responsibilities:
- Loads a master YAML configuration file.
- Loads the input data once from `pipeline_entry_path`.
- Runs the duplicates and tabulation stages if enabled.
- Handles global settings like `run_id` and `notebook`.

Usage (CLI / Script):
---------------------
```bash
python -m janitor_toolkit.run_toolkit_pipeline --config config/run_toolkit_config.yaml
```
"""

import argparse
import logging

from janitor_toolkit.m00_utils.config_loader import load_config
from janitor_toolkit.m00_utils.load_data import load_input
from janitor_toolkit.m01_tabulation.run_tabyl_pipeline import run_tabyl_pipeline
from janitor_toolkit.m02_duplicates.run_dupes_pipeline import run_duplicates_pipeline


def run_full_pipeline(config_path: str) -> dict:
    """
    Executes every enabled stage and returns their results keyed by stage name.
    """
    logging.info(f"--- Loading Master Orchestration Config from {config_path} ---")
    master_config = load_config(config_path)

    run_id = master_config.get("run_id", "default_run")
    notebook_mode = master_config.get("notebook", False)
    modules_to_run = master_config.get("modules", {})

    entry_path = master_config.get("pipeline_entry_path")
    if not entry_path:
        raise ValueError("Master config is missing 'pipeline_entry_path'. Cannot start pipeline.")

    logging.info(f"--- 🚚 Loading initial data from {entry_path} ---")
    df = load_input(entry_path, run_id=run_id)
    results = {}

    # M02: Duplicates
    module_info = modules_to_run.get("duplicates")
    if module_info and module_info.get("run"):
        logging.info("--- 🚀 Starting Module: DUPLICATES ---")
        module_config = load_config(module_info["config_path"])
        results["duplicates"] = run_duplicates_pipeline(
            config=module_config, df=df, notebook=notebook_mode, run_id=run_id
        )
        logging.info("--- ✅ Finished Module: DUPLICATES ---")

    # M01: Tabulation
    module_info = modules_to_run.get("tabyl")
    if module_info and module_info.get("run"):
        logging.info("--- 🚀 Starting Module: TABYL ---")
        module_config = load_config(module_info["config_path"])
        results["tabyl"] = run_tabyl_pipeline(
            config=module_config, df=df, notebook=notebook_mode, run_id=run_id
        )
        logging.info("--- ✅ Finished Module: TABYL ---")

    logging.info("--- 🎉 Full Pipeline Execution Complete ---")
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run the janitor_toolkit duplicates and tabulation pipeline."
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/run_toolkit_config.yaml",
        help="Path to the master run_toolkit_config.yaml file.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    return run_full_pipeline(config_path=args.config)


if __name__ == "__main__":
    main()
