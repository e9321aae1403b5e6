"""
📦 export_utils.py

Standardized export utilities for janitor_toolkit pipeline modules.

Includes:
- Dictionary-to-Excel/CSV export (multi-sheet)
- Joblib-based checkpoint serialization
- Wrappers for exporting tabulation and duplicates results

All exports are configuration-driven and respect run-specific paths.
"""
from pathlib import Path
import logging

import pandas as pd
from joblib import dump


def export_dataframes(data_dict: dict[str, pd.DataFrame], export_path: str, file_format: str = "excel", encoding: str = "utf-8", run_id: str = None) -> list[Path]:
    """
    Export a dictionary of DataFrames, one sheet (or CSV file) per entry.

    Returns:
        list[Path]: The files written.
    """
    export_path = Path(export_path)
    normalized_format = file_format.lower()
    export_path.parent.mkdir(parents=True, exist_ok=True)
    written = []

    if normalized_format == "csv":
        # export_path is a base name for multiple files.
        base_dir = export_path.parent
        base_stem = export_path.stem
        for name, df in data_dict.items():
            if isinstance(df, pd.DataFrame):
                filename = f"{run_id}_{base_stem}_{name}.csv" if run_id else f"{base_stem}_{name}.csv"
                df.to_csv(base_dir / filename, index=False, encoding=encoding)
                written.append(base_dir / filename)
        logging.info(f"📊 Exported {len(written)} CSV files to directory {base_dir}")

    elif normalized_format in ["excel", "xlsx"]:
        base_name = export_path.name
        path_with_run_id = export_path.with_name(f"{run_id}_{base_name}") if run_id else export_path
        with pd.ExcelWriter(path_with_run_id, engine="xlsxwriter") as writer:
            for name, df in data_dict.items():
                if isinstance(df, pd.DataFrame):
                    out = df.copy()
                    # Excel headers must be strings.
                    out.columns = [str(col) for col in out.columns]
                    out.to_excel(writer, sheet_name=str(name)[:31], index=False)
        written.append(path_with_run_id)
        logging.info(f"📊 Exported {len(data_dict)} sheets to {path_with_run_id}")
    else:
        raise ValueError(f"Unsupported file format: {file_format}")

    return written


def export_tabyl_result(result, config: dict, run_id: str = None) -> list[Path]:
    """
    Exports a 1-, 2- or 3-way tabulation.

    A 3-way result (dict of 2-way tables) gets one sheet per partition.
    """
    if not run_id:
        raise ValueError("A 'run_id' must be provided for export traceability.")

    if isinstance(result, dict):
        export_payload = {str(key): df for key, df in result.items()}
    else:
        export_payload = {"tabyl": result}

    export_path = config.get("export_path") or "exports/reports/tabyl/tabyl_report.xlsx"
    return export_dataframes(
        data_dict=export_payload,
        export_path=export_path.format(run_id=run_id),
        file_format="csv" if config.get("as_csv", False) else "excel",
        run_id=run_id,
    )


def export_duplicates_report(dupes: pd.DataFrame, config: dict, run_id: str = None) -> list[Path]:
    """
    Exports the rows found by `get_dupes`.
    """
    if not run_id:
        raise ValueError("A 'run_id' must be provided for export traceability.")

    if dupes.empty:
        logging.info("Duplicates report is empty. Skipping export.")
        return []

    export_path = config.get("export_path") or "exports/reports/duplicates/duplicates_report.xlsx"
    return export_dataframes(
        data_dict={"duplicates": dupes},
        export_path=export_path.format(run_id=run_id),
        file_format="csv" if config.get("as_csv", False) else "excel",
        run_id=run_id,
    )


# --- Utility functions for joblib serialization ---
def save_joblib(obj, path: str):
    """
    Save a Python object to disk using joblib serialization.

    Args:
        obj: Python object to serialize.
        path (str): Destination file path.

    Raises:
        ValueError: If the path is not provided.
    """
    if not path:
        raise ValueError("An explicit 'path' is required to save a joblib checkpoint.")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    dump(obj, path)
    logging.info(f"💾 Checkpoint saved to {path}")
