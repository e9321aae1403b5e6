"""
config_models.py — Pydantic models for module configurations.

Runners validate their config block through these models so that missing
keys fall back to documented defaults and malformed blocks fail early.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

Selector = Union[str, Dict[str, str]]


class ExportConfig(BaseModel):
    run: bool = Field(False, description="Whether to export the result tables.")
    export_path: Optional[str] = Field(
        None, description="Target path; '{run_id}' placeholders are formatted."
    )
    as_csv: bool = Field(False, description="Export CSV files instead of an Excel workbook.")


class CheckpointConfig(BaseModel):
    run: bool = Field(False, description="Whether to save a joblib checkpoint.")
    checkpoint_path: Optional[str] = Field(
        None, description="Checkpoint path; '{run_id}' placeholders are formatted."
    )


class RunnerSettings(BaseModel):
    export: ExportConfig = Field(default_factory=ExportConfig)
    checkpoint: CheckpointConfig = Field(default_factory=CheckpointConfig)


class TabylConfig(BaseModel):
    input_path: Optional[str] = Field(None, description="CSV or joblib input path.")
    variables: List[Selector] = Field(
        default_factory=list,
        description="One to three column selectors: names or {alias: source} mappings.",
    )
    show_na: bool = Field(True, description="Display counts of missing values.")
    show_missing_levels: bool = Field(
        True, description="Display zero counts for unobserved categorical levels."
    )
    logging: str = Field("auto", description="Logging mode: 'auto', 'on' or 'off'.")
    settings: RunnerSettings = Field(default_factory=RunnerSettings)

    @field_validator("variables")
    @classmethod
    def _check_arity(cls, value: List[Any]) -> List[Any]:
        if not 1 <= len(value) <= 3:
            raise ValueError("'variables' must list one, two or three columns.")
        return value


class DuplicatesConfig(BaseModel):
    input_path: Optional[str] = Field(None, description="CSV or joblib input path.")
    subset_columns: Optional[List[Selector]] = Field(
        None, description="Columns that define a duplicate; all columns when omitted."
    )
    logging: str = Field("auto", description="Logging mode: 'auto', 'on' or 'off'.")
    settings: RunnerSettings = Field(default_factory=RunnerSettings)
