"""
Pipeline settings.

Defaults live on ``PipelineSettings``; ``WLE_``-prefixed environment
variables override them, a YAML file passed to ``load_config`` overrides
both, and CLI flags are applied last by the caller.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PipelineSettings(BaseSettings):
    """Settings for the Weight Lifting Exercise classification pipeline."""

    model_config = SettingsConfigDict(env_prefix="WLE_", extra="forbid")

    # Data sources
    data_dir: Path = Path("data/raw")
    training_url: str = "https://d396qusza40orc.cloudfront.net/predmachlearn/pml-training.csv"
    evaluation_url: str = "https://d396qusza40orc.cloudfront.net/predmachlearn/pml-testing.csv"
    training_file: str = "pml-training.csv"
    evaluation_file: str = "pml-testing.csv"
    download_timeout: float = 60.0

    label_column: str = "classe"

    # Partitioning
    train_fraction: float = 0.8
    seed: int = 12345

    # Model
    n_estimators: int = 500
    cv_folds: int = 5
    tune_length: int = 3
    n_jobs: Optional[int] = None  # None = cpu_count - 1

    # Reporting
    top_importances: int = 10
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def training_path(self) -> Path:
        return Path(self.data_dir) / self.training_file

    @property
    def evaluation_path(self) -> Path:
        return Path(self.data_dir) / self.evaluation_file


def load_config(config_path: str | Path | None = None, **overrides) -> PipelineSettings:
    values = {}
    if config_path is not None:
        with open(config_path) as f:
            values = yaml.safe_load(f) or {}
        if not isinstance(values, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping, got {type(values).__name__}")
    values.update({k: v for k, v in overrides.items() if v is not None})
    return PipelineSettings(**values)
