"""
Cleaning of raw WLE sensor exports.

Raw files mix numeric readings with spreadsheet error tokens and blank
per-window summary columns. Cleaning turns every feature into a finite
float: error tokens and missing values become zero, columns with no
observed values at all are dropped, and identifier/timing metadata is
removed. No statistical imputation is attempted.
"""

import logging
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from wle_ml.domain.exercise import ERROR_TOKENS, METADATA_COLUMNS
from wle_ml.validation.schema import DataValidationError, validate_wle_schema

logger = logging.getLogger(__name__)


@dataclass
class CleanedData:
    features: pd.DataFrame
    labels: pd.Series
    empty_columns: list[str] = field(default_factory=list)

    @property
    def feature_columns(self) -> list[str]:
        return list(self.features.columns)


def normalize_error_tokens(df: pd.DataFrame) -> pd.DataFrame:
    """Replace error tokens (after trimming whitespace) with NaN in text columns."""
    df_clean = df.copy()
    for col in df_clean.columns:
        if pd.api.types.is_numeric_dtype(df_clean[col]):
            continue
        stripped = df_clean[col].where(df_clean[col].isna(), df_clean[col].astype(str).str.strip())
        df_clean[col] = stripped.mask(stripped.isin(ERROR_TOKENS))
    return df_clean


def feature_columns(df: pd.DataFrame, label_column: str | None = "classe") -> list[str]:
    excluded = set(METADATA_COLUMNS)
    if label_column is not None:
        excluded.add(label_column)
    return [col for col in df.columns if col not in excluded]


def coerce_numeric(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Convert ``columns`` to float; unparseable values and infinities become NaN."""
    df_num = df.copy()
    for col in columns:
        df_num[col] = pd.to_numeric(df_num[col], errors="coerce").astype(float)
    df_num[columns] = df_num[columns].replace([np.inf, -np.inf], np.nan)
    return df_num


def find_empty_columns(df: pd.DataFrame, columns: list[str]) -> list[str]:
    """Columns among ``columns`` holding no non-missing value."""
    return [col for col in columns if df[col].notna().sum() == 0]


def clean_training_data(df: pd.DataFrame, label_column: str = "classe") -> CleanedData:
    validate_wle_schema(df, label_column)

    df_clean = normalize_error_tokens(df)
    labeled = df_clean[label_column].notna()
    if not labeled.all():
        logger.info(f"Dropping {int((~labeled).sum())} rows without a '{label_column}' label")
        df_clean = df_clean[labeled]
    if df_clean.empty:
        raise DataValidationError(f"No rows with a '{label_column}' label")

    columns = feature_columns(df_clean, label_column)
    df_clean = coerce_numeric(df_clean, columns)

    empty = find_empty_columns(df_clean, columns)
    if empty:
        logger.info(f"Dropping {len(empty)} all-missing columns")
    kept = [col for col in columns if col not in empty]
    if not kept:
        raise DataValidationError("Every feature column is empty")

    features = df_clean[kept].fillna(0.0).reset_index(drop=True)
    labels = df_clean[label_column].astype(str).str.strip().astype("category").reset_index(drop=True)
    labels.name = label_column

    logger.info(f"Cleaned training data: {features.shape[0]} rows x {features.shape[1]} features")
    return CleanedData(features=features, labels=labels, empty_columns=empty)


def clean_evaluation_data(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """
    Clean unlabeled records against the training feature set.

    The result has exactly ``columns`` in that order, so columns dropped
    from the training data are dropped here too. Columns absent from
    ``df`` are zero-filled; row order is preserved.
    """
    validate_wle_schema(df, label_column=None)

    df_clean = normalize_error_tokens(df)
    missing = [col for col in columns if col not in df_clean.columns]
    if missing:
        logger.warning(f"Evaluation data lacks {len(missing)} training columns; filling with zero")

    df_clean = df_clean.reindex(columns=columns)
    df_clean = coerce_numeric(df_clean, columns)
    return df_clean.fillna(0.0).reset_index(drop=True)
