import pandas as pd

from wle_ml.domain.exercise import METADATA_COLUMNS


class DataValidationError(ValueError):
    """Raised when a dataset does not have the shape the pipeline expects."""


def validate_dataframe_schema(df: pd.DataFrame, required_columns: list[str]) -> bool:
    missing = set(required_columns) - set(df.columns)
    if missing:
        raise DataValidationError(f"Missing required columns: {sorted(missing)}")
    return True


def validate_wle_schema(df: pd.DataFrame, label_column: str | None = "classe") -> bool:
    """Check for the label column (when given) and at least one sensor feature column."""
    if label_column is not None:
        validate_dataframe_schema(df, [label_column])
    excluded = set(METADATA_COLUMNS) | {label_column}
    if not any(col not in excluded for col in df.columns):
        raise DataValidationError("No sensor feature columns found")
    return True
