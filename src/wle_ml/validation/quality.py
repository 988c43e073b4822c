import pandas as pd

from wle_ml.domain.exercise import ERROR_TOKENS


def count_error_tokens(df: pd.DataFrame) -> int:
    total = 0
    for col in df.columns:
        if pd.api.types.is_numeric_dtype(df[col]):
            continue
        stripped = df[col].astype("string").str.strip()
        total += int(stripped.isin(ERROR_TOKENS).sum())
    return total


def check_data_quality(df: pd.DataFrame, label_column: str | None = None) -> dict:
    """Summarize a raw frame; error tokens count as missing, as they do when cleaning."""
    from wle_ml.preprocessing.cleaning import normalize_error_tokens

    missing = normalize_error_tokens(df).isnull().sum()
    quality_report = {
        "total_rows": len(df),
        "total_columns": df.shape[1],
        "missing_values": {col: int(n) for col, n in missing.items() if n > 0},
        "error_tokens": count_error_tokens(df),
        "empty_columns": [col for col, n in missing.items() if len(df) and n == len(df)],
        "duplicate_rows": int(df.duplicated().sum()),
    }

    if label_column is not None and label_column in df.columns:
        quality_report["label_distribution"] = {
            str(k): int(v) for k, v in df[label_column].value_counts(dropna=False).sort_index().items()
        }

    return quality_report
