import numpy as np
import pandas as pd
import pytest

from wle_ml.domain.exercise import METADATA_COLUMNS
from wle_ml.preprocessing.cleaning import (
    clean_evaluation_data,
    clean_training_data,
    coerce_numeric,
    find_empty_columns,
    normalize_error_tokens,
)
from wle_ml.validation.schema import DataValidationError


def test_normalize_error_tokens():
    df = pd.DataFrame({"a": ["1.5", "#DIV/0!", " NA ", "", "  "], "b": [1, 2, 3, 4, 5]})
    result = normalize_error_tokens(df)
    assert result["a"].isna().tolist() == [False, True, True, True, True]
    assert result["a"].iloc[0] == "1.5"
    assert result["b"].tolist() == [1, 2, 3, 4, 5]


def test_coerce_numeric_handles_garbage_and_infinity():
    df = pd.DataFrame({"a": ["1", "abc", None], "b": [np.inf, 2.0, -np.inf]})
    result = coerce_numeric(df, ["a", "b"])
    assert result["a"].dtype == float
    assert result["a"].isna().tolist() == [False, True, True]
    assert result["b"].isna().tolist() == [True, False, True]


def test_find_empty_columns():
    df = pd.DataFrame({"a": [np.nan, np.nan], "b": [np.nan, 1.0]})
    assert find_empty_columns(df, ["a", "b"]) == ["a"]


def test_clean_training_data_leaves_only_finite_numbers(raw_training):
    cleaned = clean_training_data(raw_training)
    values = cleaned.features.to_numpy()
    assert all(pd.api.types.is_float_dtype(t) for t in cleaned.features.dtypes)
    assert np.isfinite(values).all()


def test_clean_training_data_drops_metadata_and_empty_columns(raw_training):
    cleaned = clean_training_data(raw_training)
    assert cleaned.empty_columns == ["kurtosis_yaw_belt"]
    assert "kurtosis_yaw_belt" not in cleaned.features.columns
    assert not set(METADATA_COLUMNS) & set(cleaned.features.columns)
    assert "classe" not in cleaned.features.columns
    assert "kurtosis_roll_belt" in cleaned.features.columns
    assert "max_roll_arm" in cleaned.features.columns


def test_clean_training_data_zero_fills(raw_training):
    cleaned = clean_training_data(raw_training)
    no_rows = (raw_training["new_window"] == "no").to_numpy()
    assert (cleaned.features.loc[no_rows, "max_roll_arm"] == 0.0).all()


def test_clean_training_data_drops_unlabeled_rows(raw_training):
    raw_training.loc[[0, 5, 9], "classe"] = None
    raw_training.loc[11, "classe"] = "NA"
    cleaned = clean_training_data(raw_training)
    assert len(cleaned.features) == len(raw_training) - 4
    assert len(cleaned.labels) == len(cleaned.features)
    assert cleaned.labels.notna().all()
    assert isinstance(cleaned.labels.dtype, pd.CategoricalDtype)
    assert list(cleaned.labels.cat.categories) == ["A", "B", "C", "D", "E"]


def test_clean_training_data_requires_label(raw_training):
    with pytest.raises(DataValidationError, match="Missing required columns"):
        clean_training_data(raw_training.drop(columns=["classe"]))


def test_clean_training_data_with_no_labels(raw_training):
    raw_training["classe"] = None
    with pytest.raises(DataValidationError, match="No rows"):
        clean_training_data(raw_training)


def test_clean_evaluation_data_aligns_to_training(raw_training, raw_evaluation):
    cleaned = clean_training_data(raw_training)
    evaluation = clean_evaluation_data(raw_evaluation, cleaned.feature_columns)

    assert list(evaluation.columns) == cleaned.feature_columns
    assert "kurtosis_yaw_belt" not in evaluation.columns
    assert "problem_id" not in evaluation.columns
    assert len(evaluation) == len(raw_evaluation)
    assert np.isfinite(evaluation.to_numpy()).all()
    # absent from the evaluation file, so zero-filled
    assert (evaluation["max_roll_arm"] == 0.0).all()
    assert evaluation["roll_belt"].tolist() == pytest.approx(raw_evaluation["roll_belt"].tolist())
