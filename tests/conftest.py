import numpy as np
import pandas as pd
import pytest

from wle_ml.common.config import PipelineSettings

CLASSES = ["A", "B", "C", "D", "E"]
SENSOR_COLUMNS = [
    "roll_belt",
    "pitch_belt",
    "total_accel_belt",
    "accel_arm_x",
    "gyros_forearm_y",
    "magnet_dumbbell_z",
]


def make_raw_frame(n_per_class: int = 40, seed: int = 0, labeled: bool = True) -> pd.DataFrame:
    """A small frame shaped like the WLE export, with separable classes."""
    rng = np.random.default_rng(seed)
    n = n_per_class * len(CLASSES)
    labels = np.repeat(CLASSES, n_per_class)
    rng.shuffle(labels)
    class_index = np.array([CLASSES.index(label) for label in labels])

    df = pd.DataFrame(
        {
            "X": np.arange(1, n + 1),
            "user_name": rng.choice(["adelmo", "carlitos", "pedro"], size=n),
            "raw_timestamp_part_1": 1322489729 + np.arange(n),
            "raw_timestamp_part_2": rng.integers(0, 999999, size=n),
            "cvtd_timestamp": "28/11/2011 14:15",
            "new_window": np.where(np.arange(n) % 10 == 0, "yes", "no"),
            "num_window": np.arange(n) // 10,
        }
    )
    for i, col in enumerate(SENSOR_COLUMNS):
        df[col] = class_index * 10.0 * (i + 1) + rng.normal(0, 1, size=n)

    # Per-window summaries: populated only on "yes" rows, with spreadsheet errors.
    summary = np.full(n, None, dtype=object)
    yes_rows = np.flatnonzero(df["new_window"] == "yes")
    summary[yes_rows] = [f"{v:.4f}" for v in rng.normal(size=len(yes_rows))]
    summary[yes_rows[::3]] = "#DIV/0!"
    df["kurtosis_roll_belt"] = summary

    empty = np.full(n, None, dtype=object)
    empty[yes_rows] = "#DIV/0!"
    df["kurtosis_yaw_belt"] = empty

    sparse = np.full(n, np.nan)
    sparse[yes_rows] = rng.normal(size=len(yes_rows))
    df["max_roll_arm"] = sparse

    if labeled:
        df["classe"] = labels
    else:
        df["problem_id"] = np.arange(1, n + 1)
    return df


@pytest.fixture
def raw_training():
    return make_raw_frame(n_per_class=40, seed=0)


@pytest.fixture
def raw_evaluation():
    df = make_raw_frame(n_per_class=4, seed=1, labeled=False)
    return df.drop(columns=["max_roll_arm"])


@pytest.fixture
def fast_settings(tmp_path):
    return PipelineSettings(
        data_dir=tmp_path / "raw",
        n_estimators=15,
        cv_folds=3,
        tune_length=3,
        n_jobs=1,
        seed=42,
        top_importances=3,
    )
