import logging

import pandas as pd
from sklearn.model_selection import train_test_split

from wle_ml.common.config import PipelineSettings
from wle_ml.models.random_forest import RandomForestModel

logger = logging.getLogger(__name__)


def split_data(X, y, train_size: float = 0.8, random_state: int = 12345):
    """Stratified split returning ``X_train, X_test, y_train, y_test``."""
    return train_test_split(X, y, train_size=train_size, random_state=random_state, stratify=y)


def train_model(X_train: pd.DataFrame, y_train, settings: PipelineSettings | None = None) -> RandomForestModel:
    settings = settings or PipelineSettings()
    model = RandomForestModel(
        n_estimators=settings.n_estimators,
        cv_folds=settings.cv_folds,
        tune_length=settings.tune_length,
        n_jobs=settings.n_jobs,
        random_state=settings.seed,
    )
    return model.fit(X_train, y_train)
