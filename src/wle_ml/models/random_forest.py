"""
Random-forest classifier tuned by k-fold cross-validation.

The only tuned parameter is ``max_features``, the number of candidate
features drawn at each split. Candidates follow the "tune length" rule:
``tune_length`` values spread evenly between 2 and the feature count.
Cross-validation folds are fanned out over a joblib worker pool.
"""

import logging

import numpy as np
import pandas as pd
from joblib import cpu_count, parallel_backend
from sklearn.ensemble import RandomForestClassifier
from sklearn.metrics import cohen_kappa_score, make_scorer
from sklearn.model_selection import GridSearchCV, StratifiedKFold

from wle_ml.models.base import BaseModel

logger = logging.getLogger(__name__)


def default_n_jobs() -> int:
    return max(cpu_count() - 1, 1)


def max_features_grid(n_features: int, tune_length: int = 3) -> list[int]:
    if n_features < 1:
        raise ValueError("n_features must be positive")
    if tune_length < 1:
        raise ValueError("tune_length must be positive")
    if n_features <= tune_length:
        return list(range(1, n_features + 1))
    if tune_length == 1:
        return [int(np.floor(np.sqrt(n_features)))]
    values = np.floor(np.linspace(2, n_features, tune_length)).astype(int)
    return sorted(set(int(v) for v in values))


class RandomForestModel(BaseModel):
    def __init__(
        self,
        n_estimators: int = 500,
        cv_folds: int = 5,
        tune_length: int = 3,
        n_jobs: int | None = None,
        random_state: int = 12345,
    ):
        self.n_estimators = n_estimators
        self.cv_folds = cv_folds
        self.tune_length = tune_length
        self.n_jobs = default_n_jobs() if n_jobs is None else max(int(n_jobs), 1)
        self.random_state = random_state
        self.search_: GridSearchCV | None = None

    def fit(self, X: pd.DataFrame, y):
        self.feature_columns_ = list(X.columns)
        grid = {"max_features": max_features_grid(len(self.feature_columns_), self.tune_length)}
        cv = StratifiedKFold(n_splits=self.cv_folds, shuffle=True, random_state=self.random_state)
        estimator = RandomForestClassifier(n_estimators=self.n_estimators, random_state=self.random_state)

        self.search_ = GridSearchCV(
            estimator,
            grid,
            cv=cv,
            scoring={"accuracy": "accuracy", "kappa": make_scorer(cohen_kappa_score)},
            refit="accuracy",
            n_jobs=self.n_jobs,
        )

        logger.info(
            f"Tuning max_features over {grid['max_features']} with {self.cv_folds}-fold CV "
            f"({self.n_estimators} trees, {self.n_jobs} worker(s))"
        )
        with parallel_backend("loky", n_jobs=self.n_jobs):
            self.search_.fit(X, np.asarray(y))
        logger.info(f"Selected {self.best_params_} (CV accuracy {self.search_.best_score_:.4f})")
        return self

    def _check_fitted(self):
        if self.search_ is None:
            raise RuntimeError("Model has not been fitted")

    @property
    def estimator_(self) -> RandomForestClassifier:
        self._check_fitted()
        return self.search_.best_estimator_

    @property
    def best_params_(self) -> dict:
        self._check_fitted()
        return self.search_.best_params_

    @property
    def classes_(self) -> np.ndarray:
        return self.estimator_.classes_

    @property
    def cv_results(self) -> pd.DataFrame:
        """Mean/std CV accuracy and kappa per ``max_features`` candidate."""
        self._check_fitted()
        res = self.search_.cv_results_
        return pd.DataFrame(
            {
                "max_features": [p["max_features"] for p in res["params"]],
                "accuracy": res["mean_test_accuracy"],
                "kappa": res["mean_test_kappa"],
                "accuracy_sd": res["std_test_accuracy"],
                "kappa_sd": res["std_test_kappa"],
            }
        )

    def feature_importances(self, top: int | None = None) -> pd.Series:
        importances = pd.Series(self.estimator_.feature_importances_, index=self.feature_columns_)
        importances = importances.sort_values(ascending=False)
        return importances if top is None else importances.head(top)

    def predict(self, X: pd.DataFrame) -> np.ndarray:
        return self.estimator_.predict(self.align_features(X))
