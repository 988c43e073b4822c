from abc import ABC, abstractmethod

import numpy as np
import pandas as pd


class BaseModel(ABC):
    """Classifier over a fixed, named set of feature columns."""

    feature_columns_: list[str]
    classes_: np.ndarray

    @abstractmethod
    def fit(self, X: pd.DataFrame, y):
        pass

    @abstractmethod
    def predict(self, X: pd.DataFrame):
        pass

    def align_features(self, X: pd.DataFrame) -> pd.DataFrame:
        missing = set(self.feature_columns_) - set(X.columns)
        if missing:
            raise ValueError(f"Input is missing {len(missing)} training features, e.g. {sorted(missing)[:5]}")
        return X[self.feature_columns_]
