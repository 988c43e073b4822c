from dataclasses import dataclass

import pandas as pd

from wle_ml.evaluation.metrics import calculate_class_metrics, calculate_metrics, confusion_matrix_frame
from wle_ml.models.base import BaseModel


@dataclass
class EvaluationResult:
    metrics: dict
    confusion: pd.DataFrame
    class_metrics: dict

    @property
    def accuracy(self) -> float:
        return self.metrics["accuracy"]

    def to_dict(self) -> dict:
        return {
            **self.metrics,
            "per_class": self.class_metrics,
            "confusion_matrix": {
                str(pred): {str(ref): int(n) for ref, n in row.items()} for pred, row in self.confusion.iterrows()
            },
        }


def evaluate_model(model: BaseModel, X: pd.DataFrame, y) -> EvaluationResult:
    y_pred = model.predict(X)
    labels = [str(c) for c in model.classes_]
    y_true = pd.Series(y).astype(str).to_numpy()
    return EvaluationResult(
        metrics=calculate_metrics(y_true, y_pred),
        confusion=confusion_matrix_frame(y_true, y_pred, labels=labels),
        class_metrics=calculate_class_metrics(y_true, y_pred, labels=labels),
    )


def predict_unlabeled(model: BaseModel, X: pd.DataFrame) -> pd.Series:
    """One predicted label per row of ``X``, in input order, indexed from 1."""
    predictions = model.predict(X)
    return pd.Series(predictions, index=pd.RangeIndex(1, len(predictions) + 1), name="prediction")
