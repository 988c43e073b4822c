import numpy as np
import pandas as pd
from scipy.stats import beta
from sklearn.metrics import accuracy_score, cohen_kappa_score, confusion_matrix


def accuracy_interval(n_correct: int, n_total: int, confidence: float = 0.95) -> tuple[float, float]:
    """Exact (Clopper-Pearson) binomial confidence interval for an accuracy."""
    if n_total == 0:
        return (float("nan"), float("nan"))
    alpha = 1 - confidence
    lower = beta.ppf(alpha / 2, n_correct, n_total - n_correct + 1) if n_correct > 0 else 0.0
    upper = beta.ppf(1 - alpha / 2, n_correct + 1, n_total - n_correct) if n_correct < n_total else 1.0
    return (float(lower), float(upper))


def confusion_matrix_frame(y_true, y_pred, labels=None) -> pd.DataFrame:
    """Confusion matrix with predictions as rows and reference labels as columns."""
    if labels is None:
        labels = sorted(set(np.asarray(y_true)) | set(np.asarray(y_pred)))
    cm = confusion_matrix(y_true, y_pred, labels=labels)
    frame = pd.DataFrame(cm.T, index=pd.Index(labels, name="Prediction"), columns=pd.Index(labels, name="Reference"))
    return frame


def calculate_metrics(y_true, y_pred) -> dict:
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    n_correct = int((y_true == y_pred).sum())
    lower, upper = accuracy_interval(n_correct, len(y_true))
    accuracy = accuracy_score(y_true, y_pred)
    no_information_rate = float(pd.Series(y_true).value_counts(normalize=True).max()) if len(y_true) else float("nan")

    return {
        "accuracy": float(accuracy),
        "accuracy_ci_lower": lower,
        "accuracy_ci_upper": upper,
        "kappa": float(cohen_kappa_score(y_true, y_pred)),
        "no_information_rate": no_information_rate,
        "out_of_sample_error": float(1 - accuracy),
        "n": int(len(y_true)),
    }


def calculate_class_metrics(y_true, y_pred, labels=None) -> dict:
    """One-vs-rest sensitivity and specificity per class."""
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    if labels is None:
        labels = sorted(set(y_true) | set(y_pred))

    per_class = {}
    for label in labels:
        tp = ((y_true == label) & (y_pred == label)).sum()
        fn = ((y_true == label) & (y_pred != label)).sum()
        tn = ((y_true != label) & (y_pred != label)).sum()
        fp = ((y_true != label) & (y_pred == label)).sum()

        sensitivity = tp / (tp + fn) if (tp + fn) > 0 else 0
        specificity = tn / (tn + fp) if (tn + fp) > 0 else 0
        per_class[str(label)] = {
            "sensitivity": float(sensitivity),
            "specificity": float(specificity),
        }

    return per_class
