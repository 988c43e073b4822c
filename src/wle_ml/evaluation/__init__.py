from .evaluator import EvaluationResult, evaluate_model, predict_unlabeled
from .metrics import calculate_class_metrics, calculate_metrics, confusion_matrix_frame

__all__ = [
    "EvaluationResult",
    "evaluate_model",
    "predict_unlabeled",
    "calculate_class_metrics",
    "calculate_metrics",
    "confusion_matrix_frame",
]
