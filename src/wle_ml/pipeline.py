"""
End-to-end WLE pipeline: load, clean, split, train, evaluate, predict.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from wle_ml.common.config import PipelineSettings
from wle_ml.dataio.datasets import load_datasets
from wle_ml.evaluation.evaluator import EvaluationResult, evaluate_model, predict_unlabeled
from wle_ml.models.random_forest import RandomForestModel
from wle_ml.preprocessing.cleaning import CleanedData, clean_evaluation_data, clean_training_data
from wle_ml.training.trainer import split_data, train_model
from wle_ml.validation.quality import check_data_quality

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    settings: PipelineSettings
    cleaned: CleanedData
    model: RandomForestModel
    train_evaluation: EvaluationResult
    test_evaluation: EvaluationResult
    predictions: pd.Series
    n_train: int
    n_test: int

    def to_dict(self) -> dict:
        return {
            "model": {
                "n_estimators": self.settings.n_estimators,
                "cv_folds": self.settings.cv_folds,
                "max_features": int(self.model.best_params_["max_features"]),
                "n_features": len(self.cleaned.feature_columns),
                "n_train": self.n_train,
                "n_test": self.n_test,
                "seed": self.settings.seed,
            },
            "in_sample": self.train_evaluation.to_dict(),
            "held_out": self.test_evaluation.to_dict(),
            "predictions": {str(k): str(v) for k, v in self.predictions.items()},
        }


def run_pipeline(
    settings: PipelineSettings,
    training_raw: pd.DataFrame | None = None,
    evaluation_raw: pd.DataFrame | None = None,
) -> PipelineResult:
    """Run every stage; raw frames are fetched from ``settings`` when not given."""
    logger.info("=" * 60)
    logger.info("Starting Weight Lifting Exercise pipeline")
    logger.info("=" * 60)

    logger.info("[1/5] Loading data...")
    if training_raw is None or evaluation_raw is None:
        training_raw, evaluation_raw = load_datasets(settings)
    quality = check_data_quality(training_raw, settings.label_column)
    logger.info(
        f"Training data: {quality['total_rows']} rows, {quality['error_tokens']} error tokens, "
        f"{len(quality['empty_columns'])} empty columns"
    )
    logger.info(f"Class distribution: {quality.get('label_distribution', {})}")

    logger.info("[2/5] Cleaning data...")
    cleaned = clean_training_data(training_raw, settings.label_column)
    evaluation_features = clean_evaluation_data(evaluation_raw, cleaned.feature_columns)

    logger.info("[3/5] Partitioning data...")
    X_train, X_test, y_train, y_test = split_data(
        cleaned.features, cleaned.labels, train_size=settings.train_fraction, random_state=settings.seed
    )
    logger.info(f"Training rows: {len(X_train)}, held-out rows: {len(X_test)}")

    logger.info("[4/5] Training model...")
    model = train_model(X_train, y_train, settings)

    logger.info("[5/5] Evaluating model...")
    train_evaluation = evaluate_model(model, X_train, y_train)
    test_evaluation = evaluate_model(model, X_test, y_test)
    predictions = predict_unlabeled(model, evaluation_features)
    logger.info(f"In-sample accuracy: {train_evaluation.accuracy:.4f}")
    logger.info(f"Held-out accuracy: {test_evaluation.accuracy:.4f}")

    logger.info("Pipeline completed successfully!")
    return PipelineResult(
        settings=settings,
        cleaned=cleaned,
        model=model,
        train_evaluation=train_evaluation,
        test_evaluation=test_evaluation,
        predictions=predictions,
        n_train=len(X_train),
        n_test=len(X_test),
    )
