import logging

import pandas as pd

from wle_ml.common.config import PipelineSettings
from wle_ml.dataio.download import fetch_dataset
from wle_ml.dataio.readers import read_raw_csv

logger = logging.getLogger(__name__)


def fetch_datasets(settings: PipelineSettings):
    training_path = fetch_dataset(settings.training_url, settings.training_path, timeout=settings.download_timeout)
    evaluation_path = fetch_dataset(settings.evaluation_url, settings.evaluation_path, timeout=settings.download_timeout)
    return training_path, evaluation_path


def load_datasets(settings: PipelineSettings) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Fetch (if needed) and read the labeled training and unlabeled evaluation sets."""
    training_path, evaluation_path = fetch_datasets(settings)
    training = read_raw_csv(training_path)
    evaluation = read_raw_csv(evaluation_path)
    logger.info(f"Read training set {training.shape} and evaluation set {evaluation.shape}")
    return training, evaluation
