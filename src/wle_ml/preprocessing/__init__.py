from .cleaning import CleanedData, clean_evaluation_data, clean_training_data

__all__ = ["CleanedData", "clean_evaluation_data", "clean_training_data"]
