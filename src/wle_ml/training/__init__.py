from .trainer import split_data, train_model

__all__ = ["split_data", "train_model"]
