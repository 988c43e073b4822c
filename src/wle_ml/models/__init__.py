from .random_forest import RandomForestModel, max_features_grid

__all__ = ["RandomForestModel", "max_features_grid"]
