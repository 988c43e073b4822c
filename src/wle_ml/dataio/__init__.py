from .download import DataDownloadError, fetch_dataset
from .readers import read_raw_csv
from .datasets import fetch_datasets, load_datasets

__all__ = ["DataDownloadError", "fetch_dataset", "fetch_datasets", "load_datasets", "read_raw_csv"]
