from .schema import DataValidationError, validate_dataframe_schema, validate_wle_schema
from .quality import check_data_quality

__all__ = ["DataValidationError", "validate_dataframe_schema", "validate_wle_schema", "check_data_quality"]
