from .readers import DataValidationError, parse_csv_content, read_patients
from .batch import assess_frame

__all__ = ["DataValidationError", "parse_csv_content", "read_patients", "assess_frame"]
