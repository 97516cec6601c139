"""
CSV input for batch assessments.

Column names are matched case-insensitively and surrounding whitespace is
ignored, so exports from spreadsheets load without manual cleanup.
"""

from io import StringIO
from pathlib import Path

import pandas as pd


class DataValidationError(Exception):
    """Raised when patient CSV data cannot be read."""
    pass


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(col).strip().lower() for col in df.columns]
    return df


def read_patients(file_path: str | Path) -> pd.DataFrame:
    """
    Read a patient CSV from disk.

    Raises:
        DataValidationError: If the file is empty or not valid CSV
    """
    file_path = Path(file_path)
    return parse_csv_content(file_path.read_bytes(), file_path.name)


def parse_csv_content(content: bytes, filename: str) -> pd.DataFrame:
    """
    Parse uploaded CSV bytes into a DataFrame.

    Raises:
        DataValidationError: If the content is empty or not valid CSV
    """
    try:
        try:
            text_content = content.decode("utf-8")
        except UnicodeDecodeError:
            text_content = content.decode("latin-1")

        df = pd.read_csv(StringIO(text_content))
    except pd.errors.EmptyDataError:
        raise DataValidationError(f"CSV file '{filename}' contains no data")
    except pd.errors.ParserError as e:
        raise DataValidationError(f"Failed to parse CSV '{filename}': {str(e)}")

    if df.empty:
        raise DataValidationError(f"CSV file '{filename}' is empty")

    return _normalize_columns(df)
