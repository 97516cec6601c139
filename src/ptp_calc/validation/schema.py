import pandas as pd

PATIENT_COLUMNS = ["age", "sex", "symptom"]
OPTIONAL_COLUMNS = ["cac"]


def validate_dataframe_schema(df: pd.DataFrame, required_columns: list[str]) -> bool:
    missing = set(required_columns) - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")
    return True


def validate_patient_schema(df: pd.DataFrame) -> bool:
    return validate_dataframe_schema(df, PATIENT_COLUMNS)
