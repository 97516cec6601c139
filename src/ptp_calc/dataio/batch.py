import logging

import pandas as pd

from ..domain.clinical_thresholds import DEFAULT_ADVISORY_AGE_CEILING
from ..scoring.assessment import Assessment, assess
from ..validation.schema import validate_patient_schema

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "ptp_ok",
    "ptp_percent",
    "ptp_display",
    "ptp_category",
    "age_band",
    "cac_range",
    "cac_category",
    "flags",
]


def _cell(value):
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if pd.isna(value):
        return None
    return value


def _row_result(assessment: Assessment) -> dict:
    ptp, cac = assessment.ptp, assessment.cac
    return {
        "ptp_ok": ptp.ok,
        "ptp_percent": ptp.percent,
        "ptp_display": ptp.display,
        "ptp_category": ptp.category.value if ptp.category else None,
        "age_band": ptp.age_band.value if ptp.age_band else None,
        "cac_range": cac.ptp_range if cac else None,
        "cac_category": cac.category.value if cac and cac.category else None,
        "flags": "; ".join(flag.message for flag in assessment.flags),
    }


def assess_frame(df: pd.DataFrame, advisory_age_ceiling: float = DEFAULT_ADVISORY_AGE_CEILING) -> pd.DataFrame:
    """Assess every patient row and append the result columns."""
    validate_patient_schema(df)

    ages = pd.to_numeric(df["age"], errors="coerce")
    cac_values = df["cac"] if "cac" in df.columns else pd.Series([None] * len(df), index=df.index)

    rows = []
    for idx in df.index:
        assessment = assess(
            _cell(ages[idx]),
            _cell(df.at[idx, "sex"]),
            _cell(df.at[idx, "symptom"]),
            _cell(cac_values[idx]),
            advisory_age_ceiling=advisory_age_ceiling,
        )
        rows.append(_row_result(assessment))

    results = pd.DataFrame(rows, index=df.index, columns=RESULT_COLUMNS)
    results["ptp_percent"] = results["ptp_percent"].astype("Int64")
    logger.info("Assessed %d patients (%d with a PTP value)", len(df), int(results["ptp_ok"].sum()))
    # re-assessing an earlier results file replaces its result columns
    return pd.concat([df.drop(columns=RESULT_COLUMNS, errors="ignore"), results], axis=1)
