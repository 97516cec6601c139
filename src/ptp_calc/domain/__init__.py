from .age_bands import AgeBand, band_for
from .clinical_thresholds import RiskCategory, category_label, classify_ptp_category
from .ptp_table import PTP_TABLE, Sex, Symptom, lookup_ptp, table_frame, table_rows

__all__ = [
    "AgeBand",
    "band_for",
    "RiskCategory",
    "category_label",
    "classify_ptp_category",
    "PTP_TABLE",
    "Sex",
    "Symptom",
    "lookup_ptp",
    "table_frame",
    "table_rows",
]
