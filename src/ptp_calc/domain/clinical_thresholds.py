from enum import Enum


class RiskCategory(str, Enum):
    LOW = "low"
    INTERMEDIATE_HIGH = "intermediateHigh"
    HIGH = "high"


# PTP at or below this percent is "low" in the guideline figure.
LOW_PTP_MAX_PERCENT = 15

DEFAULT_ADVISORY_AGE_CEILING = 100

# (exclusive upper bound, bucket, category, ptp range, label)
CAC_BUCKETS = (
    (100, "0-99", RiskCategory.LOW, "≤15%", "CAC 0–99"),
    (1000, "100-999", RiskCategory.INTERMEDIATE_HIGH, ">15–50%", "CAC 100–999"),
    (float("inf"), ">=1000", RiskCategory.HIGH, ">50%", "CAC ≥1000"),
)

CATEGORY_LABELS = {
    RiskCategory.LOW: "Low ≤15%",
    RiskCategory.INTERMEDIATE_HIGH: "Intermediate–High >15%",
    RiskCategory.HIGH: "High >50%",
}


def classify_ptp_category(percent: float) -> RiskCategory:
    if percent <= LOW_PTP_MAX_PERCENT:
        return RiskCategory.LOW
    return RiskCategory.INTERMEDIATE_HIGH


def category_label(category: RiskCategory | str) -> str:
    return CATEGORY_LABELS[RiskCategory(category)]
