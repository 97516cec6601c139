import logging
import math
from dataclasses import dataclass

from ..domain.clinical_thresholds import CAC_BUCKETS, RiskCategory
from ..validation.flags import FlagLevel

logger = logging.getLogger(__name__)

INVALID_LABEL = "Invalid CAC"
INVALID_DETAIL = "CAC must be a number ≥ 0."


@dataclass(frozen=True)
class CacResult:
    """Probability range bucket for a coronary artery calcium score."""
    ok: bool
    label: str
    detail: str
    level: FlagLevel | None = None
    bucket: str | None = None
    ptp_range: str | None = None
    category: RiskCategory | None = None

    def to_dict(self) -> dict:
        if not self.ok:
            return {"ok": False, "level": self.level.value, "label": self.label, "detail": self.detail}
        return {
            "ok": True,
            "bucket": self.bucket,
            "ptp_range": self.ptp_range,
            "category": self.category.value,
            "label": self.label,
            "detail": self.detail,
        }


INVALID_CAC = CacResult(ok=False, level=FlagLevel.BAD, label=INVALID_LABEL, detail=INVALID_DETAIL)


def _is_blank(raw) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def _to_score(raw) -> float | None:
    if isinstance(raw, bool):
        return None
    try:
        score = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(score) or score < 0:
        return None
    return score


def classify_cac(raw) -> CacResult | None:
    """
    Bucket a CAC score into the figure's probability ranges.

    Returns None when no score was supplied, and a failed result when the
    score is not a number >= 0.
    """
    if _is_blank(raw):
        return None

    score = _to_score(raw)
    if score is None:
        logger.debug("Rejected CAC input %r", raw)
        return INVALID_CAC

    # last bucket is open-ended, so every finite score matches one
    _, bucket, category, ptp_range, label = next(b for b in CAC_BUCKETS if score < b[0])
    return CacResult(
        ok=True,
        bucket=bucket,
        ptp_range=ptp_range,
        category=category,
        label=label,
        detail=f"{label} → {ptp_range}.",
    )
