import logging
import math
from dataclasses import dataclass, field

from ..domain.age_bands import AgeBand
from ..domain.clinical_thresholds import RiskCategory, classify_ptp_category
from ..domain.ptp_table import lookup_ptp
from ..validation.flags import Flag, has_blocking
from ..validation.inputs import NO_TABLE_MATCH, NO_VALUE_BELOW_30, validate_ptp_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PtpResult:
    """Outcome of a pretest probability lookup."""
    ok: bool
    flags: tuple[Flag, ...] = field(default_factory=tuple)
    age_band: AgeBand | None = None
    percent: int | None = None
    display: str | None = None
    category: RiskCategory | None = None

    def to_dict(self) -> dict:
        data = {
            "ok": self.ok,
            "age_band": self.age_band.value if self.age_band else None,
            "flags": [flag.to_dict() for flag in self.flags],
        }
        if self.ok:
            data.update(
                percent=self.percent,
                display=self.display,
                category=self.category.value,
            )
        return data


def _failure(flags: list[Flag], age_band: AgeBand | None) -> PtpResult:
    logger.debug("PTP lookup failed: band=%s flags=%d", age_band, len(flags))
    return PtpResult(ok=False, flags=tuple(flags), age_band=age_band)


def resolve_ptp(age, sex, symptom) -> PtpResult:
    """
    Look up the pretest probability for an age, sex and symptom.

    Every input problem is reported as a flag; a result with ok=False
    carries no percent. Never raises.
    """
    age_band, parsed_sex, parsed_symptom, flags = validate_ptp_inputs(age, sex, symptom)

    if has_blocking(flags):
        return _failure(flags, age_band)

    if age_band is AgeBand.LT30:
        flags.append(Flag.bad(NO_VALUE_BELOW_30))
        return _failure(flags, age_band)

    percent = lookup_ptp(parsed_symptom, parsed_sex, age_band)
    if percent is None or not math.isfinite(percent):
        flags.append(Flag.bad(NO_TABLE_MATCH))
        return _failure(flags, age_band)

    category = classify_ptp_category(percent)
    logger.debug("PTP %s/%s/%s -> %s%% (%s)", parsed_symptom.value, parsed_sex.value, age_band.value, percent, category.value)
    return PtpResult(
        ok=True,
        flags=tuple(flags),
        age_band=age_band,
        percent=percent,
        display=f"≤{percent}%",
        category=category,
    )
