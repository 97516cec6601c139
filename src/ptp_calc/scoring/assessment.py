import logging
from dataclasses import dataclass, field

from ..domain.clinical_thresholds import DEFAULT_ADVISORY_AGE_CEILING
from ..validation.clinical import CAC_INVALID, check_age_plausibility
from ..validation.flags import Flag
from .cac import CacResult, classify_cac
from .ptp import PtpResult, resolve_ptp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assessment:
    """PTP and optional CAC results for one patient, with merged flags."""
    ptp: PtpResult
    cac: CacResult | None
    flags: tuple[Flag, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.ptp.ok

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "ptp": self.ptp.to_dict(),
            "cac": self.cac.to_dict() if self.cac else None,
            "flags": [flag.to_dict() for flag in self.flags],
        }


def assess(age, sex, symptom, cac=None, *, advisory_age_ceiling: float = DEFAULT_ADVISORY_AGE_CEILING) -> Assessment:
    ptp = resolve_ptp(age, sex, symptom)
    cac_result = classify_cac(cac)

    flags = list(ptp.flags)
    if ptp.ok:
        flags.extend(check_age_plausibility(age, advisory_age_ceiling))
    if cac_result is not None and not cac_result.ok:
        flags.append(Flag.bad(CAC_INVALID))

    logger.debug("Assessment ok=%s cac=%s flags=%d", ptp.ok, cac_result.bucket if cac_result else None, len(flags))
    return Assessment(ptp=ptp, cac=cac_result, flags=tuple(flags))
