from .flags import Flag, FlagLevel, has_blocking, worst_level
from .inputs import validate_ptp_inputs
from .clinical import check_age_plausibility

__all__ = ["Flag", "FlagLevel", "has_blocking", "worst_level", "validate_ptp_inputs", "check_age_plausibility"]
