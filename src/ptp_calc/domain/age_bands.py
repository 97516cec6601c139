import math
import numbers
from enum import Enum


class AgeBand(str, Enum):
    LT30 = "lt30"
    AGE_30_39 = "30-39"
    AGE_40_49 = "40-49"
    AGE_50_59 = "50-59"
    AGE_60_69 = "60-69"
    AGE_70_PLUS = "70+"


# Upper bound (inclusive) of each band that has a table column.
BAND_UPPER_BOUNDS = (
    (39, AgeBand.AGE_30_39),
    (49, AgeBand.AGE_40_49),
    (59, AgeBand.AGE_50_59),
    (69, AgeBand.AGE_60_69),
)

MIN_TABLE_AGE = 30

TABLE_BANDS = tuple(band for band in AgeBand if band is not AgeBand.LT30)


def band_for(age) -> AgeBand | None:
    """Map an age in years to its band, or None when the age is not a finite number."""
    if isinstance(age, bool) or not isinstance(age, numbers.Real):
        return None
    if not math.isfinite(age):
        return None
    if age < MIN_TABLE_AGE:
        return AgeBand.LT30
    for upper, band in BAND_UPPER_BOUNDS:
        if age <= upper:
            return band
    return AgeBand.AGE_70_PLUS
