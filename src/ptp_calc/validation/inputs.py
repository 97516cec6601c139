"""
Input validation for the pretest probability lookup.

Validation collects every applicable finding before any decision is made,
so a caller sees all problems with the inputs at once.
"""

from ..domain.age_bands import AgeBand, band_for
from ..domain.ptp_table import Sex, Symptom
from .flags import Flag

AGE_REQUIRED = "Age is required and must be a number."
AGE_BELOW_TABLE = "Age <30: the provided figure table begins at 30–39. Result may not be applicable."
SEX_REQUIRED = "Sex is required."
SYMPTOM_REQUIRED = "Symptom selection is required."
NO_VALUE_BELOW_30 = "No table value available for age <30 from the provided figure. Cannot compute."
NO_TABLE_MATCH = "No matching table value found (check inputs)."


def validate_ptp_inputs(age, sex, symptom) -> tuple[AgeBand | None, Sex | None, Symptom | None, list[Flag]]:
    """
    Check age, sex and symptom for a table lookup.

    Returns:
        Tuple of (age_band, sex, symptom, flags). Parsed values are None
        when the corresponding input is missing or invalid.
    """
    flags = []

    age_band = band_for(age)
    if age_band is None:
        flags.append(Flag.bad(AGE_REQUIRED))
    elif age_band is AgeBand.LT30:
        flags.append(Flag.warn(AGE_BELOW_TABLE))

    parsed_sex = Sex.parse(sex)
    if parsed_sex is None:
        flags.append(Flag.bad(SEX_REQUIRED))

    parsed_symptom = Symptom.parse(symptom)
    if parsed_symptom is None:
        flags.append(Flag.bad(SYMPTOM_REQUIRED))

    return age_band, parsed_sex, parsed_symptom, flags
