from .flags import Flag

CAC_INVALID = "CAC input invalid (must be ≥0)."


def check_age_plausibility(age, ceiling: float) -> list[Flag]:
    """Advisory checks on an age that already produced a table value."""
    if age > ceiling:
        return [Flag.warn(f"Age >{ceiling:g}: verify input.")]
    return []
