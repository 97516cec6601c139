"""
Configuration settings for the PTP calculator API.

Values can be overridden with environment variables prefixed with PTP_,
for example PTP_ADVISORY_AGE_CEILING=95.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from ptp_calc import __version__
from ptp_calc.domain.clinical_thresholds import DEFAULT_ADVISORY_AGE_CEILING


class Settings(BaseSettings):
    """Application settings for the pretest probability API."""

    model_config = SettingsConfigDict(env_prefix="PTP_")

    # API Metadata
    app_name: str = "CAD Pretest Probability API"
    app_version: str = __version__
    debug: bool = False
    log_level: str = "INFO"

    # Ages above this still compute but are flagged for verification
    advisory_age_ceiling: float = DEFAULT_ADVISORY_AGE_CEILING

    # Upload limits for /batch
    max_batch_rows: int = 5000


settings = Settings()
