"""
Pydantic schemas for request/response validation.

Sex and symptom are accepted as free strings so that unknown values come
back as calculator flags instead of request validation errors.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt

from ptp_calc.domain.clinical_thresholds import RiskCategory
from ptp_calc.domain.age_bands import AgeBand
from ptp_calc.validation.flags import FlagLevel


# Strict so a JSON boolean reaches the classifier as a boolean and is rejected there
CacValue = Union[StrictInt, StrictFloat, StrictBool, str]


class FlagModel(BaseModel):
    level: FlagLevel
    message: str


class PtpRequest(BaseModel):
    age: Optional[float] = Field(None, description="Age in years")
    sex: Optional[str] = Field(None, description="men or women")
    symptom: Optional[str] = Field(None, description="chestPain or dyspnea")

    model_config = {
        "json_schema_extra": {
            "example": {"age": 45, "sex": "men", "symptom": "chestPain"}
        }
    }


class CacRequest(BaseModel):
    cac: Optional[CacValue] = Field(None, description="Coronary artery calcium score")


class AssessRequest(PtpRequest):
    cac: Optional[CacValue] = Field(None, description="Coronary artery calcium score (optional)")

    model_config = {
        "json_schema_extra": {
            "example": {"age": 62, "sex": "women", "symptom": "dyspnea", "cac": 150}
        }
    }


class PtpResponse(BaseModel):
    ok: bool
    age_band: Optional[AgeBand] = None
    flags: list[FlagModel] = Field(default_factory=list)
    percent: Optional[int] = None
    display: Optional[str] = None
    category: Optional[RiskCategory] = None


class CacResponse(BaseModel):
    ok: bool
    label: str
    detail: str
    level: Optional[FlagLevel] = None
    bucket: Optional[str] = None
    ptp_range: Optional[str] = None
    category: Optional[RiskCategory] = None


class AssessResponse(BaseModel):
    ok: bool
    ptp: PtpResponse
    cac: Optional[CacResponse] = None
    flags: list[FlagModel] = Field(default_factory=list)


class BatchResponse(BaseModel):
    filename: str
    patient_count: int
    computed_count: int
    rows: list[dict]


class HealthCheckResponse(BaseModel):
    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    table_loaded: bool
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error type or code")
    detail: str = Field(..., description="Detailed error message")
    suggestion: Optional[str] = Field(None, description="Suggested action to resolve the error")
