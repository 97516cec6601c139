"""
CAD Pretest Probability API

A FastAPI service exposing the pretest probability lookup, the CAC score
buckets and a CSV batch runner. Calculator input problems are returned as
flags in a normal 200 response; only unreadable uploads are HTTP errors.

Run with: uvicorn ptp_calc.api.main:app --reload
Swagger UI: http://localhost:8080/docs
"""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, HTTPException, UploadFile, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ptp_calc.common.logging import LOG_FORMAT
from ptp_calc.dataio import DataValidationError, assess_frame, parse_csv_content
from ptp_calc.domain.ptp_table import PTP_TABLE, table_rows
from ptp_calc.scoring import assess, classify_cac, resolve_ptp

from .config import settings
from .schemas import (
    AssessRequest,
    AssessResponse,
    BatchResponse,
    CacRequest,
    CacResponse,
    ErrorResponse,
    HealthCheckResponse,
    PtpRequest,
    PtpResponse,
)

logging.basicConfig(level=getattr(logging, settings.log_level.upper()), format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    yield
    logger.info("Shutting down API")


app = FastAPI(
    lifespan=lifespan,
    title=settings.app_name,
    description="""
## CAD Pretest Probability API

Maps age, sex and primary symptom to a pretest probability of coronary
artery disease using the ACC/AHA 2021 reference figure, and buckets a
coronary artery calcium (CAC) score into its probability range.

### Endpoints
- `POST /ptp` - Pretest probability from age, sex, symptom
- `POST /cac` - CAC score bucket
- `POST /assess` - Both, with merged flags
- `POST /batch` - Upload a CSV of patients
- `GET /table` - Reference table
- `GET /health` - Health status
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataValidationError)
async def validation_exception_handler(request, exc: DataValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="data_validation_error",
            detail=str(exc),
            suggestion="Upload a CSV with age, sex and symptom columns and an optional cac column.",
        ).model_dump(),
    )


@app.get("/", tags=["General"])
async def root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "documentation": "/docs",
        "health_check": "/health",
    }


@app.get("/health", response_model=HealthCheckResponse, tags=["General"])
async def health_check():
    table_loaded = len(PTP_TABLE) > 0
    return HealthCheckResponse(
        status="healthy" if table_loaded else "unhealthy",
        version=settings.app_version,
        table_loaded=table_loaded,
        message="API is operational." if table_loaded else "Reference table is empty.",
    )


@app.get("/config", tags=["General"])
async def get_config():
    """Return non-sensitive configuration parameters."""
    return {
        "advisory_age_ceiling": settings.advisory_age_ceiling,
        "max_batch_rows": settings.max_batch_rows,
    }


@app.get("/table", tags=["Reference"])
async def get_table():
    return [
        {"symptom": symptom.value, "sex": sex.value, "age_band": band.value, "percent": percent}
        for symptom, sex, band, percent in table_rows()
    ]


@app.post("/ptp", response_model=PtpResponse, tags=["Calculator"])
async def calculate_ptp(request: PtpRequest):
    result = resolve_ptp(request.age, request.sex, request.symptom)
    logger.info(f"PTP request: ok={result.ok} flags={len(result.flags)}")
    return result.to_dict()


@app.post("/cac", response_model=CacResponse | None, tags=["Calculator"])
async def calculate_cac(request: CacRequest):
    result = classify_cac(request.cac)
    return result.to_dict() if result else None


@app.post("/assess", response_model=AssessResponse, tags=["Calculator"])
async def calculate_assessment(request: AssessRequest):
    result = assess(
        request.age,
        request.sex,
        request.symptom,
        request.cac,
        advisory_age_ceiling=settings.advisory_age_ceiling,
    )
    logger.info(f"Assessment request: ok={result.ok} flags={len(result.flags)}")
    return result.to_dict()


@app.post(
    "/batch",
    response_model=BatchResponse,
    responses={
        400: {"description": "Invalid file", "model": ErrorResponse},
        422: {"description": "Data validation error", "model": ErrorResponse},
    },
    tags=["Calculator"],
)
async def calculate_batch(file: UploadFile = File(..., description="CSV file with one patient per row")):
    if not file.filename.endswith(".csv"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error="invalid_file_type",
                detail=f"Expected CSV file, got: {file.filename}",
                suggestion="Please upload a file with .csv extension",
            ).model_dump(),
        )

    content = await file.read()
    if len(content) == 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error="empty_file",
                detail="The uploaded file is empty",
                suggestion="Upload a CSV file with patient rows",
            ).model_dump(),
        )

    df = parse_csv_content(content, file.filename)
    if len(df) > settings.max_batch_rows:
        raise DataValidationError(f"Too many rows: {len(df)}. Maximum per upload: {settings.max_batch_rows}")

    try:
        results = assess_frame(df, advisory_age_ceiling=settings.advisory_age_ceiling)
    except ValueError as e:
        raise DataValidationError(str(e))

    logger.info(f"Batch {file.filename}: {len(results)} rows")
    return BatchResponse(
        filename=file.filename,
        patient_count=len(results),
        computed_count=int(results["ptp_ok"].sum()),
        rows=json.loads(results.to_json(orient="records", force_ascii=False)),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ptp_calc.api.main:app", host="0.0.0.0", port=8080, reload=settings.debug)
