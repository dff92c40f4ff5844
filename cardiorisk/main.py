"""
CardioRisk Assessment - FastAPI Application

Main application entry point with API endpoints for:
- Cardiovascular risk prediction from a patient assessment form
- Health checks
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from cardiorisk.config import settings
from cardiorisk.core.errors import (
    CardioRiskError, DataNormalizationError, ValidationError,
)
from cardiorisk.models.assessment import (
    ErrorResponse, HealthResponse, PredictionEnvelope, PredictionRequest,
)
from cardiorisk.services.assessment import AssessmentService
from cardiorisk.utils import configure_logging, get_logger

configure_logging(settings.log_level)
logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title=settings.app_name,
    description="Cardiovascular risk assessment (ASCVD, Framingham, WHO and risk-factor models)",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_assessment_service = AssessmentService()


# ---- Utility Functions ----

def _error_status(error: Exception) -> int:
    """HTTP status for a pipeline error."""
    if isinstance(error, (ValidationError, DataNormalizationError)):
        return 400
    return 500


def _error_response(error: Exception) -> JSONResponse:
    """Build the {"success": false, "error": {...}} body for any exception."""
    if isinstance(error, CardioRiskError):
        detail = error.to_dict()
    else:
        detail = {
            "code": "INTERNAL_SERVER_ERROR",
            "message": str(error) or "An unexpected error occurred",
        }
    return JSONResponse(
        status_code=_error_status(error),
        content={"success": False, "error": detail},
    )


def _health(components: dict) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now().isoformat(),
        components=components,
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health({
        "risk_engine": "ready",
        "validation": "ready",
    })


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health({
        "api": "healthy",
        "inference": "ready",
        "who_region": _assessment_service.risk_engine.region.value,
    })


@app.post(
    f"{settings.api_prefix}/predict",
    tags=["Prediction"],
    responses={
        200: {"model": PredictionEnvelope},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def predict(request: PredictionRequest):
    """
    Predict cardiovascular risk from patient form data.

    Validation failures are a successful response with a non-empty
    errors list; pipeline failures map to 400/500 error bodies.
    """
    try:
        raw = request.model_dump(by_alias=True, exclude_none=True)
        result = _assessment_service.predict(raw)
        return JSONResponse(content={"success": True, "data": result.to_dict()})
    except Exception as e:
        logger.error(f"Prediction failed: {e!r}", exc_info=True)
        return _error_response(e)


# ---- Application Lifecycle ----

@app.on_event("startup")
async def startup_event():
    """Initialize on startup."""
    logger.info(f"{settings.app_name} v{settings.app_version} starting up...")
    logger.info(f"Prediction endpoint: {settings.api_prefix}/predict")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"{settings.app_name} shutting down...")


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
