"""
BP Calculator - FastAPI Application

Main application entry point with endpoints for:
- Blood pressure classification (JSON API)
- Category explanation lookups
- The calculator web page
- Health and metrics checks
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from datetime import datetime, timezone
import psutil
import time

from bp_calculator import config
from bp_calculator.models import (
    BPRequest,
    BPCalculationResponse,
    BPExplanationResponse,
    CategoryListResponse,
    HealthResponse,
    MetricsResponse,
    ErrorResponse,
)
from bp_calculator.services import BloodPressureService
from bp_calculator.utils import BPCalculatorError, get_logger, setup_logging

setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)
logger = get_logger(__name__)

_bp_service = BloodPressureService()


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    app.state.bp_service = _bp_service
    logger.info(
        f"Starting web host with BP Calculator and Category Explainer. "
        f"Environment: {config.ENVIRONMENT}"
    )
    yield
    logger.info("BP Calculator API shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title="BP Calculator API",
    description="Blood pressure category calculator with explanations and recommendations",
    version=config.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"API {request.method} {request.url.path} -> {response.status_code} in {elapsed_ms:.0f}ms"
    )
    return response


@app.exception_handler(BPCalculatorError)
async def bp_error_handler(request: Request, exc: BPCalculatorError):
    """Rejected readings become 400 responses with a structured body."""
    return JSONResponse(status_code=400, content=exc.to_dict())


# ---- Serve Frontend ----
if config.FRONTEND_DIR.exists():
    app.mount("/frontend", StaticFiles(directory=str(config.FRONTEND_DIR)), name="frontend")


# ---- Page ----

@app.get("/", include_in_schema=False)
async def index():
    """Calculator page."""
    page = config.FRONTEND_DIR / "index.html"
    if not page.exists():
        logger.error(f"Calculator page not found at {page}")
        raise HTTPException(status_code=404, detail="Calculator page not found")
    return FileResponse(page)


# ---- Health ----

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    logger.info("Health check called - Status: healthy")
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=config.SERVICE_NAME,
        version=config.VERSION,
        environment=config.ENVIRONMENT,
    )


@app.get("/metrics", response_model=MetricsResponse, tags=["Health"])
async def metrics():
    """Process uptime and resident memory."""
    process = psutil.Process()
    memory_used = process.memory_info().rss
    logger.info(f"Metrics checked - Memory: {memory_used // 1024 // 1024}MB")
    now = datetime.now(timezone.utc)
    started = datetime.fromtimestamp(process.create_time(), tz=timezone.utc)
    return MetricsResponse(
        timestamp=now.isoformat(),
        uptime_seconds=max((now - started).total_seconds(), 0.0),
        memory_used_bytes=memory_used,
    )


# ---- Blood Pressure Endpoints ----

@app.post(
    "/api/bp/calculate",
    response_model=BPCalculationResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["Blood Pressure"],
)
async def calculate(request: BPRequest):
    """
    Classify a reading.

    Systolic must be within 70-190, diastolic within 40-100, and
    systolic must exceed diastolic; otherwise a 400 is returned.
    """
    return _bp_service.calculate(request.systolic, request.diastolic)


@app.get(
    "/api/bp/explain/{category}",
    response_model=BPExplanationResponse,
    tags=["Blood Pressure"],
)
async def explain_category(category: str):
    """
    Explanation, range, recommendations and guidance for a category name.

    Unknown names are answered with fallback text and `is_valid: false`.
    """
    return _bp_service.explain(category)


@app.get("/api/bp/categories", response_model=CategoryListResponse, tags=["Reference"])
async def list_categories():
    """List all blood pressure categories."""
    return {"categories": _bp_service.list_categories()}


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
