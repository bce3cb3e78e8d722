"""housefair - Household load fairness engine."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import FairnessEngineError, classify_error_with_response
from src.core.logging import configure_logfire, instrument_fastapi
from src.interface.fairness_router import router as fairness_router


logger = logging.getLogger(__name__)


def validate_startup_configuration() -> None:
    """Validate engine thresholds before serving requests.

    Raises:
        ValueError: If the configured thresholds are inconsistent
    """
    thresholds = settings.fairness_thresholds()
    logger.info(
        "startup_validation",
        extra={"stage": "thresholds", "warning": thresholds.warning, "critical": thresholds.critical},
    )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    # Configure logging first so validation logs are captured
    configure_logfire()
    validate_startup_configuration()
    yield


app = FastAPI(
    title="housefair",
    description="Household load fairness engine",
    version="0.1.0",
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
instrument_fastapi(app)

# Register routers
app.include_router(fairness_router)


@app.exception_handler(FairnessEngineError)
async def fairness_engine_error_handler(_request: Request, exc: FairnessEngineError) -> JSONResponse:
    """Return engine errors as structured 422 responses."""
    response = classify_error_with_response(exc)
    logger.warning("fairness_engine_error", extra={"code": response.code, "error": str(exc)})
    return JSONResponse(content={"detail": response.model_dump(mode="json")}, status_code=422)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "healthy"}, status_code=200)
