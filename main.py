# main.py
from fastapi import FastAPI, HTTPException, Request
from datetime import datetime
from pydantic import BaseModel, Field
from dotenv import load_dotenv
from logfacade.config import initialize_config, get_config, is_configured, Severity
from logfacade.logger import create_logger
from logfacade.logger.logger_middleware import RequestInfoMiddleware
from logfacade.api_error import ConfigurationError, AppError
from typing import Any
from contextlib import asynccontextmanager
from fastapi.responses import JSONResponse

load_dotenv()
try:
    initialize_config()
except ConfigurationError as e:
    # No backends exist yet - this is a fatal startup error
    print(f"FATAL: Configuration error:\n{e}")
    import sys

    sys.exit(1)

config = get_config()
logger = create_logger(config.logging)

app_title = config.app_title
app_version = config.app_version


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.log(f"{app_title} {app_version} starting", Severity.INFO)
    yield
    logger.log("shutting down", Severity.INFO)
    logger.shutdown()


app = FastAPI(
    title=app_title,
    version=app_version,
    description=f"Running in {config.environment} environment",
    lifespan=lifespan,
)
app.add_middleware(RequestInfoMiddleware, error_logger=logger)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.log_throwable(exc, {"path": request.url.path})

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "reference_code": exc.reference_code,
            "timestamp": datetime.now().isoformat(),
        },
    )


class HealthCheckResponse(BaseModel):
    status: str = Field(..., description="Current system health status")
    timestamp: datetime = Field(..., description="Server time in ISO 8601 format")
    version: str = Field(..., description="Application version")
    logging_configured: bool = Field(..., description="Logging configuration status")
    log_level: str = Field(..., description="Application log level")
    backends: list[str] = Field(..., description="Registered log backends")


@app.get("/health", response_model=HealthCheckResponse)
def check_health() -> HealthCheckResponse:
    if not app_version:
        logger.log("Version not found", Severity.ERROR, {"endpoint": "/health"})
        raise HTTPException(status_code=503, detail="version not found")

    return HealthCheckResponse(
        status="Healthy",
        timestamp=datetime.now(),
        version=app_version,
        logging_configured=is_configured(),
        log_level=config.logging.level_value,
        backends=[backend.name for backend in logger.backends],
    )


@app.get("/metrics")
async def metrics() -> dict[str, Any]:
    """Get log backend metrics."""
    return {"backends": logger.get_backend_metrics()}


__all__ = ["app", "config", "logger"]
