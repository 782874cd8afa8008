# shiftpay/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shiftpay.core.logging_config import get_logger, is_production, setup_logging
from shiftpay.core.request_logging import REQUEST_ID_HEADER, RequestLoggingMiddleware
from shiftpay.core.sentry_config import init_sentry
from shiftpay.routes.payroll_api import get_payroll_settings
from shiftpay.routes.payroll_api import router as payroll_router

VERSION = "0.1.0"

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

sentry_enabled = init_sentry()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Application starting up",
        extra={"extra_fields": {"production": is_production(), "python_version": sys.version}},
    )

    # Fail at startup instead of on the first request if settings are broken
    settings = get_payroll_settings()
    logger.info("Payroll settings loaded (closing_date=%d)", settings.closing_date)

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="shiftpay",
    description="Shift pay, night differential and payroll period calculation",
    version=VERSION,
    lifespan=lifespan,
)

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if is_production():
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )
    allowed_origins = CORS_ORIGINS
    allowed_methods = ["GET", "POST"]
    logger.info("CORS configured for production with origins: %s", allowed_origins)
else:
    allowed_origins = ["*"]
    allowed_methods = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=allowed_methods,
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(payroll_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "shiftpay", "version": VERSION}
