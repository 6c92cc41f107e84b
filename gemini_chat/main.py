"""
Main FastAPI application for the Gemini chat gateway.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .config import settings
from .models.schemas import ErrorResponse
from .services.errors import ModelDiscoveryError
from .util.logging import setup_logging

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Gemini Chat Gateway"
SERVICE_VERSION = "1.0.0"

app = FastAPI(
    title=SERVICE_NAME,
    description="REST gateway over Google Gemini: chat, streaming chat and model discovery",
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.exception_handler(ModelDiscoveryError)
async def model_discovery_error_handler(request: Request, exc: ModelDiscoveryError):
    """Discovery failures that no route handled itself."""
    logger.error(f"Model discovery error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ErrorResponse(error="Model Discovery Error", message=exc.message).model_dump(),
    )


@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info(f"Starting {SERVICE_NAME} on port {settings.PORT}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    settings.validate_credentials(strict=False)
    logger.info(f"Configuration: {settings.get_config_summary()}")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    logger.info(f"Shutting down {SERVICE_NAME}...")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "running",
        "docs": "/docs",
        "environment": settings.ENVIRONMENT,
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "environment": settings.ENVIRONMENT,
    }
