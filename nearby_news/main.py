# main.py
"""
FastAPI application for the nearby news service.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.exceptions import StorageFailureError, ValidationError
from .routers import location_router, news_router
from .schemas.common_schemas import ErrorResponseSchema, HealthCheckSchema
from .utils.dependencies import (
    cleanup_services,
    get_news_repository,
    get_retention_scheduler,
    initialize_services,
)
from common.logger import LoggerFactory, LoggerType, LogLevel

# Setup logging using custom logger factory
logger = LoggerFactory.get_logger(
    name="nearby-news-service",
    logger_type=LoggerType.STANDARD,
    level=LogLevel(settings.log_level),
    console_level=LogLevel(settings.log_level),
    use_colors=True,
    log_file=f"{settings.log_file_path.rstrip('/')}/nearby_news.log"
    if not settings.debug
    else None,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    """
    logger.info(f"🚀 Starting {settings.app_name} ({settings.storage_backend} store)")

    try:
        await initialize_services()
    except StorageFailureError as e:
        # Requests will report StorageFailure until the store is reachable
        logger.error(f"❌ Failed to initialize storage: {e}")

    if settings.enable_retention_sweep:
        get_retention_scheduler().start()

    logger.info("🎉 Nearby News Service is fully operational!")

    yield

    logger.info("🛑 Shutting down nearby news service...")
    await cleanup_services()
    logger.info("🔚 Nearby News Service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Nearby News Service",
    description="Location-aware news sharing with radius search",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(news_router.router, prefix=settings.api_prefix)
app.include_router(location_router.router, prefix=settings.api_prefix)


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Client-input errors: 400 with the error kind and message."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponseSchema(error=exc.code, message=exc.message).model_dump(),
    )


@app.exception_handler(StorageFailureError)
async def storage_exception_handler(request: Request, exc: StorageFailureError):
    """Infrastructure errors: logged, reported without internal detail."""
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponseSchema(
            error=StorageFailureError.code, message="Server Error"
        ).model_dump(),
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponseSchema(
            error="InternalError",
            message=str(exc) if settings.debug else "Server Error",
        ).model_dump(),
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "status": "running",
        "version": "1.0.0",
        "description": "Location-aware news sharing service",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/health", response_model=HealthCheckSchema)
async def health_check():
    """Health check endpoint."""
    store_healthy = await get_news_repository().health_check()
    scheduler_running = get_retention_scheduler().is_running()

    health = HealthCheckSchema(
        status="healthy" if store_healthy else "degraded",
        service=settings.app_name,
        dependencies={
            "store": "healthy" if store_healthy else "unhealthy",
            "retention_sweep": "running" if scheduler_running else "stopped",
        },
    )
    if not store_healthy:
        return JSONResponse(status_code=503, content=health.model_dump(mode="json"))
    return health

