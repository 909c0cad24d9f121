"""
UniCompare - FastAPI Application

Main entry point for the backend API.
Provides read-only endpoints to search, filter and compare universities.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from unicompare.api.dependencies import CatalogDep, get_catalog
from unicompare.config.settings import settings
from unicompare.infrastructure.exceptions import (
    UniCompareError,
    ValidationError,
    InvalidArgumentError,
    NotFoundError,
    InternalError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(f"UniCompare Backend starting in {settings.environment} mode...")

    # Fail fast on a broken catalog instead of on the first request
    catalog = get_catalog()
    logger.info(f"Catalog ready: {len(catalog)} universities")

    yield

    logger.info("UniCompare Backend shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Search, filter and compare universities",
    version=VERSION,
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS configuration from Settings (read-only API)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle invalid query parameters."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Handle wrong argument counts (e.g. comparison ids)."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle unknown university ids."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(UniCompareError)
async def general_error_handler(request: Request, exc: UniCompareError):
    """Handle all other application errors."""
    logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=InternalError().to_dict(),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Log unexpected faults and hide their details from clients."""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=InternalError().to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
def health_check(catalog: CatalogDep):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "unicompare",
        "universities": len(catalog),
    }


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "UniCompare API",
        "version": VERSION,
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from unicompare.api.routes import universities  # noqa: E402

app.include_router(universities.router, prefix="/api")
