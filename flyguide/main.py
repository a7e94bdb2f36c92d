"""
FlyGuide - Main FastAPI Application
Nonstop fare finder and travel guide backed by Gemini with Google Search grounding
"""

import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

# Load .env file explicitly (before reading settings)
from dotenv import load_dotenv
load_dotenv()

from flyguide.core.config import get_settings
from flyguide.core.exceptions import (
    MissingCredentialError,
    ProviderError,
    RateLimitedError,
    ResponseFormatError
)
from flyguide.api.v1.endpoints import router as v1_router

# Initialize settings
settings = get_settings()

# Configure logging
logging.config.dictConfig(settings.get_log_config())
logger = logging.getLogger(__name__)

RAW_TEXT_LIMIT = 2000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events
    """
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Model: {settings.default_model_name}")
    if settings.google_gemini_api_key:
        logger.info("Google Gemini: configured")
    else:
        logger.warning("Google Gemini: not configured (set GOOGLE_GEMINI_API_KEY)")
    logger.info("=" * 60)

    yield

    logger.info(f"Shutting down {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    **FlyGuide API**

    - **Nonstop fares**: cheapest direct round trips from Taiwan to Japan and Korea
    - **Travel guide**: must-see lists, places to stay and food near your base
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception Handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with detailed messages"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({
            "status": "error",
            "message": "Invalid request data",
            "errors": exc.errors()
        })
    )


@app.exception_handler(MissingCredentialError)
async def missing_credential_handler(request: Request, exc: MissingCredentialError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "error", "code": "missing_credential", "message": str(exc)}
    )


@app.exception_handler(RateLimitedError)
async def rate_limited_handler(request: Request, exc: RateLimitedError):
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"status": "error", "code": "rate_limited", "message": str(exc)}
    )


@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"status": "error", "code": "provider_error", "message": str(exc)}
    )


@app.exception_handler(ResponseFormatError)
async def response_format_handler(request: Request, exc: ResponseFormatError):
    """Results could not be understood; the caller may simply search again"""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "status": "error",
            "code": "unreadable_results",
            "message": str(exc),
            "raw_response": exc.raw_text[:RAW_TEXT_LIMIT]
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": "error",
            "message": "Internal server error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred"
        }
    )


# Include routers
app.include_router(v1_router)


# Root endpoint
@app.get("/", tags=["Root"])
async def root() -> Dict[str, Any]:
    """
    Root endpoint - API information
    """
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "docs": "/docs",
        "health": "/api/v1/health",
        "endpoints": {
            "search_flights": "POST /api/v1/flights/search",
            "search_guide": "POST /api/v1/guide/search"
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "flyguide.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development(),
        log_level=settings.log_level.lower()
    )
