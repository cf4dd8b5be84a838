"""
Maids Services API - Main FastAPI Application
"""

import logging
import re
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.database import init_db, close_db
from app.exceptions import AppError
from app.logging_config import configure_logging
from app.api.v1.router import api_router
from app.schemas.common import ApiResponse, ErrorResponse

settings = get_settings()
logger = logging.getLogger(__name__)

# "UNIQUE constraint failed: staff.phone" (sqlite) / "duplicate key ... Key (phone)=(...)" (postgres)
_DUPLICATE_FIELD = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)|duplicate key value.*?Key \((\w+)\)=", re.S)
# "NOT NULL constraint failed: bookings.service" (sqlite) / 'null value in column "service"' (postgres)
_NULL_FIELD = re.compile(r"NOT NULL constraint failed: \w+\.(\w+)|null value in column \"(\w+)\"")


def _matched_field(pattern: re.Pattern, text: str):
    match = pattern.search(text)
    return next((g for g in match.groups() if g), None) if match else None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    # Startup
    configure_logging()
    logger.info("Starting %s (%s)...", settings.APP_NAME, settings.ENVIRONMENT)
    await init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Booking, staff and client administration for a home-cleaning service",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware (answers preflight before any route or auth dependency runs)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


if settings.ENVIRONMENT == "development":
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.debug(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the standard failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, error=message).model_dump(),
    )


# Exception handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Known operational errors carry their own status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with clear messages."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(x) for x in error["loc"] if x not in ("body", "query", "path"))
        errors.append(f"{field}: {error['msg']}" if field else error["msg"])

    return error_response(
        f"Validation Error: {', '.join(errors)}",
        status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Constraint hit that the service layer did not catch first."""
    detail = str(exc.orig)
    field = _matched_field(_DUPLICATE_FIELD, detail)
    if field:
        return error_response(f"{field} already exists", status.HTTP_400_BAD_REQUEST)

    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, detail)
    field = _matched_field(_NULL_FIELD, detail)
    message = f"Validation Error: {field} is required" if field else "Validation Error: invalid data"
    return error_response(message, status.HTTP_400_BAD_REQUEST)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(f"Route {request.url.path} not found", exc.status_code)
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    if settings.is_production:
        message = "Something went wrong!"
    else:
        message = str(exc) or "Internal server error"
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


# Include routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


# Health check endpoints
@app.get("/health")
@app.get("/api/health")
async def health_check():
    """Health check endpoint for load balancers."""
    return ApiResponse(
        message="Server is healthy",
        data={"status": "healthy", "service": settings.APP_NAME, "environment": settings.ENVIRONMENT},
    )
