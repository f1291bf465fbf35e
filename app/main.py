# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Request Binding Demo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 8080
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings, get_values_config
from app.exceptions import (
    DemoAppException,
    demo_exception_handler,
    validation_exception_handler,
)
from app.routers import health, home, path_variables, request_params, user_api, users

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Load and validate the config.* values once
    - Shutdown: Log the shutdown
    """
    # Startup
    logger.info(f"Starting Request Binding Demo API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    values = get_values_config()
    logger.info(f"Loaded config values from {settings.VALUES_FILE}: {sorted(values.model_dump())}")

    yield

    # Shutdown
    logger.info("Shutting down Request Binding Demo API")


# Create FastAPI application
app = FastAPI(
    title="Request Binding Demo API",
    description="""
## Request Binding Demo

Small endpoints that show, side by side, how a request gets into a handler.

| Source | Example | Missing value |
|--------|---------|---------------|
| Path segment | `/api/var/baz/{message}` | 404 (route does not match) |
| Optional query | `/api/params/foo?message=` | `"mensaje por defecto"` |
| Required query | `/api/params/bar?text=&code=` | 400 |
| Raw parameters | `/api/params/request?code=&message=` | 500 (unhandled) |
| JSON body | `POST /api/var/create` | 400 |

Configuration values are loaded once at startup and served by `/api/var/values`.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Path Variables",
            "description": "Path segments, JSON body and configuration values",
        },
        {
            "name": "Request Params",
            "description": "Query string binding with defaults and raw access",
        },
        {
            "name": "Users",
            "description": "User DTOs, maps and lists as JSON",
        },
        {
            "name": "Views",
            "description": "Server-rendered HTML pages",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(DemoAppException)
async def handle_demo_exception(request: Request, exc: DemoAppException):
    """Handle custom application exceptions."""
    return await demo_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle missing or unconvertible request values."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Root and /home redirects
app.include_router(home.router)

# Path variable, body and config value endpoints
app.include_router(
    path_variables.router,
    prefix="/api/var",
    tags=["Path Variables"]
)

# Query parameter endpoints
app.include_router(
    request_params.router,
    prefix="/api/params",
    tags=["Request Params"]
)

# User JSON endpoints
app.include_router(
    user_api.router,
    prefix="/api",
    tags=["Users"]
)

# HTML views
app.include_router(
    users.router,
    tags=["Views"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)
