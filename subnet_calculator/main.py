"""FastAPI application for the IPv4 subnet calculator.

Serves the HTML form at ``/``, the JSON API under ``/api/v1`` and the health
endpoints under ``/health``. Runs directly on Uvicorn (see ``__main__``) or via
``uvicorn subnet_calculator.main:app``.

Environment Variables:
    CORS Configuration:
        CORS_ORIGINS: Comma-separated list of allowed CORS origins
                     If not set or empty, no origins allowed (same-origin only)
                     Example: http://localhost:3000,http://localhost:5173
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import VERSION, get_cors_origins
from .routers import form, health, subnets

# Configure logging
logger = logging.getLogger(__name__)


def create_app(started_at: datetime | None = None) -> FastAPI:
    """Build the application.

    Args:
        started_at: Process start time used for uptime reporting. Defaults to
            the time the application is created. Must be timezone-aware.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="IPv4 Subnet Calculator",
        description="IPv4 subnet calculator: network, broadcast and usable host range",
        version=VERSION,
        docs_url="/api/v1/docs",  # Swagger UI
        redoc_url="/api/v1/redoc",  # ReDoc
        openapi_url="/api/v1/openapi.json",  # OpenAPI spec
    )

    # Owned by this app instance, read by the health router
    app.state.started_at = started_at or datetime.now(timezone.utc)

    # Configure CORS origins from environment
    # If not set or empty, only same-origin requests are allowed
    cors_origins = get_cors_origins()
    if cors_origins:
        logger.info(f"CORS: Allowed origins: {', '.join(cors_origins)}")
    else:
        logger.debug("CORS: No origins configured, same-origin only")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(subnets.router)
    app.include_router(form.router)

    return app


app = create_app()
