"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, tourbook.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tourbook.api.routers import (
    admin_router,
    cart_router,
    health_router,
    pages_router,
    redirects_router,
    search_router,
    site_files_router,
)
from tourbook.api.routers.router_utils import API_PREFIX
from tourbook.boundary.db import dispose_engine
from tourbook.configs import Settings, get_settings
from tourbook.observability import configure_logging
from tourbook.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    # Startup
    if not settings.admin.api_key:
        logger.warning("ADMIN_API_KEY is not set; admin API is open (demo mode)")
    logger.info(
        "Tourbook API starting",
        extra={"environment": settings.environment, "site_url": settings.site.base_url},
    )

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to read CORS origins from (defaults to the cached settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Tourbook API",
        description="Tour marketplace storefront pages, cart and content-management API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(pages_router, prefix=API_PREFIX)
    app.include_router(search_router, prefix=API_PREFIX)
    app.include_router(cart_router, prefix=API_PREFIX)
    app.include_router(redirects_router, prefix=API_PREFIX)
    app.include_router(admin_router, prefix=API_PREFIX)

    # Crawler files live at the site root
    app.include_router(site_files_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "tourbook.main:app",
        host="0.0.0.0",
        port=8000,
    )
