"""API routers."""

from .admin import router as admin_router
from .health import router as health_router
from .storefront import (
    cart_router,
    pages_router,
    redirects_router,
    search_router,
    site_files_router,
)

__all__ = [
    "admin_router",
    "cart_router",
    "health_router",
    "pages_router",
    "redirects_router",
    "search_router",
    "site_files_router",
]
