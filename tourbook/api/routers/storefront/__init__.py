"""Storefront routers: pages, search, cart, redirect rules and site files."""

from .cart import router as cart_router
from .pages import router as pages_router
from .redirects import router as redirects_router
from .search import router as search_router
from .site_files import router as site_files_router

__all__ = [
    "cart_router",
    "pages_router",
    "redirects_router",
    "search_router",
    "site_files_router",
]
