"""API-specific dependencies."""

from .dependencies import (
    get_blog_service,
    get_cart_service,
    get_catalog_service,
    get_current_user_id,
    get_experience_service,
    get_faq_service,
    get_homepage_service,
    get_internal_link_service,
    get_redirect_service,
    get_settings_dependency,
    get_site_files_service,
    get_storefront_service,
    require_admin,
)

__all__ = [
    "get_blog_service",
    "get_cart_service",
    "get_catalog_service",
    "get_current_user_id",
    "get_experience_service",
    "get_faq_service",
    "get_homepage_service",
    "get_internal_link_service",
    "get_redirect_service",
    "get_settings_dependency",
    "get_site_files_service",
    "get_storefront_service",
    "require_admin",
]
