"""
Dependency injection container.

Factory functions for FastAPI dependencies: one service per request
bound to the request's database session, plus the admin key check and
the visitor identity used by the cart.

Dependencies: tourbook.configs, tourbook.application, tourbook.boundary
System role: DI container for service injection
"""

import logging
import secrets

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services import (
    BlogService,
    CartService,
    CatalogService,
    ExperienceService,
    FAQService,
    HomepageService,
    InternalLinkService,
    RedirectService,
    SiteFilesService,
    StorefrontService,
)
from tourbook.boundary.db import get_async_db
from tourbook.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_settings_dependency() -> Settings:
    """
    Get application settings.

    Returns:
        Settings: Cached settings instance
    """
    return get_settings()


def require_admin(
    x_admin_key: str | None = Header(default=None),
    settings: Settings = Depends(get_settings_dependency),
) -> None:
    """
    Guard admin routes with the ``X-Admin-Key`` header.

    When ``ADMIN_API_KEY`` is unset the admin API is open (demo mode).

    Raises:
        HTTPException(401): Missing or wrong key
    """
    expected = settings.admin.api_key
    if not expected:
        return
    if x_admin_key is None or not secrets.compare_digest(x_admin_key, expected):
        logger.warning("Rejected admin request", extra={"has_key": x_admin_key is not None})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing admin key",
        )


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Visitor identity for the cart, taken from ``X-User-Id``.

    Raises:
        HTTPException(401): Header missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header is required",
        )
    return x_user_id.strip()


def get_catalog_service(db: AsyncSession = Depends(get_async_db)) -> CatalogService:
    """
    Get catalog service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CatalogService: Category, subcategory and city service
    """
    return CatalogService(db=db)


def get_experience_service(db: AsyncSession = Depends(get_async_db)) -> ExperienceService:
    """
    Get experience service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ExperienceService: Tour admin service
    """
    return ExperienceService(db=db)


def get_blog_service(db: AsyncSession = Depends(get_async_db)) -> BlogService:
    """Get travel guide service instance."""
    return BlogService(db=db)


def get_faq_service(db: AsyncSession = Depends(get_async_db)) -> FAQService:
    return FAQService(db=db)


def get_homepage_service(db: AsyncSession = Depends(get_async_db)) -> HomepageService:
    return HomepageService(db=db)


def get_internal_link_service(db: AsyncSession = Depends(get_async_db)) -> InternalLinkService:
    return InternalLinkService(db=db)


def get_redirect_service(db: AsyncSession = Depends(get_async_db)) -> RedirectService:
    return RedirectService(db=db)


def get_cart_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CartService:
    """
    Get cart service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        CartService: Cart service using the site's default tour image
    """
    return CartService(db=db, site=settings.site)


def get_storefront_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> StorefrontService:
    """
    Get storefront page composer.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        StorefrontService: Page composer bound to the site identity
    """
    return StorefrontService(db=db, site=settings.site)


def get_site_files_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> SiteFilesService:
    return SiteFilesService(db=db, site=settings.site)
