"""
Application services.

Use case orchestrators sitting between the HTTP routers and the CRUD
layer. Each takes a request-scoped AsyncSession.
"""

from tourbook.application.services.blog_service import BlogService
from tourbook.application.services.cart_service import CartService
from tourbook.application.services.catalog_service import CatalogService
from tourbook.application.services.experience_service import ExperienceService
from tourbook.application.services.faq_service import FAQService
from tourbook.application.services.homepage_service import HomepageService
from tourbook.application.services.internal_link_service import InternalLinkService
from tourbook.application.services.redirect_service import RedirectService
from tourbook.application.services.site_files_service import SiteFilesService
from tourbook.application.services.storefront_service import StorefrontService

__all__ = [
    "BlogService",
    "CartService",
    "CatalogService",
    "ExperienceService",
    "FAQService",
    "HomepageService",
    "InternalLinkService",
    "RedirectService",
    "SiteFilesService",
    "StorefrontService",
]
