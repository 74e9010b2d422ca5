"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, SeoMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ORM models for the catalog, travel guide, homepage, links, redirects and cart
  - CRUD singletons for each table

Dependencies: sqlalchemy, tourbook.configs
System role: Database adapter providing persistent storage for the storefront
and the admin CMS.
"""

from tourbook.boundary.db.base import Base, SeoMixin, TimestampMixin, UUIDMixin
from tourbook.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from tourbook.boundary.db.models import (
    BlogCategoryModel,
    BlogPostModel,
    CartItemModel,
    CategoryModel,
    CityModel,
    ExperienceModel,
    FAQModel,
    GuideItemModel,
    GuideSectionModel,
    HomepageSettingModel,
    HomepageStatModel,
    InternalLinkModel,
    InternalLinkSectionModel,
    LinkContextType,
    SlugRedirectModel,
    SubcategoryModel,
    TestimonialModel,
)

__all__ = [
    # Base classes
    "Base",
    "SeoMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "BlogCategoryModel",
    "BlogPostModel",
    "CartItemModel",
    "CategoryModel",
    "CityModel",
    "ExperienceModel",
    "FAQModel",
    "GuideItemModel",
    "GuideSectionModel",
    "HomepageSettingModel",
    "HomepageStatModel",
    "InternalLinkModel",
    "InternalLinkSectionModel",
    "LinkContextType",
    "SlugRedirectModel",
    "SubcategoryModel",
    "TestimonialModel",
]
