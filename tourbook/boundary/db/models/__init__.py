"""
Database models package.

Exports every ORM model so importing this package registers all tables
with Base.metadata.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Database model definitions for domain entities
"""

from tourbook.boundary.db.models.category_model import CategoryModel, SubcategoryModel
from tourbook.boundary.db.models.city_model import CityModel
from tourbook.boundary.db.models.experience_model import ExperienceModel
from tourbook.boundary.db.models.blog_model import (
    BlogCategoryModel,
    BlogPostModel,
    GuideItemModel,
    GuideSectionModel,
)
from tourbook.boundary.db.models.faq_model import FAQModel
from tourbook.boundary.db.models.homepage_model import (
    HomepageSettingModel,
    HomepageStatModel,
    TestimonialModel,
)
from tourbook.boundary.db.models.internal_link_model import (
    InternalLinkModel,
    InternalLinkSectionModel,
    LinkContextType,
)
from tourbook.boundary.db.models.redirect_model import SlugRedirectModel
from tourbook.boundary.db.models.cart_model import CartItemModel

__all__ = [
    "CategoryModel",
    "SubcategoryModel",
    "CityModel",
    "ExperienceModel",
    "BlogCategoryModel",
    "BlogPostModel",
    "GuideSectionModel",
    "GuideItemModel",
    "FAQModel",
    "HomepageSettingModel",
    "HomepageStatModel",
    "TestimonialModel",
    "InternalLinkSectionModel",
    "InternalLinkModel",
    "LinkContextType",
    "SlugRedirectModel",
    "CartItemModel",
]
