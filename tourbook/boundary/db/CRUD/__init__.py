"""
CRUD operations for database models.

Exports base CRUD classes and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from tourbook.boundary.db.CRUD import experience_crud, faq_crud

    # Use singleton instances
    tour = await experience_crud.get_by_slug(db, "fiordland-cruise")

    # Or instantiate classes directly for custom behavior
    from tourbook.boundary.db.CRUD import ExperienceCRUD
    custom_crud = ExperienceCRUD()
"""

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD, SlugCRUD
from tourbook.boundary.db.CRUD.category_crud import (
    CategoryCRUD,
    SubcategoryCRUD,
    category_crud,
    subcategory_crud,
)
from tourbook.boundary.db.CRUD.city_crud import CityCRUD, city_crud
from tourbook.boundary.db.CRUD.experience_crud import ExperienceCRUD, experience_crud
from tourbook.boundary.db.CRUD.blog_crud import (
    BlogCategoryCRUD,
    BlogPostCRUD,
    GuideItemCRUD,
    GuideSectionCRUD,
    blog_category_crud,
    blog_post_crud,
    guide_item_crud,
    guide_section_crud,
)
from tourbook.boundary.db.CRUD.faq_crud import FAQCRUD, faq_crud
from tourbook.boundary.db.CRUD.homepage_crud import (
    HomepageSettingCRUD,
    HomepageStatCRUD,
    TestimonialCRUD,
    homepage_setting_crud,
    homepage_stat_crud,
    testimonial_crud,
)
from tourbook.boundary.db.CRUD.internal_link_crud import (
    InternalLinkCRUD,
    InternalLinkSectionCRUD,
    internal_link_crud,
    internal_link_section_crud,
)
from tourbook.boundary.db.CRUD.redirect_crud import SlugRedirectCRUD, slug_redirect_crud
from tourbook.boundary.db.CRUD.cart_crud import CartItemCRUD, cart_item_crud

__all__ = [
    "BaseCRUD",
    "SlugCRUD",
    "CategoryCRUD",
    "SubcategoryCRUD",
    "CityCRUD",
    "ExperienceCRUD",
    "BlogCategoryCRUD",
    "BlogPostCRUD",
    "GuideSectionCRUD",
    "GuideItemCRUD",
    "FAQCRUD",
    "HomepageSettingCRUD",
    "HomepageStatCRUD",
    "TestimonialCRUD",
    "InternalLinkSectionCRUD",
    "InternalLinkCRUD",
    "SlugRedirectCRUD",
    "CartItemCRUD",
    "category_crud",
    "subcategory_crud",
    "city_crud",
    "experience_crud",
    "blog_category_crud",
    "blog_post_crud",
    "guide_section_crud",
    "guide_item_crud",
    "faq_crud",
    "homepage_setting_crud",
    "homepage_stat_crud",
    "testimonial_crud",
    "internal_link_section_crud",
    "internal_link_crud",
    "slug_redirect_crud",
    "cart_item_crud",
]
