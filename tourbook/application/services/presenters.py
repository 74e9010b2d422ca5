"""
Row-to-payload presenters.

Build the dicts services hand to the API layer: full rows with related
names, and the storefront card shapes with their display fallbacks.

Dependencies: tourbook.core, tourbook.configs.site
System role: Presentation mapping shared by admin and storefront services
"""

from typing import Any, Iterable

from tourbook.application.services.service_utils import name_of, row_to_dict
from tourbook.configs.site import SiteSettings
from tourbook.core.formatting import excerpt, split_paragraphs
from tourbook.core.guides import order_guide_items, visible_sections
from tourbook.core.redirects import ContentType, public_path

FALLBACK_SHORT_DESCRIPTION = "Experience description"


def experience_to_dict(row: Any) -> dict[str, Any]:
    """Full tour row with city, category and subcategory names."""
    data = row_to_dict(row)
    data["city_name"] = name_of(row.city)
    data["category_name"] = name_of(row.category)
    data["subcategory_name"] = name_of(row.subcategory)
    return data


def experience_card(row: Any, site: SiteSettings) -> dict[str, Any]:
    """
    Tour card for listings.

    Falls back to the long description (then a placeholder) for the summary
    and to the site's default image when the tour has no main image.
    """
    return {
        "id": row.id,
        "title": row.title,
        "slug": row.slug,
        "url": public_path(ContentType.EXPERIENCES.value, row.slug),
        "short_description": row.short_description or row.description or FALLBACK_SHORT_DESCRIPTION,
        "price": row.price or 0,
        "original_price": row.original_price,
        "currency": row.currency or "USD",
        "image_url": row.main_image_url or site.default_tour_image,
        "rating": row.rating,
        "review_count": row.review_count or 0,
        "duration": row.duration,
        "city_name": name_of(row.city),
        "category_name": name_of(row.category),
        "featured": bool(row.featured),
        "bestseller": bool(row.bestseller),
    }


def blog_post_to_dict(row: Any) -> dict[str, Any]:
    """Full post row with its category name."""
    data = row_to_dict(row)
    data["category_name"] = name_of(row.category)
    return data


def blog_post_card(row: Any) -> dict[str, Any]:
    """Post card for the travel guide listing; excerpt falls back to the body."""
    return {
        "id": row.id,
        "title": row.title,
        "slug": row.slug,
        "url": public_path(ContentType.BLOG_POSTS.value, row.slug),
        "excerpt": row.excerpt or excerpt(row.content),
        "featured_image": row.featured_image,
        "category_name": name_of(row.category),
        "category_slug": name_of(row.category, "slug"),
        "featured": bool(row.featured),
        "published_at": row.published_at,
        "read_time_minutes": row.read_time_minutes or 5,
    }


def guide_section_to_dict(section: Any) -> dict[str, Any]:
    """Admin view of a section: every item, stored order."""
    data = row_to_dict(section)
    data["items"] = [row_to_dict(item) for item in section.items]
    return data


def guide_section_views(sections: Iterable[Any]) -> list[dict[str, Any]]:
    """Storefront view: enabled sections, paragraphs split, items by importance."""
    return [
        {
            "id": section.id,
            "section_title": section.section_title,
            "section_type": section.section_type,
            "paragraphs": split_paragraphs(section.content),
            "items": [row_to_dict(item) for item in order_guide_items(section.items)],
        }
        for section in visible_sections(sections)
    ]


def link_section_to_dict(section: Any, enabled_links_only: bool = False) -> dict[str, Any]:
    """Link section with its links by display_order."""
    data = row_to_dict(section)
    links = sorted(section.links, key=lambda link: link.display_order or 0)
    if enabled_links_only:
        links = [link for link in links if link.enabled]
    data["links"] = [row_to_dict(link) for link in links]
    return data
