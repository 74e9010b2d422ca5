"""
Page metadata assembly.

Resolves the fallback chains between a row's editable SEO columns and its
regular content: the SEO title falls back to the display title, Open Graph
falls back to SEO, Twitter falls back to Open Graph, and images fall back
to the row's main image.

Dependencies: tourbook.models.seo
System role: SEO metadata for storefront pages
"""

from datetime import datetime
from typing import Any, Sequence

from tourbook.core.formatting import excerpt
from tourbook.models.seo import OpenGraph, PageMetadata, RobotsDirectives, TwitterCard


def _first(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


def resolve_robots(entity: Any) -> RobotsDirectives:
    """Robots directives from nullable columns; NULL keeps the permissive default."""
    index = getattr(entity, "robots_index", None)
    follow = getattr(entity, "robots_follow", None)
    nosnippet = getattr(entity, "robots_nosnippet", None)
    return RobotsDirectives(
        index=index is not False,
        follow=follow is not False,
        nosnippet=bool(nosnippet),
    )


def build_page_metadata(
    entity: Any,
    *,
    url: str,
    default_title: str,
    description_candidates: Sequence[str | None],
    image: str | None = None,
    image_alt: str | None = None,
    og_type: str = "website",
    site_name: str | None = None,
    structured_data: list[dict[str, Any]] | None = None,
    last_modified: datetime | None = None,
) -> PageMetadata:
    """
    Assemble head metadata for a row carrying the SEO columns.

    Args:
        entity: ORM row or any object exposing the SEO attributes (missing ones are None)
        url: Absolute page URL, used as canonical unless overridden
        default_title: Title when ``seo_title`` is empty
        description_candidates: Descriptions tried in order before ``seo_description``
            falls through; the last entry is cut to 160 characters
        image: Main image for social cards
        image_alt: Alt text when the row has none
        og_type: Open Graph type ("product", "article", "website")
        site_name: Open Graph site name
        structured_data: JSON-LD schemas for the page
        last_modified: Row modification time

    Returns:
        PageMetadata: Fully resolved metadata
    """
    def attr(name: str) -> Any:
        return getattr(entity, name, None)

    candidates = list(description_candidates)
    if candidates:
        candidates[-1] = excerpt(candidates[-1]) if candidates[-1] else None

    title = _first(attr("seo_title"), default_title) or default_title
    description = _first(attr("seo_description"), *candidates) or ""

    og_title = _first(attr("og_title"), title) or title
    og_description = _first(attr("og_description"), description) or description
    og_image = _first(attr("og_image"), image)
    og_image_alt = _first(attr("og_image_alt"), image_alt)

    robots = resolve_robots(entity)

    return PageMetadata(
        title=title,
        description=description,
        canonical=_first(attr("canonical_url"), url) or url,
        robots=robots,
        robots_content=robots.content,
        keywords=attr("seo_keywords"),
        open_graph=OpenGraph(
            title=og_title,
            description=og_description,
            url=url,
            type=og_type,
            image=og_image,
            image_alt=og_image_alt,
            site_name=site_name,
        ),
        twitter=TwitterCard(
            title=_first(attr("twitter_title"), attr("og_title"), title) or title,
            description=_first(attr("twitter_description"), attr("og_description"), description) or description,
            image=_first(attr("twitter_image"), attr("og_image"), image),
            image_alt=_first(attr("twitter_image_alt"), attr("og_image_alt"), image_alt),
        ),
        structured_data=structured_data or [],
        last_modified=last_modified,
    )
