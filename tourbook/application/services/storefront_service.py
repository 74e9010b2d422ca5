"""
Storefront page composition.

Each public page is assembled here from several independent reads: the
row the URL names, the listings shown with it, link blocks, and the head
metadata with its structured data. Lookups by slug fall back to the
stored redirects so renamed content keeps answering at its old URL.

Dependencies: tourbook.boundary.db.CRUD, tourbook.core, tourbook.configs.site
System role: Storefront use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.presenters import (
    blog_post_card,
    blog_post_to_dict,
    experience_card,
    experience_to_dict,
    guide_section_views,
    link_section_to_dict,
)
from tourbook.application.services.service_utils import name_of, row_to_dict, rows_to_dicts
from tourbook.boundary.db.CRUD.blog_crud import blog_category_crud, blog_post_crud
from tourbook.boundary.db.CRUD.category_crud import category_crud, subcategory_crud
from tourbook.boundary.db.CRUD.city_crud import city_crud
from tourbook.boundary.db.CRUD.experience_crud import experience_crud
from tourbook.boundary.db.CRUD.faq_crud import faq_crud
from tourbook.boundary.db.CRUD.homepage_crud import (
    homepage_setting_crud,
    homepage_stat_crud,
    testimonial_crud,
)
from tourbook.boundary.db.CRUD.internal_link_crud import internal_link_section_crud
from tourbook.boundary.db.CRUD.redirect_crud import slug_redirect_crud
from tourbook.boundary.db.models.internal_link_model import LinkContextType
from tourbook.configs.site import SiteSettings
from tourbook.core.exceptions import NotFoundError, SlugMovedError
from tourbook.core.formatting import format_stat_value, split_paragraphs
from tourbook.core.listings import (
    ResultType,
    SearchResult,
    filter_results,
    sort_results,
    split_featured,
)
from tourbook.core.redirects import ContentType, base_path, public_path
from tourbook.core.seo import build_page_metadata
from tourbook.core.structured_data import (
    combine_structured_data,
    generate_structured_data,
    global_structured_data,
)

logger = logging.getLogger(__name__)

HERO_SECTION = "hero_section"
FAQ_SECTION = "faq_section"

HOMEPAGE_FEATURED_LIMIT = 6
HOMEPAGE_TESTIMONIAL_LIMIT = 6
HOMEPAGE_STAT_LIMIT = 4
RELATED_POST_LIMIT = 3

DEFAULT_HIGHLIGHTS = (
    "Professional guided experience",
    "Skip-the-line access where available",
    "Audio guide in multiple languages",
    "Small group experience",
    "Expert local knowledge",
    "Memorable photo opportunities",
)


class StorefrontService:
    """
    Storefront page composer.

    Every public method returns the dict for one page schema in
    ``tourbook.models.pages`` (or ``tourbook.models.search``).
    """

    def __init__(self, db: AsyncSession, site: SiteSettings) -> None:
        """
        Initialize storefront service.

        Args:
            db: Async SQLAlchemy session
            site: Site identity used for titles, URLs and structured data
        """
        self.db = db
        self.site = site

    # Helpers

    def _url(self, path: str) -> str:
        return f"{self.site.base_url}{path}"

    def _crumbs(self, *trail: tuple[str, str]) -> list[dict[str, str]]:
        """Home followed by ``(name, path)`` pairs, as absolute URLs."""
        crumbs = [{"name": "Home", "url": self.site.base_url}]
        crumbs.extend({"name": name, "url": self._url(path)} for name, path in trail)
        return crumbs

    def _cards(self, rows) -> list[dict[str, Any]]:
        return [experience_card(row, self.site) for row in rows]

    async def _moved_or_missing(self, content_type: str, resource: str, slug: str) -> None:
        """
        Raise for a slug that no longer resolves.

        Raises:
            SlugMovedError: If a stored redirect knows where the content went
            NotFoundError: Otherwise
        """
        redirect = await slug_redirect_crud.get_by_old_slug(self.db, content_type, slug)
        if redirect is not None:
            logger.info(
                "Slug moved",
                extra={"content_type": content_type, "old_slug": slug, "new_slug": redirect.new_slug},
            )
            raise SlugMovedError(content_type, slug, redirect.new_slug, redirect.permanent)
        raise NotFoundError(resource, slug)

    async def _link_sections(self, context_type: str, context_id: UUID | None = None) -> list[dict]:
        sections = await internal_link_section_crud.get_by_context(
            self.db, context_type, context_id, enabled_only=True
        )
        return [link_section_to_dict(section, enabled_links_only=True) for section in sections]

    async def _block(self, section_name: str):
        """Stored homepage block, None when missing or switched off."""
        row = await homepage_setting_crud.get_by_section_name(self.db, section_name)
        if row is None or not row.enabled:
            return None
        return row

    # Pages

    async def home(self) -> dict:
        """
        Compose the homepage.

        Returns:
            dict: HomePage fields
        """
        try:
            site = self.site
            hero_row = await self._block(HERO_SECTION)
            hero = {
                "title": getattr(hero_row, "title", None) or site.hero_title,
                "subtitle": getattr(hero_row, "subtitle", None) or site.hero_subtitle,
                "description": getattr(hero_row, "description", None) or site.hero_description,
                "button_text": getattr(hero_row, "button_text", None) or site.hero_button_text,
                "button_link": getattr(hero_row, "button_link", None) or site.hero_button_link,
                "background_image": getattr(hero_row, "background_image", None),
            }
            faq_row = await self._block(FAQ_SECTION)
            faq_section = {
                "title": getattr(faq_row, "title", None) or site.faq_title,
                "subtitle": getattr(faq_row, "subtitle", None) or site.faq_subtitle,
            }

            categories = await category_crud.get_featured(self.db)
            featured = await experience_crud.get_featured_active(
                self.db, limit=HOMEPAGE_FEATURED_LIMIT
            )
            faqs = await faq_crud.get_enabled(self.db)
            testimonials = await testimonial_crud.get_featured(
                self.db, limit=HOMEPAGE_TESTIMONIAL_LIMIT
            )
            stats = await homepage_stat_crud.get_all(self.db, limit=HOMEPAGE_STAT_LIMIT)
            link_sections = await self._link_sections(LinkContextType.HOMEPAGE.value)

            faq_schema = generate_structured_data(
                "FAQPage",
                {"faqs": [{"question": faq.question, "answer": faq.answer} for faq in faqs]},
            )
            metadata = build_page_metadata(
                None,
                url=site.base_url,
                default_title=f"{site.short_name} - Tours, Activities & Experiences",
                description_candidates=[site.description],
                image=hero["background_image"],
                site_name=site.short_name,
                structured_data=combine_structured_data(
                    *global_structured_data(site), *faq_schema
                ),
            )
            return {
                "hero": hero,
                "categories": rows_to_dicts(categories),
                "featured_experiences": self._cards(featured),
                "faq_section": faq_section,
                "faqs": rows_to_dicts(faqs),
                "testimonials": rows_to_dicts(testimonials),
                "stats": [
                    {
                        "label": stat.label,
                        "value": stat.value,
                        "display_value": format_stat_value(stat.label, stat.value),
                    }
                    for stat in stats
                ],
                "link_sections": link_sections,
                "metadata": metadata,
            }
        except Exception as e:
            logger.error("Failed to compose homepage", extra={"error": str(e)})
            raise

    async def tours(self) -> dict:
        """All active tours, featured first then highest rated."""
        rows = await experience_crud.get_active(self.db)
        site = self.site
        metadata = build_page_metadata(
            None,
            url=self._url("/tours"),
            default_title=f"Unforgettable Tours - {site.short_name}",
            description_candidates=[
                f"Discover amazing tours and experiences in {site.destination_name}."
            ],
            image=site.default_tour_image,
            image_alt=f"{site.short_name} Tours",
            site_name=site.short_name,
        )
        return {"experiences": self._cards(rows), "total": len(rows), "metadata": metadata}

    async def tour_detail(self, slug: str) -> dict:
        """
        Compose a tour page.

        Raises:
            SlugMovedError: If the tour was renamed
            NotFoundError: If no active tour has the slug
        """
        row = await experience_crud.get_active_by_slug(self.db, slug)
        if row is None:
            await self._moved_or_missing(ContentType.EXPERIENCES.value, "Experience", slug)

        site = self.site
        path = public_path(ContentType.EXPERIENCES.value, row.slug)
        url = self._url(path)
        image = row.main_image_url or site.default_tour_image
        category_name = name_of(row.category)
        city_name = name_of(row.city)

        breadcrumbs = self._crumbs(("Tours", "/tours"), (row.title, path))
        product = generate_structured_data(
            "Product",
            {
                "id": row.id,
                "title": row.title,
                "description": row.short_description or row.description,
                "image_url": image,
                "url": url,
                "category": category_name or "Experience",
                "brand": site.name,
                "price": row.price,
                "currency": row.currency,
                "rating": row.rating,
                "review_count": row.review_count,
                "duration": row.duration,
                "location": city_name or "Unknown",
            },
            override=row.custom_json_ld,
        )
        breadcrumb_schema = generate_structured_data("BreadcrumbList", {"breadcrumbs": breadcrumbs})
        metadata = build_page_metadata(
            row,
            url=url,
            default_title=f"{row.title} - {site.short_name}",
            description_candidates=[row.short_description, row.description],
            image=image,
            image_alt=f"{row.title} image",
            og_type="product",
            site_name=site.short_name,
            structured_data=combine_structured_data(*product, *breadcrumb_schema),
            last_modified=row.updated_at,
        )
        return {
            "experience": experience_to_dict(row),
            "highlights": list(row.highlights or DEFAULT_HIGHLIGHTS),
            "description_paragraphs": split_paragraphs(row.description),
            "image_url": image,
            "breadcrumbs": breadcrumbs,
            "link_sections": await self._link_sections(LinkContextType.EXPERIENCE.value, row.id),
            "metadata": metadata,
        }

    async def category(self, slug: str) -> dict:
        """
        Compose a category page.

        Raises:
            SlugMovedError: If the category was renamed
            NotFoundError: If no category has the slug
        """
        row = await category_crud.get_by_slug(self.db, slug)
        if row is None:
            await self._moved_or_missing(ContentType.CATEGORIES.value, "Category", slug)

        path = public_path(ContentType.CATEGORIES.value, row.slug)
        subcategories = await subcategory_crud.get_by_category(self.db, row.id)
        experiences = await experience_crud.get_active_for(self.db, category_id=row.id)
        breadcrumbs = self._crumbs((row.name, path))
        metadata = build_page_metadata(
            None,
            url=self._url(path),
            default_title=f"{row.name} Tours | {self.site.short_name}",
            description_candidates=[
                row.description,
                f"Discover amazing {row.name.lower()} experiences in {self.site.destination_name}",
            ],
            image=row.image_url,
            site_name=self.site.short_name,
            structured_data=generate_structured_data("BreadcrumbList", {"breadcrumbs": breadcrumbs}),
        )
        return {
            "category": row_to_dict(row),
            "subcategories": rows_to_dicts(subcategories),
            "experiences": self._cards(experiences),
            "breadcrumbs": breadcrumbs,
            "metadata": metadata,
        }

    async def subcategory(self, slug: str) -> dict:
        """
        Compose a subcategory page.

        Raises:
            NotFoundError: If no subcategory has the slug
        """
        row = await subcategory_crud.get_by_slug(self.db, slug)
        if row is None:
            raise NotFoundError("Subcategory", slug)

        parent = row.category
        trail = []
        if parent is not None:
            trail.append((parent.name, public_path(ContentType.CATEGORIES.value, parent.slug)))
        path = f"/subcategory/{row.slug}"
        trail.append((row.name, path))
        breadcrumbs = self._crumbs(*trail)
        experiences = await experience_crud.get_active_for(self.db, subcategory_id=row.id)
        metadata = build_page_metadata(
            None,
            url=self._url(path),
            default_title=f"{row.name} Tours | {self.site.short_name}",
            description_candidates=[
                row.description,
                f"Discover amazing {row.name.lower()} experiences in {self.site.destination_name}",
            ],
            image=row.image_url,
            site_name=self.site.short_name,
            structured_data=generate_structured_data("BreadcrumbList", {"breadcrumbs": breadcrumbs}),
        )
        return {
            "subcategory": row_to_dict(row),
            "category": row_to_dict(parent) if parent is not None else None,
            "experiences": self._cards(experiences),
            "breadcrumbs": breadcrumbs,
            "metadata": metadata,
        }

    async def destinations(self) -> dict:
        """All cities, featured first then by name."""
        rows = await city_crud.get_destinations(self.db)
        metadata = build_page_metadata(
            None,
            url=self._url("/destinations"),
            default_title=f"Destinations | {self.site.short_name}",
            description_candidates=["Explore top destinations and the experiences they offer"],
            site_name=self.site.short_name,
        )
        return {"cities": rows_to_dicts(rows), "metadata": metadata}

    async def destination(self, slug: str) -> dict:
        """
        Compose a city page.

        Raises:
            NotFoundError: If no city has the slug
        """
        row = await city_crud.get_by_slug(self.db, slug)
        if row is None:
            raise NotFoundError("City", slug)

        path = f"/destinations/{row.slug}"
        breadcrumbs = self._crumbs(("Destinations", "/destinations"), (row.name, path))
        experiences = await experience_crud.get_active_for(self.db, city_id=row.id)
        metadata = build_page_metadata(
            None,
            url=self._url(path),
            default_title=f"Things to do in {row.name} | {self.site.short_name}",
            description_candidates=[
                row.description,
                f"Discover the best tours and experiences in {row.name}",
            ],
            image=row.image_url,
            site_name=self.site.short_name,
            structured_data=generate_structured_data("BreadcrumbList", {"breadcrumbs": breadcrumbs}),
        )
        return {
            "city": row_to_dict(row),
            "experiences": self._cards(experiences),
            "breadcrumbs": breadcrumbs,
            "metadata": metadata,
        }

    async def travel_guide(self, category_slug: str | None = None) -> dict:
        """
        Compose the travel guide listing.

        Args:
            category_slug: Optional blog category filter

        Raises:
            NotFoundError: If the category filter names no blog category
        """
        category_id = None
        if category_slug:
            category = await blog_category_crud.get_by_slug(self.db, category_slug)
            if category is None:
                raise NotFoundError("Blog category", category_slug)
            category_id = category.id

        posts = await blog_post_crud.get_published(self.db, category_id=category_id)
        featured, regular = split_featured(posts)
        categories = await blog_category_crud.get_all(self.db)
        metadata = build_page_metadata(
            None,
            url=self._url(base_path(ContentType.BLOG_POSTS.value)),
            default_title=f"Travel Guide - {self.site.short_name}",
            description_candidates=[
                f"Tips, itineraries and local knowledge for visiting {self.site.destination_name}"
            ],
            site_name=self.site.short_name,
        )
        return {
            "featured_posts": [blog_post_card(post) for post in featured],
            "posts": [blog_post_card(post) for post in regular],
            "categories": rows_to_dicts(categories),
            "active_category": category_slug or None,
            "metadata": metadata,
        }

    async def travel_guide_post(self, slug: str) -> dict:
        """
        Compose a travel guide post.

        Raises:
            SlugMovedError: If the post was renamed
            NotFoundError: If no published post has the slug
        """
        post = await blog_post_crud.get_published_by_slug(self.db, slug)
        if post is None:
            await self._moved_or_missing(ContentType.BLOG_POSTS.value, "Blog post", slug)

        site = self.site
        path = public_path(ContentType.BLOG_POSTS.value, post.slug)
        url = self._url(path)
        category_name = name_of(post.category)
        related = await blog_post_crud.get_related(self.db, post.id, limit=RELATED_POST_LIMIT)

        breadcrumbs = self._crumbs(("Travel Guide", "/travel-guide"), (post.title, path))
        posting = generate_structured_data(
            "BlogPosting",
            {
                "title": post.title,
                "excerpt": post.excerpt,
                "featured_image": post.featured_image,
                "url": url,
                "published_date": post.published_at.isoformat() if post.published_at else None,
                "updated_date": post.updated_at.isoformat() if post.updated_at else None,
                "category": category_name or "Blog",
                "author": site.blog_author,
                "publisher": site.name,
                "publisher_logo": site.logo,
            },
            override=post.custom_json_ld,
        )
        breadcrumb_schema = generate_structured_data("BreadcrumbList", {"breadcrumbs": breadcrumbs})
        metadata = build_page_metadata(
            post,
            url=url,
            default_title=f"{post.title} - {site.short_name} Blog",
            description_candidates=[post.excerpt, post.content],
            image=post.featured_image,
            image_alt=f"{post.title} - Blog Post Image",
            og_type="article",
            site_name=site.short_name,
            structured_data=combine_structured_data(*posting, *breadcrumb_schema),
            last_modified=post.updated_at,
        )
        return {
            "post": blog_post_to_dict(post),
            "paragraphs": split_paragraphs(post.content),
            "guide_sections": guide_section_views(post.guide_sections),
            "related_posts": [blog_post_card(other) for other in related],
            "breadcrumbs": breadcrumbs,
            "link_sections": await self._link_sections(LinkContextType.BLOG_POST.value, post.id),
            "metadata": metadata,
        }

    async def search(
        self,
        query: str,
        result_type: str = "all",
        price_range: str | None = None,
        sort: str = "relevance",
    ) -> dict:
        """
        Search tours, categories and destinations.

        Args:
            query: Free text; blank returns no results
            result_type: ``all``, ``experience``, ``category`` or ``destination``
            price_range: Optional price band ("0-25", "25-50", "50-100", "100+")
            sort: relevance, price-low, price-high, rating or popular

        Returns:
            dict: SearchPage fields; ``counts`` are per type before filtering

        Raises:
            ValidationError: If type, price_range or sort is unknown
        """
        query = (query or "").strip()
        results: list[SearchResult] = []
        if query:
            for row in await experience_crud.search(self.db, query):
                results.append(SearchResult(
                    type=ResultType.EXPERIENCE,
                    title=row.title,
                    slug=row.slug,
                    url=public_path(ContentType.EXPERIENCES.value, row.slug),
                    subtitle=name_of(row.city),
                    image_url=row.main_image_url or self.site.default_tour_image,
                    price=row.price,
                    rating=row.rating,
                    review_count=row.review_count,
                    featured=bool(row.featured),
                ))
            for row in await category_crud.search(self.db, query):
                results.append(SearchResult(
                    type=ResultType.CATEGORY,
                    title=row.name,
                    slug=row.slug,
                    url=public_path(ContentType.CATEGORIES.value, row.slug),
                    subtitle=row.description,
                    image_url=row.image_url,
                    featured=bool(row.featured),
                ))
            for row in await city_crud.search(self.db, query):
                results.append(SearchResult(
                    type=ResultType.DESTINATION,
                    title=row.name,
                    slug=row.slug,
                    url=f"/destinations/{row.slug}",
                    subtitle=row.country,
                    image_url=row.image_url,
                    featured=bool(row.featured),
                ))

        counts = {kind.value: 0 for kind in ResultType}
        for result in results:
            counts[result.type.value] += 1
        narrowed = sort_results(filter_results(results, result_type, price_range), sort)
        logger.info(
            "Search executed",
            extra={"query": query, "type": result_type, "hits": len(narrowed)},
        )
        return {
            "query": query,
            "type": result_type or "all",
            "price_range": price_range,
            "sort": sort,
            "total": len(narrowed),
            "counts": counts,
            "results": [
                {
                    "type": result.type.value,
                    "title": result.title,
                    "slug": result.slug,
                    "url": result.url,
                    "subtitle": result.subtitle,
                    "image_url": result.image_url,
                    "price": result.price,
                    "rating": result.rating,
                    "review_count": result.review_count,
                    "featured": result.featured,
                }
                for result in narrowed
            ],
        }
