"""
Crawler file service.

Dependencies: tourbook.boundary.db.CRUD, tourbook.core.site_files
System role: robots.txt and sitemap.xml generation
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.blog_crud import blog_post_crud
from tourbook.boundary.db.CRUD.category_crud import category_crud
from tourbook.boundary.db.CRUD.city_crud import city_crud
from tourbook.boundary.db.CRUD.experience_crud import experience_crud
from tourbook.configs.site import SiteSettings
from tourbook.core.redirects import ContentType, public_path
from tourbook.core.site_files import (
    SitemapEntry,
    render_robots_txt,
    render_sitemap,
    static_entries,
)

logger = logging.getLogger(__name__)


def _indexable(row) -> bool:
    return getattr(row, "robots_index", None) is not False


class SiteFilesService:
    """Builds the crawler-facing files from live content."""

    def __init__(self, db: AsyncSession, site: SiteSettings) -> None:
        self.db = db
        self.site = site

    def robots_txt(self) -> str:
        return render_robots_txt(self.site)

    async def sitemap_xml(self) -> str:
        """
        Sitemap of the fixed pages plus every public row.

        Active tours, categories, cities and published posts are listed;
        rows marked ``robots_index = false`` are left out.

        Returns:
            str: XML document
        """
        entries = static_entries()
        for row in await experience_crud.get_active(self.db):
            if _indexable(row):
                entries.append(SitemapEntry(
                    path=public_path(ContentType.EXPERIENCES.value, row.slug),
                    lastmod=row.updated_at,
                    changefreq="weekly",
                    priority=0.8,
                ))
        for row in await category_crud.get_all(self.db):
            entries.append(SitemapEntry(
                path=public_path(ContentType.CATEGORIES.value, row.slug),
                lastmod=row.updated_at,
                changefreq="weekly",
                priority=0.7,
            ))
        for row in await city_crud.get_all(self.db):
            entries.append(SitemapEntry(
                path=f"/destinations/{row.slug}",
                lastmod=row.updated_at,
                changefreq="weekly",
                priority=0.7,
            ))
        for row in await blog_post_crud.get_published(self.db):
            if _indexable(row):
                entries.append(SitemapEntry(
                    path=public_path(ContentType.BLOG_POSTS.value, row.slug),
                    lastmod=row.updated_at or row.published_at,
                    changefreq="monthly",
                    priority=0.6,
                ))
        logger.info("Sitemap generated", extra={"entries": len(entries)})
        return render_sitemap(self.site, entries)
