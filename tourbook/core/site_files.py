"""
robots.txt and sitemap.xml rendering.

Dependencies: xml.etree (stdlib), tourbook.configs.site
System role: Crawler-facing site files
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable
from xml.etree import ElementTree

from tourbook.configs.site import SiteSettings

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

STATIC_PAGES: tuple[tuple[str, str, float], ...] = (
    ("/", "daily", 1.0),
    ("/tours", "daily", 0.9),
    ("/destinations", "weekly", 0.8),
    ("/travel-guide", "weekly", 0.8),
    ("/about", "monthly", 0.5),
)


@dataclass(frozen=True)
class SitemapEntry:
    """One ``<url>`` element."""

    path: str
    lastmod: datetime | None = None
    changefreq: str | None = None
    priority: float | None = None


def render_robots_txt(site: SiteSettings) -> str:
    """Crawler rules: allow everything except the configured private paths."""
    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {path}" for path in site.robots_disallow)
    lines.append("")
    lines.append(f"Sitemap: {site.base_url}/sitemap.xml")
    return "\n".join(lines) + "\n"


def static_entries() -> list[SitemapEntry]:
    """Entries for the fixed storefront pages."""
    return [
        SitemapEntry(path=path, changefreq=freq, priority=priority)
        for path, freq, priority in STATIC_PAGES
    ]


def render_sitemap(site: SiteSettings, entries: Iterable[SitemapEntry]) -> str:
    """
    Render a sitemap document.

    Args:
        site: Site settings providing the absolute base URL
        entries: Pages to list; duplicates by path are emitted once

    Returns:
        str: XML document with declaration
    """
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
    seen: set[str] = set()
    for entry in entries:
        if entry.path in seen:
            continue
        seen.add(entry.path)
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = f"{site.base_url}{entry.path}"
        if entry.lastmod is not None:
            ElementTree.SubElement(url, "lastmod").text = entry.lastmod.date().isoformat()
        if entry.changefreq:
            ElementTree.SubElement(url, "changefreq").text = entry.changefreq
        if entry.priority is not None:
            ElementTree.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    body = ElementTree.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
