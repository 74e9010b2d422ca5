"""
Tests for robots.txt and sitemap.xml rendering.

System role: Verification of crawler-facing site files
"""

from datetime import datetime, timezone
from xml.etree import ElementTree

from tourbook.core.site_files import SITEMAP_NS, SitemapEntry, render_robots_txt, render_sitemap, static_entries


def test_robots_txt(site) -> None:
    robots = render_robots_txt(site)

    lines = robots.splitlines()
    assert lines[:2] == ["User-agent: *", "Allow: /"]
    assert "Disallow: /admin" in lines
    assert "Disallow: /api" in lines
    assert robots.endswith("Sitemap: https://tours.example.com/sitemap.xml\n")


def test_sitemap_lists_absolute_urls_once(site) -> None:
    entries = static_entries() + [
        SitemapEntry(
            path="/tour/cruise",
            lastmod=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
            changefreq="weekly",
            priority=0.8,
        ),
        SitemapEntry(path="/tours"),
    ]

    xml = render_sitemap(site, entries)

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    root = ElementTree.fromstring(xml.split("\n", 1)[1])
    ns = {"sm": SITEMAP_NS}
    locs = [loc.text for loc in root.findall("sm:url/sm:loc", ns)]
    assert locs.count("https://tours.example.com/tours") == 1
    assert "https://tours.example.com/tour/cruise" in locs

    tour = root.findall("sm:url", ns)[locs.index("https://tours.example.com/tour/cruise")]
    assert tour.find("sm:lastmod", ns).text == "2024-05-01"
    assert tour.find("sm:priority", ns).text == "0.8"
