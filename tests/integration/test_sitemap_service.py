"""
Integration tests for sitemap generation from live content.

System role: Verification of which rows reach sitemap.xml
"""

from xml.etree import ElementTree

from tourbook.application.services.blog_service import BlogService
from tourbook.application.services.catalog_service import CatalogService
from tourbook.application.services.experience_service import ExperienceService
from tourbook.application.services.site_files_service import SiteFilesService
from tourbook.core.site_files import SITEMAP_NS
from tourbook.models.blog import CreateBlogPostRequest
from tourbook.models.city import CreateCityRequest
from tourbook.models.experience import CreateExperienceRequest


async def _sitemap_locs(db_session, site) -> list[str]:
    xml = await SiteFilesService(db=db_session, site=site).sitemap_xml()
    root = ElementTree.fromstring(xml)
    return [loc.text for loc in root.iter(f"{{{SITEMAP_NS}}}loc")]


async def test_public_rows_listed(db_session, site) -> None:
    tours = ExperienceService(db=db_session)
    await tours.create_experience(CreateExperienceRequest(title="Open Walk").model_dump())
    await tours.create_experience(CreateExperienceRequest(title="Draft Walk", status="draft").model_dump())
    await tours.create_experience(
        CreateExperienceRequest(title="Hidden Walk", robots_index=False).model_dump()
    )
    await CatalogService(db=db_session).create_city(CreateCityRequest(name="Te Anau").model_dump())
    blog = BlogService(db=db_session)
    await blog.create_post(CreateBlogPostRequest(title="Live Post", published=True).model_dump())
    await blog.create_post(CreateBlogPostRequest(title="Draft Post").model_dump())

    locs = await _sitemap_locs(db_session, site)

    assert "https://tours.example.com/tour/open-walk" in locs
    assert "https://tours.example.com/destinations/te-anau" in locs
    assert "https://tours.example.com/travel-guide/live-post" in locs
    assert "https://tours.example.com/tour/draft-walk" not in locs
    assert "https://tours.example.com/tour/hidden-walk" not in locs
    assert "https://tours.example.com/travel-guide/draft-post" not in locs


async def test_empty_site_lists_fixed_pages(db_session, site) -> None:
    locs = await _sitemap_locs(db_session, site)

    assert "https://tours.example.com/" in locs
    assert "https://tours.example.com/tours" in locs
