"""
Integration tests for storefront page composition.

System role: Verification of page payloads, fallbacks and moved slugs
"""

import pytest

from tourbook.application.services.blog_service import BlogService
from tourbook.application.services.catalog_service import CatalogService
from tourbook.application.services.experience_service import ExperienceService
from tourbook.application.services.faq_service import FAQService
from tourbook.application.services.homepage_service import HomepageService
from tourbook.application.services.internal_link_service import InternalLinkService
from tourbook.application.services.storefront_service import DEFAULT_HIGHLIGHTS, StorefrontService
from tourbook.core.exceptions import NotFoundError, SlugMovedError, ValidationError
from tourbook.models.blog import CreateBlogPostRequest
from tourbook.models.category import CreateCategoryRequest
from tourbook.models.city import CreateCityRequest
from tourbook.models.experience import CreateExperienceRequest
from tourbook.models.faq import CreateFAQRequest
from tourbook.models.guide import CreateGuideItemRequest, CreateGuideSectionRequest
from tourbook.models.homepage import CreateHomepageStatRequest, UpsertHomepageSettingRequest
from tourbook.models.internal_link import CreateLinkRequest, CreateLinkSectionRequest


@pytest.fixture
def storefront(db_session, site) -> StorefrontService:
    return StorefrontService(db=db_session, site=site)


@pytest.fixture
def tours(db_session) -> ExperienceService:
    return ExperienceService(db=db_session)


@pytest.fixture
def blog(db_session) -> BlogService:
    return BlogService(db=db_session)


async def _tour(tours: ExperienceService, title: str, **extra) -> dict:
    return await tours.create_experience(CreateExperienceRequest(title=title, **extra).model_dump())


class TestHomePage:
    async def test_empty_site_uses_built_in_copy(self, storefront, site) -> None:
        page = await storefront.home()

        assert page["hero"]["title"] == site.hero_title
        assert page["hero"]["button_link"] == "/tours"
        assert page["faq_section"]["title"] == site.faq_title
        assert page["featured_experiences"] == []
        assert page["metadata"].title == "Example - Tours, Activities & Experiences"
        assert page["metadata"].canonical == "https://tours.example.com"

    async def test_stored_blocks_and_content(self, storefront, db_session) -> None:
        homepage = HomepageService(db=db_session)
        await homepage.upsert_setting(
            "hero_section", UpsertHomepageSettingRequest(title="Fiordland awaits").model_dump()
        )
        await homepage.upsert_setting(
            "faq_section", UpsertHomepageSettingRequest(title="Hidden", enabled=False).model_dump()
        )
        await homepage.create_stat(
            CreateHomepageStatRequest(label="Happy Travellers", value=15000).model_dump()
        )
        faqs = FAQService(db=db_session)
        await faqs.create_faq(CreateFAQRequest(question="Is lunch included?", answer="Yes.").model_dump())
        await faqs.create_faq(
            CreateFAQRequest(question="Draft?", answer="No.", enabled=False).model_dump()
        )

        page = await storefront.home()

        assert page["hero"]["title"] == "Fiordland awaits"
        assert page["hero"]["subtitle"] == "Unbeatable deals."
        assert page["faq_section"]["title"] == "Frequently Asked Questions"
        assert page["stats"][0]["display_value"] == "15K+"
        assert [faq["question"] for faq in page["faqs"]] == ["Is lunch included?"]
        schema_types = [schema["@type"] for schema in page["metadata"].structured_data]
        assert "FAQPage" in schema_types

    async def test_upsert_replaces_existing_block(self, db_session) -> None:
        homepage = HomepageService(db=db_session)
        first = await homepage.upsert_setting(
            "hero_section", UpsertHomepageSettingRequest(title="One").model_dump()
        )
        second = await homepage.upsert_setting(
            "hero_section", UpsertHomepageSettingRequest(title="Two").model_dump()
        )

        assert second["id"] == first["id"]
        assert len(await homepage.list_settings()) == 1

    async def test_only_enabled_links_shown(self, storefront, db_session) -> None:
        links = InternalLinkService(db=db_session)
        section = await links.create_section(
            CreateLinkSectionRequest(section_title="Popular").model_dump()
        )
        await links.create_link(section["id"], CreateLinkRequest(title="Shown", url="/tours").model_dump())
        await links.create_link(
            section["id"], CreateLinkRequest(title="Hidden", url="/x", enabled=False).model_dump()
        )
        hidden = await links.create_section(
            CreateLinkSectionRequest(section_title="Off", enabled=False).model_dump()
        )

        page = await storefront.home()

        assert [s["section_title"] for s in page["link_sections"]] == ["Popular"]
        assert [link["title"] for link in page["link_sections"][0]["links"]] == ["Shown"]
        assert hidden["enabled"] is False


class TestTourPages:
    async def test_tour_detail(self, storefront, tours) -> None:
        tour = await _tour(tours, "Milford Sound Cruise", price=99, description="Sail.\n\nSwim.")

        page = await storefront.tour_detail(tour["slug"])

        metadata = page["metadata"]
        assert metadata.title == "Milford Sound Cruise - Example"
        assert metadata.canonical == "https://tours.example.com/tour/milford-sound-cruise"
        assert metadata.open_graph.type == "product"
        assert page["highlights"] == list(DEFAULT_HIGHLIGHTS)
        assert page["description_paragraphs"] == ["Sail.", "Swim."]
        assert page["image_url"] == "https://img.example.com/default.jpg"
        assert [crumb["name"] for crumb in page["breadcrumbs"]] == ["Home", "Tours", "Milford Sound Cruise"]

    async def test_renamed_tour_reports_move(self, storefront, tours) -> None:
        tour = await _tour(tours, "Milford Sound Cruise")
        await tours.update_experience(tour["id"], {"slug": "milford-cruise"})

        with pytest.raises(SlugMovedError) as exc_info:
            await storefront.tour_detail("milford-sound-cruise")

        assert exc_info.value.new_slug == "milford-cruise"
        assert exc_info.value.permanent is True

    async def test_inactive_tour_is_missing(self, storefront, tours) -> None:
        tour = await _tour(tours, "Closed Walk", status="inactive")

        with pytest.raises(NotFoundError):
            await storefront.tour_detail(tour["slug"])

    async def test_tours_listing(self, storefront, tours) -> None:
        await _tour(tours, "Open Walk")
        await _tour(tours, "Draft Walk", status="draft")

        page = await storefront.tours()

        assert page["total"] == 1
        assert page["experiences"][0]["url"] == "/tour/open-walk"
        assert page["metadata"].title == "Unforgettable Tours - Example"

    async def test_category_page(self, storefront, tours, db_session) -> None:
        category = await CatalogService(db=db_session).create_category(
            CreateCategoryRequest(name="Cruises").model_dump()
        )
        await _tour(tours, "Fjord Cruise", category_id=category["id"])

        page = await storefront.category("cruises")

        assert page["metadata"].title == "Cruises Tours | Example"
        assert page["metadata"].description == "Discover amazing cruises experiences in Fiordland"
        assert [card["title"] for card in page["experiences"]] == ["Fjord Cruise"]

    async def test_destination_page(self, storefront, tours, db_session) -> None:
        city = await CatalogService(db=db_session).create_city(
            CreateCityRequest(name="Te Anau", country="New Zealand").model_dump()
        )
        await _tour(tours, "Glow Worm Caves", city_id=city["id"])

        page = await storefront.destination("te-anau")

        assert page["breadcrumbs"][-1]["url"] == "https://tours.example.com/destinations/te-anau"
        assert page["experiences"][0]["city_name"] == "Te Anau"


class TestTravelGuidePages:
    async def test_draft_post_is_missing(self, storefront, blog) -> None:
        post = await blog.create_post(CreateBlogPostRequest(title="Draft Notes").model_dump())

        with pytest.raises(NotFoundError):
            await storefront.travel_guide_post(post["slug"])

    async def test_post_page(self, storefront, blog) -> None:
        post = await blog.create_post(
            CreateBlogPostRequest(title="Packing List", content="Pack light.", published=True).model_dump()
        )
        await blog.create_post(CreateBlogPostRequest(title="Other Post", published=True).model_dump())
        await blog.create_post(CreateBlogPostRequest(title="Unpublished").model_dump())
        section = await blog.create_guide_section(
            post["id"], CreateGuideSectionRequest(section_title="What to Carry").model_dump()
        )
        hidden = await blog.create_guide_section(
            post["id"], CreateGuideSectionRequest(section_title="Hidden", enabled=False).model_dump()
        )
        await blog.create_guide_item(
            section["id"], CreateGuideItemRequest(title="Snacks", importance="optional").model_dump()
        )
        await blog.create_guide_item(
            section["id"],
            CreateGuideItemRequest(title="Sunscreen", importance="essential", sort_order=5).model_dump(),
        )

        page = await storefront.travel_guide_post("packing-list")

        assert page["metadata"].title == "Packing List - Example Blog"
        assert page["metadata"].open_graph.type == "article"
        assert page["paragraphs"] == ["Pack light."]
        assert [s["section_title"] for s in page["guide_sections"]] == ["What to Carry"]
        assert [i["title"] for i in page["guide_sections"][0]["items"]] == ["Sunscreen", "Snacks"]
        assert [p["title"] for p in page["related_posts"]] == ["Other Post"]
        assert hidden["enabled"] is False

    async def test_renamed_post_reports_move(self, storefront, blog) -> None:
        post = await blog.create_post(
            CreateBlogPostRequest(title="Packing List", published=True).model_dump()
        )
        await blog.update_post(post["id"], {"slug": "what-to-pack"})

        with pytest.raises(SlugMovedError) as exc_info:
            await storefront.travel_guide_post("packing-list")

        assert exc_info.value.new_slug == "what-to-pack"

    async def test_listing_splits_featured(self, storefront, blog) -> None:
        await blog.create_post(
            CreateBlogPostRequest(title="Top Pick", published=True, featured=True).model_dump()
        )
        await blog.create_post(CreateBlogPostRequest(title="Regular", published=True).model_dump())

        page = await storefront.travel_guide()

        assert [p["title"] for p in page["featured_posts"]] == ["Top Pick"]
        assert [p["title"] for p in page["posts"]] == ["Regular"]
        assert page["posts"][0]["url"] == "/travel-guide/regular"

    async def test_unknown_category_filter(self, storefront) -> None:
        with pytest.raises(NotFoundError):
            await storefront.travel_guide("nope")


class TestSearch:
    async def test_blank_query_returns_nothing(self, storefront) -> None:
        page = await storefront.search("   ")

        assert page["total"] == 0
        assert page["counts"] == {"experience": 0, "category": 0, "destination": 0}

    async def test_counts_ignore_type_filter(self, storefront, tours, db_session) -> None:
        city = await CatalogService(db=db_session).create_city(
            CreateCityRequest(name="Milford").model_dump()
        )
        await _tour(tours, "Milford Cruise", price=80, city_id=city["id"])

        page = await storefront.search("milford", result_type="experience")

        assert page["counts"] == {"experience": 1, "category": 0, "destination": 1}
        assert page["total"] == 1
        assert page["results"][0]["url"] == "/tour/milford-cruise"

    async def test_unknown_sort_rejected(self, storefront) -> None:
        with pytest.raises(ValidationError):
            await storefront.search("milford", sort="alphabetical")

    async def test_unknown_price_range_rejected_without_hits(self, storefront) -> None:
        with pytest.raises(ValidationError):
            await storefront.search("", price_range="bogus")

        with pytest.raises(ValidationError):
            await storefront.search("zzz-nohit", price_range="bogus")
