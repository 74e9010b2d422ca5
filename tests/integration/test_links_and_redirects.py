"""
Integration tests for internal link blocks and stored redirects.

System role: Verification of link context rules and path resolution
"""

import uuid

import pytest

from tourbook.application.services.experience_service import ExperienceService
from tourbook.application.services.internal_link_service import InternalLinkService
from tourbook.application.services.redirect_service import RedirectService
from tourbook.core.exceptions import NotFoundError, SlugConflictError, ValidationError
from tourbook.models.experience import CreateExperienceRequest
from tourbook.models.internal_link import CreateLinkRequest, CreateLinkSectionRequest
from tourbook.models.redirect import CreateRedirectRequest


@pytest.fixture
def links(db_session) -> InternalLinkService:
    return InternalLinkService(db=db_session)


@pytest.fixture
def redirects(db_session) -> RedirectService:
    return RedirectService(db=db_session)


def _section(**fields) -> dict:
    return CreateLinkSectionRequest(**{"section_title": "Popular Tours", **fields}).model_dump()


class TestLinkContexts:
    async def test_homepage_section_rejects_context_id(self, links) -> None:
        with pytest.raises(ValidationError):
            await links.create_section(_section(context_id=uuid.uuid4()))

    async def test_tour_section_needs_context_id(self, links) -> None:
        with pytest.raises(ValidationError):
            await links.create_section(_section(context_type="experience"))

    async def test_tour_section_for_unknown_tour(self, links) -> None:
        with pytest.raises(NotFoundError):
            await links.create_section(_section(context_type="experience", context_id=uuid.uuid4()))

    async def test_sections_listed_per_context(self, links, db_session) -> None:
        tour = await ExperienceService(db=db_session).create_experience(
            CreateExperienceRequest(title="Kayak Safari").model_dump()
        )
        await links.create_section(_section())
        await links.create_section(
            _section(section_title="Nearby", context_type="experience", context_id=tour["id"])
        )

        homepage = await links.list_sections("homepage")
        for_tour = await links.list_sections("experience", tour["id"])

        assert [s["section_title"] for s in homepage] == ["Popular Tours"]
        assert [s["section_title"] for s in for_tour] == ["Nearby"]


class TestLinks:
    async def test_links_ordered_and_toggled(self, links) -> None:
        section = await links.create_section(_section())
        second = await links.create_link(
            section["id"], CreateLinkRequest(title="Kayaks", url="/tour/kayak", display_order=2).model_dump()
        )
        await links.create_link(
            section["id"], CreateLinkRequest(title="Cruises", url="/category/cruises", display_order=1).model_dump()
        )

        toggled = await links.toggle_link(second["id"])
        loaded = await links.get_section(section["id"])

        assert toggled["enabled"] is False
        assert [link["title"] for link in loaded["links"]] == ["Cruises", "Kayaks"]

    async def test_link_for_missing_section(self, links) -> None:
        with pytest.raises(NotFoundError):
            await links.create_link(
                uuid.uuid4(), CreateLinkRequest(title="Lost", url="/nowhere").model_dump()
            )


class TestRedirects:
    async def test_slugs_are_normalized(self, redirects) -> None:
        row = await redirects.create_redirect(
            CreateRedirectRequest(old_slug="Old Cruise", new_slug="New Cruise", content_type="experiences").model_dump()
        )

        assert row["old_slug"] == "old-cruise"
        assert row["new_slug"] == "new-cruise"

    async def test_self_redirect_rejected(self, redirects) -> None:
        with pytest.raises(ValidationError):
            await redirects.create_redirect(
                CreateRedirectRequest(old_slug="loop", new_slug="loop", content_type="experiences").model_dump()
            )

    async def test_duplicate_old_slug_conflicts(self, redirects) -> None:
        data = CreateRedirectRequest(old_slug="a", new_slug="b", content_type="categories").model_dump()
        await redirects.create_redirect(data)

        with pytest.raises(SlugConflictError):
            await redirects.create_redirect({**data, "new_slug": "c"})

    async def test_same_slug_in_other_content_type_is_fine(self, redirects) -> None:
        await redirects.create_redirect(
            CreateRedirectRequest(old_slug="a", new_slug="b", content_type="categories").model_dump()
        )
        row = await redirects.create_redirect(
            CreateRedirectRequest(old_slug="a", new_slug="b", content_type="blog_posts").model_dump()
        )

        assert row["content_type"] == "blog_posts"

    async def test_rules_start_with_legacy_blog(self, redirects) -> None:
        await redirects.create_redirect(
            CreateRedirectRequest(old_slug="old", new_slug="new", content_type="experiences").model_dump()
        )

        rules = await redirects.get_rules()

        assert rules[0]["source"] == "/blog"
        assert rules[0]["destination"] == "/travel-guide"
        assert {"source": "/tour/old", "destination": "/tour/new"}.items() <= rules[1].items()

    async def test_resolve_path(self, redirects) -> None:
        await redirects.create_redirect(
            CreateRedirectRequest(
                old_slug="old", new_slug="new", content_type="experiences", permanent=False
            ).model_dump()
        )

        moved = await redirects.resolve_path("/tour/old/")
        legacy = await redirects.resolve_path("/blog/packing-list")
        untouched = await redirects.resolve_path("/tour/new")

        assert moved["destination"] == "/tour/new"
        assert moved["status_code"] == 307
        assert legacy["destination"] == "/travel-guide/packing-list"
        assert legacy["status_code"] == 308
        assert untouched == {"path": "/tour/new", "matched": False}
