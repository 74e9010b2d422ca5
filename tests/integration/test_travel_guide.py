"""
Integration tests for travel guide administration.

System role: Verification of post publication, renames and guide nesting
"""

import uuid

import pytest

from tourbook.application.services.blog_service import BlogService
from tourbook.boundary.db.CRUD.blog_crud import guide_section_crud
from tourbook.boundary.db.CRUD.redirect_crud import slug_redirect_crud
from tourbook.core.exceptions import NotFoundError
from tourbook.models.blog import CreateBlogCategoryRequest, CreateBlogPostRequest
from tourbook.models.guide import CreateGuideItemRequest, CreateGuideSectionRequest


@pytest.fixture
def blog(db_session) -> BlogService:
    return BlogService(db=db_session)


async def _post(blog: BlogService, title: str = "Packing for Fiordland", **extra) -> dict:
    return await blog.create_post(CreateBlogPostRequest(title=title, **extra).model_dump())


class TestPublication:
    async def test_draft_has_no_publish_time(self, blog) -> None:
        post = await _post(blog)

        assert post["published"] is False
        assert post["published_at"] is None
        assert post["read_time_minutes"] == 5

    async def test_publishing_stamps_once_and_unpublishing_clears(self, blog) -> None:
        post = await _post(blog)

        published = await blog.toggle_post_published(post["id"])
        stamped_at = published["published_at"]
        edited = await blog.update_post(post["id"], {"published": True, "excerpt": "Layers."})
        unpublished = await blog.toggle_post_published(post["id"])

        assert stamped_at is not None
        assert edited["published_at"] == stamped_at
        assert unpublished["published"] is False
        assert unpublished["published_at"] is None

    async def test_created_published_post_is_stamped(self, blog) -> None:
        post = await _post(blog, published=True)
        assert post["published_at"] is not None


class TestPosts:
    async def test_unknown_blog_category_rejected(self, blog) -> None:
        with pytest.raises(NotFoundError):
            await _post(blog, category_id=uuid.uuid4())

    async def test_category_name_attached(self, blog) -> None:
        category = await blog.create_blog_category(
            CreateBlogCategoryRequest(name="Packing Lists").model_dump()
        )

        post = await _post(blog, category_id=category["id"])

        assert category["slug"] == "packing-lists"
        assert post["category_name"] == "Packing Lists"

    async def test_rename_records_redirect(self, blog, db_session) -> None:
        post = await _post(blog)

        await blog.update_post(post["id"], {"slug": "what-to-pack"})

        redirect = await slug_redirect_crud.get_by_old_slug(
            db_session, "blog_posts", "packing-for-fiordland"
        )
        assert redirect.new_slug == "what-to-pack"

    async def test_code_snippets_round_trip_as_json(self, blog) -> None:
        post = await _post(
            blog,
            code_snippets=[{"language": "bash", "code": "echo hi", "title": "Greeting"}],
        )

        assert post["code_snippets"][0]["code"] == "echo hi"


class TestGuideSections:
    async def test_section_with_items(self, blog) -> None:
        post = await _post(blog)
        section = await blog.create_guide_section(
            post["id"],
            CreateGuideSectionRequest(section_title="What to Carry", section_type="what_to_carry").model_dump(),
        )

        await blog.create_guide_item(
            section["id"],
            CreateGuideItemRequest(title="Rain jacket", importance="essential").model_dump(),
        )
        await blog.create_guide_item(
            section["id"],
            CreateGuideItemRequest(title="Binoculars", importance="optional", sort_order=1).model_dump(),
        )
        loaded = await blog.get_guide_section(section["id"])

        assert [item["title"] for item in loaded["items"]] == ["Rain jacket", "Binoculars"]

    async def test_section_for_missing_post(self, blog) -> None:
        with pytest.raises(NotFoundError):
            await blog.create_guide_section(
                uuid.uuid4(), CreateGuideSectionRequest(section_title="Orphan").model_dump()
            )

    async def test_toggle_section(self, blog) -> None:
        post = await _post(blog)
        section = await blog.create_guide_section(
            post["id"], CreateGuideSectionRequest(section_title="What to Do").model_dump()
        )

        toggled = await blog.toggle_guide_section(section["id"])

        assert toggled["enabled"] is False

    async def test_deleting_post_removes_sections(self, blog, db_session) -> None:
        post = await _post(blog)
        section = await blog.create_guide_section(
            post["id"], CreateGuideSectionRequest(section_title="What to Do").model_dump()
        )

        await blog.delete_post(post["id"])
        db_session.expire_all()

        assert await guide_section_crud.get_by_id(db_session, section["id"]) is None
