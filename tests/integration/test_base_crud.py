"""
Test suite for BaseCRUD and SlugCRUD generic database operations.

Tests basic CRUD functionality: create, read (by ID and all), update, toggle,
delete, exists and slug lookups, against the in-memory SQLite database.

System role: Verification of generic database layer foundation
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD, SlugCRUD
from tourbook.boundary.db.models.category_model import CategoryModel
from tourbook.boundary.db.models.faq_model import FAQModel
from tourbook.core.exceptions import ValidationError


@pytest.fixture
def faq_crud_under_test() -> BaseCRUD:
    """BaseCRUD over FAQs, ordered like the admin list."""
    crud = BaseCRUD(FAQModel)
    crud.default_order = (FAQModel.sort_order,)
    return crud


@pytest.fixture
def category_crud_under_test() -> SlugCRUD:
    return SlugCRUD(CategoryModel)


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    async def test_create_should_fill_id_timestamps_and_defaults(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        # Act
        faq = await faq_crud_under_test.create(db_session, question="Q?", answer="A.")

        # Assert
        assert isinstance(faq.id, uuid.UUID)
        assert faq.created_at is not None
        assert faq.updated_at is not None
        assert faq.enabled is True
        assert faq.sort_order == 0

    async def test_create_should_add_and_flush(
        self, faq_crud_under_test: BaseCRUD, mock_db: AsyncSession
    ) -> None:
        """Test create adds the instance and flushes before re-reading it."""
        # Arrange
        reloaded = MagicMock()
        mock_result = MagicMock()
        mock_result.scalar_one = MagicMock(return_value=reloaded)
        mock_db.add = MagicMock()
        mock_db.flush = AsyncMock()
        mock_db.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await faq_crud_under_test.create(mock_db, question="Q?", answer="A.")

        # Assert
        mock_db.add.assert_called_once()
        mock_db.flush.assert_awaited_once()
        mock_db.execute.assert_awaited_once()
        assert result is reloaded


class TestBaseCRUDRead:
    """Test suite for get_by_id(), get_all() and exists()."""

    async def test_get_by_id_should_return_none_when_not_found(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        assert await faq_crud_under_test.get_by_id(db_session, uuid.uuid4()) is None

    async def test_get_all_should_use_default_order_and_paging(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        for position in (3, 1, 2):
            await faq_crud_under_test.create(
                db_session, question=f"Q{position}", answer="A", sort_order=position
            )

        # Act
        everything = await faq_crud_under_test.get_all(db_session)
        page = await faq_crud_under_test.get_all(db_session, limit=1, offset=1)

        # Assert
        assert [faq.question for faq in everything] == ["Q1", "Q2", "Q3"]
        assert [faq.question for faq in page] == ["Q2"]

    async def test_exists(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        faq = await faq_crud_under_test.create(db_session, question="Q?", answer="A.")

        assert await faq_crud_under_test.exists(db_session, faq.id) is True
        assert await faq_crud_under_test.exists(db_session, uuid.uuid4()) is False


class TestBaseCRUDUpdate:
    """Test suite for update_by_id() and toggle_field()."""

    async def test_update_should_write_given_fields_only(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        faq = await faq_crud_under_test.create(db_session, question="Q?", answer="A.")

        # Act
        updated = await faq_crud_under_test.update_by_id(db_session, faq.id, answer="B.")

        # Assert
        assert updated.answer == "B."
        assert updated.question == "Q?"

    async def test_update_should_return_none_when_not_found(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        assert await faq_crud_under_test.update_by_id(db_session, uuid.uuid4(), answer="B.") is None

    async def test_update_should_reject_null_on_not_null_column(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        faq = await faq_crud_under_test.create(db_session, question="Q?", answer="A.")

        # Act / Assert
        with pytest.raises(ValidationError) as exc_info:
            await faq_crud_under_test.update_by_id(db_session, faq.id, enabled=None)
        assert exc_info.value.details["field"] == "enabled"

    async def test_toggle_should_flip_boolean(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        faq = await faq_crud_under_test.create(db_session, question="Q?", answer="A.")

        # Act
        first = await faq_crud_under_test.toggle_field(db_session, faq.id, "enabled")
        second = await faq_crud_under_test.toggle_field(db_session, faq.id, "enabled")

        # Assert
        assert first.enabled is False
        assert second.enabled is True


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete_by_id() method."""

    async def test_delete_should_report_whether_a_row_went(
        self, faq_crud_under_test: BaseCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        faq = await faq_crud_under_test.create(db_session, question="Q?", answer="A.")

        # Act
        deleted = await faq_crud_under_test.delete_by_id(db_session, faq.id)
        deleted_again = await faq_crud_under_test.delete_by_id(db_session, faq.id)

        # Assert
        assert deleted is True
        assert deleted_again is False


class TestSlugCRUD:
    """Test suite for SlugCRUD lookups."""

    async def test_get_by_slug(
        self, category_crud_under_test: SlugCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        await category_crud_under_test.create(db_session, name="Cruises", slug="cruises")

        # Act
        found = await category_crud_under_test.get_by_slug(db_session, "cruises")
        missing = await category_crud_under_test.get_by_slug(db_session, "walks")

        # Assert
        assert found.name == "Cruises"
        assert missing is None

    async def test_slug_taken_ignores_the_row_being_edited(
        self, category_crud_under_test: SlugCRUD, db_session: AsyncSession
    ) -> None:
        # Arrange
        category = await category_crud_under_test.create(db_session, name="Cruises", slug="cruises")

        # Act / Assert
        assert await category_crud_under_test.slug_taken(db_session, "cruises") is True
        assert await category_crud_under_test.slug_taken(
            db_session, "cruises", exclude_id=category.id
        ) is False
        assert await category_crud_under_test.slug_taken(db_session, "walks") is False
