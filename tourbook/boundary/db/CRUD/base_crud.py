"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.base import Base
from tourbook.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
        default_order: Columns get_all orders by when no ordering is given
    """

    default_order: tuple = ()

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def _reload(self, session: AsyncSession, id: UUID) -> ModelT:
        """Re-read a flushed row so defaults and eager relationships are populated."""
        stmt = (
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        return await self._reload(session, instance.id)

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
        order_by: Sequence[Any] | None = None,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records with optional pagination.

        Args:
            session: Async database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip
            order_by: Column expressions; defaults to ``default_order``

        Returns:
            Sequence of model instances
        """
        ordering = order_by if order_by is not None else self.default_order
        stmt = select(self.model).order_by(*ordering).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    def _reject_nulls(self, values: dict[str, Any]) -> None:
        columns = self.model.__table__.columns
        for key, value in values.items():
            if value is None and key in columns and not columns[key].nullable:
                raise ValidationError(f"{key} cannot be null", field=key)

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> ModelT | None:
        """
        Update a record by primary key.

        Loads the row and assigns attributes so ``onupdate`` timestamps fire
        and eagerly loaded relationships are refreshed afterwards.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise

        Raises:
            ValidationError: If a NOT NULL column is set to None
        """
        self._reject_nulls(kwargs)
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await session.flush()
        return await self._reload(session, instance.id)

    async def toggle_field(self, session: AsyncSession, id: UUID, field: str) -> ModelT | None:
        """
        Flip a boolean column.

        Used for list-view toggles (featured, enabled, published).

        Args:
            session: Async database session
            id: UUID primary key
            field: Boolean column name

        Returns:
            Updated model instance if found, None otherwise
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        setattr(instance, field, not getattr(instance, field))
        await session.flush()
        return await self._reload(session, instance.id)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None


class SlugCRUD(BaseCRUD[ModelT]):
    """BaseCRUD for tables with a unique ``slug`` column."""

    async def get_by_slug(self, session: AsyncSession, slug: str) -> ModelT | None:
        """
        Retrieve a single record by slug.

        Args:
            session: Async database session
            slug: URL slug

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def slug_taken(
        self,
        session: AsyncSession,
        slug: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check whether another row already uses ``slug``.

        Args:
            session: Async database session
            slug: Candidate slug
            exclude_id: Row being edited, ignored in the check

        Returns:
            True if the slug belongs to a different row
        """
        stmt = select(self.model.id).where(self.model.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await session.execute(stmt)
        return result.first() is not None
