"""
Base repository class for common database operations.

This provides generic CRUD operations that all repositories inherit from.
It uses SQLAlchemy AsyncSession and handles common patterns like:
- Pagination
- Entity ↔ Model conversion via mappers
- Reloading rows so that eager-loaded links are never stale
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID, uuid4

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from admin_dashboard.domain.exceptions import ConflictError, NotFoundError
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base

# Type variables for generic repository
TModel = TypeVar("TModel", bound=Base)  # SQLAlchemy model type
TEntity = TypeVar("TEntity")  # Domain entity type


class BaseRepository(Generic[TModel, TEntity]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        TModel: SQLAlchemy model type (e.g., RoleModel)
        TEntity: Domain entity type (e.g., Role)

    Attributes:
        session: SQLAlchemy AsyncSession for database operations
        model_class: SQLAlchemy model class
        mapper: Mapper class for entity ↔ model conversion
        entity_name: Name used in NotFoundError messages
    """

    entity_name = "Entity"

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        mapper_class: Any,
    ):
        """
        Initialize base repository.

        Args:
            session: SQLAlchemy async session
            model_class: SQLAlchemy model class
            mapper_class: Mapper class with to_entity() and to_model() methods
        """
        self.session = session
        self.model_class = model_class
        self.mapper = mapper_class

    def _default_order(self) -> list[Any]:
        return [self.model_class.created_at.desc()]

    async def _flush(self) -> None:
        """Flush pending changes, reporting unique violations as conflicts."""
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"{self.entity_name} conflicts with existing data"
            ) from exc

    async def _load_model(self, entity_id: UUID) -> Optional[TModel]:
        stmt = (
            select(self.model_class)
            .where(self.model_class.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _load_or_raise(self, entity_id: UUID) -> TModel:
        model = await self._load_model(entity_id)
        if model is None:
            raise NotFoundError(self.entity_name, entity_id)
        return model

    async def _fetch_all(self, stmt: Select) -> list[TEntity]:
        result = await self.session.execute(
            stmt.execution_options(populate_existing=True)
        )
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def _fetch_one(self, stmt: Select) -> Optional[TEntity]:
        result = await self.session.execute(
            stmt.execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self.mapper.to_entity(model) if model is not None else None

    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity to the database.

        Args:
            entity: Domain entity to persist (an id is assigned if missing)

        Returns:
            Created entity reloaded from the database
        """
        entity.id = entity.id or uuid4()  # type: ignore[attr-defined]
        self.session.add(self.mapper.to_model(entity))
        await self._flush()
        await self._after_add(entity)
        return self.mapper.to_entity(await self._load_or_raise(entity.id))  # type: ignore[attr-defined]

    async def _after_add(self, entity: TEntity) -> None:
        """Hook for writing links of a freshly inserted row."""

    async def get_by_id(self, entity_id: UUID) -> Optional[TEntity]:
        """
        Retrieve entity by ID.

        Returns:
            Domain entity if found, None otherwise
        """
        model = await self._load_model(entity_id)
        if model is None:
            return None
        return self.mapper.to_entity(model)

    async def update(self, entity: TEntity) -> TEntity:
        """
        Update the stored row of an existing entity.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        entity_id = entity.id  # type: ignore[attr-defined]
        existing_model = await self._load_or_raise(entity_id)

        self.mapper.to_model(entity, existing_model=existing_model)
        await self._flush()

        return self.mapper.to_entity(await self._load_or_raise(entity_id))

    async def delete(self, entity_id: UUID) -> None:
        """
        Delete entity from database. Junction rows go with it (ON DELETE CASCADE).

        Raises:
            NotFoundError: If entity doesn't exist
        """
        model = await self._load_or_raise(entity_id)
        await self.session.delete(model)
        await self.session.flush()

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[TEntity]:
        """
        List entities with pagination.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            List of domain entities
        """
        stmt = (
            select(self.model_class)
            .order_by(*self._default_order())
            .offset(skip)
            .limit(limit)
        )
        return await self._fetch_all(stmt)

    async def count(self) -> int:
        """Count total number of entities."""
        result = await self.session.execute(select(func.count(self.model_class.id)))
        return result.scalar_one()
