"""
Base repository class for common database operations.

Generic CRUD shared by all PostgreSQL repositories, with entity ↔ model
conversion through mappers and integrity violations reported as
``ConflictError``.
"""

import logging
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.exceptions import ConflictError, NotFoundError
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base

logger = logging.getLogger(__name__)

# Type variables for generic repository
TModel = TypeVar("TModel", bound=Base)  # SQLAlchemy model type
TEntity = TypeVar("TEntity")  # Domain entity type


class BaseRepository(Generic[TModel, TEntity]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        TModel: SQLAlchemy model type (e.g., UserModel)
        TEntity: Domain entity type (e.g., User)

    Attributes:
        session: SQLAlchemy AsyncSession for database operations
        model_class: SQLAlchemy model class
        mapper: Mapper with to_entity() and to_model() methods
    """

    conflict_message = "Record conflicts with an existing one"

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        mapper_class,
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

    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity to the database.

        Returns:
            Created entity with its generated id

        Raises:
            ConflictError: If a unique constraint is violated
        """
        model = self.mapper.to_model(entity)
        self.session.add(model)
        await self._flush()
        await self.session.refresh(model)
        return self.mapper.to_entity(model)

    async def get_by_id(self, entity_id: int) -> Optional[TEntity]:
        model = await self._get_model(entity_id)
        if model is None:
            return None
        return self.mapper.to_entity(model)

    async def update(self, entity: TEntity) -> TEntity:
        """
        Update existing entity.

        Raises:
            NotFoundError: If entity doesn't exist
            ConflictError: If a unique constraint is violated
        """
        entity_id = entity.id  # type: ignore  # All entities have id
        existing_model = await self._get_model_or_raise(entity_id)

        updated_model = self.mapper.to_model(entity, existing_model=existing_model)
        await self._flush()
        await self.session.refresh(updated_model)

        return self.mapper.to_entity(updated_model)

    async def delete(self, entity_id: int) -> None:
        """
        Hard delete entity from database.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        model = await self._get_model_or_raise(entity_id)
        await self.session.delete(model)
        await self._flush()

    async def _get_model(self, entity_id: int) -> Optional[TModel]:
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_model_or_raise(self, entity_id: int) -> TModel:
        model = await self._get_model(entity_id)
        if model is None:
            raise NotFoundError(
                f"{self.model_class.__name__} with id {entity_id} not found",
                resource_id=str(entity_id),
            )
        return model

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            logger.warning(
                f"Integrity violation on {self.model_class.__tablename__}: {exc.orig}"
            )
            raise ConflictError(self.conflict_message) from exc
