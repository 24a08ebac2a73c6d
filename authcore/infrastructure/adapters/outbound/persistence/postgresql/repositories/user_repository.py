"""PostgreSQL implementation of UserRepositoryPort."""

from datetime import datetime
from typing import Optional

from sqlalchemy import exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.exceptions import NotFoundError
from authcore.application.ports.outbound.user_repository_port import UserRepositoryPort
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_mapper import (
    UserMapper,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    UserModel,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresUserRepository(BaseRepository[UserModel, User], UserRepositoryPort):
    """
    PostgreSQL implementation of UserRepositoryPort.

    Inherits common CRUD operations from BaseRepository and implements
    User-specific operations defined in UserRepositoryPort.
    """

    conflict_message = "Email or national id already registered"

    def __init__(self, session: AsyncSession):
        super().__init__(session, UserModel, UserMapper)

    async def get_by_email(self, email: Email) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.value)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self.mapper.to_entity(model)

    async def exists_by_email(self, email: Email) -> bool:
        stmt = select(exists().where(UserModel.email == email.value))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def exists_by_national_id(self, national_id: str) -> bool:
        stmt = select(exists().where(UserModel.national_id == national_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def increment_failed_login_attempts(self, user_id: int, now: datetime) -> int:
        """
        Atomically increment the failed login counter.

        A single ``UPDATE ... RETURNING`` so concurrent failures are all
        counted.

        Raises:
            NotFoundError: If user doesn't exist
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                failed_login_attempts=UserModel.failed_login_attempts + 1,
                updated_at=now,
            )
            .returning(UserModel.failed_login_attempts)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        attempts = result.scalar_one_or_none()

        if attempts is None:
            raise NotFoundError(
                f"User with id {user_id} not found",
                resource_type="User",
                resource_id=str(user_id),
            )

        return attempts
