"""PostgreSQL implementation of RoleRepositoryPort."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.ports.outbound.role_repository_port import RoleRepositoryPort
from authcore.domain.entities.role import Role
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleMapper,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.role_model import (
    RoleModel,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresRoleRepository(BaseRepository[RoleModel, Role], RoleRepositoryPort):
    """PostgreSQL implementation of RoleRepositoryPort."""

    conflict_message = "Role name already exists"

    def __init__(self, session: AsyncSession):
        super().__init__(session, RoleModel, RoleMapper)

    async def get_by_name(self, name: str) -> Optional[Role]:
        """Exact, case-sensitive name lookup."""
        stmt = select(RoleModel).where(RoleModel.name == name)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self.mapper.to_entity(model)

    async def list_all(self) -> list[Role]:
        stmt = select(RoleModel).order_by(RoleModel.name.asc())
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]
