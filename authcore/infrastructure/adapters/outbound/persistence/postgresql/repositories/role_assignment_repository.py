"""PostgreSQL implementation of RoleAssignmentRepositoryPort."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.ports.outbound.role_assignment_repository_port import (
    RoleAssignmentRepositoryPort,
)
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.value_objects.entity_state import EntityState
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleAssignmentMapper,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.role_model import (
    RoleAssignmentModel,
    RoleModel,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresRoleAssignmentRepository(
    BaseRepository[RoleAssignmentModel, RoleAssignment],
    RoleAssignmentRepositoryPort,
):
    """
    PostgreSQL implementation of RoleAssignmentRepositoryPort.

    Active-assignment uniqueness is enforced by the partial unique index
    on (user_id, role_id) WHERE state = 'active'; a violation on insert
    surfaces as ``ConflictError``.
    """

    conflict_message = "User already has this role assigned"

    def __init__(self, session: AsyncSession):
        super().__init__(session, RoleAssignmentModel, RoleAssignmentMapper)

    async def get_active(self, user_id: int, role_id: int) -> Optional[RoleAssignment]:
        stmt = select(RoleAssignmentModel).where(
            RoleAssignmentModel.user_id == user_id,
            RoleAssignmentModel.role_id == role_id,
            RoleAssignmentModel.state == EntityState.ACTIVE,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self.mapper.to_entity(model)

    async def count_active_for_role(self, role_id: int) -> int:
        stmt = select(func.count(RoleAssignmentModel.id)).where(
            RoleAssignmentModel.role_id == role_id,
            RoleAssignmentModel.state == EntityState.ACTIVE,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_active_by_role(self) -> dict[int, int]:
        stmt = (
            select(RoleAssignmentModel.role_id, func.count(RoleAssignmentModel.id))
            .where(RoleAssignmentModel.state == EntityState.ACTIVE)
            .group_by(RoleAssignmentModel.role_id)
        )
        result = await self.session.execute(stmt)
        return {role_id: count for role_id, count in result.all()}

    async def list_active_for_role(self, role_id: int) -> list[RoleAssignment]:
        stmt = (
            select(RoleAssignmentModel)
            .where(
                RoleAssignmentModel.role_id == role_id,
                RoleAssignmentModel.state == EntityState.ACTIVE,
            )
            .order_by(RoleAssignmentModel.assigned_at.asc(), RoleAssignmentModel.id.asc())
        )
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def list_for_user_and_role(
        self, user_id: int, role_id: int
    ) -> list[RoleAssignment]:
        stmt = (
            select(RoleAssignmentModel)
            .where(
                RoleAssignmentModel.user_id == user_id,
                RoleAssignmentModel.role_id == role_id,
            )
            .order_by(RoleAssignmentModel.assigned_at.desc(), RoleAssignmentModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def list_active_role_names_for_user(self, user_id: int) -> list[str]:
        stmt = (
            select(RoleModel.name)
            .join(RoleAssignmentModel, RoleAssignmentModel.role_id == RoleModel.id)
            .where(
                RoleAssignmentModel.user_id == user_id,
                RoleAssignmentModel.state == EntityState.ACTIVE,
                RoleModel.state == EntityState.ACTIVE,
            )
            .order_by(RoleModel.name.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_for_role(self, role_id: int) -> int:
        stmt = (
            delete(RoleAssignmentModel)
            .where(RoleAssignmentModel.role_id == role_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
