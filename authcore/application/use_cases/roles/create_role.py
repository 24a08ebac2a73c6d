"""Create role use case."""

import logging

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.role_dto import CreateRoleInput, RoleOutput
from authcore.application.exceptions import ConflictError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.domain.entities.role import Role

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Use case for creating a role."""

    def __init__(self, uow: UnitOfWorkPort, clock: Clock = utc_now):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            clock: Source of the current UTC time
        """
        self.uow = uow
        self.clock = clock

    @guard_errors()
    async def execute(self, input_dto: CreateRoleInput) -> RoleOutput:
        """
        Create a new role.

        Args:
            input_dto: Role name, description and initial state

        Returns:
            Created role

        Raises:
            ConflictError: If a role with the same name exists
        """
        async with self.uow:
            if await self.uow.roles.get_by_name(input_dto.name) is not None:
                raise ConflictError(
                    message=f"Role '{input_dto.name}' already exists",
                    resource_type="Role",
                    field="name",
                )

            now = self.clock()
            role = Role(
                id=None,
                name=input_dto.name,
                description=input_dto.description,
                state=input_dto.state,
                created_at=now,
                updated_at=now,
            )
            created = await self.uow.roles.add(role)

        logger.info("Role created", extra={"role_id": created.id, "role_name": created.name})
        return RoleOutput.from_entity(created)
