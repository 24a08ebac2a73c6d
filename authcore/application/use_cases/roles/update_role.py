"""Update role use case."""

import logging

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.role_dto import RoleOutput, UpdateRoleInput
from authcore.application.exceptions import ConflictError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_role_or_raise

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Use case for a partial role update."""

    def __init__(self, uow: UnitOfWorkPort, clock: Clock = utc_now):
        self.uow = uow
        self.clock = clock

    @guard_errors()
    async def execute(self, role_id: int, input_dto: UpdateRoleInput) -> RoleOutput:
        """
        Apply the fields present in ``input_dto`` to a role.

        Args:
            role_id: Role to update
            input_dto: Patch; absent fields are left untouched

        Returns:
            Updated role

        Raises:
            NotFoundError: If role doesn't exist
            ConflictError: If the new name belongs to another role
        """
        async with self.uow:
            role = await get_role_or_raise(self.uow, role_id)

            if input_dto.name is not None and input_dto.name != role.name:
                owner = await self.uow.roles.get_by_name(input_dto.name)
                if owner is not None and owner.id != role.id:
                    raise ConflictError(
                        message=f"Role '{input_dto.name}' already exists",
                        resource_type="Role",
                        field="name",
                    )
                role.rename(input_dto.name)

            if "description" in input_dto.model_fields_set:
                role.describe(input_dto.description)

            if input_dto.state is not None:
                role.set_state(input_dto.state)

            role.updated_at = self.clock()
            updated = await self.uow.roles.update(role)

        logger.info("Role updated", extra={"role_id": updated.id})
        return RoleOutput.from_entity(updated)
