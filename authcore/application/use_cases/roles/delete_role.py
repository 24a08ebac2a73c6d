"""Delete role use case."""

import logging

from authcore.application.dto.role_dto import MessageOutput
from authcore.application.exceptions import ConflictError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_role_or_raise

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """
    Use case for deleting a role.

    A role can only be deleted while no user actively holds it. Its inactive
    assignment rows are deleted along with it.
    """

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    @guard_errors()
    async def execute(self, role_id: int) -> MessageOutput:
        """
        Delete a role and its assignment history.

        Raises:
            NotFoundError: If role doesn't exist
            ConflictError: If the role has active assignments
        """
        async with self.uow:
            role = await get_role_or_raise(self.uow, role_id)

            active = await self.uow.assignments.count_active_for_role(role_id)
            if active > 0:
                logger.warning(
                    "Role deletion blocked by active assignments",
                    extra={"role_id": role_id, "active_assignments": active},
                )
                raise ConflictError(
                    message=f"Role '{role.name}' has {active} active assignment(s)",
                    resource_type="Role",
                )

            removed = await self.uow.assignments.delete_for_role(role_id)
            await self.uow.roles.delete(role_id)

        logger.info(
            "Role deleted",
            extra={"role_id": role_id, "assignments_removed": removed},
        )
        return MessageOutput(message=f"Role '{role.name}' deleted")
