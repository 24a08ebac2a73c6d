"""List role users use case."""

from authcore.application.dto.role_dto import AssignmentOutput, RoleOutput, RoleUsersOutput
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_role_or_raise


class ListRoleUsersUseCase:
    """Use case for listing the users that actively hold a role."""

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    @guard_errors()
    async def execute(self, role_id: int) -> RoleUsersOutput:
        """
        List active assignments of a role with user summaries.

        Raises:
            NotFoundError: If role doesn't exist
        """
        async with self.uow:
            role = await get_role_or_raise(self.uow, role_id)
            active = await self.uow.assignments.list_active_for_role(role_id)

            assignments = []
            for assignment in active:
                user = await self.uow.users.get_by_id(assignment.user_id)
                assignments.append(AssignmentOutput.from_entity(assignment, user=user))

        return RoleUsersOutput(
            role=RoleOutput.from_entity(role),
            assignments=assignments,
            total=len(assignments),
        )
