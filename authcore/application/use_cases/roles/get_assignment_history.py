"""Assignment history use case."""

from authcore.application.dto.role_dto import (
    AssignmentHistoryOutput,
    AssignmentOutput,
    RoleOutput,
    UserSummaryOutput,
)
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_role_or_raise, get_user_or_raise


class GetAssignmentHistoryUseCase:
    """List every grant episode of a role to a user, newest first."""

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    @guard_errors()
    async def execute(self, role_id: int, user_id: int) -> AssignmentHistoryOutput:
        """
        Raises:
            NotFoundError: If the role or user doesn't exist
        """
        async with self.uow:
            role = await get_role_or_raise(self.uow, role_id)
            user = await get_user_or_raise(self.uow, user_id)
            rows = await self.uow.assignments.list_for_user_and_role(user_id, role_id)

        return AssignmentHistoryOutput(
            role=RoleOutput.from_entity(role),
            user=UserSummaryOutput.from_entity(user),
            assignments=[AssignmentOutput.from_entity(row) for row in rows],
        )
