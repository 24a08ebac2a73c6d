"""List roles use case."""

from authcore.application.dto.role_dto import RoleListItemOutput
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors


class ListRolesUseCase:
    """List every role by name with its active assignment count."""

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    @guard_errors()
    async def execute(self) -> list[RoleListItemOutput]:
        async with self.uow:
            roles = await self.uow.roles.list_all()
            counts = await self.uow.assignments.count_active_by_role()

        return [
            RoleListItemOutput.from_entity(role, counts.get(role.id, 0))
            for role in roles
        ]
