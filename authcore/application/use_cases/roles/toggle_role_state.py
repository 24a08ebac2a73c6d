"""Toggle role state use case."""

import logging

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.role_dto import RoleOutput
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_role_or_raise

logger = logging.getLogger(__name__)


class ToggleRoleStateUseCase:
    """Flip a role between active and inactive."""

    def __init__(self, uow: UnitOfWorkPort, clock: Clock = utc_now):
        self.uow = uow
        self.clock = clock

    @guard_errors()
    async def execute(self, role_id: int) -> RoleOutput:
        async with self.uow:
            role = await get_role_or_raise(self.uow, role_id)
            new_state = role.toggle_state()
            role.updated_at = self.clock()
            updated = await self.uow.roles.update(role)

        logger.info("Role state toggled", extra={"role_id": role_id, "state": new_state.value})
        return RoleOutput.from_entity(updated)
