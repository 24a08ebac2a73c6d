"""Activate / deactivate user use case."""

import logging

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.auth_dto import UserPublicOutput
from authcore.application.dto.user_dto import SetUserStateInput
from authcore.application.exceptions import ConflictError, ForbiddenError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_user_or_raise
from authcore.domain.exceptions import InvalidUserStateTransitionError

logger = logging.getLogger(__name__)


class SetUserActiveStateUseCase:
    """
    Use case for the administrative account switch.

    A deactivated account keeps its roles and history but can no longer log
    in or resolve its token. Lockout counters are left as they are.
    """

    def __init__(self, uow: UnitOfWorkPort, clock: Clock = utc_now):
        self.uow = uow
        self.clock = clock

    @guard_errors()
    async def execute(
        self, user_id: int, input_dto: SetUserStateInput, acting_user_id: str
    ) -> UserPublicOutput:
        """
        Activate or deactivate a user.

        Args:
            user_id: Account to change
            input_dto: Requested state
            acting_user_id: Token subject of the administrator

        Returns:
            The user with its active role names

        Raises:
            NotFoundError: If user doesn't exist
            ForbiddenError: If an administrator deactivates their own account
            ConflictError: If the account is already in the requested state
        """
        if not input_dto.active and str(user_id) == acting_user_id:
            raise ForbiddenError("You cannot deactivate your own account")

        async with self.uow:
            user = await get_user_or_raise(self.uow, user_id)

            try:
                if input_dto.active:
                    user.activate()
                else:
                    user.deactivate()
            except InvalidUserStateTransitionError as exc:
                raise ConflictError(exc.message, resource_type="User") from exc

            user.updated_at = self.clock()
            updated = await self.uow.users.update(user)
            roles = await self.uow.assignments.list_active_role_names_for_user(user_id)

        logger.warning(
            "User account state changed",
            extra={
                "user_id": user_id,
                "is_active": updated.is_active,
                "changed_by": acting_user_id,
            },
        )
        return UserPublicOutput.from_entity(updated, roles)
