"""Get current user use case."""

from authcore.application.dto.auth_dto import UserPublicOutput
from authcore.application.dto.token_dto import TokenClaims
from authcore.application.exceptions import UnauthorizedError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors


class GetCurrentUserUseCase:
    """Resolve verified token claims to the live user record."""

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    @guard_errors()
    async def execute(self, claims: TokenClaims) -> UserPublicOutput:
        """
        Load the token's subject with its current active roles.

        Raises:
            UnauthorizedError: If the subject is malformed, unknown or deactivated
        """
        try:
            user_id = int(claims.sub)
        except ValueError:
            raise UnauthorizedError("Invalid token subject") from None

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None or not user.is_active:
                raise UnauthorizedError("User not found or inactive")

            roles = await self.uow.assignments.list_active_role_names_for_user(user.id)

        return UserPublicOutput.from_entity(user, roles)
