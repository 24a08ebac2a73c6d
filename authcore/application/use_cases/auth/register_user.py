"""Register user use case."""

import logging
from datetime import datetime

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.auth_dto import (
    AuthResponseOutput,
    RegisterUserInput,
    UserPublicOutput,
)
from authcore.application.exceptions import BadRequestError, ConflictError
from authcore.application.ports.outbound.password_hasher_port import PasswordHasherPort
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash

logger = logging.getLogger(__name__)


class MissingDefaultRoleError(RuntimeError):
    """The configured default role is required but does not exist."""


class RegisterUserUseCase:
    """Use case for registering a new user."""

    def __init__(
        self,
        uow: UnitOfWorkPort,
        password_hasher: PasswordHasherPort,
        token_issuer: TokenIssuerPort,
        default_role_name: str = "usuario",
        require_default_role: bool = False,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            password_hasher: Produces the stored password digest
            token_issuer: Signs the initial session token
            default_role_name: Role granted to every new user
            require_default_role: Fail registration when the default role is missing
            clock: Source of the current UTC time
        """
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.default_role_name = default_role_name
        self.require_default_role = require_default_role
        self.clock = clock

    @guard_errors(BadRequestError, "Could not create the account")
    async def execute(self, input_dto: RegisterUserInput) -> AuthResponseOutput:
        """
        Register a new user account and log it in.

        Args:
            input_dto: User registration data

        Returns:
            Auth response with the initial token and the public user projection

        Raises:
            ConflictError: If the email or national id is already registered
            BadRequestError: If the account could not be created
        """
        async with self.uow:
            email = Email(input_dto.email)

            if await self.uow.users.exists_by_email(email):
                logger.warning("Registration rejected: email already registered")
                raise ConflictError(
                    message="Email already registered",
                    resource_type="User",
                    field="email",
                )

            if input_dto.national_id and await self.uow.users.exists_by_national_id(
                input_dto.national_id
            ):
                logger.warning("Registration rejected: national id already registered")
                raise ConflictError(
                    message="National id already registered",
                    resource_type="User",
                    field="national_id",
                )

            now = self.clock()
            user = User(
                id=None,
                email=email,
                name=f"{input_dto.first_name} {input_dto.last_name}",
                password_hash=PasswordHash(self.password_hasher.hash(input_dto.password)),
                is_active=True,
                email_verified=False,
                failed_login_attempts=0,
                phone=input_dto.phone,
                national_id=input_dto.national_id,
                created_at=now,
                updated_at=now,
            )
            created_user = await self.uow.users.add(user)

            roles = await self._grant_default_role(created_user, now)

        token = self.token_issuer.issue(created_user.id, created_user.email.value, roles)
        logger.info("User registered", extra={"user_id": created_user.id})

        return AuthResponseOutput(
            access_token=token.access_token,
            token_type=token.token_type,
            expires_in=token.expires_in,
            user=UserPublicOutput.from_entity(created_user, roles),
        )

    async def _grant_default_role(self, user: User, now: datetime) -> list[str]:
        role = await self.uow.roles.get_by_name(self.default_role_name)

        if role is None:
            if self.require_default_role:
                raise MissingDefaultRoleError(
                    f"Default role '{self.default_role_name}' does not exist"
                )
            logger.warning(
                "Default role missing, user registered without roles",
                extra={"role_name": self.default_role_name, "user_id": user.id},
            )
            return []

        await self.uow.assignments.add(RoleAssignment.grant(user.id, role.id, now))
        return [role.name] if role.is_active else []
