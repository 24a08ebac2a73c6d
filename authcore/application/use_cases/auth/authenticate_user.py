"""Authenticate user use case."""

import logging

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.auth_dto import (
    AuthResponseOutput,
    LoginInput,
    UserPublicOutput,
)
from authcore.application.exceptions import (
    AccountDisabledError,
    AccountLockedError,
    InvalidCredentialsError,
)
from authcore.application.ports.outbound.password_hasher_port import PasswordHasherPort
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.domain.services.lockout_policy import AccountStatus, LockoutPolicy
from authcore.domain.value_objects.email import Email

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """
    Use case for logging a user in.

    Runs one step of the lockout state machine per attempt:

    - unknown email: ``InvalidCredentialsError``
    - deactivated: ``AccountDisabledError``, counter untouched
    - locked: ``AccountLockedError`` with the minutes left, password not checked
    - wrong password: counter incremented atomically, lock applied when the
      threshold is reached, ``InvalidCredentialsError``
    - right password: counter reset, lock cleared, token issued
    """

    def __init__(
        self,
        uow: UnitOfWorkPort,
        password_hasher: PasswordHasherPort,
        token_issuer: TokenIssuerPort,
        lockout_policy: LockoutPolicy,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            password_hasher: Verifies submitted passwords against stored digests
            token_issuer: Signs the session token
            lockout_policy: Attempt threshold and lock duration
            clock: Source of the current UTC time
        """
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.lockout_policy = lockout_policy
        self.clock = clock

    @guard_errors()
    async def execute(self, input_dto: LoginInput) -> AuthResponseOutput:
        """
        Authenticate a user and issue a session token.

        Args:
            input_dto: Login credentials

        Returns:
            Auth response with the token and the public user projection

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            AccountDisabledError: Account is deactivated
            AccountLockedError: Account is locked
            InternalError: Any unexpected failure
        """
        rejected = False

        async with self.uow:
            email = Email(input_dto.email)
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.password_hasher.verify(input_dto.password, self.password_hasher.dummy_hash)
                logger.warning("Login failed: unknown email")
                raise InvalidCredentialsError()

            now = self.clock()
            status = user.status(now)

            if status is AccountStatus.DEACTIVATED:
                logger.warning("Login rejected: account disabled", extra={"user_id": user.id})
                raise AccountDisabledError()

            if status is AccountStatus.LOCKED:
                minutes = user.lock_minutes_remaining(now)
                logger.warning(
                    "Login rejected: account locked",
                    extra={"user_id": user.id, "minutes_remaining": minutes},
                )
                raise AccountLockedError(minutes)

            if not self.password_hasher.verify(input_dto.password, user.password_hash.value):
                attempts = await self.uow.users.increment_failed_login_attempts(user.id, now)
                if user.record_failed_login(self.lockout_policy, now, failed_attempts=attempts):
                    user.updated_at = now
                    await self.uow.users.update(user)
                    logger.warning(
                        "Account locked after repeated failed logins",
                        extra={"user_id": user.id, "failed_attempts": attempts},
                    )
                else:
                    logger.warning(
                        "Login failed: wrong password",
                        extra={"user_id": user.id, "failed_attempts": attempts},
                    )
                # Raised outside the unit of work so the increment commits.
                rejected = True
            else:
                user.record_successful_login(now)
                user.updated_at = now
                await self.uow.users.update(user)
                roles = await self.uow.assignments.list_active_role_names_for_user(user.id)

        if rejected:
            raise InvalidCredentialsError()

        token = self.token_issuer.issue(user.id, user.email.value, roles)
        logger.info("User logged in", extra={"user_id": user.id})

        return AuthResponseOutput(
            access_token=token.access_token,
            token_type=token.token_type,
            expires_in=token.expires_in,
            user=UserPublicOutput.from_entity(user, roles),
        )
