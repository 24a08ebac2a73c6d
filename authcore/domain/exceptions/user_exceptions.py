"""User domain exceptions."""

from authcore.domain.exceptions.base import DomainException, InvalidStateTransitionError


class UserDomainException(DomainException):
    """Base exception for user-related domain errors."""


class InvalidEmailError(UserDomainException):
    """Raised when an email address is invalid."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Invalid email format: {email}",
            code="INVALID_EMAIL"
        )


class InvalidPasswordError(UserDomainException):
    """Raised when a password or password hash does not meet requirements."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid password: {reason}",
            code="INVALID_PASSWORD"
        )


class InvalidUserStateTransitionError(InvalidStateTransitionError, UserDomainException):
    """Raised when activating an active user or deactivating an inactive one."""

    def __init__(self, current_state: str, attempted_transition: str):
        InvalidStateTransitionError.__init__(
            self, "user", current_state, attempted_transition
        )
