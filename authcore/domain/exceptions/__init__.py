"""Domain exceptions package."""

from authcore.domain.exceptions.base import DomainException, InvalidStateTransitionError
from authcore.domain.exceptions.role_exceptions import (
    InvalidAssignmentStateTransitionError,
    InvalidRoleError,
    RoleDomainException,
)
from authcore.domain.exceptions.user_exceptions import (
    InvalidEmailError,
    InvalidPasswordError,
    InvalidUserStateTransitionError,
    UserDomainException,
)

__all__ = [
    # Base
    "DomainException",
    "InvalidStateTransitionError",
    # User exceptions
    "UserDomainException",
    "InvalidEmailError",
    "InvalidPasswordError",
    "InvalidUserStateTransitionError",
    # Role exceptions
    "RoleDomainException",
    "InvalidRoleError",
    "InvalidAssignmentStateTransitionError",
]
