"""Role and role assignment domain exceptions."""

from authcore.domain.exceptions.base import DomainException, InvalidStateTransitionError


class RoleDomainException(DomainException):
    """Base exception for role-related domain errors."""


class InvalidRoleError(RoleDomainException):
    """Raised when role data is invalid."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid role: {reason}",
            code="INVALID_ROLE"
        )


class InvalidAssignmentStateTransitionError(
    InvalidStateTransitionError, RoleDomainException
):
    """Raised when revoking an assignment that is no longer active."""

    def __init__(self, current_state: str, attempted_transition: str):
        InvalidStateTransitionError.__init__(
            self, "assignment", current_state, attempted_transition
        )
