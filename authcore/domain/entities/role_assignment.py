"""RoleAssignment domain entity."""

from dataclasses import dataclass
from datetime import datetime

from authcore.domain.exceptions import InvalidAssignmentStateTransitionError
from authcore.domain.value_objects.entity_state import EntityState


@dataclass
class RoleAssignment:
    """
    One grant episode of a role to a user.

    An assignment is created active and may be revoked exactly once.
    It is never reactivated: granting the role again creates a new
    assignment, so the rows of a (user, role) pair form its audit trail.
    """

    id: int | None
    user_id: int
    role_id: int
    state: EntityState = EntityState.ACTIVE
    assigned_at: datetime | None = None
    revoked_at: datetime | None = None

    def __post_init__(self) -> None:
        self.state = EntityState(self.state)
        if self.state is EntityState.ACTIVE and self.revoked_at is not None:
            raise ValueError("An active assignment cannot have a revoke timestamp")

    @classmethod
    def grant(cls, user_id: int, role_id: int, now: datetime) -> "RoleAssignment":
        """Create a new active assignment granted at ``now``."""
        return cls(
            id=None,
            user_id=user_id,
            role_id=role_id,
            state=EntityState.ACTIVE,
            assigned_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.state is EntityState.ACTIVE

    def revoke(self, now: datetime) -> None:
        """
        Deactivate this assignment.

        Raises:
            InvalidAssignmentStateTransitionError: If already inactive
        """
        if not self.is_active:
            raise InvalidAssignmentStateTransitionError(self.state.value, "revoke")
        self.state = EntityState.INACTIVE
        self.revoked_at = now

    def __repr__(self) -> str:
        return (
            f"RoleAssignment(id={self.id}, user_id={self.user_id}, "
            f"role_id={self.role_id}, state={self.state.value})"
        )
