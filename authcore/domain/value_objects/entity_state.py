"""Enumerated lifecycle state shared by roles and role assignments."""

import enum


class EntityState(str, enum.Enum):
    """
    Soft lifecycle state.

    Roles may flip between both values. Role assignments only ever move
    from ACTIVE to INACTIVE; a new grant creates a new assignment.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"

    def toggled(self) -> "EntityState":
        """Return the opposite state."""
        if self is EntityState.ACTIVE:
            return EntityState.INACTIVE
        return EntityState.ACTIVE
