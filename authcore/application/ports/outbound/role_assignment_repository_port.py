"""Role assignment repository port interface."""

from typing import Optional, Protocol

from authcore.domain.entities.role_assignment import RoleAssignment


class RoleAssignmentRepositoryPort(Protocol):
    """
    Repository interface for RoleAssignment entity.

    Implementations must guarantee at most one active assignment per
    (user, role) pair, even under concurrent inserts.
    """

    async def add(self, assignment: RoleAssignment) -> RoleAssignment:
        """
        Insert a new assignment.

        Args:
            assignment: Assignment entity to add (``id`` is None)

        Returns:
            Created assignment with its assigned id

        Raises:
            ConflictError: If an active assignment already exists for the pair
        """
        ...

    async def update(self, assignment: RoleAssignment) -> RoleAssignment:
        """
        Persist a state transition of an existing assignment.

        Raises:
            NotFoundError: If assignment doesn't exist
        """
        ...

    async def get_active(self, user_id: int, role_id: int) -> Optional[RoleAssignment]:
        """Return the active assignment of the pair, None if there is none."""
        ...

    async def count_active_for_role(self, role_id: int) -> int:
        """Number of active assignments of a role."""
        ...

    async def count_active_by_role(self) -> dict[int, int]:
        """Active assignment counts keyed by role id (roles with none omitted)."""
        ...

    async def list_active_for_role(self, role_id: int) -> list[RoleAssignment]:
        """Active assignments of a role, oldest grant first."""
        ...

    async def list_for_user_and_role(
        self, user_id: int, role_id: int
    ) -> list[RoleAssignment]:
        """Every assignment of the pair, newest grant first."""
        ...

    async def list_active_role_names_for_user(self, user_id: int) -> list[str]:
        """
        Names of the roles a user actively holds.

        Only assignments in state active whose role is also active are
        included. Names are sorted ascending.
        """
        ...

    async def delete_for_role(self, role_id: int) -> int:
        """
        Delete every assignment row of a role.

        Returns:
            Number of rows deleted
        """
        ...
