"""Role repository port interface."""

from typing import Optional, Protocol

from authcore.domain.entities.role import Role


class RoleRepositoryPort(Protocol):
    """Repository interface for Role entity."""

    async def add(self, role: Role) -> Role:
        """
        Add a new role.

        Args:
            role: Role entity to add (``id`` is None)

        Returns:
            Created role with its assigned id

        Raises:
            ConflictError: If a role with the same name exists
        """
        ...

    async def get_by_id(self, role_id: int) -> Optional[Role]:
        """Retrieve role by ID, None if absent."""
        ...

    async def get_by_name(self, name: str) -> Optional[Role]:
        """
        Retrieve role by its exact (case-sensitive) name.

        Args:
            name: Role name

        Returns:
            Role entity if found, None otherwise
        """
        ...

    async def list_all(self) -> list[Role]:
        """List every role ordered by name ascending."""
        ...

    async def update(self, role: Role) -> Role:
        """
        Persist changes to an existing role.

        Raises:
            NotFoundError: If role doesn't exist
            ConflictError: If the new name is taken
        """
        ...

    async def delete(self, role_id: int) -> None:
        """
        Physically delete a role.

        Raises:
            NotFoundError: If role doesn't exist
        """
        ...
