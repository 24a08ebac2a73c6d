"""User repository port interface."""

from datetime import datetime
from typing import Optional, Protocol

from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email


class UserRepositoryPort(Protocol):
    """Repository interface for User entity."""

    async def add(self, user: User) -> User:
        """
        Add a new user to the repository.

        Args:
            user: User entity to add (``id`` is None)

        Returns:
            Created user entity with its assigned id and timestamps

        Raises:
            ConflictError: If the email or national id is already taken
        """
        ...

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Retrieve user by ID.

        Args:
            user_id: User's unique identifier

        Returns:
            User entity if found, None otherwise
        """
        ...

    async def get_by_email(self, email: Email) -> Optional[User]:
        """
        Retrieve user by normalized email address.

        Args:
            email: User's email value object

        Returns:
            User entity if found, None otherwise
        """
        ...

    async def exists_by_email(self, email: Email) -> bool:
        """Check whether a user with this email exists."""
        ...

    async def exists_by_national_id(self, national_id: str) -> bool:
        """Check whether a user holds this national id."""
        ...

    async def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            NotFoundError: If user doesn't exist
        """
        ...

    async def increment_failed_login_attempts(
        self, user_id: int, now: datetime
    ) -> int:
        """
        Atomically add one to the user's failed login counter.

        Concurrent failures for the same user must each be counted.

        Args:
            user_id: User's unique identifier
            now: Timestamp recorded as the update time

        Returns:
            The counter value after the increment

        Raises:
            NotFoundError: If user doesn't exist
        """
        ...
