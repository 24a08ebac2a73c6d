"""
PostgreSQL implementation of Unit of Work pattern.

Manages database transactions and coordinates repository operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_assignment_repository import (
    PostgresRoleAssignmentRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_repository import (
    PostgresRoleRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork(UnitOfWorkPort):
    """
    PostgreSQL implementation of Unit of Work pattern.

    All repositories share the same SQLAlchemy session, so everything done
    inside one ``async with`` block commits or rolls back together.

    Usage:
        async with uow:
            role = await uow.roles.get_by_id(role_id)
            role.toggle_state()
            await uow.roles.update(role)
            # Transaction committed on exit

        # On exception, automatic rollback occurs

    Attributes:
        users: User repository
        roles: Role repository
        assignments: Role assignment repository
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Unit of Work with a database session.

        Args:
            session: SQLAlchemy AsyncSession for database operations
        """
        self._session = session

        self.users = PostgresUserRepository(session)
        self.roles = PostgresRoleRepository(session)
        self.assignments = PostgresRoleAssignmentRepository(session)

    async def __aenter__(self) -> "PostgresUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred during the context, rollback the transaction.
        Otherwise, commit the transaction.
        """
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def close(self) -> None:
        """Close the database session."""
        await self._session.close()
