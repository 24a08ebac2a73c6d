"""Unit of Work port interface."""

from typing import Protocol

from authcore.application.ports.outbound.role_assignment_repository_port import (
    RoleAssignmentRepositoryPort,
)
from authcore.application.ports.outbound.role_repository_port import RoleRepositoryPort
from authcore.application.ports.outbound.user_repository_port import UserRepositoryPort


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing transactions.

    All repository operations within one ``async with`` block are committed
    or rolled back together.

    Usage:
        async with uow:
            role = await uow.roles.get_by_id(role_id)
            role.toggle_state()
            await uow.roles.update(role)

        # On exception, automatic rollback occurs
    """

    users: UserRepositoryPort
    roles: RoleRepositoryPort
    assignments: RoleAssignmentRepositoryPort

    async def __aenter__(self) -> "UnitOfWorkPort":
        """
        Enter async context manager (begin transaction).

        Returns:
            Self (UnitOfWorkPort instance)
        """
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred, the transaction is rolled back.
        Otherwise, the transaction is committed.
        """
        ...

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
