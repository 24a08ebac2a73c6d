"""In-memory implementation of Unit of Work pattern."""

from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.infrastructure.adapters.outbound.persistence.memory.repositories import (
    InMemoryRoleAssignmentRepository,
    InMemoryRoleRepository,
    InMemoryUserRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.memory.store import (
    InMemoryStore,
    Journal,
)


class InMemoryUnitOfWork(UnitOfWorkPort):
    """
    Unit of Work over an ``InMemoryStore``.

    Writes are visible immediately; rollback undoes this unit's writes
    through its journal.
    """

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._journal = Journal(store)

        self.users = InMemoryUserRepository(store, self._journal)
        self.roles = InMemoryRoleRepository(store, self._journal)
        self.assignments = InMemoryRoleAssignmentRepository(store, self._journal)

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._journal.clear()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        self._journal.clear()

    async def rollback(self) -> None:
        self._journal.rollback()

    async def close(self) -> None:
        self._journal.clear()
