"""
In-memory persistence.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from authcore.infrastructure.adapters.outbound.persistence.memory.repositories import (
    InMemoryRoleAssignmentRepository,
    InMemoryRoleRepository,
    InMemoryUserRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.memory.store import InMemoryStore
from authcore.infrastructure.adapters.outbound.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
)

__all__ = [
    "InMemoryRoleAssignmentRepository",
    "InMemoryRoleRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
