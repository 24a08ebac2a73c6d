"""PostgreSQL repository implementations."""

from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_assignment_repository import (
    PostgresRoleAssignmentRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_repository import (
    PostgresRoleRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_repository import (
    PostgresUserRepository,
)

__all__ = [
    "PostgresRoleAssignmentRepository",
    "PostgresRoleRepository",
    "PostgresUserRepository",
]
