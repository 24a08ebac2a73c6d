"""
SQLAlchemy models for PostgreSQL persistence.

Pure ORM models with NO business logic; business logic lives in the
domain layer (authcore.domain.entities).

Models:
- UserModel: credentials, lockout state and profile
- RoleModel: named roles with an active/inactive state
- RoleAssignmentModel: grant/revoke history of roles to users
"""

from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    TimestampMixin,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.role_model import (
    ACTIVE_ASSIGNMENT_INDEX,
    RoleAssignmentModel,
    RoleModel,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    UserModel,
)

__all__ = [
    "ACTIVE_ASSIGNMENT_INDEX",
    "Base",
    "RoleAssignmentModel",
    "RoleModel",
    "TimestampMixin",
    "UserModel",
]
