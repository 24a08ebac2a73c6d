"""Role and RoleAssignment SQLAlchemy models."""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    BigInteger,
    DateTime,
    ForeignKey,
    Identity,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from authcore.domain.value_objects.entity_state import EntityState
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    TimestampMixin,
    _utc_now,
    entity_state_enum,
)

ACTIVE_ASSIGNMENT_INDEX = "uq_role_assignments_active_user_role"


class RoleModel(Base, TimestampMixin):
    """Role SQLAlchemy model. Names are unique and case-sensitive."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, Identity(), primary_key=True)

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    state: Mapped[EntityState] = mapped_column(
        entity_state_enum,
        nullable=False,
        default=EntityState.ACTIVE,
    )

    def __repr__(self) -> str:
        return f"RoleModel(id={self.id}, name={self.name})"


class RoleAssignmentModel(Base):
    """
    One grant episode of a role to a user.

    The partial unique index allows any number of inactive rows per
    (user, role) but only one active row.
    """

    __tablename__ = "role_assignments"
    __table_args__ = (
        Index(
            ACTIVE_ASSIGNMENT_INDEX,
            "user_id",
            "role_id",
            unique=True,
            postgresql_where=text("state = 'active'"),
        ),
        Index("ix_role_assignments_role_id_state", "role_id", "state"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(), primary_key=True)

    user_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("roles.id", ondelete="RESTRICT"),
        nullable=False,
    )

    state: Mapped[EntityState] = mapped_column(
        entity_state_enum,
        nullable=False,
        default=EntityState.ACTIVE,
    )

    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utc_now,
    )

    revoked_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"RoleAssignmentModel(id={self.id}, user_id={self.user_id}, "
            f"role_id={self.role_id}, state={self.state})"
        )
