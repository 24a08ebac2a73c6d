"""User SQLAlchemy model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, Boolean, DateTime, Identity, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    User SQLAlchemy model for authentication and profile data.

    Pure SQLAlchemy with no business logic; the lockout state machine lives
    in ``authcore.domain.entities.user.User``.

    Attributes:
        id: 64-bit identity primary key
        email: Unique normalized email
        name: Display name
        password_hash: Argon2id digest
        is_active: Whether the account may log in
        email_verified: Whether the email was verified
        failed_login_attempts: Consecutive failed logins
        locked_until: Lockout expiry (NULL when not locked)
        last_login_at: Timestamp of last successful login
        phone: Optional phone number
        national_id: Optional national id, unique when present
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigInteger, Identity(), primary_key=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    email_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    failed_login_attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    locked_until: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    last_login_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Multiple NULLs are allowed by a unique constraint
    national_id: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, unique=True)

    def __repr__(self) -> str:
        """String representation of UserModel."""
        return f"UserModel(id={self.id}, email={self.email})"
