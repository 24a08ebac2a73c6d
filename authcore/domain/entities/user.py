"""User domain entity."""

from dataclasses import dataclass
from datetime import datetime

from authcore.domain.exceptions import InvalidUserStateTransitionError
from authcore.domain.services.lockout_policy import (
    AccountStatus,
    LockoutPolicy,
    minutes_until,
)
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash


@dataclass
class User:
    """
    User entity carrying credentials and login state.

    The entity owns the lockout state machine transitions:

        active --(failure reaching threshold)--> locked-until(T)
        locked-until(T) --(now >= T)--> active       (lazy, no write)
        any --(successful login)--> active with counter 0
        active <--(activate / deactivate)--> deactivated

    ``id`` is ``None`` until the store assigns one.
    """

    id: int | None
    email: Email
    name: str
    password_hash: PasswordHash
    is_active: bool = True
    email_verified: bool = False
    failed_login_attempts: int = 0
    locked_until: datetime | None = None
    last_login_at: datetime | None = None
    phone: str | None = None
    national_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate user after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Name cannot be empty")

        if len(self.name) > 255:
            raise ValueError("Name cannot exceed 255 characters")

        if self.failed_login_attempts < 0:
            raise ValueError("Failed login attempts cannot be negative")

    # ------------------------------------------------------------------
    # Lockout state machine
    # ------------------------------------------------------------------

    def is_locked(self, now: datetime) -> bool:
        """True while a lockout expiry lies in the future."""
        return self.locked_until is not None and now < self.locked_until

    def status(self, now: datetime) -> AccountStatus:
        """
        Login state at ``now``.

        Deactivation wins over a pending lock.
        """
        if not self.is_active:
            return AccountStatus.DEACTIVATED
        if self.is_locked(now):
            return AccountStatus.LOCKED
        return AccountStatus.ACTIVE

    def lock_minutes_remaining(self, now: datetime) -> int:
        """Minutes until the lock expires (0 when not locked)."""
        if self.locked_until is None:
            return 0
        return minutes_until(self.locked_until, now)

    def record_failed_login(
        self,
        policy: LockoutPolicy,
        now: datetime,
        failed_attempts: int | None = None,
    ) -> bool:
        """
        Record a failed password check.

        Args:
            policy: Lockout thresholds
            now: Current instant
            failed_attempts: Counter value already incremented by the store.
                When omitted the entity increments its own counter.

        Returns:
            True if this failure locked the account
        """
        if failed_attempts is None:
            failed_attempts = self.failed_login_attempts + 1
        self.failed_login_attempts = failed_attempts

        if policy.should_lock(failed_attempts):
            self.locked_until = policy.lock_expiry(now)
            return True

        self.locked_until = None
        return False

    def record_successful_login(self, now: datetime) -> None:
        """Reset the failure counter, clear any lock and stamp the login."""
        self.failed_login_attempts = 0
        self.locked_until = None
        self.last_login_at = now

    # ------------------------------------------------------------------
    # Administrative transitions
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """
        Activate this user account.

        Raises:
            InvalidUserStateTransitionError: If user is already active
        """
        if self.is_active:
            raise InvalidUserStateTransitionError("active", "activate")
        self.is_active = True

    def deactivate(self) -> None:
        """
        Deactivate this user account.

        Raises:
            InvalidUserStateTransitionError: If user is already inactive
        """
        if not self.is_active:
            raise InvalidUserStateTransitionError("inactive", "deactivate")
        self.is_active = False

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, User):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"User(id={self.id}, email={self.email}, "
            f"is_active={self.is_active}, failed_login_attempts={self.failed_login_attempts})"
        )
