"""
Login lockout policy.

The policy bounds brute-force attempts: after ``max_attempts`` consecutive
failures the account is locked for ``lockout_duration``. Unlocking is lazy,
an expired lock is simply ignored the next time the account is evaluated.
"""

import enum
import math
from dataclasses import dataclass
from datetime import datetime, timedelta


class AccountStatus(str, enum.Enum):
    """Login state of an account at a given instant."""

    ACTIVE = "active"
    LOCKED = "locked"
    DEACTIVATED = "deactivated"


@dataclass(frozen=True)
class LockoutPolicy:
    """Thresholds of the lockout state machine."""

    max_attempts: int = 5
    lockout_duration: timedelta = timedelta(minutes=15)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.lockout_duration <= timedelta(0):
            raise ValueError("lockout_duration must be positive")

    def should_lock(self, failed_attempts: int) -> bool:
        """Whether this many consecutive failures locks the account."""
        return failed_attempts >= self.max_attempts

    def lock_expiry(self, now: datetime) -> datetime:
        """Instant at which a lock started ``now`` ends."""
        return now + self.lockout_duration


def minutes_until(expiry: datetime, now: datetime) -> int:
    """Whole minutes left until ``expiry``, rounded up; never below zero."""
    seconds = (expiry - now).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / 60)
