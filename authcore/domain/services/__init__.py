"""Domain services."""

from authcore.domain.services.lockout_policy import (
    AccountStatus,
    LockoutPolicy,
    minutes_until,
)

__all__ = [
    "AccountStatus",
    "LockoutPolicy",
    "minutes_until",
]
