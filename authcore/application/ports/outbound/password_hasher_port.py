"""Password hasher port interface."""

from typing import Protocol


class PasswordHasherPort(Protocol):
    """One-way, salted and deliberately slow password hashing."""

    dummy_hash: str
    """Digest of a random secret, verified against when no user matches."""

    def hash(self, password: str) -> str:
        """Return a self-describing digest of ``password``."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check ``password`` against a digest.

        Returns False for a mismatch or an unreadable digest; never raises
        for bad input.
        """
        ...
