"""
Password hashing with Argon2id.

Argon2id is memory-hard and the default variant of ``argon2-cffi``. The work
factor (time cost, memory cost, parallelism) comes from configuration.
"""

import logging
import secrets

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

logger = logging.getLogger(__name__)


class Argon2PasswordHasher:
    """Password hasher adapter backed by ``argon2.PasswordHasher``."""

    def __init__(
        self,
        time_cost: int = 2,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        """
        Initialize the hasher.

        Args:
            time_cost: Number of iterations
            memory_cost: Memory usage in KiB
            parallelism: Number of parallel lanes
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=32,
            salt_len=16,
        )
        # Digest of a random secret, checked on logins for unknown emails
        self.dummy_hash = self._hasher.hash(secrets.token_urlsafe(32))

    def hash(self, password: str) -> str:
        """
        Hash a password.

        Returns:
            Argon2id hash string (includes algorithm, parameters, salt and hash)
        """
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Verify a password against an Argon2id hash.

        Returns:
            True if password matches hash, False otherwise
        """
        try:
            return self._hasher.verify(password_hash, password)
        except VerifyMismatchError:
            return False
        except (VerificationError, InvalidHashError):
            logger.warning("Stored password hash could not be verified")
            return False
