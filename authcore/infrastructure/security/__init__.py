"""Password hashing and token adapters."""

from authcore.infrastructure.security.password_hasher import Argon2PasswordHasher
from authcore.infrastructure.security.token_issuer import JoseTokenIssuer

__all__ = [
    "Argon2PasswordHasher",
    "JoseTokenIssuer",
]
