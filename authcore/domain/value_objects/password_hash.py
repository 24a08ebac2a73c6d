"""Password hash value object."""

from dataclasses import dataclass

from authcore.domain.exceptions import InvalidPasswordError


@dataclass(frozen=True)
class PasswordHash:
    """
    Password digest produced by the password hasher.

    Only ever holds a digest, never a plaintext password. The digest is
    redacted from str/repr so it cannot leak through logs.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidPasswordError("Password hash cannot be empty")

        if len(self.value) < 20:
            raise InvalidPasswordError(
                "Invalid password hash format (too short, likely not hashed)"
            )

        if any(ch.isspace() for ch in self.value):
            raise InvalidPasswordError(
                "Invalid password hash format (contains whitespace)"
            )

    def __str__(self) -> str:
        return "***REDACTED***"

    def __repr__(self) -> str:
        return "PasswordHash(***REDACTED***)"
