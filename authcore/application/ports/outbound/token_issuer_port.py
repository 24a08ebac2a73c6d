"""Token issuer port interface."""

from typing import Protocol

from authcore.application.dto.token_dto import IssuedToken, TokenClaims


class TokenIssuerPort(Protocol):
    """Builds, signs and validates session tokens."""

    def issue(self, user_id: int, email: str, roles: list[str]) -> IssuedToken:
        """
        Sign a session token for an authenticated user.

        Args:
            user_id: User id, carried as the ``sub`` claim (stringified)
            email: User email
            roles: Active role names

        Returns:
            The signed token with its lifetime in seconds
        """
        ...

    def decode(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the claims.

        Raises:
            InvalidTokenError: If the token is malformed, tampered or expired
        """
        ...
