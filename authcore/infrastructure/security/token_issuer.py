"""
Session token issuance and validation with python-jose.

Tokens are stateless HS256 JWTs carrying ``sub`` (stringified user id),
``email``, ``roles``, ``iat`` and ``exp``. There is no server-side
revocation; a token is valid until it expires.
"""

import logging
from datetime import datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.token_dto import IssuedToken, TokenClaims
from authcore.application.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


class JoseTokenIssuer:
    """Token issuer adapter signing JWTs with a shared secret."""

    def __init__(
        self,
        secret: str,
        lifetime_seconds: int,
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ):
        """
        Initialize the issuer.

        Args:
            secret: Signing secret (required, never defaulted)
            lifetime_seconds: Token lifetime, must be positive
            algorithm: HMAC algorithm
            clock: Source of the current UTC time
        """
        if not secret:
            raise ValueError("A signing secret is required")
        if lifetime_seconds <= 0:
            raise ValueError("lifetime_seconds must be positive")

        self._secret = secret
        self.lifetime_seconds = lifetime_seconds
        self.algorithm = algorithm
        self.clock = clock

    def issue(self, user_id: int, email: str, roles: list[str]) -> IssuedToken:
        now = self.clock()
        expire = now + timedelta(seconds=self.lifetime_seconds)

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "roles": list(roles),
            "iat": _timestamp(now),
            "exp": _timestamp(expire),
        }
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)

        return IssuedToken(
            access_token=token,
            token_type="Bearer",
            expires_in=self.lifetime_seconds,
        )

    def decode(self, token: str) -> TokenClaims:
        """
        Decode and validate a session token.

        Verifies the signature, the algorithm and the expiry.

        Raises:
            InvalidTokenError: On any failure
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            return TokenClaims(**payload)
        except JWTError as exc:
            logger.warning(f"Token rejected: {exc}")
            raise InvalidTokenError() from exc
        except (PydanticValidationError, TypeError) as exc:
            logger.warning("Token rejected: unexpected claims")
            raise InvalidTokenError() from exc


def _timestamp(moment: datetime) -> int:
    return int(moment.timestamp())
