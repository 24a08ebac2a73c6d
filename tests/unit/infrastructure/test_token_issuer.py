"""Unit tests for the JWT token issuer."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from authcore.application.exceptions import InvalidTokenError
from authcore.infrastructure.config.settings import Settings
from authcore.infrastructure.security.token_issuer import JoseTokenIssuer

SECRET = "test-secret-key-that-is-at-least-32-characters"


class TestIssue:
    """Test token issuance."""

    def test_payload(self):
        now = datetime.now(timezone.utc).replace(microsecond=0)
        issuer = JoseTokenIssuer(SECRET, lifetime_seconds=86400, clock=lambda: now)

        token = issuer.issue(42, "alice@example.com", ["usuario"])

        assert token.token_type == "Bearer"
        assert token.expires_in == 86400
        payload = jwt.get_unverified_claims(token.access_token)
        assert payload == {
            "sub": "42",
            "email": "alice@example.com",
            "roles": ["usuario"],
            "iat": int(now.timestamp()),
            "exp": int(now.timestamp()) + 86400,
        }

    def test_signed_with_hs256(self):
        issuer = JoseTokenIssuer(SECRET, lifetime_seconds=60)
        token = issuer.issue(1, "a@example.com", [])
        assert jwt.get_unverified_header(token.access_token)["alg"] == "HS256"

    def test_secret_is_required(self):
        with pytest.raises(ValueError):
            JoseTokenIssuer("", lifetime_seconds=60)

    def test_lifetime_must_be_positive(self):
        with pytest.raises(ValueError):
            JoseTokenIssuer(SECRET, lifetime_seconds=0)


class TestDecode:
    """Test token validation."""

    def test_round_trip(self, token_issuer):
        token = token_issuer.issue(7, "bob@example.com", ["admin", "usuario"])

        claims = token_issuer.decode(token.access_token)

        assert claims.sub == "7"
        assert claims.roles == ["admin", "usuario"]
        assert claims.has_any_role("superadmin", "admin") is True
        assert claims.has_any_role("superadmin") is False

    def test_expired_token(self):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=2)
        issuer = JoseTokenIssuer(SECRET, lifetime_seconds=3600, clock=lambda: issued_at)
        token = issuer.issue(1, "a@example.com", [])

        with pytest.raises(InvalidTokenError):
            issuer.decode(token.access_token)

    def test_tampered_token(self, token_issuer):
        token = token_issuer.issue(1, "a@example.com", []).access_token
        header, payload, signature = token.split(".")
        forged = jwt.encode(
            {"sub": "1", "email": "a@example.com", "roles": ["superadmin"], "iat": 0, "exp": 4102444800},
            "another-secret-that-is-at-least-32-chars",
        )

        with pytest.raises(InvalidTokenError):
            token_issuer.decode(f"{header}.{forged.split('.')[1]}.{signature}")

    def test_wrong_secret(self, token_issuer):
        other = JoseTokenIssuer("another-secret-that-is-at-least-32-chars", lifetime_seconds=60)
        token = other.issue(1, "a@example.com", [])

        with pytest.raises(InvalidTokenError):
            token_issuer.decode(token.access_token)

    def test_garbage(self, token_issuer):
        with pytest.raises(InvalidTokenError):
            token_issuer.decode("not.a.token")

    def test_missing_claims(self, token_issuer):
        token = jwt.encode({"sub": "1", "exp": 4102444800}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            token_issuer.decode(token)


class TestLifetimeConfiguration:
    """Token lifetime parsed from settings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("24h", 86400), ("15m", 900), ("garbage", 86400), ("0s", 86400)],
    )
    def test_lifetime_from_settings(self, raw, expected):
        settings = Settings(
            _env_file=None, jwt_secret=SECRET, storage_backend="memory", jwt_expires_in=raw
        )
        assert settings.token_lifetime_seconds == expected
