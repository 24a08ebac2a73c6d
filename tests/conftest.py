"""
Pytest configuration and fixtures for authcore tests.

This module provides:
- Settings for an in-memory, fast-hashing test application
- A controllable clock
- In-memory store and unit of work fixtures
- Password hasher and token issuer fixtures
- Async HTTP client over the ASGI app
- Registered user and superadmin token fixtures
"""

# Set environment variables BEFORE importing anything from authcore
import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-characters")
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["LOG_FILE_ENABLED"] = "false"

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from authcore.application.clock import utc_now
from authcore.domain.services.lockout_policy import LockoutPolicy
from authcore.infrastructure.adapters.inbound.api.app import create_app
from authcore.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryStore,
    InMemoryUnitOfWork,
)
from authcore.infrastructure.bootstrap import run_bootstrap, seed_roles
from authcore.infrastructure.config.container import Container
from authcore.infrastructure.config.settings import Settings
from authcore.infrastructure.security.password_hasher import Argon2PasswordHasher
from authcore.infrastructure.security.token_issuer import JoseTokenIssuer

TEST_SECRET = "test-secret-key-that-is-at-least-32-characters"
ADMIN_EMAIL = "root@example.com"
ADMIN_PASSWORD = "RootPass123!"
DEFAULT_PASSWORD = "Password123!"


class FakeClock:
    """Clock returning a fixed UTC instant that tests move forward explicitly."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


# ============================================================================
# Core Fixtures
# ============================================================================
@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at the real current time, so issued tokens stay valid."""
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory application with a cheap Argon2 work factor."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        storage_backend="memory",
        log_file_enabled=False,
        log_level="WARNING",
        argon2_time_cost=1,
        argon2_memory_cost=8192,
        argon2_parallelism=1,
        bootstrap_admin_email=ADMIN_EMAIL,
        bootstrap_admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def password_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(time_cost=1, memory_cost=8192, parallelism=1)


@pytest.fixture
def token_issuer() -> JoseTokenIssuer:
    """Issuer on the real clock; token expiry is checked against wall time."""
    return JoseTokenIssuer(secret=TEST_SECRET, lifetime_seconds=3600, clock=utc_now)


@pytest.fixture
def lockout_policy() -> LockoutPolicy:
    return LockoutPolicy(max_attempts=5, lockout_duration=timedelta(minutes=15))


@pytest_asyncio.fixture
async def seeded_store(store: InMemoryStore, clock: FakeClock) -> InMemoryStore:
    """Store holding the default roles (superadmin, admin, usuario)."""
    await seed_roles(InMemoryUnitOfWork(store), ["superadmin", "admin", "usuario"], clock)
    return store


# ============================================================================
# FastAPI Client Fixtures
# ============================================================================
@pytest.fixture
def container(settings: Settings, clock: FakeClock, store: InMemoryStore) -> Container:
    return Container(settings, clock=clock, store=store)


@pytest_asyncio.fixture
async def async_client(container: Container) -> AsyncGenerator[AsyncClient, None]:
    """
    Async client over the ASGI app.

    ASGITransport does not run the lifespan, so the bootstrap is run here.
    """
    app = create_app(container=container)
    await run_bootstrap(container)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


RegisterUser = Callable[..., Awaitable[dict]]


@pytest.fixture
def register_user(async_client: AsyncClient) -> RegisterUser:
    """Register a user through the API and return the auth response body."""

    async def _register(
        email: str,
        password: str = DEFAULT_PASSWORD,
        first_name: str = "Test",
        last_name: str = "User",
        **extra,
    ) -> dict:
        response = await async_client.post(
            "/api/auth/register",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
                **extra,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest_asyncio.fixture
async def superadmin_headers(async_client: AsyncClient) -> dict[str, str]:
    """Authorization header of the bootstrap superadmin."""
    response = await async_client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def auth_headers(body: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {body['access_token']}"}


@pytest.fixture
def bearer() -> Callable[[dict], dict[str, str]]:
    """Build an Authorization header from an auth response body."""
    return auth_headers
