"""Unit tests for the startup bootstrap."""

import pytest

from authcore.infrastructure.adapters.outbound.persistence.memory import InMemoryUnitOfWork
from authcore.infrastructure.bootstrap import ensure_superadmin, run_bootstrap, seed_roles


class TestSeedRoles:
    """Test role seeding."""

    async def test_seed_is_idempotent(self, store, clock):
        created = await seed_roles(InMemoryUnitOfWork(store), ["superadmin", "admin"], clock)
        again = await seed_roles(InMemoryUnitOfWork(store), ["superadmin", "admin", "usuario"], clock)

        assert created == ["superadmin", "admin"]
        assert again == ["usuario"]
        assert sorted(r.name for r in store.roles.values()) == ["admin", "superadmin", "usuario"]


class TestEnsureSuperadmin:
    """Test bootstrap superadmin creation."""

    async def test_creates_verified_superadmin(self, seeded_store, password_hasher, clock):
        user_id = await ensure_superadmin(
            InMemoryUnitOfWork(seeded_store),
            "Root@Example.com",
            "RootPass123!",
            password_hasher,
            clock=clock,
        )

        user = seeded_store.users[user_id]
        assert user.email.value == "root@example.com"
        assert user.email_verified is True
        assert password_hasher.verify("RootPass123!", user.password_hash.value)

        uow = InMemoryUnitOfWork(seeded_store)
        assert await uow.assignments.list_active_role_names_for_user(user_id) == ["superadmin"]

    async def test_existing_email_is_left_untouched(self, seeded_store, password_hasher, clock):
        args = ("root@example.com", "RootPass123!", password_hasher)
        first = await ensure_superadmin(InMemoryUnitOfWork(seeded_store), *args, clock=clock)
        second = await ensure_superadmin(InMemoryUnitOfWork(seeded_store), *args, clock=clock)

        assert first is not None
        assert second is None
        assert len(seeded_store.users) == 1

    async def test_missing_role_fails(self, store, password_hasher, clock):
        with pytest.raises(RuntimeError):
            await ensure_superadmin(
                InMemoryUnitOfWork(store), "root@example.com", "RootPass123!", password_hasher, clock=clock
            )
        assert store.users == {}


async def test_run_bootstrap(container, store):
    await run_bootstrap(container)
    await run_bootstrap(container)

    assert sorted(r.name for r in store.roles.values()) == ["admin", "superadmin", "usuario"]
    assert [u.email.value for u in store.users.values()] == ["root@example.com"]
