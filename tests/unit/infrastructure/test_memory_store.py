"""Unit tests for the in-memory store and unit of work."""

import pytest

from authcore.application.exceptions import ConflictError
from authcore.domain.entities.role import Role
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.infrastructure.adapters.outbound.persistence.memory import InMemoryUnitOfWork

DIGEST = "$argon2id$v=19$m=8192,t=1,p=1$c29tZXNhbHQ$aGFzaGVkdmFsdWU"


def new_user(email: str, national_id: str | None = None) -> User:
    return User(
        id=None,
        email=Email(email),
        name="Someone",
        password_hash=PasswordHash(DIGEST),
        national_id=national_id,
    )


class TestUnitOfWork:
    """Test commit and rollback semantics."""

    async def test_commit_keeps_writes(self, store, uow):
        async with uow:
            user = await uow.users.add(new_user("a@example.com"))

        assert store.users[user.id].email.value == "a@example.com"

    async def test_rollback_undoes_every_write(self, store, uow, clock):
        async with uow:
            role = await uow.roles.add(Role(id=None, name="auditor"))

        with pytest.raises(RuntimeError):
            async with uow:
                user = await uow.users.add(new_user("a@example.com"))
                await uow.assignments.add(RoleAssignment.grant(user.id, role.id, clock()))
                role.rename("renamed")
                await uow.roles.update(role)
                raise RuntimeError("boom")

        assert store.users == {}
        assert store.assignments == {}
        assert store.roles[role.id].name == "auditor"

    async def test_rollback_restores_deleted_rows(self, store, uow):
        async with uow:
            role = await uow.roles.add(Role(id=None, name="auditor"))

        with pytest.raises(RuntimeError):
            async with uow:
                await uow.roles.delete(role.id)
                raise RuntimeError("boom")

        assert role.id in store.roles

    async def test_reads_are_detached(self, store, uow):
        async with uow:
            user = await uow.users.add(new_user("a@example.com"))

        fetched = await uow.users.get_by_id(user.id)
        fetched.failed_login_attempts = 99

        assert store.users[user.id].failed_login_attempts == 0


class TestRepositories:
    """Test uniqueness rules and queries."""

    async def test_duplicate_email_conflicts(self, uow):
        async with uow:
            await uow.users.add(new_user("a@example.com"))
            with pytest.raises(ConflictError):
                await uow.users.add(new_user("A@example.com"))

    async def test_duplicate_national_id_conflicts(self, uow):
        async with uow:
            await uow.users.add(new_user("a@example.com", national_id="123"))
            with pytest.raises(ConflictError):
                await uow.users.add(new_user("b@example.com", national_id="123"))
            assert await uow.users.exists_by_national_id("123") is True

    async def test_increment_is_cumulative(self, uow, clock):
        async with uow:
            user = await uow.users.add(new_user("a@example.com"))
            assert await uow.users.increment_failed_login_attempts(user.id, clock()) == 1
            assert await uow.users.increment_failed_login_attempts(user.id, clock()) == 2

    async def test_single_active_assignment(self, uow, clock):
        async with uow:
            first = await uow.assignments.add(RoleAssignment.grant(1, 1, clock()))
            with pytest.raises(ConflictError):
                await uow.assignments.add(RoleAssignment.grant(1, 1, clock()))

            first.revoke(clock())
            await uow.assignments.update(first)
            second = await uow.assignments.add(RoleAssignment.grant(1, 1, clock()))

            assert second.id != first.id
            assert await uow.assignments.count_active_for_role(1) == 1
            assert len(await uow.assignments.list_for_user_and_role(1, 1)) == 2

    async def test_active_role_names_skip_inactive_roles(self, uow, clock):
        async with uow:
            on = await uow.roles.add(Role(id=None, name="b-role"))
            off = await uow.roles.add(Role(id=None, name="a-role", state="inactive"))
            also_on = await uow.roles.add(Role(id=None, name="a-other"))
            for role in (on, off, also_on):
                await uow.assignments.add(RoleAssignment.grant(5, role.id, clock()))

            assert await uow.assignments.list_active_role_names_for_user(5) == ["a-other", "b-role"]
