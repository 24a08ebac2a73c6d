"""Unit tests for granting, revoking and listing role assignments."""

import pytest

from authcore.application.dto.role_dto import AssignmentAction, SetAssignmentInput
from authcore.application.exceptions import ConflictError, NotFoundError
from authcore.application.use_cases.roles import (
    GetAssignmentHistoryUseCase,
    ListRoleUsersUseCase,
    SetRoleAssignmentUseCase,
)
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.entity_state import EntityState
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.infrastructure.adapters.outbound.persistence.memory import InMemoryUnitOfWork

DIGEST = "$argon2id$v=19$m=8192,t=1,p=1$c29tZXNhbHQ$aGFzaGVkdmFsdWU"


@pytest.fixture
async def bob(seeded_store) -> User:
    uow = InMemoryUnitOfWork(seeded_store)
    async with uow:
        return await uow.users.add(
            User(id=None, email=Email("bob@example.com"), name="Bob Jones", password_hash=PasswordHash(DIGEST))
        )


@pytest.fixture
def admin_role_id(seeded_store) -> int:
    return next(r.id for r in seeded_store.roles.values() if r.name == "admin")


@pytest.fixture
def set_assignment(seeded_store, clock):
    use_case = SetRoleAssignmentUseCase(InMemoryUnitOfWork(seeded_store), clock=clock)

    async def _set(role_id: int, user_id: int, action: str):
        return await use_case.execute(
            role_id, SetAssignmentInput(user_id=str(user_id), action=action)
        )

    return _set


class TestSetRoleAssignment:
    """Test SetRoleAssignmentUseCase."""

    async def test_assign(self, set_assignment, bob, admin_role_id, clock):
        result = await set_assignment(admin_role_id, bob.id, "assign")

        assert result.message == "Role assigned"
        assert result.assignment.state is EntityState.ACTIVE
        assert result.assignment.assigned_at == clock()
        assert result.assignment.user.email == "bob@example.com"
        assert result.assignment.role.name == "admin"

    async def test_second_assign_conflicts(self, set_assignment, bob, admin_role_id, seeded_store):
        await set_assignment(admin_role_id, bob.id, "assign")

        with pytest.raises(ConflictError) as exc_info:
            await set_assignment(admin_role_id, bob.id, "assign")

        assert exc_info.value.message == "User already has this role assigned"
        active = [a for a in seeded_store.assignments.values() if a.is_active]
        assert len(active) == 1

    async def test_revoke(self, set_assignment, bob, admin_role_id, clock):
        await set_assignment(admin_role_id, bob.id, "assign")
        clock.advance(minutes=1)

        result = await set_assignment(admin_role_id, bob.id, AssignmentAction.REVOKE)

        assert result.message == "Role revoked"
        assert result.assignment.state is EntityState.INACTIVE
        assert result.assignment.revoked_at == clock()

    async def test_revoke_without_active_assignment(self, set_assignment, bob, admin_role_id):
        with pytest.raises(NotFoundError):
            await set_assignment(admin_role_id, bob.id, "revoke")

    async def test_missing_role(self, set_assignment, bob):
        with pytest.raises(NotFoundError) as exc_info:
            await set_assignment(999, bob.id, "assign")
        assert exc_info.value.details["resource_type"] == "Role"

    async def test_missing_user(self, set_assignment, admin_role_id):
        with pytest.raises(NotFoundError) as exc_info:
            await set_assignment(admin_role_id, 999, "assign")
        assert exc_info.value.details["resource_type"] == "User"

    async def test_assign_revoke_assign_keeps_history(
        self, set_assignment, bob, admin_role_id, seeded_store, clock
    ):
        await set_assignment(admin_role_id, bob.id, "assign")
        clock.advance(minutes=1)
        await set_assignment(admin_role_id, bob.id, "revoke")
        clock.advance(minutes=1)
        await set_assignment(admin_role_id, bob.id, "assign")

        history = await GetAssignmentHistoryUseCase(InMemoryUnitOfWork(seeded_store)).execute(
            admin_role_id, bob.id
        )

        assert [a.state for a in history.assignments] == [EntityState.ACTIVE, EntityState.INACTIVE]
        assert history.assignments[0].assigned_at > history.assignments[1].assigned_at
        assert history.user.email == "bob@example.com"
        assert history.role.name == "admin"


class TestListRoleUsers:
    """Test ListRoleUsersUseCase."""

    async def test_lists_active_holders_only(
        self, set_assignment, bob, admin_role_id, seeded_store
    ):
        uow = InMemoryUnitOfWork(seeded_store)
        async with uow:
            carol = await uow.users.add(
                User(id=None, email=Email("carol@example.com"), name="Carol", password_hash=PasswordHash(DIGEST))
            )
        await set_assignment(admin_role_id, bob.id, "assign")
        await set_assignment(admin_role_id, carol.id, "assign")
        await set_assignment(admin_role_id, carol.id, "revoke")

        result = await ListRoleUsersUseCase(InMemoryUnitOfWork(seeded_store)).execute(admin_role_id)

        assert result.total == 1
        assert [a.user.email for a in result.assignments] == ["bob@example.com"]
        assert result.role.name == "admin"

    async def test_missing_role(self, store):
        with pytest.raises(NotFoundError):
            await ListRoleUsersUseCase(InMemoryUnitOfWork(store)).execute(5)


class TestAssignmentHistory:
    """Test GetAssignmentHistoryUseCase."""

    async def test_empty_history(self, bob, admin_role_id, seeded_store):
        history = await GetAssignmentHistoryUseCase(InMemoryUnitOfWork(seeded_store)).execute(
            admin_role_id, bob.id
        )
        assert history.assignments == []

    async def test_missing_user(self, admin_role_id, seeded_store):
        with pytest.raises(NotFoundError):
            await GetAssignmentHistoryUseCase(InMemoryUnitOfWork(seeded_store)).execute(
                admin_role_id, 404
            )
