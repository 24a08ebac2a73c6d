"""Unit tests for SetUserActiveStateUseCase."""

import pytest

from authcore.application.dto.user_dto import SetUserStateInput
from authcore.application.exceptions import ConflictError, ForbiddenError, NotFoundError
from authcore.application.use_cases.users import SetUserActiveStateUseCase
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.infrastructure.adapters.outbound.persistence.memory import InMemoryUnitOfWork

DIGEST = "$argon2id$v=19$m=8192,t=1,p=1$c29tZXNhbHQ$aGFzaGVkdmFsdWU"
ROOT_ID = "999"


@pytest.fixture
async def carol(seeded_store, clock) -> User:
    uow = InMemoryUnitOfWork(seeded_store)
    async with uow:
        user = await uow.users.add(
            User(
                id=None,
                email=Email("carol@example.com"),
                name="Carol White",
                password_hash=PasswordHash(DIGEST),
            )
        )
        role = await uow.roles.get_by_name("usuario")
        await uow.assignments.add(RoleAssignment.grant(user.id, role.id, clock()))
    return user


@pytest.fixture
def use_case(seeded_store, clock) -> SetUserActiveStateUseCase:
    return SetUserActiveStateUseCase(InMemoryUnitOfWork(seeded_store), clock=clock)


class TestSetUserActiveState:
    """Test account activation and deactivation."""

    async def test_deactivate(self, use_case, carol, seeded_store, clock):
        result = await use_case.execute(
            carol.id, SetUserStateInput(active=False), acting_user_id=ROOT_ID
        )

        assert result.is_active is False
        assert result.roles == ["usuario"]
        assert seeded_store.users[carol.id].is_active is False
        assert seeded_store.users[carol.id].updated_at == clock()

    async def test_reactivate(self, use_case, carol, seeded_store):
        await use_case.execute(carol.id, SetUserStateInput(active=False), acting_user_id=ROOT_ID)
        result = await use_case.execute(
            carol.id, SetUserStateInput(active=True), acting_user_id=ROOT_ID
        )

        assert result.is_active is True
        assert seeded_store.users[carol.id].is_active is True

    async def test_same_state_conflicts(self, use_case, carol):
        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                carol.id, SetUserStateInput(active=True), acting_user_id=ROOT_ID
            )

        assert exc_info.value.message == "Cannot activate user in state: active"

    async def test_cannot_deactivate_self(self, use_case, carol, seeded_store):
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                carol.id, SetUserStateInput(active=False), acting_user_id=str(carol.id)
            )

        assert seeded_store.users[carol.id].is_active is True

    async def test_unknown_user(self, use_case):
        with pytest.raises(NotFoundError):
            await use_case.execute(12345, SetUserStateInput(active=False), acting_user_id=ROOT_ID)

    def test_input_accepts_wire_alias(self):
        assert SetUserStateInput.model_validate({"activo": False}).active is False
