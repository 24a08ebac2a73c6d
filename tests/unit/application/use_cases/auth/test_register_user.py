"""Unit tests for RegisterUserUseCase."""

import pytest

from authcore.application.dto.auth_dto import RegisterUserInput
from authcore.application.exceptions import BadRequestError, ConflictError
from authcore.application.use_cases.auth.register_user import RegisterUserUseCase
from authcore.infrastructure.adapters.outbound.persistence.memory import InMemoryUnitOfWork


@pytest.fixture
def register_input() -> RegisterUserInput:
    return RegisterUserInput(
        email="Alice@Example.com",
        password="Password123!",
        first_name="Alice",
        last_name="Smith",
        national_id="12345678",
    )


def build_use_case(store, password_hasher, token_issuer, clock, **kwargs) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        InMemoryUnitOfWork(store),
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        clock=clock,
        **kwargs,
    )


class TestRegisterUserUseCase:
    """Test RegisterUserUseCase."""

    async def test_register_user_success(
        self, seeded_store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(seeded_store, password_hasher, token_issuer, clock)

        result = await use_case.execute(register_input)

        assert result.user.email == "alice@example.com"
        assert result.user.name == "Alice Smith"
        assert result.user.roles == ["usuario"]
        assert result.user.email_verified is False
        assert result.user.is_active is True
        assert token_issuer.decode(result.access_token).roles == ["usuario"]

        stored = seeded_store.users[int(result.user.id)]
        assert stored.failed_login_attempts == 0
        assert stored.national_id == "12345678"
        assert stored.created_at == clock()

    async def test_password_is_hashed(
        self, seeded_store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(seeded_store, password_hasher, token_issuer, clock)

        result = await use_case.execute(register_input)

        digest = seeded_store.users[int(result.user.id)].password_hash.value
        assert digest != "Password123!"
        assert digest.startswith("$argon2id$")
        assert password_hasher.verify("Password123!", digest)

    async def test_email_already_exists(
        self, seeded_store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(seeded_store, password_hasher, token_issuer, clock)
        await use_case.execute(register_input)

        duplicate = register_input.model_copy(update={"national_id": None})
        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(duplicate)

        assert "email" in exc_info.value.message.lower()
        assert len(seeded_store.users) == 1

    async def test_national_id_already_exists(
        self, seeded_store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(seeded_store, password_hasher, token_issuer, clock)
        await use_case.execute(register_input)

        other = register_input.model_copy(update={"email": "bob@example.com"})
        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(other)

        assert exc_info.value.details["field"] == "national_id"

    async def test_missing_default_role_registers_without_roles(
        self, store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(store, password_hasher, token_issuer, clock)

        result = await use_case.execute(register_input)

        assert result.user.roles == []
        assert len(store.users) == 1
        assert store.assignments == {}

    async def test_required_default_role_missing_fails_and_rolls_back(
        self, store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(
            store, password_hasher, token_issuer, clock, require_default_role=True
        )

        with pytest.raises(BadRequestError) as exc_info:
            await use_case.execute(register_input)

        assert exc_info.value.message == "Could not create the account"
        assert store.users == {}

    async def test_custom_default_role(
        self, seeded_store, password_hasher, token_issuer, clock, register_input
    ):
        use_case = build_use_case(
            seeded_store, password_hasher, token_issuer, clock, default_role_name="admin"
        )

        result = await use_case.execute(register_input)

        assert result.user.roles == ["admin"]
