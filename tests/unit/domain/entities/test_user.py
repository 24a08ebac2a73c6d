"""Unit tests for User entity."""

from datetime import datetime, timedelta, timezone

import pytest

from authcore.domain.entities.user import User
from authcore.domain.exceptions import InvalidUserStateTransitionError
from authcore.domain.services.lockout_policy import AccountStatus, LockoutPolicy
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
DIGEST = "$argon2id$v=19$m=8192,t=1,p=1$c29tZXNhbHQ$aGFzaGVkdmFsdWU"


@pytest.fixture
def user() -> User:
    return User(
        id=1,
        email=Email("alice@example.com"),
        name="Alice Smith",
        password_hash=PasswordHash(DIGEST),
    )


@pytest.fixture
def policy() -> LockoutPolicy:
    return LockoutPolicy(max_attempts=5, lockout_duration=timedelta(minutes=15))


class TestUserCreation:
    """Test User entity creation."""

    def test_defaults(self, user):
        assert user.is_active is True
        assert user.email_verified is False
        assert user.failed_login_attempts == 0
        assert user.locked_until is None
        assert user.status(NOW) is AccountStatus.ACTIVE

    def test_empty_name_raises_error(self):
        with pytest.raises(ValueError):
            User(id=None, email=Email("a@example.com"), name="  ", password_hash=PasswordHash(DIGEST))

    def test_negative_counter_raises_error(self):
        with pytest.raises(ValueError):
            User(
                id=None,
                email=Email("a@example.com"),
                name="A",
                password_hash=PasswordHash(DIGEST),
                failed_login_attempts=-1,
            )

    def test_equality_by_id(self, user):
        other = User(id=1, email=Email("other@example.com"), name="Other", password_hash=PasswordHash(DIGEST))
        assert user == other

    def test_repr_does_not_leak_digest(self, user):
        assert DIGEST not in repr(user)


class TestLockoutTransitions:
    """Test the lockout state machine on the entity."""

    def test_failures_below_threshold_do_not_lock(self, user, policy):
        for _ in range(4):
            assert user.record_failed_login(policy, NOW) is False
        assert user.failed_login_attempts == 4
        assert user.status(NOW) is AccountStatus.ACTIVE

    def test_fifth_failure_locks(self, user, policy):
        for _ in range(4):
            user.record_failed_login(policy, NOW)

        assert user.record_failed_login(policy, NOW) is True
        assert user.locked_until == NOW + timedelta(minutes=15)
        assert user.status(NOW) is AccountStatus.LOCKED
        assert user.lock_minutes_remaining(NOW) == 15

    def test_store_counter_wins(self, user, policy):
        """A counter already incremented by the store is taken as is."""
        assert user.record_failed_login(policy, NOW, failed_attempts=5) is True
        assert user.failed_login_attempts == 5

    def test_lock_expires_lazily(self, user, policy):
        user.record_failed_login(policy, NOW, failed_attempts=5)
        later = NOW + timedelta(minutes=15)

        assert user.is_locked(later - timedelta(seconds=1)) is True
        assert user.is_locked(later) is False
        assert user.status(later) is AccountStatus.ACTIVE
        # No write happened: the expiry is still recorded
        assert user.locked_until is not None

    def test_successful_login_resets(self, user, policy):
        user.record_failed_login(policy, NOW, failed_attempts=3)
        user.record_successful_login(NOW)

        assert user.failed_login_attempts == 0
        assert user.locked_until is None
        assert user.last_login_at == NOW

    def test_deactivation_wins_over_lock(self, user, policy):
        user.record_failed_login(policy, NOW, failed_attempts=5)
        user.deactivate()
        assert user.status(NOW) is AccountStatus.DEACTIVATED


class TestActivation:
    """Test administrative transitions."""

    def test_deactivate_then_activate(self, user):
        user.deactivate()
        assert user.is_active is False
        user.activate()
        assert user.is_active is True

    def test_activate_active_user_raises(self, user):
        with pytest.raises(InvalidUserStateTransitionError):
            user.activate()

    def test_deactivate_inactive_user_raises(self, user):
        user.deactivate()
        with pytest.raises(InvalidUserStateTransitionError):
            user.deactivate()
