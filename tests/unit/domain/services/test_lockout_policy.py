"""Unit tests for the lockout policy."""

from datetime import datetime, timedelta, timezone

import pytest

from authcore.domain.services.lockout_policy import LockoutPolicy, minutes_until

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestLockoutPolicy:
    """Test LockoutPolicy thresholds."""

    def test_defaults(self):
        policy = LockoutPolicy()
        assert policy.max_attempts == 5
        assert policy.lockout_duration == timedelta(minutes=15)

    def test_should_lock_at_exactly_max_attempts(self):
        policy = LockoutPolicy(max_attempts=5)
        assert policy.should_lock(4) is False
        assert policy.should_lock(5) is True
        assert policy.should_lock(6) is True

    def test_lock_expiry(self):
        policy = LockoutPolicy(lockout_duration=timedelta(minutes=15))
        assert policy.lock_expiry(NOW) == NOW + timedelta(minutes=15)

    def test_rejects_non_positive_values(self):
        with pytest.raises(ValueError):
            LockoutPolicy(max_attempts=0)
        with pytest.raises(ValueError):
            LockoutPolicy(lockout_duration=timedelta(0))


class TestMinutesUntil:
    """Test minutes_until rounding."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(minutes=15), 15),
            (timedelta(minutes=14, seconds=1), 15),
            (timedelta(seconds=1), 1),
            (timedelta(0), 0),
            (timedelta(minutes=-3), 0),
        ],
    )
    def test_rounds_up(self, delta, expected):
        assert minutes_until(NOW + delta, NOW) == expected
