"""Unit tests for Email value object."""

import pytest

from authcore.domain.exceptions import InvalidEmailError
from authcore.domain.value_objects.email import Email


class TestEmailCreation:
    """Test Email value object creation."""

    def test_create_valid_email(self):
        email = Email("alice@example.com")
        assert email.value == "alice@example.com"

    def test_email_normalized_to_lowercase(self):
        """Test email is normalized to lowercase."""
        assert Email("Alice@Example.COM").value == "alice@example.com"

    def test_email_strips_whitespace(self):
        assert Email("  alice@example.com  ").value == "alice@example.com"

    def test_normalization_is_idempotent(self):
        """Wrapping an already-normalized address changes nothing."""
        once = Email(" Alice@Example.com ")
        twice = Email(once.value)
        assert once == twice
        assert str(twice) == "alice@example.com"

    def test_create_email_with_plus_sign(self):
        assert Email("user+tag@example.com").value == "user+tag@example.com"


class TestEmailValidation:
    """Test Email validation."""

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "aliceexample.com", "alice@", "@example.com", "alice@example"],
    )
    def test_invalid_email_raises_error(self, raw):
        with pytest.raises(InvalidEmailError):
            Email(raw)

    def test_error_carries_code(self):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email("not-an-email")
        assert exc_info.value.code == "INVALID_EMAIL"
