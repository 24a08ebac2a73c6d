"""Unit tests for the Argon2id password hasher."""

from authcore.infrastructure.security.password_hasher import Argon2PasswordHasher


class TestArgon2PasswordHasher:
    """Test hashing and verification."""

    def test_hash_is_argon2id(self, password_hasher):
        digest = password_hasher.hash("Password123!")
        assert digest.startswith("$argon2id$")
        assert "Password123!" not in digest

    def test_hash_is_salted(self, password_hasher):
        assert password_hasher.hash("Password123!") != password_hasher.hash("Password123!")

    def test_verify_correct_password(self, password_hasher):
        digest = password_hasher.hash("Password123!")
        assert password_hasher.verify("Password123!", digest) is True

    def test_verify_wrong_password(self, password_hasher):
        digest = password_hasher.hash("Password123!")
        assert password_hasher.verify("Password124!", digest) is False

    def test_dummy_hash_is_a_real_digest(self, password_hasher):
        assert password_hasher.dummy_hash.startswith("$argon2id$")
        assert password_hasher.verify("Password123!", password_hasher.dummy_hash) is False

    def test_verify_garbage_hash(self, password_hasher):
        assert password_hasher.verify("Password123!", "not-a-real-hash-value") is False

    def test_work_factor_is_encoded(self):
        hasher = Argon2PasswordHasher(time_cost=1, memory_cost=8192, parallelism=1)
        assert "m=8192,t=1,p=1" in hasher.hash("Password123!")
