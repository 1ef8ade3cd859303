"""Unit tests for password hashing."""

import pytest

from eduforum.util.password import PasswordHashError, hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_hash_is_salted_and_encoded(self):
        """Same password hashed twice should give different encodings."""
        # Act
        first = hash_password("s3cret", iterations=1000)
        second = hash_password("s3cret", iterations=1000)

        # Assert
        assert first != second
        algorithm, iterations, salt_hex, digest_hex = first.split("$")
        assert algorithm == "pbkdf2_sha256"
        assert iterations == "1000"
        assert len(bytes.fromhex(salt_hex)) == 16
        assert "s3cret" not in first

    def test_verify_accepts_correct_password(self):
        """Correct password should verify."""
        encoded = hash_password("s3cret", iterations=1000)
        assert verify_password("s3cret", encoded) is True

    def test_verify_rejects_wrong_password(self):
        """Wrong password should not verify."""
        encoded = hash_password("s3cret", iterations=1000)
        assert verify_password("S3cret", encoded) is False

    def test_verify_rejects_malformed_hash(self):
        """Malformed stored hash should raise."""
        with pytest.raises(PasswordHashError):
            verify_password("s3cret", "plaintext")

    def test_verify_rejects_unknown_algorithm(self):
        """Hash with another algorithm tag should raise."""
        encoded = hash_password("s3cret", iterations=1000).replace(
            "pbkdf2_sha256", "md5", 1
        )
        with pytest.raises(PasswordHashError, match="Unsupported"):
            verify_password("s3cret", encoded)
