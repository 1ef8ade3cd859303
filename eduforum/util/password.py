"""Password hashing utilities."""

import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


class PasswordHashError(Exception):
    """Stored password hash could not be parsed."""

    pass


def hash_password(password: str, iterations: int) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: Plaintext password
        iterations: PBKDF2 iteration count

    Returns:
        Encoded hash: ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``
    """
    salt = secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against an encoded hash in constant time.

    Args:
        password: Plaintext password to check
        encoded: Hash produced by hash_password

    Returns:
        True if the password matches

    Raises:
        PasswordHashError: If the encoded hash is malformed
    """
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        rounds = int(iterations)
    except ValueError as e:
        raise PasswordHashError(f"Malformed password hash: {e}")

    if algorithm != ALGORITHM:
        raise PasswordHashError(f"Unsupported password hash algorithm: {algorithm}")

    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(digest, expected)
