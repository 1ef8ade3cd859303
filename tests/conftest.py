"""Test configuration and fixtures."""

import os
from uuid import uuid4

import logfire
import pytest

from eduforum.domain.model import Account
from eduforum.domain.value import AccountId, DisplayName, Role

# Test defaults; must be in place before Settings() is first built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SESSION__PASSWORD_ITERATIONS", "1000")

logfire.configure(send_to_logfire=False, console=False)


def make_account(name: str = "alice", role: Role = Role.STUDENT) -> Account:
    """Build an account without going through registration.

    The password hash is a placeholder; use AccountService.register when a
    test needs to log in.
    """
    return Account(
        id=AccountId(uuid4()),
        name=DisplayName(name),
        password_hash="pbkdf2_sha256$1$00$00",
        role=role,
    )


@pytest.fixture
def student_account() -> Account:
    """A Student account named alice."""
    return make_account("alice", Role.STUDENT)


@pytest.fixture
def admin_account() -> Account:
    """An Admin account named root."""
    return make_account("root", Role.ADMIN)
