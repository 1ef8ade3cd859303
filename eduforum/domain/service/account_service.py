"""Account domain service."""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from eduforum.config import SessionSettings
from eduforum.domain.error import (
    BusinessRuleViolationError,
    InvalidCredentialsError,
    ValidationError,
)
from eduforum.domain.model.account import Account
from eduforum.domain.repository import AccountRepository
from eduforum.domain.value import AccountId, DisplayName, Role
from eduforum.util.password import hash_password, verify_password

from .base import Service


class AccountService(Service):
    """Domain service for account registration and credential checks."""

    def __init__(
        self, account_repository: AccountRepository, session_settings: SessionSettings
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            session_settings: Session settings (password work factor)
        """
        self.account_repository = account_repository
        self.session_settings = session_settings

    async def register(self, name: str, password: str, role: Role) -> Account:
        """Create a new account.

        Args:
            name: Account name
            password: Plaintext password (hashed before storage)
            role: Student or Admin

        Returns:
            Created account

        Raises:
            ValidationError: If name or password is blank
            BusinessRuleViolationError: If (name, role) already exists
        """
        with logfire.span("account_service.register", name=name, role=role.value):
            if not name.strip() or not password:
                raise ValidationError("Name and password required")

            existing = await self.account_repository.find_by_name_and_role(name, role)
            if existing:
                logfire.warn("Duplicate sign-up attempt", name=name, role=role.value)
                raise BusinessRuleViolationError(f"{role.value} already exists")

            # PBKDF2 is CPU-bound; keep it off the event loop
            password_hash = await asyncio.to_thread(
                hash_password, password, self.session_settings.password_iterations
            )
            account = Account(
                id=AccountId(uuid4()),
                name=DisplayName(name),
                password_hash=password_hash,
                role=role,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.account_repository.save(account)
            logfire.info("Account created", name=name, role=role.value)
            return saved

    async def authenticate(self, name: str, password: str, role: Role) -> Account:
        """Check a (name, role, password) triple.

        Args:
            name: Account name
            password: Plaintext password
            role: Student or Admin

        Returns:
            The matching account

        Raises:
            InvalidCredentialsError: If no account matches or password is wrong
        """
        with logfire.span("account_service.authenticate", name=name, role=role.value):
            account = await self.account_repository.find_by_name_and_role(name, role)
            if not account or not await asyncio.to_thread(
                verify_password, password, account.password_hash
            ):
                logfire.warn("Failed log-in attempt", name=name, role=role.value)
                raise InvalidCredentialsError()

            logfire.info("Account authenticated", name=name, role=role.value)
            return account
