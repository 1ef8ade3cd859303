"""Session domain service."""

import secrets
from datetime import datetime, timedelta, timezone

import logfire

from eduforum.config import SessionSettings
from eduforum.domain.error import NotAuthenticatedError, NotAuthorizedError
from eduforum.domain.model.account import Account
from eduforum.domain.model.session import Session
from eduforum.domain.repository import SessionRepository
from eduforum.domain.value import Role

from .base import Service


class SessionService(Service):
    """Domain service for cookie sessions and role checks."""

    def __init__(
        self, session_repository: SessionRepository, session_settings: SessionSettings
    ) -> None:
        """Initialize session service.

        Args:
            session_repository: Process-held session store
            session_settings: Session settings
        """
        self.session_repository = session_repository
        self.session_settings = session_settings

    @property
    def timeout(self) -> timedelta:
        """Inactivity window after which a session is discarded."""
        return timedelta(minutes=self.session_settings.timeout_minutes)

    async def open(self, account: Account, previous_token: str | None = None) -> Session:
        """Open a session for an account.

        Any session carried by the caller is destroyed first, so a sign-up or
        log-in always replaces the connection's previous identity. Sessions
        abandoned past the inactivity timeout are swept at the same time.

        Args:
            account: Authenticated account
            previous_token: Token the caller currently holds, if any

        Returns:
            New session
        """
        with logfire.span("session_service.open", name=account.name.root):
            if previous_token:
                await self.session_repository.delete(previous_token)

            now = datetime.now(timezone.utc)
            purged = await self.session_repository.purge_expired(self.timeout, now)
            if purged:
                logfire.info("Expired sessions purged", count=purged)

            session = Session(
                token=secrets.token_urlsafe(32),
                name=account.name,
                role=account.role,
                created_at=now,
                last_seen_at=now,
            )
            saved = await self.session_repository.save(session)
            logfire.info(
                "Session opened", name=account.name.root, role=account.role.value
            )
            return saved

    async def resolve(self, token: str | None) -> Session | None:
        """Look up a live session and refresh its inactivity window.

        Args:
            token: Cookie token (optional)

        Returns:
            Session if the token is known and not expired, None otherwise
        """
        if not token:
            return None

        session = await self.session_repository.get(token)
        if not session:
            return None

        now = datetime.now(timezone.utc)
        if session.is_expired(self.timeout, now):
            await self.session_repository.delete(token)
            logfire.info("Session expired", name=session.name.root)
            return None

        return await self.session_repository.save(
            session.model_copy(update={"last_seen_at": now})
        )

    async def close(self, token: str | None) -> None:
        """Destroy the caller's session.

        Raises:
            NotAuthenticatedError: If the caller has no session
        """
        if not token or not await self.session_repository.delete(token):
            raise NotAuthenticatedError("No session to destroy")
        logfire.info("Session closed")

    async def require(
        self, token: str | None, operation: str, roles: frozenset[Role] | None = None
    ) -> Session:
        """Authorization guard for one operation.

        Args:
            token: Cookie token (optional)
            operation: Operation name, used in errors and logs
            roles: Allowed roles (None allows any authenticated identity)

        Returns:
            The caller's session

        Raises:
            NotAuthenticatedError: If there is no live session
            NotAuthorizedError: If the session role is not allowed
        """
        session = await self.resolve(token)
        if not session:
            logfire.warn("Unauthenticated request", operation=operation)
            raise NotAuthenticatedError()

        if roles is not None and session.role not in roles:
            logfire.warn(
                "Forbidden request",
                operation=operation,
                name=session.name.root,
                role=session.role.value,
            )
            raise NotAuthorizedError(operation, session.role.value)

        return session
