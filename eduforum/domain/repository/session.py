"""Session store interface."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from eduforum.domain.model.session import Session


class SessionRepository(ABC):
    """Store of live sessions keyed by cookie token."""

    @abstractmethod
    async def get(self, token: str) -> Optional[Session]:
        """Get a session by token, None if unknown."""
        pass

    @abstractmethod
    async def save(self, session: Session) -> Session:
        """Create or replace a session."""
        pass

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """Delete a session.

        Returns:
            True if the session existed
        """
        pass

    @abstractmethod
    async def purge_expired(self, timeout: timedelta, now: datetime) -> int:
        """Delete every session idle for longer than the timeout.

        Returns:
            Number of sessions removed
        """
        pass
